import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    """Transactional emails the application sends"""

    invite = "invite"
    welcome = "welcome"
    email_verification = "email_verification"
    password_reset = "password_reset"


class INotificationService(ABC):
    """
    Notification dispatcher interface - application layer.

    Implementations must not raise: a delivery problem is logged and
    reported as False.
    """

    @abstractmethod
    async def send(
        self, kind: NotificationKind, recipient: str, template_data: Dict[str, Any]
    ) -> bool:
        """Send a notification, returning True when it was handed off"""
        pass


async def dispatch_best_effort(
    notifier: INotificationService,
    kind: NotificationKind,
    recipient: str,
    template_data: Dict[str, Any],
) -> bool:
    """
    Send without letting a delivery problem escape into the caller.

    Returns False (after logging) when the dispatcher reports failure or raises.
    """
    try:
        sent = await notifier.send(kind, recipient, template_data)
    except Exception:
        logger.exception(f"Notification dispatcher raised while sending {kind.value} to {recipient}")
        return False
    if not sent:
        logger.warning(f"Failed to send {kind.value} email to {recipient}")
    return sent
