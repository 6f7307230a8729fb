import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Any, Dict

from src.adapter.services.email_templates import render
from src.app.services.notification_service import INotificationService, NotificationKind

logger = logging.getLogger(__name__)


class LoggingNotificationService(INotificationService):
    """Writes outgoing mail to the log instead of delivering it (development)"""

    async def send(
        self, kind: NotificationKind, recipient: str, template_data: Dict[str, Any]
    ) -> bool:
        subject, _ = render(kind, template_data)
        logger.info(f"[email:{kind.value}] to={recipient} subject={subject!r} data={template_data}")
        return True


class SmtpNotificationService(INotificationService):
    """Delivers mail over SMTP; the blocking client runs on a worker thread"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender: str,
        use_tls: bool = True,
        timeout: int = 10,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.use_tls = use_tls
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.host and self.username and self.password)

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            server.login(self.username, self.password)
            server.send_message(message)

    async def send(
        self, kind: NotificationKind, recipient: str, template_data: Dict[str, Any]
    ) -> bool:
        if not self.configured:
            logger.warning(f"Cannot send email to {recipient}: email service not configured")
            return False

        subject, html = render(kind, template_data)
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(f"{subject}\n\nOpen this message in an HTML capable client.")
        message.add_alternative(html, subtype="html")

        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(f"Failed to send {kind.value} email to {recipient}: {exc}")
            return False

        logger.info(f"Sent {kind.value} email to {recipient}")
        return True
