"""
Transactional email templates.

Each renderer returns (subject, html). Values are escaped before they are
interpolated into markup.
"""

from html import escape
from typing import Any, Callable, Dict, Tuple

from src.app.services.notification_service import NotificationKind

BRAND = "ERP Business Suite"


def _layout(title: str, body: str) -> str:
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>{title}</title>
        <style>
            body {{
                margin: 0;
                padding: 0;
                font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
                background-color: #f4f6f8;
            }}
            .container {{
                max-width: 600px;
                margin: 0 auto;
                padding: 40px 20px;
            }}
            .content {{
                background: #ffffff;
                border: 1px solid #e5e7eb;
                border-radius: 12px;
                padding: 40px;
            }}
            h1 {{
                color: #111827;
                font-size: 22px;
                margin: 0 0 16px 0;
            }}
            p {{
                color: #374151;
                font-size: 16px;
                line-height: 1.6;
                margin: 0 0 20px 0;
            }}
            .button {{
                display: inline-block;
                background: #2563eb;
                color: #ffffff;
                padding: 12px 28px;
                border-radius: 8px;
                text-decoration: none;
                font-weight: 600;
            }}
            .footer {{
                text-align: center;
                color: #9ca3af;
                font-size: 12px;
                margin-top: 24px;
            }}
        </style>
    </head>
    <body>
        <div class="container">
            <div class="content">
                {body}
            </div>
            <div class="footer">{BRAND}</div>
        </div>
    </body>
    </html>
    """


def render_invite(data: Dict[str, Any]) -> Tuple[str, str]:
    company = escape(str(data.get("company_name", "")))
    role = escape(str(data.get("role", ""))).replace("_", " ")
    details = ""
    if data.get("position"):
        details += f"<p><strong>Position:</strong> {escape(str(data['position']))}</p>"
    if data.get("department"):
        details += f"<p><strong>Department:</strong> {escape(str(data['department']))}</p>"

    subject = f"Invitation to join {data.get('company_name', '')}"
    body = f"""
        <h1>You're invited to {company}</h1>
        <p>Hi {escape(str(data.get("invitee_name", "")))},</p>
        <p>{escape(str(data.get("inviter_name", "")))} has invited you to join
        <strong>{company}</strong> as <strong>{role}</strong>.</p>
        {details}
        <p><a class="button" href="{escape(str(data.get("invite_link", "")))}">Accept invitation</a></p>
        <p>This invitation expires in 7 days.</p>
    """
    return subject, _layout(subject, body)


def render_welcome(data: Dict[str, Any]) -> Tuple[str, str]:
    subject = f"Welcome to {data.get('company_name', '')} - {BRAND}"
    body = f"""
        <h1>Welcome aboard, {escape(str(data.get("user_name", "")))}!</h1>
        <p>Your account at <strong>{escape(str(data.get("company_name", "")))}</strong> is ready.</p>
        <p><a class="button" href="{escape(str(data.get("login_link", "")))}">Sign in</a></p>
    """
    return subject, _layout(subject, body)


def render_email_verification(data: Dict[str, Any]) -> Tuple[str, str]:
    subject = f"Verify Your Email - {BRAND}"
    body = f"""
        <h1>Confirm your email address</h1>
        <p>Click the button below to verify your email. The link is valid for 24 hours.</p>
        <p><a class="button" href="{escape(str(data.get("verification_link", "")))}">Verify email</a></p>
    """
    return subject, _layout(subject, body)


def render_password_reset(data: Dict[str, Any]) -> Tuple[str, str]:
    subject = f"Password Reset Request - {BRAND}"
    body = f"""
        <h1>Reset your password</h1>
        <p>Hi {escape(str(data.get("user_name", "")))},</p>
        <p>We received a request to reset your password. The link is valid for 1 hour.</p>
        <p><a class="button" href="{escape(str(data.get("reset_link", "")))}">Reset password</a></p>
        <p>If you did not request this, you can ignore this email.</p>
    """
    return subject, _layout(subject, body)


RENDERERS: Dict[NotificationKind, Callable[[Dict[str, Any]], Tuple[str, str]]] = {
    NotificationKind.invite: render_invite,
    NotificationKind.welcome: render_welcome,
    NotificationKind.email_verification: render_email_verification,
    NotificationKind.password_reset: render_password_reset,
}


def render(kind: NotificationKind, data: Dict[str, Any]) -> Tuple[str, str]:
    return RENDERERS[kind](data)
