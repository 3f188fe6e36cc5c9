import logging
import mimetypes
import os
from dataclasses import dataclass
from datetime import datetime
from email.message import EmailMessage
from email.utils import formataddr
from typing import Any, Awaitable, Callable, Dict, Optional, Sequence

import aiosmtplib
import jinja2
from markupsafe import Markup

from src.common.config import Settings

logger = logging.getLogger(__name__)

# Configure Jinja2 environment
# src/common/utils/email_service.py -> src/templates/emails
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
TEMPLATE_DIR = os.path.join(BASE_DIR, "templates", "emails")

template_loader = jinja2.FileSystemLoader(searchpath=TEMPLATE_DIR)
template_env = jinja2.Environment(loader=template_loader, autoescape=True)

PLAIN_TEXT_FALLBACK = "This message is best viewed in an HTML-capable email client."


def render_template(template_name: str, context: Dict[str, Any]) -> str:
    """Render an email fragment. Every context value is HTML-escaped."""
    template = template_env.get_template(template_name)
    return template.render(**context)


def render_email(title: str, content: str) -> str:
    """
    Wrap a rendered fragment in the branded layout.

    The fragment is inserted verbatim, so it must come from render_template
    (or be otherwise escaped) before it gets here.
    """
    return render_template(
        "layout.html",
        {"title": title, "content": Markup(content), "year": datetime.now().year},
    )


@dataclass(frozen=True)
class EmailAttachment:
    filename: str
    content: bytes
    content_type: Optional[str] = None

    def mime_type(self) -> str:
        if self.content_type:
            return self.content_type
        guessed, _ = mimetypes.guess_type(self.filename)
        return guessed or "application/octet-stream"


Transport = Callable[..., Awaitable[Any]]


class EmailDispatcher:
    """Sends one HTML email per call through SMTP (aiosmtplib)."""

    def __init__(self, settings: Settings, transport: Transport = aiosmtplib.send):
        self.settings = settings
        self._transport = transport

    @property
    def sender(self) -> str:
        return formataddr((self.settings.EMAIL_SENDER_NAME, self.settings.EMAIL_USER))

    def build_message(
        self,
        recipient: str,
        subject: str,
        html_body: str,
        attachments: Sequence[EmailAttachment] = (),
    ) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = recipient
        message["Subject"] = subject
        message.set_content(PLAIN_TEXT_FALLBACK)
        message.add_alternative(html_body, subtype="html")

        for attachment in attachments:
            maintype, _, subtype = attachment.mime_type().partition("/")
            message.add_attachment(
                attachment.content,
                maintype=maintype,
                subtype=subtype or "octet-stream",
                filename=attachment.filename,
            )
        return message

    async def send(
        self,
        recipient: str,
        subject: str,
        html_body: str,
        attachments: Sequence[EmailAttachment] = (),
    ) -> None:
        """
        Send a single email.

        Args:
            recipient (str): Address of the single recipient.
            subject (str): The subject line.
            html_body (str): A complete HTML document (see render_email).
            attachments: Files to attach, in order.

        Raises:
            aiosmtplib.SMTPException, OSError: when the transport fails. Nothing is retried.
        """
        message = self.build_message(recipient, subject, html_body, attachments)

        if not self.settings.SMTP_HOST:
            logger.info("[MOCK EMAIL] To: %s, Subject: %s, Attachments: %d", recipient, subject, len(attachments))
            return

        try:
            await self._transport(
                message,
                hostname=self.settings.SMTP_HOST,
                port=self.settings.SMTP_PORT,
                username=self.settings.EMAIL_USER,
                password=self.settings.EMAIL_PASS,
                use_tls=self.settings.SMTP_USE_TLS,
                start_tls=not self.settings.SMTP_USE_TLS,
                timeout=120,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("Error sending email to %s: %s", recipient, e)
            raise
        logger.info("Email sent to %s", recipient)
