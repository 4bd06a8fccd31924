import smtplib
import ssl
from email.mime.text import MIMEText
from typing import Optional

from justmyluck.platform.config import Settings
from justmyluck.platform.exceptions import NotificationError
from justmyluck.platform.logger import get_logger

logger = get_logger("email_service")


class SMTPTransport:
    """Plain-text mail delivery over SMTP."""

    def __init__(
        self,
        host: str,
        port: int = 587,
        secure: bool = False,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: float = 30,
    ):
        self.host = host
        self.port = port
        self.secure = secure
        self.username = username
        self.password = password
        self.timeout = timeout

    def send_mail(self, sender: str, recipient: str, subject: str, body: str) -> None:
        msg = MIMEText(body, "plain")
        msg["Subject"] = subject
        msg["From"] = sender
        msg["To"] = recipient

        try:
            if self.secure:
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(self.host, self.port, context=context, timeout=self.timeout) as server:
                    self._deliver(server, sender, recipient, msg)
            else:
                with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                    server.ehlo()
                    if server.has_extn("starttls"):
                        server.starttls(context=ssl.create_default_context())
                        server.ehlo()
                    self._deliver(server, sender, recipient, msg)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f"SMTP delivery to {recipient} failed: {e}") from e

        logger.info(f"Email sent to {recipient}: {subject}")

    def _deliver(self, server, sender: str, recipient: str, msg: MIMEText) -> None:
        if self.username:
            server.login(self.username, self.password or "")
        server.sendmail(sender, [recipient], msg.as_string())


def create_transport(settings: Settings) -> Optional[SMTPTransport]:
    """Build the SMTP transport, or None when SMTP_HOST is not configured."""
    if not settings.SMTP_HOST:
        return None
    return SMTPTransport(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        secure=settings.smtp_secure,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASS,
    )
