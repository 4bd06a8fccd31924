from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from justmyluck.platform.config import Settings
from justmyluck.platform.services.email import SMTPTransport

template_dir = Path(__file__).resolve().parent.parent / "template"

env = Environment(loader=FileSystemLoader(str(template_dir)))

NOTIFICATION_SUBJECT = "New Just My Luck signup"


class SignupNotifier:
    """Tells the operator about a signup by email."""

    def __init__(self, transport: SMTPTransport, sender: str, recipient: str):
        self.transport = transport
        self.sender = sender
        self.recipient = recipient

    def notify(self, email: str, source: str) -> None:
        body = env.get_template("signup_notification.txt").render(email=email, source=source)
        self.transport.send_mail(self.sender, self.recipient, NOTIFICATION_SUBJECT, body)


def build_notifier(transport: Optional[SMTPTransport], settings: Settings) -> Optional[SignupNotifier]:
    """Notifications need both a transport and NOTIFY_TO; otherwise they are off."""
    if transport is None or not settings.NOTIFY_TO:
        return None
    return SignupNotifier(transport, settings.notify_sender or "", settings.NOTIFY_TO)
