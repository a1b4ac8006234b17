"""SMTP email adapter.

Configured from the environment:

    SMTP_HOST    (default smtp.gmail.com)
    SMTP_PORT    (default 587)
    SMTP_SECURE  "true" for implicit TLS (port 465); otherwise STARTTLS is used
    SMTP_USER / SMTP_PASS
    SMTP_SENDER  (default SMTP_USER)
"""

import os
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import make_msgid

import structlog

from notifications.channel.email_port import EmailPort

logger = structlog.get_logger(__name__)


class SmtpEmailAdapter(EmailPort):
    name = "smtp"

    def __init__(self, host=None, port=None, secure=None, user=None, password=None, timeout=10):
        self.host = host or os.getenv("SMTP_HOST", "smtp.gmail.com")
        self.port = int(port or os.getenv("SMTP_PORT", "587"))
        self.secure = secure if secure is not None else os.getenv("SMTP_SECURE", "false").lower() == "true"
        self.user = user if user is not None else os.getenv("SMTP_USER", "")
        self.password = password if password is not None else os.getenv("SMTP_PASS", "")
        self.timeout = timeout

    @property
    def sender(self):
        return os.getenv("SMTP_SENDER") or self.user

    def _connect(self):
        context = ssl.create_default_context()
        if self.secure:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout, context=context)

        client = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        client.starttls(context=context)
        return client

    def send(self, message: EmailMessage) -> dict:
        if not message["From"]:
            message["From"] = self.sender
        if not message["Message-ID"]:
            message["Message-ID"] = make_msgid()

        try:
            with self._connect() as client:
                if self.user:
                    client.login(self.user, self.password)
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP delivery failed", host=self.host, to=message["To"], error=str(exc))
            return {"message_id": None, "status": "failed", "error": str(exc)}

        return {"message_id": message["Message-ID"], "status": "sent"}
