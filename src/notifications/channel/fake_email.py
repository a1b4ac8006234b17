"""Fake email adapter: records messages in memory instead of sending them."""

from email.message import EmailMessage
from uuid import uuid4

from notifications.channel.email_port import EmailPort


class FakeEmailAdapter(EmailPort):
    name = "fake"

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed"):
        """Make subsequent sends succeed or fail."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(self, message: EmailMessage) -> dict:
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"email-{uuid4().hex[:12]}"
        self.sent_emails.append(
            {
                "message_id": message_id,
                "from": message["From"],
                "to": message["To"],
                "subject": message["Subject"],
                "body": message.get_content(),
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        self.sent_emails.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
