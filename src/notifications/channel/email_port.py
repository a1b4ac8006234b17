"""Email channel port: the interface every email transport implements."""

from abc import ABC, abstractmethod
from email.message import EmailMessage


class EmailPort(ABC):
    """Sends one fully-built message and reports the outcome without raising."""

    name = "email"

    @abstractmethod
    def send(self, message: EmailMessage) -> dict:
        """Deliver ``message``.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
