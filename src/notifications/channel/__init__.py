"""Email channel registry.

The adapter is a process-wide singleton chosen by
``NOTIFICATIONS_EMAIL_ADAPTER`` (``fake`` by default, or ``smtp``).
"""

import os

_channel_instances: dict[str, object] = {}


def get_email_channel(adapter: str | None = None):
    """Return the configured email adapter (singleton per adapter name)."""
    adapter = (adapter or os.getenv("NOTIFICATIONS_EMAIL_ADAPTER", "fake")).lower()

    if adapter not in _channel_instances:
        if adapter == "fake":
            from notifications.channel.fake_email import FakeEmailAdapter

            _channel_instances[adapter] = FakeEmailAdapter()
        elif adapter == "smtp":
            from notifications.channel.smtp_email import SmtpEmailAdapter

            _channel_instances[adapter] = SmtpEmailAdapter()
        else:
            raise ValueError(f"Unknown email adapter: {adapter}")

    return _channel_instances[adapter]


def reset_channels():
    """Drop all adapter singletons (useful for testing)."""
    _channel_instances.clear()
