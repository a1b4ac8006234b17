from datetime import date
from pathlib import Path

import pytest

# Every registered coupon except DIWALI25 is valid on this date
COUPON_DAY = date(2026, 5, 1)


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def fixed_coupon_day(monkeypatch):
    """Coupons are judged against a fixed calendar day rather than the clock."""
    from ordering.coupon import registry

    monkeypatch.setattr(registry, "current_date", lambda: COUPON_DAY)
    return COUPON_DAY


@pytest.fixture(autouse=True)
def reset_notifications(monkeypatch):
    """Every test starts with the in-memory email adapter and a fresh dispatcher."""
    from notifications.channel import reset_channels
    from notifications.dispatcher import reset_dispatcher

    monkeypatch.setenv("NOTIFICATIONS_EMAIL_ADAPTER", "fake")
    reset_channels()
    reset_dispatcher()

    yield

    reset_channels()
    reset_dispatcher()


@pytest.fixture()
def fake_email():
    """The fake email adapter the dispatcher will send through."""
    from notifications.channel import get_email_channel

    return get_email_channel("fake")
