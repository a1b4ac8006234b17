"""Fixtures for HTTP API tests.

The application initializes both domains and pushes the right domain
context per request, so tests talk to it only through the TestClient and
reset every provider afterwards.
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def app():
    from app import app as fastapi_app

    return fastapi_app


@pytest.fixture(scope="session")
def _domains(app):
    from catalogue.domain import catalogue
    from ordering.domain import ordering

    return ordering, catalogue


@pytest.fixture(scope="session", autouse=True)
def setup_databases(_domains):
    """Create database schemas for both domains."""
    from shared.db import drop_db, setup_db

    for domain in _domains:
        setup_db(domain)

    yield

    for domain in _domains:
        drop_db(domain)


@pytest.fixture(autouse=True)
def reset_domains(_domains):
    yield

    for domain in _domains:
        with domain.domain_context():
            for _, provider in domain.providers.items():
                provider._data_reset()

            for _, broker in domain.brokers.items():
                broker._data_reset()

            domain.event_store.store._data_reset()


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def customer():
    return {"X-Customer-Id": "cust-001"}


@pytest.fixture()
def other_customer():
    return {"X-Customer-Id": "cust-002"}


@pytest.fixture()
def admin():
    return {"X-Customer-Id": "admin-001", "X-Customer-Role": "admin"}


@pytest.fixture()
def ordering_ctx(_domains):
    """Push the ordering domain context for direct repository checks."""
    ordering, _ = _domains
    with ordering.domain_context():
        yield ordering
