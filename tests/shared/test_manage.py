"""Tests for the database management CLI."""

import sys

import manage
import pytest


def test_in_memory_domains_have_nothing_to_create(monkeypatch):
    calls = []
    monkeypatch.setattr("shared.db.setup_db", lambda domain: calls.append(domain.name) or [])

    manage.setup_databases(["catalogue"])

    assert calls == ["catalogue"]


def test_cli_dispatches_drop(monkeypatch):
    dropped = []
    monkeypatch.setattr(manage, "configure_logging", lambda: None)
    monkeypatch.setattr(manage, "drop_databases", lambda domains: dropped.append(domains))
    monkeypatch.setattr(sys, "argv", ["manage.py", "drop-db", "--domain", "ordering"])

    manage.main()

    assert dropped == [["ordering"]]


def test_cli_rejects_unknown_domain(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["manage.py", "setup-db", "--domain", "billing"])
    with pytest.raises(SystemExit):
        manage.main()
