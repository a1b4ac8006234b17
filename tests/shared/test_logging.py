import logging

import pytest
import structlog
from shared.logging import add_context, clear_context, configure_logging, current_environment, get_log_level


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogLevel:
    @pytest.mark.parametrize(
        "env, level",
        [("production", "INFO"), ("development", "DEBUG"), ("test", "WARNING"), ("unknown", "INFO")],
    )
    def test_level_follows_environment(self, monkeypatch, env, level):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENV", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", env)
        assert get_log_level() == level

    def test_log_level_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "error")
        assert get_log_level() == "ERROR"

    def test_env_wins_over_protean_env(self, monkeypatch):
        monkeypatch.setenv("ENV", "Staging")
        monkeypatch.setenv("PROTEAN_ENV", "test")
        assert current_environment() == "staging"


class TestConfigureLogging:
    def test_file_handlers(self, tmp_path):
        configure_logging(level="INFO", log_dir=str(tmp_path / "logs"), log_file_prefix="storefront")

        logging.getLogger("tests").error("written to disk")

        assert (tmp_path / "logs" / "storefront.log").read_text().count("written to disk") == 1
        assert (tmp_path / "logs" / "storefront_error.log").exists()
        assert logging.getLogger("protean").level == logging.WARNING

    def test_console_only(self):
        configure_logging(level="DEBUG")
        assert len(logging.getLogger().handlers) == 1
        assert logging.getLogger().level == logging.DEBUG


class TestLogContext:
    def test_bound_values_until_cleared(self):
        add_context(customer_id="cust-001", path="/cart")
        assert structlog.contextvars.get_contextvars() == {"customer_id": "cust-001", "path": "/cart"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
