"""
Tests for settings and logging configuration.
"""

import logging

from atm_terminal.infrastructure.settings import CashSettings, Settings, get_settings
from atm_terminal.loggers import LokiHandler, get_logger


class TestSettings:
    """Tests for Settings configuration."""

    def test_settings_defaults(self):
        """Test default settings values."""
        settings = get_settings()
        assert settings.cash.stock == {20: 7, 10: 15, 5: 4}
        assert settings.cash.currency_symbol == "£"
        assert settings.account.overdraft_limit == 100
        assert settings.keypad.pin_length == 4
        assert settings.keypad.amount_length == 5
        assert settings.keypad.message_duration == 2.0

    def test_settings_singleton(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_stock_covers_every_denomination(self):
        """Test denominations without starting notes get zero."""
        cash = CashSettings(denominations=(50, 20), starting_notes=((20, 3),))
        assert cash.stock == {50: 0, 20: 3}

    def test_settings_sections_independent(self):
        """Test overriding one section keeps the others."""
        settings = Settings(cash=CashSettings(starting_notes=((20, 1),)))
        assert settings.cash.stock == {20: 1, 10: 0, 5: 0}
        assert settings.account.overdraft_limit == 100


class TestLogging:
    """Tests for the logger factory."""

    def test_console_only_by_default(self):
        """Test no file or Loki handler without configuration."""
        logger = get_logger("atm-test-console")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_no_duplicate_handlers(self):
        """Test repeated calls reuse the logger."""
        first = get_logger("atm-test-repeat")
        second = get_logger("atm-test-repeat")
        assert first is second
        assert len(second.handlers) == 1

    def test_file_and_loki_handlers(self, tmp_path):
        """Test optional handlers are attached when configured."""
        log_file = tmp_path / "logs" / "terminal.log"
        logger = get_logger(
            "atm-test-full",
            log_file=str(log_file),
            loki_url="http://loki.invalid/push",
        )

        assert log_file.parent.is_dir()
        assert any(isinstance(h, LokiHandler) for h in logger.handlers)
        assert len(logger.handlers) == 3

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
