"""
Application settings.

Provides typed configuration sections with defaults taken from configs.
"""

from dataclasses import dataclass, field

from atm_terminal.configs import (
    AMOUNT_LENGTH,
    CURRENCY_SYMBOL,
    DENOMINATIONS,
    MESSAGE_DURATION,
    OVERDRAFT_LIMIT,
    PIN_LENGTH,
    PIN_SERVICE_TIMEOUT,
    PIN_SERVICE_URL,
    STARTING_NOTES,
    WS_URL,
)


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class CashSettings:
    """Notes loaded into the terminal."""

    denominations: tuple[int, ...] = DENOMINATIONS
    starting_notes: tuple[tuple[int, int], ...] = tuple(STARTING_NOTES.items())
    currency_symbol: str = CURRENCY_SYMBOL

    @property
    def stock(self) -> dict[int, int]:
        """Get the starting stock for every configured denomination."""
        notes = dict(self.starting_notes)
        return {denomination: notes.get(denomination, 0) for denomination in self.denominations}


@dataclass(frozen=True)
class AccountSettings:
    """Account rules."""

    overdraft_limit: int = OVERDRAFT_LIMIT


@dataclass(frozen=True)
class KeypadSettings:
    """Keypad and display behaviour."""

    pin_length: int = PIN_LENGTH
    amount_length: int = AMOUNT_LENGTH
    message_duration: float = MESSAGE_DURATION


@dataclass(frozen=True)
class ServiceSettings:
    """External service URLs."""

    pin_service_url: str = PIN_SERVICE_URL
    pin_service_timeout: float = PIN_SERVICE_TIMEOUT
    websocket_url: str = WS_URL


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    cash: CashSettings = field(default_factory=CashSettings)
    account: AccountSettings = field(default_factory=AccountSettings)
    keypad: KeypadSettings = field(default_factory=KeypadSettings)
    services: ServiceSettings = field(default_factory=ServiceSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
