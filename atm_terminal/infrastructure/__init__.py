"""
Infrastructure layer - External dependencies and implementations.

Contains:
- PIN verification service client
- Terminal screen
- Frontend (WebSocket) client
- Configuration
"""

from .frontend import (
    WebSocketStatsPanel,
    send_to_ws,
)
from .pin_service import HttpPinVerifier
from .settings import (
    Settings,
    get_settings,
)
from .terminal_screen import TerminalScreen


__all__ = [
    # Services
    "HttpPinVerifier",
    "WebSocketStatsPanel",
    "send_to_ws",
    # Display
    "TerminalScreen",
    # Settings
    "Settings",
    "get_settings",
]
