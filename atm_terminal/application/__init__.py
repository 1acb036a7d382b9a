"""
Application layer - Use cases and application services.

Contains:
- Terminal service (key event handling)
- API facade
"""

from .terminal_service import TerminalService
from .api_facade import AtmTerminalFacade


__all__ = [
    "TerminalService",
    "AtmTerminalFacade",
]
