"""
WebSocket client for sending terminal events to the frontend.

This module provides utilities for pushing real-time events, such as the
withdrawal statistics panel, to connected WebSocket clients.
"""

import json
from typing import Any, Optional, Sequence

import websockets
from websockets.exceptions import WebSocketException

from atm_terminal.configs import WS_URL
from atm_terminal.loggers import logger


async def send_to_ws(
    event: str,
    data: Optional[dict[str, Any]] = None,
    ws_url: str = WS_URL,
) -> bool:
    """
    Send an event to the WebSocket server.

    Args:
        event: The event name/type to send.
        data: Optional dictionary of event data.
        ws_url: WebSocket URL to connect to (default from config).

    Returns:
        True if the message was sent successfully, False otherwise.

    Example:
        await send_to_ws(
            event='withdrawalStats',
            data={'notes': ['£20 notes: 4'], 'total': 'Total: 80'},
        )
    """
    message = {"event": event, "data": data}

    try:
        async with websockets.connect(ws_url) as ws:
            await ws.send(json.dumps(message))
            logger.debug(f"WebSocket message sent: {event}")
            return True
    except WebSocketException as e:
        logger.warning(f"WebSocket connection error: {e}")
        return False
    except OSError as e:
        logger.error(f"Failed to send WebSocket message: {e}")
        return False


class WebSocketStatsPanel:
    """Stats panel rendered by a frontend listening on a WebSocket."""

    EVENT = "withdrawalStats"

    def __init__(self, ws_url: str = WS_URL) -> None:
        self._ws_url = ws_url

    async def update(self, note_lines: Sequence[str], total_line: str) -> None:
        """Push the cumulative withdrawal statistics to the frontend."""
        await send_to_ws(
            event=self.EVENT,
            data={"notes": list(note_lines), "total": total_line},
            ws_url=self._ws_url,
        )
