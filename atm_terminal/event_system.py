"""
Event system for the ATM terminal.

This module provides a publish-subscribe event system carrying keypad
events (digit, backspace, confirm) from the terminal surface to the
session. Events are handled strictly one at a time, in arrival order.
"""

import asyncio
from enum import Enum
from typing import Any, Callable, Union

from atm_terminal.loggers import logger


class EventType(str, Enum):
    """
    Enumeration of keypad event types.

    These events are published when a key is pressed on the terminal.
    """

    DIGIT = "digit"
    BACKSPACE = "backspace"
    CONFIRM = "confirm"


class EventPublisher:
    """
    Publisher for sending events to the event queue.

    Attributes:
        event_queue: The asyncio queue to publish events to.
    """

    def __init__(self, event_queue: asyncio.Queue) -> None:
        self.event_queue = event_queue

    async def publish(self, event_type: Union[EventType, str], **data: Any) -> None:
        """
        Publish an event to the queue.

        Args:
            event_type: The type of event to publish.
            **data: Additional event data as keyword arguments.
        """
        event = {"type": event_type, **data}
        await self.event_queue.put(event)


class EventConsumer:
    """
    Consumer for processing events from the event queue.

    Dispatches each event to the handlers registered for its type. The
    next event is not taken from the queue until every handler of the
    current one has finished.

    Attributes:
        event_queue: The asyncio queue to consume events from.
        handlers: Mapping of event types to their handler functions.
        is_consuming: Flag indicating if the consumer is active.
    """

    def __init__(self, event_queue: asyncio.Queue) -> None:
        """
        Initialize the event consumer.

        Args:
            event_queue: The asyncio queue to consume events from.
        """
        self.event_queue = event_queue
        self.handlers: dict[Union[EventType, str], list[Callable]] = {}
        self.is_consuming = False
        self._consume_task: asyncio.Task | None = None

    def register_handler(
        self,
        event_type: Union[EventType, str],
        handler: Callable,
    ) -> None:
        """
        Register a handler for an event type.

        Args:
            event_type: The event type to handle.
            handler: The handler function (sync or async).
        """
        if event_type not in self.handlers:
            self.handlers[event_type] = []
        self.handlers[event_type].append(handler)

    def unregister_handler(
        self,
        event_type: Union[EventType, str],
        handler: Callable,
    ) -> None:
        """
        Unregister a handler for an event type.

        Args:
            event_type: The event type.
            handler: The handler function to remove.
        """
        if handler in self.handlers.get(event_type, []):
            self.handlers[event_type].remove(handler)

    async def _process_event(self, event: dict[str, Any]) -> None:
        """
        Process a single event by calling its handlers in registration order.

        Args:
            event: The event dictionary containing type and data.
        """
        for handler in self.handlers.get(event.get("type"), []):
            try:
                if asyncio.iscoroutinefunction(handler):
                    await handler(event)
                else:
                    handler(event)
            except Exception:
                logger.exception(f"Handler failed for event {event.get('type')}")

    async def _consume_loop(self) -> None:
        """
        Main consumption loop that processes events from the queue.
        """
        while self.is_consuming:
            try:
                # Use wait_for with timeout to allow checking is_consuming flag
                event = await asyncio.wait_for(
                    self.event_queue.get(),
                    timeout=0.5,
                )
            except asyncio.TimeoutError:
                continue

            try:
                await self._process_event(event)
            finally:
                self.event_queue.task_done()

    async def start_consuming(self) -> None:
        """
        Start the event consumption loop.
        """
        if self.is_consuming:
            return

        self.is_consuming = True
        self._consume_task = asyncio.create_task(self._consume_loop())

    async def stop_consuming(self) -> None:
        """
        Stop the event consumption loop and cancel the consumption task.
        """
        self.is_consuming = False

        if self._consume_task:
            self._consume_task.cancel()
            try:
                await self._consume_task
            except asyncio.CancelledError:
                pass
            self._consume_task = None
