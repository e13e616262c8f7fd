"""Interaction dispatch router."""
from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Callable, Optional

from slashsync.core.registry import CommandRegistry
from slashsync.dispatch.events import (
    ButtonInteraction,
    CommandInteraction,
    InteractionEvent,
    SelectMenuInteraction,
)
from slashsync.ui.registry import UIRegistry

logger = logging.getLogger(__name__)


class DispatchRouter:
    """Routes interaction events to command handlers and UI callbacks.

    Unknown command names and custom ids are dropped silently: after a
    restart or a partial sync the platform may still deliver interactions
    for things this process never registered.

    Coroutine handlers are scheduled on the running loop and not awaited;
    exceptions raised by handlers are never caught here.
    """

    def __init__(self, commands: CommandRegistry, ui: UIRegistry):
        self.commands = commands
        self.ui = ui
        self._pending: set[asyncio.Future] = set()

    def resolve(self, event: InteractionEvent) -> Optional[Callable[..., Any]]:
        """Find the handler for an event, or None."""
        if isinstance(event, CommandInteraction):
            definition = self.commands.get(event.command_name)
            return definition.handler if definition else None
        if isinstance(event, ButtonInteraction):
            return self.ui.get_button_handler(event.custom_id)
        if isinstance(event, SelectMenuInteraction):
            return self.ui.get_select_menu_handler(event.custom_id)
        return None

    async def route(self, event: InteractionEvent) -> None:
        """Invoke the handler for one event."""
        handler = self.resolve(event)
        if handler is None:
            logger.debug("No handler for interaction %r, dropping", event)
            return

        result = handler(event)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    @property
    def pending(self) -> int:
        """Number of handler tasks still running."""
        return len(self._pending)

    async def wait_pending(self) -> None:
        """Wait for every scheduled handler task to finish.

        A handler exception propagates from here.
        """
        while self._pending:
            await asyncio.gather(*list(self._pending))

