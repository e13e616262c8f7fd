"""Bot client facade.

Wires a platform session to the command registry, the reconciler, the
UI registry and the dispatch router.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from slashsync.config import Config, get_config
from slashsync.core.datamodels import CommandDefinition, RemoteCommandRecord
from slashsync.core.registry import CommandRegistry
from slashsync.dispatch.events import (
    ButtonInteraction,
    CommandInteraction,
    SelectMenuInteraction,
    from_gateway_payload,
    parse_interaction,
)
from slashsync.dispatch.router import DispatchRouter
from slashsync.loader import load_commands
from slashsync.logging import configure_logging, get_log_path
from slashsync.sync.reconciler import Reconciler
from slashsync.sync.session import PlatformSession
from slashsync.ui.registry import UILayout, UIRegistry

logger = logging.getLogger(__name__)

READY_EVENT = "ready"
INTERACTION_EVENT = "interaction_create"

# Key under which handlers find this client in the event context
CLIENT_CONTEXT_KEY = "client"

EVENT_TYPES = (CommandInteraction, ButtonInteraction, SelectMenuInteraction)


class BotClient:
    """Handles commands and interactions for a bot.

    Usage:
        client = BotClient(session)
        await client.register_commands("./commands")

        # inside a command handler
        client = interaction.context["client"]
        rows = client.register_ui(Button(label="Again", on_click=on_again))
    """

    def __init__(
        self,
        session: PlatformSession,
        config: Optional[Config] = None,
        commands: Optional[CommandRegistry] = None,
        ui: Optional[UIRegistry] = None,
    ):
        self.session = session
        self.config = config or get_config()
        self.commands = commands if commands is not None else CommandRegistry()
        self.ui = ui if ui is not None else UIRegistry()
        self.reconciler = Reconciler(session, self.config)
        self.router = DispatchRouter(self.commands, self.ui)
        self._dispatching = False

    def setup_logging(
        self,
        log_path: Optional[Path] = None,
        name: Optional[str] = None,
    ) -> logging.Handler:
        """Configure the slashsync logger from the config's log level.

        Args:
            log_path: Log file to write to
            name: Bot name; logs go to ~/.slashsync/logs/<name>.log unless
                log_path is given. With neither, logs go to stderr.
        """
        if log_path is None and name:
            log_path = get_log_path(name)
        return configure_logging(self.config.get("log_level"), log_path=log_path)

    async def sync_commands(self, commands: Optional[Iterable[CommandDefinition]] = None) -> bool:
        """Sync the given commands, or every registered command."""
        if commands is None:
            commands = self.commands.all_commands()
        return await self.reconciler.sync(commands)

    async def push_commands(
        self,
        commands: Optional[Iterable[CommandDefinition]] = None,
    ) -> list[RemoteCommandRecord]:
        """Push unconditionally, skipping the diff."""
        if commands is None:
            commands = self.commands.all_commands()
        return await self.reconciler.push(commands)

    async def register_commands(self, commands_dir: Path | str, recursive: bool = True) -> list[CommandDefinition]:
        """Load commands from a directory, sync them and start dispatching.

        Args:
            commands_dir: The directory to load commands from.
            recursive: Whether or not to look for commands recursively.

        Returns:
            The loaded definitions.
        """
        definitions = load_commands(commands_dir, recursive=recursive)
        for definition in definitions:
            self.commands.add(definition)

        if self.session.is_ready():
            await self.sync_commands()
        else:
            # Sync once the session reports ready
            self.session.once(READY_EVENT, self._on_ready)

        self.enable_dispatch()
        return definitions

    def enable_dispatch(self) -> None:
        """Subscribe the router to interaction events (once)."""
        if self._dispatching:
            return
        self.session.on(INTERACTION_EVENT, self.handle_interaction)
        self._dispatching = True

    async def handle_interaction(self, interaction: Any) -> None:
        """Route an event model, a ``{"kind": ...}`` dict or a raw gateway payload.

        Handlers find this client under ``event.context["client"]``.
        """
        if isinstance(interaction, EVENT_TYPES):
            event = interaction
        elif isinstance(interaction, dict) and "kind" in interaction:
            event = parse_interaction(interaction)
        elif isinstance(interaction, dict):
            event = from_gateway_payload(interaction)
        else:
            event = None

        if event is None:
            logger.debug("Ignoring unsupported interaction")
            return
        event = event.model_copy(update={"context": {**event.context, CLIENT_CONTEXT_KEY: self}})
        await self.router.route(event)

    def register_ui(self, ui: UILayout) -> list[dict[str, Any]]:
        """
        Render message components, binding ``on_click``/``on_select``
        callbacks to generated custom ids.

        Args:
            ui: A single component, or a 1D or 2D list of components

        Returns:
            Action row payloads for the message's ``components``
        """
        return self.ui.register_ui(ui)

    async def close(self) -> None:
        """Wait for running handlers to finish."""
        await self.router.wait_pending()

    async def _on_ready(self, *args: Any) -> None:
        await self.sync_commands()
