"""
Command registry for declared slash commands.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator

from slashsync.core.datamodels import CommandDefinition, ParameterSpec
from slashsync.core.decorators import command

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Name-keyed set of declared commands.

    Registering a name twice replaces the earlier definition (last write wins).
    """

    def __init__(self, commands: Iterable[CommandDefinition] | None = None):
        self._commands: dict[str, CommandDefinition] = {}
        for definition in commands or []:
            self.add(definition)

    def add(self, definition: CommandDefinition) -> CommandDefinition:
        """Add a definition, replacing any command of the same name."""
        if definition.name in self._commands:
            logger.warning(f"Command '{definition.name}' redefined, last definition wins")
        self._commands[definition.name] = definition
        return definition

    def register(
        self,
        fn: Callable[..., Any] | None = None,
        *,
        name: str | None = None,
        description: str = "",
        parameters: Iterable[ParameterSpec | dict[str, Any]] | None = None,
        allowed_roles: Iterable[str | int] | None = None,
        allowed_users: Iterable[str | int] | None = None,
        default_permission: bool = True,
    ) -> Callable:
        """
        Register a handler as a command. Works with or without arguments.

        Usage:
            @registry.register
            async def ping(interaction): ...

            @registry.register(name="kick", allowed_roles=["1234"])
            async def kick_member(interaction): ...

        The decorated function is returned unchanged so it stays callable;
        its definition is kept on ``__command_definition__`` so the command
        loader finds registered handlers too.
        """
        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            definition = command(
                name=name,
                description=description,
                parameters=parameters,
                allowed_roles=allowed_roles,
                allowed_users=allowed_users,
                default_permission=default_permission,
            )(func)
            self.add(definition)
            func.__command_name__ = definition.name
            func.__command_definition__ = definition
            return func

        if fn is not None:
            return decorator(fn)
        return decorator

    def get(self, name: str) -> CommandDefinition | None:
        """Get a command by name."""
        return self._commands.get(name)

    def all_commands(self) -> list[CommandDefinition]:
        """All commands in registration order."""
        return list(self._commands.values())

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(list(self._commands.values()))

    def __len__(self) -> int:
        return len(self._commands)


# Global command registry
command_registry = CommandRegistry()
