"""Platform session boundary.

The bot client does not inherit from an SDK client; it is handed an object
that satisfies PlatformSession and talks to the platform through it.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class PlatformSession(Protocol):
    """Connection to the chat platform.

    ``guild_id=None`` selects the application (global) scope.
    Event names used by the client: ``"ready"`` and ``"interaction_create"``.
    """

    def is_ready(self) -> bool:
        ...

    def has_guild(self, guild_id: str) -> bool:
        ...

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        ...

    def once(self, event: str, handler: Callable[..., Any]) -> None:
        ...

    async def fetch_commands(self, guild_id: Optional[str] = None) -> Optional[Sequence[Any]]:
        """Registered commands in the scope, or None if unavailable."""
        ...

    async def set_commands(
        self,
        commands: list[dict[str, Any]],
        guild_id: Optional[str] = None,
    ) -> Optional[Sequence[Any]]:
        """Replace every command in the scope; returns the registered commands."""
        ...

    async def set_permissions(self, guild_id: str, permissions: list[dict[str, Any]]) -> None:
        """Replace command permissions for a guild."""
        ...
