"""
Decorators for declaring commands.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from slashsync.core.datamodels import CommandDefinition, ParameterSpec


def command(
    name: str | None = None,
    description: str = "",
    parameters: Iterable[ParameterSpec | dict[str, Any]] | None = None,
    allowed_roles: Iterable[str | int] | None = None,
    allowed_users: Iterable[str | int] | None = None,
    default_permission: bool = True,
) -> Callable[[Callable[..., Any]], CommandDefinition]:
    """
    Decorator that turns a handler into a CommandDefinition.

    The command loader picks up module-level definitions, so a command
    file only needs:

        @command(description="Replies with pong")
        async def ping(interaction):
            ...

        @command(name="ban", allowed_roles=["1234"], default_permission=False)
        async def ban_user(interaction): ...
    """
    def decorator(fn: Callable[..., Any]) -> CommandDefinition:
        return CommandDefinition(
            name=name or fn.__name__,
            description=description or _first_doc_line(fn),
            parameters=list(parameters or []),
            allowed_roles=list(allowed_roles or []),
            allowed_users=list(allowed_users or []),
            default_permission=default_permission,
            handler=fn,
        )
    return decorator


def _first_doc_line(fn: Callable[..., Any]) -> str:
    doc = (fn.__doc__ or "").strip()
    return doc.split("\n", 1)[0].strip()
