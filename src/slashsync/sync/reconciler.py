"""Command reconciliation between declared and registered commands."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

from pydantic import BaseModel, ValidationError

from slashsync.config import Config, get_config
from slashsync.core.datamodels import CommandDefinition, RemoteCommandRecord
from slashsync.core.exceptions import (
    ConfigurationError,
    FetchError,
    PushError,
    SessionNotReadyError,
)
from slashsync.core.helpers import index_by_name, to_remote_record, unique_by_name
from slashsync.logging import log_exception
from slashsync.sync.permissions import generate_permissions
from slashsync.sync.session import PlatformSession

logger = logging.getLogger(__name__)


class CommandScope(BaseModel):
    """Where commands are registered and where permissions go."""
    guild_id: str
    global_commands: bool = True

    model_config = {"frozen": True}

    @property
    def command_guild_id(self) -> Optional[str]:
        """Guild id for command calls, None for the application scope."""
        return None if self.global_commands else self.guild_id


def commands_differ(
    declared: Iterable[CommandDefinition],
    remote: Iterable[RemoteCommandRecord],
) -> bool:
    """True if the declared set is not structurally equal to the remote set."""
    local_data = index_by_name(declared)
    remote_data = index_by_name(remote)

    if len(local_data) != len(remote_data):
        logger.info(f"Command count differs (remote={len(remote_data)}, local={len(local_data)})")
        return True

    for name, data in local_data.items():
        if remote_data.get(name) != data:
            logger.debug(f"Command '{name}' differs from remote")
            return True
    return False


class Reconciler:
    """Keeps the platform's command set in line with the declared one.

    Usage:
        reconciler = Reconciler(session)
        pushed = await reconciler.sync(registry.all_commands())

    In development mode commands go to the configured guild, where they
    propagate immediately; otherwise they are registered application-wide.
    Permissions are always set on the guild.
    """

    def __init__(self, session: PlatformSession, config: Config | None = None):
        self.session = session
        self.config = config or get_config()

    def resolve_scope(self) -> CommandScope:
        """Resolve the command scope, raising ConfigurationError if impossible."""
        if not self.session.is_ready():
            raise SessionNotReadyError("Commands can only be synced once the session is ready")

        guild_id = self.config.get("guild_id")
        if not guild_id:
            raise ConfigurationError("No guild id configured; set GUILD_ID")
        if not self.session.has_guild(guild_id):
            raise ConfigurationError(f"Guild {guild_id} is not available, check GUILD_ID")

        return CommandScope(guild_id=guild_id, global_commands=not self.config.is_development)

    async def fetch_remote(self, scope: CommandScope) -> list[RemoteCommandRecord]:
        """Fetch the registered commands for a scope."""
        try:
            raw = await self.session.fetch_commands(guild_id=scope.command_guild_id)
        except Exception as e:
            raise FetchError(log_exception(e, "Could not fetch remote commands")) from e

        if raw is None:
            raise FetchError("Could not fetch remote commands")

        return _validate_records(raw, FetchError, "Invalid remote command")

    async def sync(self, commands: Iterable[CommandDefinition]) -> bool:
        """Push the declared commands if they differ from the remote ones.

        Returns:
            True if a push happened, False if already in sync.
        """
        commands = list(commands)
        scope = self.resolve_scope()
        remote = await self.fetch_remote(scope)

        if not commands_differ(commands, remote):
            logger.info("Commands are already in sync, nothing to push")
            return False

        logger.info("Local commands differ from remote commands, syncing now")
        await self.push(commands, scope=scope)
        logger.info("Finished syncing")
        return True

    async def push(
        self,
        commands: Iterable[CommandDefinition],
        scope: CommandScope | None = None,
    ) -> list[RemoteCommandRecord]:
        """Replace the remote command set and its guild permissions.

        Not transactional: if the permission push fails the commands are
        already updated; run sync again to recover.
        """
        commands = unique_by_name(commands)
        scope = scope or self.resolve_scope()

        if scope.global_commands:
            logger.info("Registering application commands")
        else:
            logger.info(f"Development mode, registering commands on guild {scope.guild_id}")

        payload = [cmd.to_data().to_payload() for cmd in commands]
        try:
            raw = await self.session.set_commands(payload, guild_id=scope.command_guild_id)
        except Exception as e:
            raise PushError(log_exception(e, "Command push rejected")) from e

        if raw is None:
            raise PushError("Command push returned no commands")
        records = _validate_records(raw, PushError, "Invalid pushed command")

        permissions = generate_permissions(records, commands)
        try:
            await self.session.set_permissions(
                scope.guild_id, [entry.to_payload() for entry in permissions]
            )
        except Exception as e:
            raise PushError(log_exception(e, "Permission push rejected")) from e

        logger.debug(f"Pushed {len(records)} commands and {len(permissions)} permission entries")
        return records


def _validate_records(raw: Sequence[Any], error_cls: type[Exception], context: str) -> list[RemoteCommandRecord]:
    # Some SDKs return a name/id keyed mapping
    if isinstance(raw, dict):
        raw = list(raw.values())
    try:
        return [to_remote_record(item) for item in raw]
    except ValidationError as e:
        raise error_cls(log_exception(e, context, include_traceback=False)) from e
