"""
Helper functions for command normalization.
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from slashsync.core.datamodels import (
    CommandDefinition,
    NormalizedCommandData,
    RemoteCommandRecord,
)


def normalize(command: Union[CommandDefinition, RemoteCommandRecord]) -> NormalizedCommandData:
    """Project a declared or remote command onto its comparable wire form."""
    return command.to_data()


def index_by_name(
    commands: Iterable[Union[CommandDefinition, RemoteCommandRecord]],
) -> dict[str, NormalizedCommandData]:
    """Build a name-keyed map of normalized data. Later duplicates win."""
    return {cmd.name: normalize(cmd) for cmd in commands}


def unique_by_name(commands: Iterable[CommandDefinition]) -> list[CommandDefinition]:
    """Collapse duplicate names, keeping the last definition in first-seen position."""
    by_name: dict[str, CommandDefinition] = {}
    for cmd in commands:
        by_name[cmd.name] = cmd
    return list(by_name.values())


def to_remote_record(raw: Any) -> RemoteCommandRecord:
    """Validate a session-provided command (dict or SDK object)."""
    if isinstance(raw, RemoteCommandRecord):
        return raw
    if isinstance(raw, dict):
        return RemoteCommandRecord.model_validate(raw)
    return RemoteCommandRecord.model_validate(raw, from_attributes=True)
