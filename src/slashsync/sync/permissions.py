"""Permission generation from declared allow-lists."""
from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Sequence

from pydantic import BaseModel, Field

from slashsync.core.datamodels import CommandDefinition, RemoteCommandRecord


class PrincipalType(str, Enum):
    ROLE = "ROLE"
    USER = "USER"


class PermissionGrant(BaseModel):
    """One allow entry for a role or user."""
    principal_type: PrincipalType
    principal_id: str
    allow: bool = True

    model_config = {"frozen": True}

    def to_payload(self) -> dict[str, Any]:
        return {
            "type": self.principal_type.value,
            "id": self.principal_id,
            "permission": self.allow,
        }


class PermissionEntry(BaseModel):
    """Grants for one registered command."""
    command_id: str
    grants: list[PermissionGrant] = Field(default_factory=list)

    model_config = {"frozen": True}

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.command_id,
            "permissions": [grant.to_payload() for grant in self.grants],
        }


def generate_permissions(
    records: Sequence[RemoteCommandRecord],
    commands: Iterable[CommandDefinition],
) -> list[PermissionEntry]:
    """Build one PermissionEntry per registered command.

    Role grants come before user grants, each in declaration order. A record
    with no declared counterpart gets no grants, leaving the platform default.
    """
    by_name: dict[str, CommandDefinition] = {}
    for cmd in commands:
        by_name[cmd.name] = cmd

    entries = []
    for record in records:
        declared = by_name.get(record.name)
        roles = declared.allowed_roles if declared else []
        users = declared.allowed_users if declared else []
        entries.append(PermissionEntry(
            command_id=record.id,
            grants=generate_grants(roles, users),
        ))
    return entries


def generate_grants(allowed_roles: Iterable[str], allowed_users: Iterable[str]) -> list[PermissionGrant]:
    return (
        [PermissionGrant(principal_type=PrincipalType.ROLE, principal_id=role) for role in allowed_roles]
        + [PermissionGrant(principal_type=PrincipalType.USER, principal_id=user) for user in allowed_users]
    )
