"""Command reconciliation and permission generation.

    from slashsync.sync import Reconciler

    reconciler = Reconciler(session)
    await reconciler.sync(registry.all_commands())
"""
from __future__ import annotations

from slashsync.sync.permissions import (
    PermissionEntry,
    PermissionGrant,
    PrincipalType,
    generate_permissions,
)
from slashsync.sync.reconciler import CommandScope, Reconciler, commands_differ
from slashsync.sync.session import PlatformSession

__all__ = [
    "CommandScope",
    "PermissionEntry",
    "PermissionGrant",
    "PlatformSession",
    "PrincipalType",
    "Reconciler",
    "commands_differ",
    "generate_permissions",
]
