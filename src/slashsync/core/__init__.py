"""
Core module for the slashsync package.

Provides the command model, normalization and the command registry.
"""

from slashsync.core.datamodels import (
    CommandChoice,
    CommandDefinition,
    CommandType,
    NormalizedCommandData,
    ParameterSpec,
    ParameterType,
    RemoteCommandRecord,
)
from slashsync.core.decorators import command
from slashsync.core.exceptions import (
    ConfigurationError,
    FetchError,
    PushError,
    SessionNotReadyError,
    SlashSyncError,
    UIComponentError,
)
from slashsync.core.helpers import index_by_name, normalize
from slashsync.core.registry import CommandRegistry, command_registry

__all__ = [
    # Registry
    "CommandRegistry",
    "command_registry",
    # Models
    "CommandChoice",
    "CommandDefinition",
    "CommandType",
    "NormalizedCommandData",
    "ParameterSpec",
    "ParameterType",
    "RemoteCommandRecord",
    # Exceptions
    "SlashSyncError",
    "ConfigurationError",
    "SessionNotReadyError",
    "FetchError",
    "PushError",
    "UIComponentError",
    # Decorators
    "command",
    # Helpers
    "normalize",
    "index_by_name",
]
