"""
slashsync - slash command sync and interaction dispatch for chat bots

Keeps declared slash commands in sync with the platform (pushing only when
something changed), assigns per-command role/user permissions, and routes
interactions to command handlers and to callbacks bound to dynamically
generated button and select menu ids.

Example usage:
    from slashsync import BotClient, Button, command

    @command(description="Replies with pong", allowed_roles=["1234"])
    async def ping(interaction):
        rows = client.register_ui(Button(label="Again", on_click=on_again))
        ...

    client = BotClient(session)          # any PlatformSession
    await client.register_commands("./commands")
"""

__version__ = "0.1.0"

from slashsync.client import BotClient
from slashsync.config import Config, ConfigManager, get_config
from slashsync.core import (
    CommandChoice,
    CommandDefinition,
    CommandRegistry,
    CommandType,
    ConfigurationError,
    FetchError,
    NormalizedCommandData,
    ParameterSpec,
    ParameterType,
    PushError,
    RemoteCommandRecord,
    SessionNotReadyError,
    SlashSyncError,
    UIComponentError,
    command,
    command_registry,
    normalize,
)
from slashsync.dispatch import (
    ButtonInteraction,
    CommandInteraction,
    DispatchRouter,
    InteractionEvent,
    SelectMenuInteraction,
    from_gateway_payload,
    parse_interaction,
)
from slashsync.sync import (
    PermissionEntry,
    PermissionGrant,
    PlatformSession,
    PrincipalType,
    Reconciler,
    commands_differ,
    generate_permissions,
)
from slashsync.ui import Button, ButtonStyle, SelectMenu, SelectOption, UIRegistry

__all__ = [
    # Version
    "__version__",
    # Client
    "BotClient",
    "PlatformSession",
    # Config
    "Config",
    "ConfigManager",
    "get_config",
    # Commands
    "CommandChoice",
    "CommandDefinition",
    "CommandRegistry",
    "CommandType",
    "NormalizedCommandData",
    "ParameterSpec",
    "ParameterType",
    "RemoteCommandRecord",
    "command",
    "command_registry",
    "normalize",
    # Sync
    "Reconciler",
    "commands_differ",
    "generate_permissions",
    "PermissionEntry",
    "PermissionGrant",
    "PrincipalType",
    # Dispatch
    "DispatchRouter",
    "InteractionEvent",
    "CommandInteraction",
    "ButtonInteraction",
    "SelectMenuInteraction",
    "parse_interaction",
    "from_gateway_payload",
    # UI
    "UIRegistry",
    "Button",
    "ButtonStyle",
    "SelectMenu",
    "SelectOption",
    # Exceptions
    "SlashSyncError",
    "ConfigurationError",
    "SessionNotReadyError",
    "FetchError",
    "PushError",
    "UIComponentError",
]
