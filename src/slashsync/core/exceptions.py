"""
Exception classes for command sync and dispatch.
"""


class SlashSyncError(Exception):
    """Base exception for slashsync errors."""


class ConfigurationError(SlashSyncError):
    """Command scope could not be resolved (missing or unknown guild)."""


class SessionNotReadyError(ConfigurationError):
    """Platform session is not ready yet."""


class FetchError(SlashSyncError):
    """Remote command list could not be fetched."""


class PushError(SlashSyncError):
    """Platform rejected a command or permission push."""


class UIComponentError(SlashSyncError):
    """UI component tree cannot be rendered."""
