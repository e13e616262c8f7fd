"""
Data models for declared and remote commands.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, Field, field_validator


class CommandType(IntEnum):
    """Application command kinds."""
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


class ParameterType(IntEnum):
    """Option types as numbered by the platform."""
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class CommandChoice(BaseModel):
    """A fixed choice offered for a parameter."""
    name: str
    value: Union[str, int, float]

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}


class ParameterSpec(BaseModel):
    """A single command option. Sub-commands nest further options."""
    type: ParameterType
    name: str
    description: str = ""
    required: bool = False
    choices: list[CommandChoice] = Field(default_factory=list)
    options: list[ParameterSpec] = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "ignore", "from_attributes": True}

    @field_validator("required", mode="before")
    @classmethod
    def _none_is_optional(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("choices", "options", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class NormalizedCommandData(BaseModel):
    """Comparison-ready, wire-relevant view of a command.

    Two values are equivalent iff every field is equal; option order counts.
    """
    type: CommandType = CommandType.CHAT_INPUT
    name: str
    description: str = ""
    options: list[ParameterSpec] = Field(default_factory=list)
    default_permission: bool = True

    model_config = {"frozen": True}

    def to_payload(self) -> dict[str, Any]:
        """Render the dict sent in a bulk set."""
        return self.model_dump(mode="json")


class CommandDefinition(BaseModel):
    """A locally declared command and its handler."""
    name: str
    description: str = ""
    parameters: list[ParameterSpec] = Field(default_factory=list)
    allowed_roles: list[str] = Field(default_factory=list)
    allowed_users: list[str] = Field(default_factory=list)
    default_permission: bool = True
    type: CommandType = CommandType.CHAT_INPUT
    handler: Callable[..., Any] = Field(exclude=True)

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("allowed_roles", "allowed_users", mode="before")
    @classmethod
    def _snowflakes_to_str(cls, value: Any) -> Any:
        if value is None:
            return []
        return [str(v) if isinstance(v, int) else v for v in value]

    def to_data(self) -> NormalizedCommandData:
        return NormalizedCommandData(
            type=self.type,
            name=self.name,
            description=self.description,
            options=list(self.parameters),
            default_permission=self.default_permission,
        )


class RemoteCommandRecord(BaseModel):
    """The platform's registered state for one command."""
    id: str
    name: str
    description: str = ""
    type: CommandType = CommandType.CHAT_INPUT
    options: list[ParameterSpec] = Field(default_factory=list)
    default_permission: bool = True
    application_id: Optional[str] = None
    guild_id: Optional[str] = None
    version: Optional[str] = None

    model_config = {"extra": "ignore", "from_attributes": True}

    @field_validator("id", "application_id", "guild_id", "version", mode="before")
    @classmethod
    def _snowflake_to_str(cls, value: Any) -> Any:
        # Snowflakes sometimes arrive as ints
        return str(value) if isinstance(value, int) else value

    @field_validator("options", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("default_permission", mode="before")
    @classmethod
    def _none_is_default(cls, value: Any) -> Any:
        return True if value is None else value

    def to_data(self) -> NormalizedCommandData:
        return NormalizedCommandData(
            type=self.type,
            name=self.name,
            description=self.description,
            options=list(self.options),
            default_permission=self.default_permission,
        )
