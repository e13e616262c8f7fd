"""
Inbound interaction events.

A closed tagged union over the three interaction kinds the bot handles.
Each variant carries only the fields its kind guarantees, plus the raw
platform context.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class CommandInteraction(BaseModel):
    """A slash command invocation."""
    kind: Literal["command"] = "command"
    command_name: str
    options: dict[str, Any] = Field(default_factory=dict)
    context: dict[str, Any] = Field(default_factory=dict)


class ButtonInteraction(BaseModel):
    """A button click."""
    kind: Literal["button"] = "button"
    custom_id: str
    context: dict[str, Any] = Field(default_factory=dict)


class SelectMenuInteraction(BaseModel):
    """A select menu submission."""
    kind: Literal["select_menu"] = "select_menu"
    custom_id: str
    values: list[str] = Field(default_factory=list)
    context: dict[str, Any] = Field(default_factory=dict)


InteractionEvent = Annotated[
    Union[CommandInteraction, ButtonInteraction, SelectMenuInteraction],
    Field(discriminator="kind"),
]

_event_adapter: TypeAdapter = TypeAdapter(InteractionEvent)

# Raw platform numbering
APPLICATION_COMMAND = 2
MESSAGE_COMPONENT = 3
BUTTON_COMPONENT = 2
SELECT_COMPONENTS = {3, 5, 6, 7, 8}
SUB_COMMAND_OPTIONS = {1, 2}  # SUB_COMMAND, SUB_COMMAND_GROUP


def parse_interaction(data: dict[str, Any]) -> InteractionEvent:
    """Validate a ``{"kind": ...}`` dict into the matching event model."""
    return _event_adapter.validate_python(data)


def from_gateway_payload(payload: dict[str, Any]) -> Optional[InteractionEvent]:
    """Convert a raw platform interaction payload.

    Returns None for interaction types the router does not handle
    (pings, autocomplete, modal submits).
    """
    data = payload.get("data") or {}
    interaction_type = payload.get("type")

    if interaction_type == APPLICATION_COMMAND:
        return CommandInteraction(
            command_name=data.get("name", ""),
            options=_options_to_dict(data.get("options") or []),
            context=payload,
        )

    if interaction_type == MESSAGE_COMPONENT:
        component_type = data.get("component_type")
        custom_id = data.get("custom_id", "")
        if component_type == BUTTON_COMPONENT:
            return ButtonInteraction(custom_id=custom_id, context=payload)
        if component_type in SELECT_COMPONENTS:
            return SelectMenuInteraction(
                custom_id=custom_id,
                values=[str(v) for v in data.get("values") or []],
                context=payload,
            )

    return None


def _options_to_dict(options: list[dict[str, Any]]) -> dict[str, Any]:
    """Flatten option payloads; sub-commands become nested dicts."""
    result: dict[str, Any] = {}
    for opt in options:
        if opt.get("type") in SUB_COMMAND_OPTIONS:
            result[opt["name"]] = _options_to_dict(opt.get("options") or [])
        else:
            result[opt["name"]] = opt.get("value")
    return result
