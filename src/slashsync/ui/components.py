"""
UI component models for message action rows.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, Field

ACTION_ROW = 1
BUTTON = 2
STRING_SELECT = 3


class ButtonStyle(IntEnum):
    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5


class Button(BaseModel):
    """A clickable button. ``on_click`` receives the ButtonInteraction."""
    label: Optional[str] = None
    style: ButtonStyle = ButtonStyle.PRIMARY
    emoji: Optional[str] = None
    url: Optional[str] = None
    disabled: bool = False
    custom_id: Optional[str] = None
    on_click: Optional[Callable[..., Any]] = Field(default=None, exclude=True)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": BUTTON, "style": int(self.style)}
        if self.label is not None:
            payload["label"] = self.label
        if self.emoji is not None:
            payload["emoji"] = {"name": self.emoji}
        if self.style == ButtonStyle.LINK:
            payload["url"] = self.url
        else:
            payload["custom_id"] = self.custom_id
        if self.disabled:
            payload["disabled"] = True
        return payload


class SelectOption(BaseModel):
    label: str
    value: str
    description: Optional[str] = None
    emoji: Optional[str] = None
    default: bool = False

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(exclude_none=True, exclude={"emoji"})
        if self.emoji is not None:
            payload["emoji"] = {"name": self.emoji}
        return payload


class SelectMenu(BaseModel):
    """A string select menu. ``on_select`` receives the SelectMenuInteraction."""
    options: list[SelectOption] = Field(default_factory=list)
    placeholder: Optional[str] = None
    min_values: int = 1
    max_values: int = 1
    disabled: bool = False
    custom_id: Optional[str] = None
    on_select: Optional[Callable[..., Any]] = Field(default=None, exclude=True)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": STRING_SELECT,
            "custom_id": self.custom_id,
            "options": [opt.to_payload() for opt in self.options],
            "min_values": self.min_values,
            "max_values": self.max_values,
        }
        if self.placeholder is not None:
            payload["placeholder"] = self.placeholder
        if self.disabled:
            payload["disabled"] = True
        return payload


UIComponent = Union[Button, SelectMenu]


def action_row(components: list[UIComponent]) -> dict[str, Any]:
    """Wrap rendered components in an action row payload."""
    return {"type": ACTION_ROW, "components": [c.to_payload() for c in components]}
