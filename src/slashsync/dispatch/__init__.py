"""Interaction events and the dispatch router."""
from __future__ import annotations

from slashsync.dispatch.events import (
    ButtonInteraction,
    CommandInteraction,
    InteractionEvent,
    SelectMenuInteraction,
    from_gateway_payload,
    parse_interaction,
)
from slashsync.dispatch.router import DispatchRouter

__all__ = [
    "ButtonInteraction",
    "CommandInteraction",
    "DispatchRouter",
    "InteractionEvent",
    "SelectMenuInteraction",
    "from_gateway_payload",
    "parse_interaction",
]
