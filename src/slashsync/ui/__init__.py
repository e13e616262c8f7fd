"""UI components with callback binding."""
from __future__ import annotations

from slashsync.ui.components import Button, ButtonStyle, SelectMenu, SelectOption, UIComponent
from slashsync.ui.registry import UIRegistry

__all__ = [
    "Button",
    "ButtonStyle",
    "SelectMenu",
    "SelectOption",
    "UIComponent",
    "UIRegistry",
]
