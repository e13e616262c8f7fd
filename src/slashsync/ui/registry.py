"""Registry binding generated component ids to callbacks."""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional, Sequence, Union
from uuid import uuid4

from slashsync.core.exceptions import UIComponentError
from slashsync.ui.components import Button, ButtonStyle, SelectMenu, UIComponent, action_row

logger = logging.getLogger(__name__)

MAX_ROWS = 5
MAX_ROW_WIDTH = 5
MAX_SELECT_OPTIONS = 25

UILayout = Union[UIComponent, Sequence[UIComponent], Sequence[Sequence[UIComponent]]]


class UIRegistry:
    """Button and select menu listeners keyed by generated custom id.

    Entries live as long as the registry; nothing is evicted. Inserts are
    serialized, lookups are plain dict reads since entries never change
    once added.

    Usage:
        ui = UIRegistry()
        rows = ui.register_ui([
            Button(label="Yes", on_click=on_yes),
            Button(label="No", style=ButtonStyle.DANGER, on_click=on_no),
        ])
        await reply(content="Continue?", components=rows)
    """

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        self.button_listeners: dict[str, Callable[..., Any]] = {}
        self.select_menu_listeners: dict[str, Callable[..., Any]] = {}
        self._new_id = id_factory or (lambda: uuid4().hex)
        self._lock = threading.Lock()

    def register_ui(self, ui: UILayout) -> list[dict[str, Any]]:
        """Bind callbacks and render action rows.

        Args:
            ui: A single component, a list of components (one row) or a
                list of rows.

        Returns:
            Action row payloads, ready to send as message components.
        """
        rows = _to_rows(ui)
        _validate_rows(rows)
        return [action_row([self._bind(component) for component in row]) for row in rows]

    def get_button_handler(self, custom_id: str) -> Optional[Callable[..., Any]]:
        return self.button_listeners.get(custom_id)

    def get_select_menu_handler(self, custom_id: str) -> Optional[Callable[..., Any]]:
        return self.select_menu_listeners.get(custom_id)

    def _bind(self, component: UIComponent) -> UIComponent:
        if isinstance(component, Button) and component.on_click is not None:
            custom_id = self._register(self.button_listeners, component.on_click)
            return component.model_copy(update={"custom_id": custom_id})
        if isinstance(component, SelectMenu) and component.on_select is not None:
            custom_id = self._register(self.select_menu_listeners, component.on_select)
            return component.model_copy(update={"custom_id": custom_id})
        return component

    def _register(self, listeners: dict[str, Callable[..., Any]], callback: Callable[..., Any]) -> str:
        with self._lock:
            custom_id = self._new_id()
            while custom_id in listeners:
                custom_id = self._new_id()
            listeners[custom_id] = callback
        logger.debug(f"Registered UI listener {custom_id}")
        return custom_id

    def __len__(self) -> int:
        return len(self.button_listeners) + len(self.select_menu_listeners)


def _is_component(obj: Any) -> bool:
    return isinstance(obj, (Button, SelectMenu))


def _to_rows(ui: UILayout) -> list[list[UIComponent]]:
    """Normalize a component, a row or a grid into a list of rows."""
    if _is_component(ui):
        return [[ui]]
    if not isinstance(ui, (list, tuple)):
        raise UIComponentError(f"Unsupported UI value: {type(ui).__name__}")
    if all(isinstance(item, (list, tuple)) for item in ui):
        return [list(row) for row in ui]
    if any(isinstance(item, (list, tuple)) for item in ui):
        raise UIComponentError("Cannot mix components and rows at the top level")
    return [list(ui)] if ui else []


def _validate_rows(rows: list[list[UIComponent]]) -> None:
    if len(rows) > MAX_ROWS:
        raise UIComponentError(f"At most {MAX_ROWS} rows allowed, got {len(rows)}")

    for index, row in enumerate(rows):
        if not row:
            raise UIComponentError(f"Row {index} is empty")
        if len(row) > MAX_ROW_WIDTH:
            raise UIComponentError(f"Row {index} has {len(row)} components, max is {MAX_ROW_WIDTH}")
        for component in row:
            if not _is_component(component):
                raise UIComponentError(f"Unsupported UI component: {type(component).__name__}")
            if isinstance(component, SelectMenu):
                if len(row) > 1:
                    raise UIComponentError(f"Select menu must be alone in row {index}")
                _validate_select(component)
            else:
                _validate_button(component)


def _validate_button(button: Button) -> None:
    if button.style == ButtonStyle.LINK:
        if not button.url:
            raise UIComponentError("Link buttons need a url")
        if button.on_click is not None:
            raise UIComponentError("Link buttons cannot have on_click")
    elif button.on_click is None and not button.custom_id:
        raise UIComponentError(f"Button {button.label!r} needs on_click or custom_id")


def _validate_select(menu: SelectMenu) -> None:
    if not 1 <= len(menu.options) <= MAX_SELECT_OPTIONS:
        raise UIComponentError(f"Select menus need 1 to {MAX_SELECT_OPTIONS} options")
    if menu.on_select is None and not menu.custom_id:
        raise UIComponentError("Select menu needs on_select or custom_id")
