"""
Tests for UI components and the UI registry.
"""

import itertools
import threading

import pytest

from slashsync.core import UIComponentError
from slashsync.ui import Button, ButtonStyle, SelectMenu, SelectOption, UIRegistry


def noop(event):
    return None


def menu(**kwargs):
    kwargs.setdefault("on_select", noop)
    return SelectMenu(options=[SelectOption(label="One", value="1")], **kwargs)


# ============================================================================
# Component Payload Tests
# ============================================================================

class TestComponentPayloads:
    """Tests for rendering individual components."""

    def test_button_payload(self):
        payload = Button(label="Go", style=ButtonStyle.SUCCESS, emoji="✅", custom_id="x").to_payload()
        assert payload == {
            "type": 2,
            "style": 3,
            "label": "Go",
            "emoji": {"name": "✅"},
            "custom_id": "x",
        }

    def test_link_button_has_url_not_custom_id(self):
        payload = Button(label="Docs", style=ButtonStyle.LINK, url="https://example.com").to_payload()
        assert payload["url"] == "https://example.com"
        assert "custom_id" not in payload

    def test_callback_not_serialized(self):
        assert "on_click" not in Button(label="x", on_click=noop).model_dump()

    def test_select_payload(self):
        payload = SelectMenu(
            custom_id="s",
            placeholder="Pick",
            options=[SelectOption(label="One", value="1", description="first")],
        ).to_payload()
        assert payload["type"] == 3
        assert payload["placeholder"] == "Pick"
        assert payload["options"] == [{"label": "One", "value": "1", "description": "first", "default": False}]


# ============================================================================
# Registry Tests
# ============================================================================

class TestRegisterUI:
    """Tests for UIRegistry.register_ui."""

    def test_single_button(self):
        ui = UIRegistry()
        rows = ui.register_ui(Button(label="Go", on_click=noop))

        assert len(rows) == 1
        assert rows[0]["type"] == 1
        custom_id = rows[0]["components"][0]["custom_id"]
        assert ui.button_listeners == {custom_id: noop}
        assert ui.get_button_handler(custom_id) is noop

    def test_one_dimensional_list_is_one_row(self):
        rows = UIRegistry().register_ui([Button(label="a", on_click=noop), Button(label="b", on_click=noop)])
        assert len(rows) == 1
        assert len(rows[0]["components"]) == 2

    def test_two_dimensional_list(self):
        ui = UIRegistry()
        rows = ui.register_ui([
            [Button(label="a", on_click=noop), Button(label="b", on_click=noop)],
            [menu()],
        ])
        assert len(rows) == 2
        assert len(ui.button_listeners) == 2
        assert len(ui.select_menu_listeners) == 1
        assert len(ui) == 3

    def test_input_component_not_mutated(self):
        button = Button(label="a", on_click=noop)
        UIRegistry().register_ui(button)
        assert button.custom_id is None

    def test_components_without_callbacks_pass_through(self):
        ui = UIRegistry()
        rows = ui.register_ui([
            Button(label="static", custom_id="fixed"),
            Button(label="Docs", style=ButtonStyle.LINK, url="https://example.com"),
        ])
        assert rows[0]["components"][0]["custom_id"] == "fixed"
        assert len(ui) == 0

    def test_ids_unique_across_calls(self):
        ui = UIRegistry()
        ids = []
        for _ in range(50):
            rows = ui.register_ui([Button(label="a", on_click=noop), Button(label="b", on_click=noop)])
            ids.extend(c["custom_id"] for c in rows[0]["components"])
        assert len(set(ids)) == 100
        assert len(ui.button_listeners) == 100

    def test_colliding_id_is_redrawn(self):
        ids = iter(["same", "same", "other"])
        ui = UIRegistry(id_factory=lambda: next(ids))
        ui.register_ui(Button(label="a", on_click=noop))
        rows = ui.register_ui(Button(label="b", on_click=noop))
        assert rows[0]["components"][0]["custom_id"] == "other"
        assert set(ui.button_listeners) == {"same", "other"}

    def test_concurrent_registration(self):
        counter = itertools.count()
        ui = UIRegistry(id_factory=lambda: f"id-{next(counter) % 500}")

        def worker():
            for _ in range(50):
                ui.register_ui(Button(label="x", on_click=noop))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(ui.button_listeners) == 200

    def test_empty_list(self):
        assert UIRegistry().register_ui([]) == []


class TestLayoutValidation:
    """Tests for layout errors."""

    def test_too_many_rows(self):
        with pytest.raises(UIComponentError, match="rows"):
            UIRegistry().register_ui([[Button(label=str(i), on_click=noop)] for i in range(6)])

    def test_too_many_in_row(self):
        with pytest.raises(UIComponentError, match="max is 5"):
            UIRegistry().register_ui([Button(label=str(i), on_click=noop) for i in range(6)])

    def test_select_must_be_alone(self):
        with pytest.raises(UIComponentError, match="alone"):
            UIRegistry().register_ui([menu(), Button(label="x", on_click=noop)])

    def test_mixed_top_level(self):
        with pytest.raises(UIComponentError, match="mix"):
            UIRegistry().register_ui([Button(label="x", on_click=noop), [Button(label="y", on_click=noop)]])

    def test_link_button_needs_url(self):
        with pytest.raises(UIComponentError, match="url"):
            UIRegistry().register_ui(Button(label="x", style=ButtonStyle.LINK))

    def test_link_button_rejects_on_click(self):
        with pytest.raises(UIComponentError, match="on_click"):
            UIRegistry().register_ui(Button(label="x", style=ButtonStyle.LINK, url="https://e.com", on_click=noop))

    def test_button_needs_id_or_callback(self):
        with pytest.raises(UIComponentError):
            UIRegistry().register_ui(Button(label="x"))

    def test_select_needs_options(self):
        with pytest.raises(UIComponentError, match="options"):
            UIRegistry().register_ui(SelectMenu(on_select=noop))

    def test_unsupported_value(self):
        with pytest.raises(UIComponentError):
            UIRegistry().register_ui("button")

    def test_failed_render_registers_nothing(self):
        ui = UIRegistry()
        with pytest.raises(UIComponentError):
            ui.register_ui([[Button(label="ok", on_click=noop)], [menu(), menu()]])
        assert len(ui) == 0
