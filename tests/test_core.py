#!/usr/bin/env python3
"""
Tests for the command model, normalization, decorator and registry.
"""

import pytest
from pydantic import ValidationError

from slashsync.core import (
    # Exceptions
    SlashSyncError,
    ConfigurationError,
    SessionNotReadyError,
    FetchError,
    PushError,
    UIComponentError,
    # Models
    CommandChoice,
    CommandDefinition,
    CommandType,
    NormalizedCommandData,
    ParameterSpec,
    ParameterType,
    RemoteCommandRecord,
    # Registry
    CommandRegistry,
    # Decorator
    command,
    # Helpers
    normalize,
    index_by_name,
)
from slashsync.core.helpers import to_remote_record, unique_by_name


def noop(interaction):
    return None


def make_command(name="ping", description="a", **kwargs):
    return CommandDefinition(name=name, description=description, handler=noop, **kwargs)


# ============================================================================
# Exception Tests
# ============================================================================

class TestExceptions:
    """Tests for the error taxonomy."""

    def test_base_class(self):
        for cls in (ConfigurationError, FetchError, PushError, UIComponentError):
            assert issubclass(cls, SlashSyncError)

    def test_not_ready_is_configuration_error(self):
        assert issubclass(SessionNotReadyError, ConfigurationError)

    def test_message(self):
        assert str(PushError("rejected")) == "rejected"


# ============================================================================
# Model Tests
# ============================================================================

class TestCommandDefinition:
    """Tests for CommandDefinition."""

    def test_defaults(self):
        cmd = make_command()
        assert cmd.parameters == []
        assert cmd.allowed_roles == []
        assert cmd.allowed_users == []
        assert cmd.default_permission is True
        assert cmd.type == CommandType.CHAT_INPUT

    def test_is_immutable(self):
        cmd = make_command()
        with pytest.raises(ValidationError):
            cmd.name = "other"

    def test_int_snowflakes_become_strings(self):
        cmd = make_command(allowed_roles=[123, "456"], allowed_users=[789])
        assert cmd.allowed_roles == ["123", "456"]
        assert cmd.allowed_users == ["789"]

    def test_handler_excluded_from_dump(self):
        dumped = make_command().model_dump()
        assert "handler" not in dumped

    def test_parameters_from_dicts(self):
        cmd = make_command(parameters=[{"type": 3, "name": "text", "description": "t"}])
        assert cmd.parameters[0].type == ParameterType.STRING
        assert cmd.parameters[0].required is False


class TestNormalization:
    """Tests for normalize() and equality of normalized data."""

    def test_strips_handler_and_permissions(self):
        data = normalize(make_command(allowed_roles=["1"], allowed_users=["2"]))
        assert isinstance(data, NormalizedCommandData)
        assert set(data.model_dump()) == {"type", "name", "description", "options", "default_permission"}

    def test_handler_does_not_affect_equality(self):
        a = CommandDefinition(name="ping", description="a", handler=noop)
        b = CommandDefinition(name="ping", description="a", handler=lambda i: 1)
        assert normalize(a) == normalize(b)

    def test_permission_lists_do_not_affect_equality(self):
        assert normalize(make_command(allowed_roles=["1"])) == normalize(make_command())

    def test_description_affects_equality(self):
        assert normalize(make_command(description="a")) != normalize(make_command(description="b"))

    def test_option_order_is_significant(self):
        x = ParameterSpec(type=ParameterType.STRING, name="x")
        y = ParameterSpec(type=ParameterType.INTEGER, name="y")
        assert normalize(make_command(parameters=[x, y])) != normalize(make_command(parameters=[y, x]))

    def test_remote_matches_declared(self):
        declared = make_command(parameters=[
            ParameterSpec(
                type=ParameterType.STRING,
                name="color",
                description="pick",
                required=True,
                choices=[CommandChoice(name="Red", value="red")],
            ),
        ])
        remote = RemoteCommandRecord.model_validate({
            "id": 42,
            "application_id": 7,
            "name": "ping",
            "description": "a",
            "type": 1,
            "version": "99",
            "default_permission": None,
            "options": [{
                "type": 3,
                "name": "color",
                "description": "pick",
                "required": True,
                "choices": [{"name": "Red", "value": "red"}],
                "name_localizations": None,
            }],
        })
        assert remote.id == "42"
        assert normalize(remote) == normalize(declared)

    def test_missing_required_defaults_false(self):
        declared = make_command(parameters=[ParameterSpec(type=ParameterType.STRING, name="x")])
        remote = RemoteCommandRecord.model_validate({
            "id": "1",
            "name": "ping",
            "description": "a",
            "options": [{"type": 3, "name": "x", "description": ""}],
        })
        assert normalize(remote) == normalize(declared)

    def test_payload_is_plain_json(self):
        payload = normalize(make_command(parameters=[ParameterSpec(type=ParameterType.USER, name="who")])).to_payload()
        assert payload["name"] == "ping"
        assert payload["type"] == 1
        assert payload["options"][0]["type"] == 6

    def test_index_by_name_last_wins(self):
        index = index_by_name([make_command(description="first"), make_command(description="second")])
        assert len(index) == 1
        assert index["ping"].description == "second"

    def test_unique_by_name_keeps_first_position(self):
        cmds = [make_command("a", "1"), make_command("b"), make_command("a", "2")]
        result = unique_by_name(cmds)
        assert [c.name for c in result] == ["a", "b"]
        assert result[0].description == "2"

    def test_to_remote_record_from_object(self):
        class SdkCommand:
            id = 5
            name = "ping"
            description = "a"
            type = 1
            options = None
            default_permission = True

        record = to_remote_record(SdkCommand())
        assert record.id == "5"
        assert record.options == []


# ============================================================================
# Decorator Tests
# ============================================================================

class TestCommandDecorator:
    """Tests for @command."""

    def test_uses_function_name_and_doc(self):
        @command()
        def hello(interaction):
            """Says hello.

            More text here.
            """

        assert isinstance(hello, CommandDefinition)
        assert hello.name == "hello"
        assert hello.description == "Says hello."

    def test_explicit_values(self):
        @command(name="ban", description="Ban someone", allowed_roles=["mod"], default_permission=False)
        def ban_user(interaction):
            return "banned"

        assert ban_user.name == "ban"
        assert ban_user.allowed_roles == ["mod"]
        assert ban_user.default_permission is False
        assert ban_user.handler(None) == "banned"


# ============================================================================
# Registry Tests
# ============================================================================

class TestCommandRegistry:
    """Tests for CommandRegistry."""

    def test_register_bare_decorator(self):
        registry = CommandRegistry()

        @registry.register
        def ping(interaction):
            return "pong"

        assert "ping" in registry
        assert registry.get("ping").handler is ping
        assert ping(None) == "pong"
        assert ping.__command_name__ == "ping"
        assert ping.__command_definition__ is registry.get("ping")

    def test_register_with_arguments(self):
        registry = CommandRegistry()

        @registry.register(name="kick", description="Kick", allowed_users=[1])
        def kick_member(interaction):
            pass

        entry = registry.get("kick")
        assert entry.description == "Kick"
        assert entry.allowed_users == ["1"]

    def test_get_unknown_returns_none(self):
        assert CommandRegistry().get("missing") is None

    def test_duplicate_name_last_wins(self, caplog):
        registry = CommandRegistry()
        registry.add(make_command(description="first"))
        registry.add(make_command(description="second"))
        assert len(registry) == 1
        assert registry.get("ping").description == "second"
        assert "redefined" in caplog.text

    def test_iteration_order(self):
        registry = CommandRegistry([make_command("b"), make_command("a")])
        assert [c.name for c in registry] == ["b", "a"]
        assert [c.name for c in registry.all_commands()] == ["b", "a"]
