"""
Shared fixtures: an in-memory platform session.
"""

import itertools

import pytest

from slashsync.config import Config


class FakeSession:
    """In-memory PlatformSession recording every call."""

    def __init__(self, ready=True, guilds=("guild-1",)):
        self.ready = ready
        self.guilds = set(guilds)
        self.remote = {None: []}  # guild_id (None = application) -> command dicts
        self.fetch_calls = []
        self.set_calls = []
        self.permission_calls = []
        self.handlers = {}
        self.once_handlers = {}
        self.fetch_returns_none = False
        self.fail_set_commands = None
        self.fail_set_permissions = None
        self._ids = itertools.count(1000)

    def is_ready(self):
        return self.ready

    def has_guild(self, guild_id):
        return guild_id in self.guilds

    def on(self, event, handler):
        self.handlers.setdefault(event, []).append(handler)

    def once(self, event, handler):
        self.once_handlers.setdefault(event, []).append(handler)

    async def fetch_commands(self, guild_id=None):
        self.fetch_calls.append(guild_id)
        if self.fetch_returns_none:
            return None
        return list(self.remote.get(guild_id, []))

    async def set_commands(self, commands, guild_id=None):
        self.set_calls.append((commands, guild_id))
        if self.fail_set_commands:
            raise self.fail_set_commands
        registered = [dict(cmd, id=str(next(self._ids))) for cmd in commands]
        self.remote[guild_id] = registered
        return registered

    async def set_permissions(self, guild_id, permissions):
        self.permission_calls.append((guild_id, permissions))
        if self.fail_set_permissions:
            raise self.fail_set_permissions

    async def emit_ready(self):
        self.ready = True
        for handler in self.once_handlers.pop("ready", []):
            await handler()

    async def emit(self, event, payload):
        for handler in self.handlers.get(event, []):
            await handler(payload)

    @property
    def write_count(self):
        return len(self.set_calls) + len(self.permission_calls)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def prod_config():
    return Config(guild_id="guild-1", environment="production")


@pytest.fixture
def dev_config():
    return Config(guild_id="guild-1", environment="development")
