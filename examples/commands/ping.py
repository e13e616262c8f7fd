"""
Example command module.

Point BotClient.register_commands at examples/commands to load it. The
session adapter is expected to put a ``reply`` coroutine function in each
interaction payload; without one, replies are only logged.
"""

import logging

from slashsync import Button, ParameterSpec, ParameterType, command

logger = logging.getLogger(__name__)


async def log_reply(**message):
    logger.info(f"reply: {message}")


@command(
    description="Replies with pong",
    parameters=[ParameterSpec(type=ParameterType.STRING, name="message", description="Text to echo")],
)
async def ping(interaction):
    client = interaction.context["client"]
    reply = interaction.context.get("reply", log_reply)
    text = interaction.options.get("message") or "pong"

    async def on_again(click):
        await click.context.get("reply", log_reply)(content=text)

    rows = client.register_ui(Button(label="Again", on_click=on_again))
    await reply(content=text, components=rows)
