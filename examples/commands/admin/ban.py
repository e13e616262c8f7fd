"""Role-restricted example: only the listed role and user can see /ban."""

import logging

from slashsync import ParameterSpec, ParameterType, command

logger = logging.getLogger(__name__)


@command(
    description="Ban a member",
    parameters=[ParameterSpec(type=ParameterType.USER, name="member", description="Who", required=True)],
    allowed_roles=["123456789012345678"],
    allowed_users=["876543210987654321"],
    default_permission=False,
)
async def ban(interaction):
    member = interaction.options["member"]
    reply = interaction.context.get("reply")
    if reply is None:
        logger.info(f"Banned {member}")
        return
    await reply(content=f"Banned <@{member}>")
