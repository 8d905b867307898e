"""
Discord client

Turns the static command registry into discord.py commands. Each registry
entry is exposed twice: as a slash command, and as a text command triggered
by mentioning the bot (which works without the privileged message content
intent).
"""

import io
from typing import Any, Dict

import discord
from discord import app_commands
from discord.ext import commands

from mathbot.contexts.dispatch.logger import _log_exception, _log_info, log_invocation
from mathbot.contexts.dispatch.registry import CommandRegistry, CommandSpec, Reply
from mathbot.contexts.rendering import GENERIC_ERROR_MESSAGE


def reply_kwargs(reply: Reply) -> Dict[str, Any]:
    """Translate a Reply into keyword arguments for send()/followup.send()."""
    kwargs: Dict[str, Any] = {}
    if reply.content is not None:
        kwargs["content"] = reply.content
    if reply.attachment is not None:
        kwargs["file"] = discord.File(
            io.BytesIO(reply.attachment.data), filename=reply.attachment.filename
        )
    return kwargs


def build_slash_command(spec: CommandSpec) -> app_commands.Command:
    """Build a slash command whose single option is named and described by the spec."""

    async def callback(interaction: discord.Interaction, value: str) -> None:
        log_invocation(spec.name, interaction.user, value)
        # Rendering can take longer than Discord's 3s acknowledgement window
        await interaction.response.defer(thinking=True)
        reply = await spec.handler(value)
        await interaction.followup.send(**reply_kwargs(reply))

    command = app_commands.Command(
        name=spec.name,
        description=spec.description,
        callback=callback,
    )
    command = app_commands.rename(value=spec.parameter.name)(command)
    return app_commands.describe(value=spec.parameter.description)(command)


def build_text_command(spec: CommandSpec) -> commands.Command:
    """Build a mention-prefixed text command: '@bot math x^2'."""

    async def callback(ctx: commands.Context, *, value: str) -> None:
        log_invocation(spec.name, ctx.author, value)
        async with ctx.typing():
            reply = await spec.handler(value)
        await ctx.send(**reply_kwargs(reply))

    return commands.Command(callback, name=spec.name, help=spec.description)


class MathBot(commands.Bot):
    """
    Discord bot serving every command in a registry.

    Slash commands are synced globally in setup_hook, once per login.
    """

    def __init__(self, registry: CommandRegistry):
        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=discord.Intents.default(),
            help_command=None,
        )
        self.registry = registry

        for spec in registry:
            self.tree.add_command(build_slash_command(spec))
            self.add_command(build_text_command(spec))

        self.tree.error(self.on_app_command_error)

    async def setup_hook(self) -> None:
        synced = await self.tree.sync()
        _log_info(f"Registered {len(synced)} slash commands globally: {self.registry.names()}")

    async def on_ready(self) -> None:
        _log_info(f"Logged in as {self.user}")

    async def on_app_command_error(
        self, interaction: discord.Interaction, error: app_commands.AppCommandError
    ) -> None:
        name = interaction.command.name if interaction.command else "?"
        _log_exception(f"/{name} failed: {error!r}", error)
        if interaction.response.is_done():
            await interaction.followup.send(GENERIC_ERROR_MESSAGE)
        else:
            await interaction.response.send_message(GENERIC_ERROR_MESSAGE)

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        if isinstance(error, commands.CommandNotFound):
            return
        if isinstance(error, commands.UserInputError):
            await ctx.send(f"Usage: @{self.user} {ctx.command.name} <value>")
            return
        _log_exception(f"{ctx.command.name if ctx.command else '?'} failed: {error!r}", error)
        await ctx.send(GENERIC_ERROR_MESSAGE)


def build_bot(registry: CommandRegistry) -> MathBot:
    return MathBot(registry)
