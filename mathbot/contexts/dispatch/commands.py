"""
Command handlers and the default registry.

Handlers are platform-neutral: they take the raw argument string and return a
Reply. Failures a user can act on come back as text; infrastructure failures
come back as a generic message and are logged by the context that hit them.
"""

from mathbot.contexts.dispatch.registry import (
    Attachment,
    CommandRegistry,
    CommandSpec,
    ParameterSpec,
    Reply,
)
from mathbot.contexts.rendering import Artifact, InputError, render_expression
from mathbot.contexts.stats import (
    StatsLookupError,
    fetch_player_stats,
    format_player_stats,
    normalize_player,
)

INVALID_SYNTAX_HEADER = "**Invalid Typst Math Syntax**"


async def math_command(expression: str) -> Reply:
    """Math rendering via typst."""
    outcome = await render_expression(expression)

    if isinstance(outcome, Artifact):
        return Reply(attachment=Attachment(filename=outcome.filename, data=outcome.data))
    if isinstance(outcome, InputError):
        return Reply(content=f"{INVALID_SYNTAX_HEADER}\n{outcome.message}")
    return Reply(content=outcome.user_message)


async def owstats_command(player: str) -> Reply:
    """Get Overwatch stats of a player."""
    try:
        stats = await fetch_player_stats(player)
    except StatsLookupError:
        return Reply(content=f"Could not fetch stats for player {normalize_player(player)}.")
    return Reply(content=format_player_stats(player, stats))


def build_registry() -> CommandRegistry:
    """Build the bot's command table, in the order commands are declared to Discord."""
    registry = CommandRegistry()
    registry.register(
        CommandSpec(
            name="math",
            description="Math rendering via typst",
            parameter=ParameterSpec("expression", "math expression (typst syntax)"),
            handler=math_command,
        )
    )
    registry.register(
        CommandSpec(
            name="owstats",
            description="Get Overwatch Stats of a Player",
            parameter=ParameterSpec("player", "player"),
            handler=owstats_command,
        )
    )
    return registry
