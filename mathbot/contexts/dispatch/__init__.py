"""
Dispatch Context

Responsibilities:
- Declares the bot's commands in a static, ordered registry
- Maps render outcomes and stats lookups to platform-neutral replies
- Exposes the registry on Discord as slash and mention commands

Owns: Command registration, reply formatting, the Discord session
Never: Runs the compiler or calls the stats API directly
"""

from mathbot.contexts.dispatch.commands import build_registry, math_command, owstats_command
from mathbot.contexts.dispatch.registry import (
    Attachment,
    CommandRegistry,
    CommandSpec,
    ParameterSpec,
    Reply,
)

__all__ = [
    "build_registry",
    "math_command",
    "owstats_command",
    "Attachment",
    "CommandRegistry",
    "CommandSpec",
    "ParameterSpec",
    "Reply",
]
