"""
Command Registry

Static, ordered table of the bot's commands. Built once at startup and
read-only afterwards; the Discord client turns each entry into a slash
command and a mention-prefixed text command.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Iterator, List, Optional


@dataclass(frozen=True)
class Attachment:
    """Binary file sent alongside (or instead of) a text reply."""

    filename: str
    data: bytes


@dataclass(frozen=True)
class Reply:
    """
    Platform-neutral response to one invocation.

    Attributes:
        content: Text message (None for attachment-only replies)
        attachment: File to upload (None for text-only replies)
    """

    content: Optional[str] = None
    attachment: Optional[Attachment] = None


@dataclass(frozen=True)
class ParameterSpec:
    """The single string parameter a command takes."""

    name: str
    description: str


CommandHandler = Callable[[str], Awaitable[Reply]]


@dataclass(frozen=True)
class CommandSpec:
    """
    One registry entry.

    Attributes:
        name: Command keyword (lowercase, as users type it)
        description: Short help shown by Discord
        parameter: Schema of the command's only argument
        handler: Coroutine taking the argument value and returning a Reply
    """

    name: str
    description: str
    parameter: ParameterSpec
    handler: CommandHandler


class CommandRegistry:
    """
    Ordered command table.

    Usage:
        registry = CommandRegistry()
        registry.register(CommandSpec("math", ...))

        for spec in registry:
            ...
    """

    def __init__(self):
        self._commands: Dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        """
        Add a command at the end of the table.

        Raises:
            ValueError: If the name is already registered
        """
        key = spec.name.lower()
        if key in self._commands:
            raise ValueError(f"Command name collision: '{key}' is already registered")
        self._commands[key] = spec

    def get(self, name: str) -> Optional[CommandSpec]:
        """Look up a command by name (case-insensitive)."""
        return self._commands.get(name.lower())

    def names(self) -> List[str]:
        return list(self._commands)

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
