#!/usr/bin/env python3
"""
Bot Runner CLI

Starts the Discord bot with every command from the static registry.

Examples:\n

    run_bot.py                       # Uses DISCORD_TOKEN from the environment / .env

    run_bot.py --log-level DEBUG     # Show debug output on the console
"""

import os
from pathlib import Path

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from mathbot.contexts.dispatch import build_registry
from mathbot.contexts.dispatch.discord_client import build_bot
from mathbot.contexts.dispatch.logger import setup_bot_logger

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "logs"))

app = typer.Typer(
    help="Run the mathbot Discord bot",
    add_completion=False,
)


@app.command()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", "-l", help="Minimum console log level"),
    ] = "INFO",
):
    """
    Connect to Discord and serve commands until interrupted.

    Requires DISCORD_TOKEN. Slash commands are registered globally on login.
    """
    token = os.getenv("DISCORD_TOKEN")
    if not token:
        typer.secho("Error: missing DISCORD_TOKEN\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    setup_bot_logger(LOGS_PATH, console_level=log_level.upper())

    bot = build_bot(build_registry())
    # discord.py's own logging goes through the stdlib; loguru already owns the console
    bot.run(token, log_handler=None)


if __name__ == "__main__":
    app()
