"""Unit tests for loguru setup."""

import os

import pytest
from loguru import logger

from mathbot import __version__
from mathbot.contexts.dispatch.logger import setup_bot_logger
from mathbot.contexts.rendering.logger import CONTEXT_PREFIX, _log_info
from mathbot.utils.logger import setup_logger


@pytest.fixture
def restore_loguru():
    yield
    logger.remove()


@pytest.mark.unit
def test_setup_logger_writes_banner_and_prefixed_messages(tmp_path, restore_loguru):
    """Banner settings and context-prefixed messages both land in the log file."""
    log_dir = tmp_path / "logs"

    log_file = setup_logger(
        context_name="render", log_dir=log_dir, extra_provenance={"typst_compiler": "typst"}
    )
    _log_info("hello from the renderer")
    logger.complete()

    assert log_file == log_dir / "render.log"
    content = log_file.read_text()
    assert "---- render starting ----" in content
    assert f"pid={os.getpid()}" in content
    assert "typst_compiler=typst" in content
    assert f"{CONTEXT_PREFIX} hello from the renderer" in content


@pytest.mark.unit
def test_file_sink_keeps_debug_below_console_level(tmp_path, restore_loguru):
    """The console level only filters stdout; the file still records DEBUG."""
    log_file = setup_logger(context_name="render", log_dir=tmp_path, console_level="ERROR")
    logger.debug("quiet detail")
    logger.complete()

    assert "quiet detail" in log_file.read_text()


@pytest.mark.unit
def test_setup_bot_logger_records_render_settings(tmp_path, restore_loguru):
    """The bot banner names the version, compiler and timeout in effect."""
    log_file = setup_bot_logger(tmp_path)
    logger.complete()

    assert log_file == tmp_path / "bot.log"
    content = log_file.read_text()
    assert "---- bot starting ----" in content
    assert f"mathbot={__version__}" in content
    assert "typst_compiler=" in content
    assert "render_timeout_s=" in content
