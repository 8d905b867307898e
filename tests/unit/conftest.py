"""Shared fixtures for unit tests: a stand-in typst compiler."""

import stat
import sys
from pathlib import Path

import pytest

# Behaves like `typst compile <source> <output>`, switching on markers in the source.
# Successful runs write "PNG|<workspace>|<listing>|<source>" and, when
# FAKE_TYPST_RECORD is set, a copy of those bytes for comparison.
FAKE_TYPST_SOURCE = r'''
import os
import sys
import time

_, mode, source, output = sys.argv
assert mode == "compile", mode

with open(source, encoding="utf-8") as f:
    text = f.read()

if "$$$invalid$$$" in text:
    sys.stderr.write("error: unexpected dollar sign\n  --> math.typ:3:3\n  |\n3 | $ $$$invalid$$$ $\n")
    sys.exit(1)
if "BADUTF8" in text:
    sys.stderr.buffer.write(b"\xff\xfe not utf-8\nsecond line\n")
    sys.exit(1)
if "SILENT" in text:
    sys.exit(1)
if "NOOUTPUT" in text:
    sys.exit(0)
if "SLEEP" in text:
    time.sleep(60)

workspace = os.path.dirname(source)
listing = ",".join(sorted(os.listdir(workspace)))
data = "|".join(["PNG", workspace, listing, text]).encode("utf-8")

with open(output, "wb") as f:
    f.write(data)

record_dir = os.environ.get("FAKE_TYPST_RECORD")
if record_dir:
    with open(os.path.join(record_dir, os.path.basename(workspace)), "wb") as f:
        f.write(data)
'''


@pytest.fixture
def fake_typst(tmp_path: Path) -> str:
    """Path to an executable fake typst."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    script = bin_dir / "fake_typst.py"
    script.write_text(FAKE_TYPST_SOURCE)

    # Short sh wrapper keeps the shebang independent of the interpreter path length
    wrapper = bin_dir / "typst"
    wrapper.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n')
    wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    return str(wrapper)


@pytest.fixture
def scratch_root(tmp_path: Path) -> Path:
    """Parent directory for workspaces; empty after every completed render."""
    root = tmp_path / "scratch"
    root.mkdir()
    return root
