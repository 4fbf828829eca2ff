from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def console() -> Console:
    """Console writing plain text into a buffer, readable via ``console.file``."""

    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)


def output_of(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


@pytest.fixture()
def read_output():
    return output_of
