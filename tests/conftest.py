from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from codeformat import reset_config  # noqa: E402


@pytest.fixture(autouse=True)
def default_formatting_config():
    """Run every test against the default line feed and tab tokens."""

    reset_config()
    yield
    reset_config()
