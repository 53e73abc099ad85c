"""Shared fixtures: TOML documents written to a temporary directory."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

FIRST_TOML = """
    name = "first"
    version = 3

    [field0]
    values = [0.12, 3.45, 6.78]

    [field1]
    name = "b"
    id = 10
"""

SECOND_TOML = """
    name = "second"
    version = 3

    [field0]
    values = [0.123, 3.456, 6.789]

    [field3]
    name = "b"
    id = 11
"""


@pytest.fixture
def write_toml(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a factory that writes dedented text to ``tmp_path / name``."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def first_toml(write_toml: Callable[[str, str], Path]) -> Path:
    return write_toml("first.toml", FIRST_TOML)


@pytest.fixture
def second_toml(write_toml: Callable[[str, str], Path]) -> Path:
    return write_toml("second.toml", SECOND_TOML)
