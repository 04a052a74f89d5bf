"""Key-to-action mapping of the terminal frontend."""

from __future__ import annotations

import pytest

from frontend.cli.input_handler import resolve


@pytest.mark.parametrize(
    ("ch", "action"),
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("D", "right"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("R", "restart"),
        ("h", "hint"),
        ("v", "solve"),
        ("\r", "enter"),
        ("5", "5"),
        ("\x07", ""),
    ],
)
def test_resolve(ch: str, action: str) -> None:
    assert resolve(ch) == action
