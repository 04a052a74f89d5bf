"""Single-keypress reader for the terminal frontend.

Arrow keys, WASD, digits and a few command letters are read without Enter.
POSIX terminals go through termios raw mode; Windows through msvcrt.
"""

from __future__ import annotations

import os
import sys
import time

# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "h": "hint",
    "v": "solve",
    "\r": "enter",
    "\n": "enter",
}

# Final byte of ``ESC [ x``.
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

# Byte following the ``\x00`` / ``\xe0`` prefix from msvcrt.
_WIN_ARROW_MAP: dict[str, str] = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}


def resolve(ch: str) -> str:
    """Map one raw character to its action name.

    Unmapped printable characters (digits, mostly) come back unchanged and
    anything else maps to ``""``.
    """
    action = _KEY_MAP.get(ch.lower() if ch.isalpha() else ch)
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


# -- platform readers ----------------------------------------------------------


def _read_posix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def ready(wait: float | None) -> bool:
        return bool(select.select([fd], [], [], wait)[0])

    def read1() -> str:
        # os.read is unbuffered so select() keeps seeing the rest of an
        # escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        if not ready(timeout):
            return None
        ch = read1()
        if ch != "\x1b":
            return resolve(ch)
        if not ready(0.1):
            return "quit"  # bare Escape
        if read1() != "[":
            return "quit"
        if not ready(0.1):
            return ""
        return _ARROW_MAP.get(read1(), "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return _WIN_ARROW_MAP.get(msvcrt.getwch(), "")
    if ch == "\x1b":
        return "quit"
    return resolve(ch)


_read = _read_windows if os.name == "nt" else _read_posix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action name.

    Possible return values:
        "up", "down", "left", "right"  — arrows / WASD
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "hint"                         — h
        "solve"                        — v
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char (digits)
        ""                             — unrecognised key
    """
    key = _read(None)
    assert key is not None
    return key


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key`, but return ``None`` after *timeout* seconds."""
    return _read(timeout)
