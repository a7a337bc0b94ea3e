"""Single-keypress reader for the terminal frontend.

Arrow keys, WASD and a few command keys are normalised to action strings
without waiting for Enter.  Works on macOS / Linux (tty + termios + select)
and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time

# -- key tables -----------------------------------------------------------------

_ACTIONS: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "\r": "enter",
    "\n": "enter",
}

# Final byte of the ``ESC [ x`` sequences sent by arrow keys.
_ARROWS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

# Second byte of the ``\xe0 x`` / ``\x00 x`` pairs msvcrt reports for arrows.
_WIN_ARROWS: dict[str, str] = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}

_ESCAPE_WAIT = 0.05


def _action(ch: str) -> str:
    """Map a raw character to its action string."""
    return _ACTIONS.get(ch.lower(), ch if ch.isprintable() else "")


# -- platform readers -------------------------------------------------------------


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    end = None if timeout is None else time.monotonic() + timeout
    while not msvcrt.kbhit():
        if end is not None and time.monotonic() >= end:
            return None
        time.sleep(0.02)

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return _WIN_ARROWS.get(msvcrt.getwch(), "")
    if ch == "\x1b":
        return "quit"
    return _action(ch)


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def _next(wait: float | None) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = _next(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return _action(ch)

        # ESC [ A/B/C/D, or a bare Escape when nothing follows quickly.
        if _next(_ESCAPE_WAIT) != "[":
            return "quit"
        final = _next(_ESCAPE_WAIT)
        return _ARROWS.get(final or "", "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


# -- public API -------------------------------------------------------------------


def read_key(timeout: float | None = None) -> str | None:
    """Read one keypress and return a normalised action string.

    Blocks until a key is pressed, or for at most *timeout* seconds, in which
    case ``None`` is returned.

    Possible return values:
        "up", "down", "left", "right"  — arrows / WASD
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "enter"                        — Enter / Return
        "<char>"                       — any other printable char
        ""                             — unrecognised key
    """
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_unix(timeout)
