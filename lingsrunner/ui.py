"""Terminal output helpers: colour styling and status messages."""

from __future__ import annotations

import os
import sys

_CODES = {
    "bold": 1,
    "red": 31,
    "green": 32,
    "blue": 34,
}

_RESET = "\x1b[0m"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force and force != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def style(text, *args: str) -> str:
    """Wrap ``text`` in ANSI codes for the named styles when colours are enabled.

    Known styles are ``bold``, ``red``, ``green`` and ``blue``.
    """
    text = str(text)
    try:
        codes = [_CODES[name] for name in args]
    except KeyError as err:
        raise ValueError(f"unknown style: {err.args[0]!r}") from None
    if not codes or not _colors_enabled():
        return text
    prefix = "".join(f"\x1b[{code}m" for code in codes)
    return f"{prefix}{text}{_RESET}"


def warn(message: str) -> None:
    """Print a warning line in red."""
    marker = "!" if no_emoji() else "⚠️ "
    print(f"{style(marker, 'red')} {style(message, 'red')}")


def success(message: str) -> None:
    """Print a success line in green."""
    marker = "✓" if no_emoji() else "✅"
    print(f"{style(marker, 'green')} {style(message, 'green')}")