"""Console presentation helpers with graceful fallbacks."""
from __future__ import annotations

import os
import shutil
import sys
import textwrap
from typing import Optional, TextIO

try:  # optional dependency
    import colorama
    from colorama import Fore, Style
except Exception:  # pragma: no cover - optional dep
    colorama = None
    Fore = None  # type: ignore[assignment]
    Style = None  # type: ignore[assignment]

try:  # optional dependency
    import pyfiglet
except Exception:  # pragma: no cover - optional dep
    pyfiglet = None

__all__ = [
    "init",
    "banner",
    "section",
    "kv",
    "big_number",
    "success",
    "warning",
    "error",
    "elapsed",
    "rule",
    "line",
]

_width = 100
_plain_mode = False
_use_color = False
_color_prefix = {
    "success": "",
    "warning": "",
    "error": "",
    "label": "",
}

_symbol_success = "✓"
_symbol_warning = "!"
_symbol_error = "✗"


def init(plain: bool = False) -> None:
    """Initialise console helpers with optional colour output."""

    global _width, _plain_mode, _use_color, _color_prefix
    global _symbol_success, _symbol_warning, _symbol_error

    _width = shutil.get_terminal_size(fallback=(100, 24)).columns or 100

    env_plain = bool(os.environ.get("NO_COLOR"))
    stream = getattr(sys.stdout, "isatty", lambda: False)
    try:
        is_tty = bool(stream())
    except Exception:  # pragma: no cover - conservative fallback
        is_tty = False

    _plain_mode = plain or env_plain or not is_tty
    _use_color = not _plain_mode and colorama is not None
    if _use_color:
        try:
            colorama.init()
        except Exception:  # pragma: no cover - best-effort init
            _use_color = False

    if _plain_mode:
        _symbol_success = "[OK]"
        _symbol_warning = "[!]"
        _symbol_error = "[X]"
    else:
        _symbol_success = "✓"
        _symbol_warning = "!"
        _symbol_error = "✗"

    if _use_color and Fore is not None and Style is not None:
        _color_prefix = {
            "success": Fore.GREEN + Style.BRIGHT,
            "warning": Fore.YELLOW + Style.BRIGHT,
            "error": Fore.RED + Style.BRIGHT,
            "label": Fore.CYAN,
        }
    else:
        _color_prefix = {"success": "", "warning": "", "error": "", "label": ""}


def _apply(style: str, message: str) -> str:
    if not _use_color or not style:
        return message
    suffix = Style.RESET_ALL if Style is not None else ""
    return f"{style}{message}{suffix}"


def rule(char: str = "=", width: Optional[int] = None) -> None:
    """Print a horizontal rule spanning the console width."""

    count = width if width is not None else _width
    print(char * max(1, count))


def banner(title: str) -> None:
    """Display a banner heading for the CLI."""

    if _plain_mode or pyfiglet is None:
        print(f"=== {title} ===".center(_width))
        return

    try:
        fig = pyfiglet.figlet_format(title, width=_width)
    except Exception:
        print(f"=== {title} ===".center(_width))
        return
    print(fig)


def section(title: str) -> None:
    rule("=")
    print(f" {title.upper()}")
    rule("=")


def kv(key: str, value: str) -> None:
    """Print a key-value line."""

    print(f"{_apply(_color_prefix['label'], key)}: {value}")


def big_number(key: str, value: int, base: int = 10) -> None:
    """Print a labelled integer in decimal or binary, wrapped to the console.

    Continuation lines are indented under the first digit so long values
    stay readable without a horizontal scroll.
    """

    digits = format(value, "b") if base == 2 else str(value)
    indent = " " * (len(key) + 2)
    room = max(16, _width - len(indent))
    if _plain_mode or len(digits) <= room:
        kv(key, digits)
        return
    chunks = textwrap.wrap(digits, room)
    kv(key, chunks[0])
    for chunk in chunks[1:]:
        print(f"{indent}{chunk}")


def success(msg: str, stream: Optional[TextIO] = None) -> None:
    """Highlight a success message (stdout by default)."""

    print(_apply(_color_prefix["success"], f"{_symbol_success} {msg}"), file=stream)


def warning(msg: str, stream: Optional[TextIO] = None) -> None:
    """Highlight a warning message (stderr by default)."""

    out = stream if stream is not None else sys.stderr
    print(_apply(_color_prefix["warning"], f"{_symbol_warning} {msg}"), file=out)


def error(msg: str, stream: Optional[TextIO] = None) -> None:
    """Highlight an error message (stderr by default)."""

    out = stream if stream is not None else sys.stderr
    print(_apply(_color_prefix["error"], f"{_symbol_error} {msg}"), file=out)


def elapsed(prefix: str, seconds: float) -> None:
    """Print a formatted elapsed time entry."""

    print(f"{prefix} {seconds:.2f}s")


def line() -> None:
    """Print a thin separator line."""

    rule("-")
