"""Blocking single-key terminal input."""

from __future__ import annotations

import os
import select
import sys
from typing import Optional

from utilhub.ui.navigation import Key

IS_WINDOWS = sys.platform == "win32"

ESCAPE_SEQUENCES = {
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1bOA": Key.UP,
    "\x1bOB": Key.DOWN,
    "\x1b[5~": Key.PAGE_UP,
    "\x1b[6~": Key.PAGE_DOWN,
}

# Second character after a \x00 or \xe0 prefix from msvcrt
WINDOWS_SCAN_CODES = {
    "H": Key.UP,
    "P": Key.DOWN,
    "I": Key.PAGE_UP,
    "Q": Key.PAGE_DOWN,
}


def decode_sequence(sequence: str) -> Key:
    """Map a raw terminal sequence to a ``Key``."""
    if sequence in ("\r", "\n"):
        return Key.ENTER
    if sequence == "\x1b":
        return Key.ESCAPE
    return ESCAPE_SEQUENCES.get(sequence, Key.OTHER)


def _utf8_length(lead: int) -> int:
    """Number of bytes in the UTF-8 sequence that starts with ``lead``."""
    if lead >= 0xF8:
        return 1
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _read_exact(fd: int, count: int) -> bytes:
    data = b""
    while len(data) < count:
        chunk = os.read(fd, count - len(data))
        if not chunk:
            break
        data += chunk
    return data


def _is_tty(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError, OSError):
        return False


class KeyboardInput:
    """Keeps the terminal in cbreak mode while a picker is on screen.

    Typeahead is kept so that keys pressed during a repaint are not lost.
    """

    def __init__(self, stream=None) -> None:
        self.stream = sys.stdin if stream is None else stream
        self.old_settings = None

    def __enter__(self) -> "KeyboardInput":
        if IS_WINDOWS or not _is_tty(self.stream):
            return self
        import termios
        import tty

        fd = self.stream.fileno()
        self.old_settings = termios.tcgetattr(fd)
        tty.setcbreak(fd, termios.TCSANOW)
        return self

    def __exit__(self, *args) -> None:
        if self.old_settings is not None:
            import termios

            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self.old_settings)
            self.old_settings = None


def _read_posix_raw(fd: int) -> str:
    """Read one key press. Returns an empty string only at end of input."""
    data = os.read(fd, 1)
    if not data:
        return ""
    if data != b"\x1b":
        data += _read_exact(fd, _utf8_length(data[0]) - 1)
        return data.decode("utf-8", errors="replace")

    # A lone ESC is the Escape key; arrows and paging arrive as a burst.
    sequence = "\x1b"
    while select.select([fd], [], [], 0.05)[0]:
        chunk = os.read(fd, 1)
        if not chunk:
            break
        sequence += chunk.decode("utf-8", errors="replace")
        if len(sequence) >= 3 and (sequence[-1].isalpha() or sequence[-1] == "~"):
            break
    return sequence


def _read_posix() -> Optional[Key]:
    if not _is_tty(sys.stdin):
        line = sys.stdin.readline()
        if not line:
            return None
        return decode_sequence(line.rstrip("\r\n") or "\n")

    with KeyboardInput(sys.stdin):
        sequence = _read_posix_raw(sys.stdin.fileno())

    if not sequence:
        return None
    return decode_sequence(sequence)


def _read_windows() -> Optional[Key]:
    import msvcrt

    ch = msvcrt.getwch()  # type: ignore[attr-defined]
    if ch in ("\x00", "\xe0"):
        code = msvcrt.getwch()  # type: ignore[attr-defined]
        return WINDOWS_SCAN_CODES.get(code, Key.OTHER)
    return decode_sequence(ch)


def read_key() -> Optional[Key]:
    """Block until a key is pressed. Returns ``None`` when input is exhausted."""
    if IS_WINDOWS:
        return _read_windows()
    return _read_posix()
