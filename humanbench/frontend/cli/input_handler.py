"""Terminal event source: keys, SGR mouse reports and resizes.

Works on macOS / Linux (termios + select) and, keys only, on Windows
(msvcrt).  Use :class:`TerminalInput` as a context manager; it switches the
terminal into cbreak mode with mouse reporting and restores everything on
exit.
"""

from __future__ import annotations

import os
import shutil
import signal
import sys
import time
from typing import Any, TextIO

from humanbench.backend.models.events import InputEvent, Key, Mouse, MouseButton, Resize

# Escape sequences must arrive within this window to count as one key.
_ESCAPE_TIMEOUT = 0.05
# Longest slice of an indefinite wait, so resizes are noticed promptly.
_WAKE_INTERVAL = 0.25

_ENTER_SCREEN = "\x1b[?1049h\x1b[?25l\x1b[?1000h\x1b[?1006h"
_LEAVE_SCREEN = "\x1b[?1006l\x1b[?1000l\x1b[?25h\x1b[?1049l"


class TerminalError(RuntimeError):
    """The terminal could not be put into (or taken out of) game mode."""


# -- decoding --------------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\t": "tab",
    "\x03": "esc",  # Ctrl-C
    "\x1b": "esc",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

_BUTTONS = {
    0: MouseButton.LEFT,
    1: MouseButton.MIDDLE,
    2: MouseButton.RIGHT,
    64: MouseButton.WHEEL_UP,
    65: MouseButton.WHEEL_DOWN,
}


def decode_char(ch: str) -> Key | None:
    """Map a single raw character to a :class:`Key` (``None`` if unusable)."""
    if ch in _KEY_MAP:
        return Key(_KEY_MAP[ch])
    if ch.isprintable():
        return Key(ch)
    return None


def decode_escape(sequence: str) -> InputEvent | None:
    """Decode what followed an ESC byte.

    Handles ``[A``-style and ``OA``-style arrows and SGR mouse reports
    (``[<button;column;row`` followed by ``M`` for press or ``m`` for
    release).  An empty *sequence* is a bare Escape.
    """
    if not sequence:
        return Key("esc")
    if sequence[0] in "[O" and len(sequence) == 2 and sequence[1] in _ARROW_MAP:
        return Key(_ARROW_MAP[sequence[1]])
    if sequence.startswith("[<") and sequence[-1] in "Mm":
        try:
            code, column, row = (int(part) for part in sequence[2:-1].split(";"))
        except ValueError:
            return None
        if code & 32:  # motion
            return None
        button = _BUTTONS.get(code & ~(4 | 8 | 16 | 32))
        if button is None:
            return None
        return Mouse(column - 1, row - 1, button, pressed=sequence[-1] == "M")
    return None


def _sequence_complete(sequence: str) -> bool:
    if not sequence:
        return False
    if sequence[0] == "O":
        return len(sequence) >= 2
    if sequence[0] != "[":
        return True
    if len(sequence) < 2:
        return False
    if sequence.startswith("[<"):
        return sequence[-1] in "Mm"
    # CSI: parameters then a final byte in @..~
    return "@" <= sequence[-1] <= "~"


# -- event source ----------------------------------------------------------------


class TerminalInput:
    """Blocking/polling source of :mod:`humanbench.backend.models.events`."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdin
        self._fd: int | None = None
        self._saved: Any = None
        self._old_winch: Any = None
        self._resized = False

    # -- setup / teardown -------------------------------------------------------

    def __enter__(self) -> TerminalInput:
        if not self.stream.isatty():
            raise TerminalError("standard input is not a terminal")
        if os.name == "nt":
            return self

        import termios
        import tty

        try:
            self._fd = self.stream.fileno()
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
            # Keep Ctrl-C as a key instead of a signal.
            attrs = termios.tcgetattr(self._fd)
            attrs[3] &= ~termios.ISIG
            termios.tcsetattr(self._fd, termios.TCSADRAIN, attrs)
        except (OSError, termios.error) as exc:
            raise TerminalError(f"could not configure terminal: {exc}") from exc

        self._old_winch = signal.signal(signal.SIGWINCH, self._on_winch)
        sys.stdout.write(_ENTER_SCREEN)
        sys.stdout.flush()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if os.name == "nt" or self._fd is None:
            return

        import termios

        sys.stdout.write(_LEAVE_SCREEN)
        sys.stdout.flush()
        if self._old_winch is not None:
            signal.signal(signal.SIGWINCH, self._old_winch)
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        except (OSError, termios.error) as exc:
            raise TerminalError(f"could not restore terminal: {exc}") from exc

    def _on_winch(self, signum: int, frame: object) -> None:
        self._resized = True

    # -- reading ----------------------------------------------------------------

    def poll(self, timeout: float | None) -> InputEvent | None:
        """Wait up to *timeout* seconds (forever if ``None``) for an event.

        Unrecognised input is skipped without ending the wait.
        """
        end = None if timeout is None else time.monotonic() + timeout
        while True:
            if self._resized:
                self._resized = False
                size = shutil.get_terminal_size()
                return Resize(size.columns, size.lines)

            remaining = None if end is None else end - time.monotonic()
            if remaining is not None and remaining <= 0:
                return None
            wait = _WAKE_INTERVAL if remaining is None else min(remaining, _WAKE_INTERVAL)

            ch = self._read_char(wait)
            if ch is None:
                continue
            event = self._decode(ch)
            if event is not None:
                return event

    def _decode(self, ch: str) -> InputEvent | None:
        if len(ch) > 1 and ch[0] == "\x1b":  # pre-translated Windows arrow
            return decode_escape(ch[1:])
        if ch != "\x1b" or os.name == "nt":
            return decode_char(ch)
        sequence = ""
        while not _sequence_complete(sequence):
            nxt = self._read_char(_ESCAPE_TIMEOUT)
            if nxt is None:
                break
            sequence += nxt
        return decode_escape(sequence)

    def _read_char(self, timeout: float) -> str | None:
        if os.name == "nt":
            return self._read_char_windows(timeout)

        import select

        if self._fd is None:
            raise TerminalError("terminal input is not open")
        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return None
        # os.read (unbuffered) so select() keeps seeing the rest of
        # multi-byte sequences.
        return os.read(self._fd, 1).decode("utf-8", errors="ignore") or None

    @staticmethod
    def _read_char_windows(timeout: float) -> str | None:
        import msvcrt  # type: ignore[import-not-found]

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                ch = msvcrt.getwch()
                if ch in ("\x00", "\xe0"):
                    code = msvcrt.getwch()
                    return {"H": "\x1b[A", "P": "\x1b[B", "M": "\x1b[C", "K": "\x1b[D"}.get(code)
                return ch
            time.sleep(0.02)
        return None
