"""Single-keystroke terminal input.

Raw mode delivers each key immediately, without line buffering or echo.
It is a process-wide setting, so it is only ever switched through the
``raw_mode`` context manager which restores the previous mode on every
exit path.
"""

import logging
import os
import sys
from contextlib import contextmanager
from typing import Generator, Optional, Protocol


logger = logging.getLogger(__name__)

ENTER_KEYS = ("\r", "\n")
CTRL_C = "\x03"


class InputError(Exception):
    """Reading user input (keystroke, line or clipboard) failed."""
    pass


class Terminal(Protocol):
    """Key source used by the confirmation prompt."""

    def enable_raw_mode(self) -> None: ...

    def disable_raw_mode(self) -> None: ...

    def read_key(self) -> str: ...


class PosixTerminal:
    """Raw key input on Unix terminals via termios."""

    def __init__(self, fd: Optional[int] = None):
        self.fd = fd
        self._saved_attrs = None

    def enable_raw_mode(self) -> None:
        import termios
        import tty

        try:
            if self.fd is None:
                self.fd = sys.stdin.fileno()
            saved = termios.tcgetattr(self.fd)
        except (termios.error, OSError, ValueError) as e:
            raise InputError(f"Cannot switch terminal to raw mode: {e}")

        try:
            tty.setraw(self.fd)
        except termios.error as e:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, saved)
            raise InputError(f"Cannot switch terminal to raw mode: {e}")
        self._saved_attrs = saved

    def disable_raw_mode(self) -> None:
        import termios

        if self._saved_attrs is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_attrs)
        except termios.error as e:
            raise InputError(f"Cannot restore terminal mode: {e}")
        finally:
            self._saved_attrs = None

    def read_key(self) -> str:
        try:
            data = os.read(self.fd, 1)
        except OSError as e:
            raise InputError(f"Failed to read key: {e}")
        if not data:
            raise InputError("End of input while waiting for a key")
        return data.decode("utf-8", errors="replace")


class WindowsTerminal:
    """Key input on Windows consoles.

    ``msvcrt.getwch`` already reads unbuffered and unechoed, so there is
    no mode to switch.
    """

    def enable_raw_mode(self) -> None:
        pass

    def disable_raw_mode(self) -> None:
        pass

    def read_key(self) -> str:
        import msvcrt

        try:
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                # Function and arrow keys arrive as a two-character sequence
                return ch + msvcrt.getwch()
            return ch
        except OSError as e:
            raise InputError(f"Failed to read key: {e}")


def get_terminal() -> Terminal:
    """Return the terminal implementation for this platform."""
    if os.name == "nt":
        return WindowsTerminal()
    return PosixTerminal()


@contextmanager
def raw_mode(terminal: Terminal) -> Generator[Terminal, None, None]:
    """Hold the terminal in raw mode for the duration of the block.

    Raw mode is released exactly once, whether the block returns, raises
    or is interrupted. If enabling fails nothing is released.

    Args:
        terminal: Terminal to switch

    Yields:
        The same terminal, ready for ``read_key``
    """
    terminal.enable_raw_mode()
    logger.debug("Raw mode enabled")
    try:
        yield terminal
    finally:
        terminal.disable_raw_mode()
        logger.debug("Raw mode disabled")
