"""Shared CLI prompt utilities.

Password sources (clipboard, manual entry) and the single-keystroke
confirmation shown before a weak password is saved.
"""

import enum
import logging
import sys
from typing import Optional, TextIO

import pyperclip

from core.terminal import CTRL_C, ENTER_KEYS, InputError, Terminal, get_terminal, raw_mode


logger = logging.getLogger(__name__)

RED = "\033[31m"
RESET = "\033[0m"


class ConfirmationDecision(enum.Enum):
    ACCEPT = "accept"
    ABORT = "abort"


class GateState(enum.Enum):
    IDLE = "idle"
    AWAITING_KEY = "awaiting_key"
    RESOLVED = "resolved"


class ConfirmationGate:
    """Ask for Enter (save anyway) or Q (abort) before saving a weak password.

    Each gate is used for one decision. ``begin`` shows the warning,
    ``handle_key`` applies one keystroke, and ``run`` drives both while
    the terminal is held in raw mode.

    Attributes:
        state: Current GateState
        decision: ConfirmationDecision once RESOLVED, else None
    """

    def __init__(self, password: str, terminal: Optional[Terminal] = None,
                 out: Optional[TextIO] = None):
        self.password = password
        self.terminal = terminal if terminal is not None else get_terminal()
        self.out = out if out is not None else sys.stdout
        self.state = GateState.IDLE
        self.decision: Optional[ConfirmationDecision] = None

    def _write(self, text: str) -> None:
        # Raw mode disables output post-processing, so lines end in \r\n
        self.out.write(text + "\r\n")
        self.out.flush()

    def _use_color(self) -> bool:
        isatty = getattr(self.out, "isatty", None)
        return bool(isatty and isatty())

    def begin(self) -> None:
        """Show the warning and start waiting for a key."""
        if self.state is not GateState.IDLE:
            raise RuntimeError(f"Gate already started (state: {self.state.value})")
        warning = (
            f"{self.password} is a weak password. "
            "Press Enter to continue anyway. Press Q to abort and try again!"
        )
        if self._use_color():
            warning = f"{RED}{warning}{RESET}"
        self._write(warning)
        self.state = GateState.AWAITING_KEY

    def handle_key(self, key: str) -> GateState:
        """Apply one keystroke.

        Enter resolves ACCEPT, q/Q resolves ABORT, anything else is
        ignored and the gate keeps waiting.

        Raises:
            KeyboardInterrupt: On Ctrl-C, which raw mode would otherwise swallow
        """
        if self.state is not GateState.AWAITING_KEY:
            raise RuntimeError(f"Gate is not waiting for a key (state: {self.state.value})")

        if key in ENTER_KEYS:
            self._resolve(ConfirmationDecision.ACCEPT)
        elif key in ("q", "Q"):
            self._resolve(ConfirmationDecision.ABORT)
        elif key == CTRL_C:
            self._resolve(ConfirmationDecision.ABORT)
            raise KeyboardInterrupt
        else:
            logger.debug("Ignored key %r while waiting for confirmation", key)
            self._write("Press Enter to save anyway or Q to abort.")
        return self.state

    def _resolve(self, decision: ConfirmationDecision) -> None:
        self.decision = decision
        self.state = GateState.RESOLVED

    def run(self) -> ConfirmationDecision:
        """Block until a recognized key arrives.

        A failed read resolves as ABORT. Raw mode is released on every
        exit path.
        """
        try:
            with raw_mode(self.terminal):
                self.begin()
                while self.state is GateState.AWAITING_KEY:
                    self.handle_key(self.terminal.read_key())
        except (InputError, OSError) as e:
            logger.warning("Confirmation input failed, aborting: %s", e)
            self._resolve(ConfirmationDecision.ABORT)

        return self.decision


def confirm_weak_password(password: str, terminal: Optional[Terminal] = None,
                          out: Optional[TextIO] = None) -> ConfirmationDecision:
    """Ask whether a weak password should be saved anyway.

    Args:
        password: The weak password, shown in the warning
        terminal: Key source (defaults to the platform terminal)
        out: Stream for the warning (defaults to stdout)

    Returns:
        ConfirmationDecision.ACCEPT or ConfirmationDecision.ABORT
    """
    return ConfirmationGate(password, terminal, out).run()


def read_clipboard() -> str:
    """Return the current clipboard text.

    Raises:
        InputError: If the clipboard cannot be read
    """
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as e:
        raise InputError(f"Could not read the clipboard: {e}")


def prompt_manual_password() -> str:
    """Read one typed line as the password.

    Raises:
        InputError: If stdin is closed
    """
    print("Write it down!")
    try:
        return input()
    except EOFError:
        raise InputError("No input available for the password.")
