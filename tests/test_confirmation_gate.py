"""Tests for the weak-password confirmation prompt."""

import io
import os

import pytest

from cli.prompts import ConfirmationDecision, ConfirmationGate, GateState, confirm_weak_password
from core.terminal import InputError, PosixTerminal, raw_mode


posix_only = pytest.mark.skipif(os.name == "nt", reason="termios is POSIX only")


class TestGateTransitions:
    """Test the state machine one keystroke at a time."""

    def test_starts_idle(self, fake_terminal, out):
        gate = ConfirmationGate("abc", fake_terminal(), out)
        assert gate.state is GateState.IDLE
        assert gate.decision is None

    def test_begin_shows_warning(self, fake_terminal, out):
        gate = ConfirmationGate("abc", fake_terminal(), out)
        gate.begin()
        assert gate.state is GateState.AWAITING_KEY
        warning = out.getvalue()
        assert "abc is a weak password" in warning
        assert "Enter" in warning
        assert "Q" in warning

    def test_warning_is_red_on_a_terminal(self, fake_terminal):
        class TtyOut(io.StringIO):
            def isatty(self):
                return True

        out = TtyOut()
        ConfirmationGate("abc", fake_terminal(), out).begin()
        assert out.getvalue().startswith("\033[31mabc is a weak password")
        assert out.getvalue().endswith("\033[0m\r\n")

    def test_warning_is_plain_when_redirected(self, fake_terminal, out):
        ConfirmationGate("abc", fake_terminal(), out).begin()
        assert "\033[" not in out.getvalue()

    @pytest.mark.parametrize("key", ["\r", "\n"])
    def test_enter_accepts(self, fake_terminal, out, key):
        gate = ConfirmationGate("abc", fake_terminal(), out)
        gate.begin()
        assert gate.handle_key(key) is GateState.RESOLVED
        assert gate.decision is ConfirmationDecision.ACCEPT

    @pytest.mark.parametrize("key", ["q", "Q"])
    def test_q_aborts(self, fake_terminal, out, key):
        gate = ConfirmationGate("abc", fake_terminal(), out)
        gate.begin()
        assert gate.handle_key(key) is GateState.RESOLVED
        assert gate.decision is ConfirmationDecision.ABORT

    @pytest.mark.parametrize("key", ["x", " ", "y", "\x1b", "1", "\x04"])
    def test_other_keys_ignored(self, fake_terminal, out, key):
        gate = ConfirmationGate("abc", fake_terminal(), out)
        gate.begin()
        assert gate.handle_key(key) is GateState.AWAITING_KEY
        assert gate.decision is None
        assert gate.password == "abc"

    def test_ctrl_c_interrupts(self, fake_terminal, out):
        gate = ConfirmationGate("abc", fake_terminal(), out)
        gate.begin()
        with pytest.raises(KeyboardInterrupt):
            gate.handle_key("\x03")
        assert gate.decision is ConfirmationDecision.ABORT

    def test_key_before_begin_rejected(self, fake_terminal, out):
        gate = ConfirmationGate("abc", fake_terminal(), out)
        with pytest.raises(RuntimeError):
            gate.handle_key("\r")

    def test_begin_twice_rejected(self, fake_terminal, out):
        gate = ConfirmationGate("abc", fake_terminal(), out)
        gate.begin()
        with pytest.raises(RuntimeError):
            gate.begin()


class TestGateRun:
    """Test the blocking loop and raw-mode handling."""

    def test_enter_resolves_accept(self, fake_terminal, out):
        terminal = fake_terminal(["\r"])
        assert confirm_weak_password("abc", terminal, out) is ConfirmationDecision.ACCEPT
        assert terminal.calls == ["enable", "disable"]

    def test_q_resolves_abort(self, fake_terminal, out):
        terminal = fake_terminal(["q"])
        assert confirm_weak_password("abc", terminal, out) is ConfirmationDecision.ABORT
        assert terminal.calls == ["enable", "disable"]

    def test_waits_through_unrecognized_keys(self, fake_terminal, out):
        terminal = fake_terminal(["a", "b", "z", "Q", "\r"])
        assert confirm_weak_password("abc", terminal, out) is ConfirmationDecision.ABORT
        assert terminal.reads == 4
        assert terminal.keys == ["\r"]
        assert terminal.calls == ["enable", "disable"]

    def test_read_failure_aborts_and_restores(self, fake_terminal, out):
        terminal = fake_terminal(["x", InputError("read failed")])
        assert confirm_weak_password("abc", terminal, out) is ConfirmationDecision.ABORT
        assert terminal.calls == ["enable", "disable"]

    def test_os_error_aborts_and_restores(self, fake_terminal, out):
        terminal = fake_terminal([OSError("device gone")])
        assert confirm_weak_password("abc", terminal, out) is ConfirmationDecision.ABORT
        assert terminal.calls.count("disable") == 1

    def test_end_of_input_aborts(self, fake_terminal, out):
        terminal = fake_terminal([])
        assert confirm_weak_password("abc", terminal, out) is ConfirmationDecision.ABORT
        assert terminal.calls == ["enable", "disable"]

    def test_enable_failure_aborts_without_release(self, fake_terminal, out):
        terminal = fake_terminal(["\r"], fail_enable=True)
        assert confirm_weak_password("abc", terminal, out) is ConfirmationDecision.ABORT
        assert terminal.calls == ["enable"]
        assert terminal.reads == 0

    def test_ctrl_c_restores_before_propagating(self, fake_terminal, out):
        terminal = fake_terminal(["\x03"])
        with pytest.raises(KeyboardInterrupt):
            confirm_weak_password("abc", terminal, out)
        assert terminal.calls == ["enable", "disable"]

    def test_lines_end_with_carriage_return(self, fake_terminal, out):
        confirm_weak_password("abc", fake_terminal(["x", "\r"]), out)
        lines = out.getvalue().split("\r\n")
        assert lines[-1] == ""
        assert len(lines) == 3


class TestRawMode:
    """Test the raw-mode context manager and the POSIX terminal."""

    def test_releases_on_exception(self, fake_terminal):
        terminal = fake_terminal()
        with pytest.raises(ValueError):
            with raw_mode(terminal):
                raise ValueError("boom")
        assert terminal.calls == ["enable", "disable"]

    @posix_only
    def test_posix_terminal_rejects_non_tty(self, tmp_path):
        path = tmp_path / "not-a-tty"
        path.write_text("")
        with open(path, "rb") as f:
            terminal = PosixTerminal(f.fileno())
            with pytest.raises(InputError):
                terminal.enable_raw_mode()
            # Nothing was acquired, so nothing is restored
            terminal.disable_raw_mode()

    @posix_only
    def test_posix_terminal_end_of_input(self, tmp_path):
        path = tmp_path / "empty"
        path.write_text("")
        with open(path, "rb") as f:
            with pytest.raises(InputError):
                PosixTerminal(f.fileno()).read_key()

    @posix_only
    def test_posix_terminal_reads_one_key(self, tmp_path):
        path = tmp_path / "keys"
        path.write_text("q\r")
        with open(path, "rb") as f:
            terminal = PosixTerminal(f.fileno())
            assert terminal.read_key() == "q"
            assert terminal.read_key() == "\r"
