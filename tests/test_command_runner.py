from __future__ import annotations

import io
import os
import signal

import pytest

from viewer_actions.ops.command_runner import (
    NO_COMMAND_MESSAGE,
    CommandRunner,
    OutcomeKind,
    describe_returncode,
)
from viewer_actions.ops.shellcmd import ExecResult


class FakeExecutor:
    def __init__(self, result: ExecResult) -> None:
        self.result = result
        self.calls: list[tuple[str, float]] = []

    def __call__(self, command: str, timeout: float) -> ExecResult:
        self.calls.append((command, timeout))
        return self.result


def _runner(result: ExecResult, timeout: float = 5.0):
    executor = FakeExecutor(result)
    out, err = io.BytesIO(), io.BytesIO()
    runner = CommandRunner(timeout=timeout, executor=executor, stdout=out, stderr=err)
    return runner, executor, out, err


def test_no_command_never_executes():
    runner, executor, out, err = _runner(ExecResult(0))

    outcome = runner.run("   ", ["/tmp/a.png"])

    assert outcome.kind is OutcomeKind.NO_COMMAND
    assert outcome.message == NO_COMMAND_MESSAGE
    assert executor.calls == []
    assert out.getvalue() == b""


def test_success_without_output_reports_command():
    runner, executor, _, _ = _runner(ExecResult(0), timeout=2.5)

    outcome = runner.run("identify {}", ["/tmp/a.png"])

    assert executor.calls == [("identify /tmp/a.png", 2.5)]
    assert outcome.kind is OutcomeKind.SUCCESS
    assert outcome.message == "Success: identify /tmp/a.png"


def test_success_prefers_stdout_text():
    runner, _, _, _ = _runner(ExecResult(0, stdout=b"a.png PNG 10x10", stderr=b"warn"))
    assert runner.run("identify {}", ["/tmp/a.png"]).message == "a.png PNG 10x10"


def test_timeout_message():
    runner, _, _, _ = _runner(ExecResult(-1, timed_out=True))

    outcome = runner.run("sleep 100", ["/tmp/a.png"])

    assert outcome.kind is OutcomeKind.TIMEOUT
    assert outcome.returncode is None
    assert outcome.message == "Child process timed out: sleep 100"


def test_failure_prefers_stderr_then_stdout():
    runner, _, _, _ = _runner(ExecResult(2, stdout=b"out", stderr=b"bad file"))
    assert runner.run("x", ["/a"]).message == "Error 2: bad file"

    runner, _, _, _ = _runner(ExecResult(2, stdout=b"out"))
    assert runner.run("x", ["/a"]).message == "Error 2: out"


def test_failure_without_output_describes_code():
    runner, _, _, _ = _runner(ExecResult(1))

    outcome = runner.run("false", ["/tmp/a.png"])

    assert outcome.kind is OutcomeKind.FAILURE
    assert outcome.message == f"Error 1: {os.strerror(1)}"


def test_failure_code_has_no_leading_zeros():
    runner, _, _, _ = _runner(ExecResult(7))
    assert runner.run("x", ["/a"]).message.startswith("Error 7: ")


def test_output_is_mirrored_verbatim():
    raw_out = b"line1\nline2\n\xff"
    raw_err = b"oops\n"
    runner, _, out, err = _runner(ExecResult(0, stdout=raw_out, stderr=raw_err))

    runner.run("cat {}", ["/a"])

    assert out.getvalue() == raw_out
    assert err.getvalue() == raw_err


def test_output_is_mirrored_on_failure_too():
    runner, _, out, err = _runner(ExecResult(4, stderr=b"denied"))
    runner.run("x", ["/a"])
    assert out.getvalue() == b""
    assert err.getvalue() == b"denied"


def test_mirror_defaults_to_process_streams(capfdbinary):
    runner = CommandRunner(executor=FakeExecutor(ExecResult(0, stdout=b"hello\n")))

    runner.run("echo {}", ["/a"])

    assert capfdbinary.readouterr().out == b"hello\n"


@pytest.mark.skipif(not hasattr(signal, "SIGKILL"), reason="posix signals")
def test_describe_negative_code_names_signal():
    assert describe_returncode(-signal.SIGKILL) == "Terminated by SIGKILL"
