"""Run a command expression against a set of paths and classify the result."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO

from viewer_actions.infra.logger import get_logger
from viewer_actions.ops import shellcmd
from viewer_actions.ops.shellcmd import ExecResult

_logger = get_logger("command_runner")

NO_COMMAND_MESSAGE = "Error: no command to execute"

Expander = Callable[[str, Sequence[str]], str | None]
Executor = Callable[[str, float], ExecResult]


class OutcomeKind(Enum):
    SUCCESS = "success"
    TIMEOUT = "timeout"
    FAILURE = "failure"
    NO_COMMAND = "no_command"


def _text(data: bytes | None) -> str:
    return data.decode("utf-8", errors="replace") if data else ""


def describe_returncode(code: int) -> str:
    """Human readable description of a child exit code."""
    if code < 0:
        try:
            return f"Terminated by {signal.Signals(-code).name}"
        except ValueError:
            return f"Terminated by signal {-code}"
    return os.strerror(code)


@dataclass(frozen=True)
class CommandOutcome:
    kind: OutcomeKind
    command: str | None = None
    returncode: int | None = None
    stdout: bytes | None = None
    stderr: bytes | None = None

    @property
    def message(self) -> str:
        """Status text for this outcome (not yet length limited)."""
        if self.kind is OutcomeKind.NO_COMMAND:
            return NO_COMMAND_MESSAGE
        if self.kind is OutcomeKind.SUCCESS:
            return _text(self.stdout) or f"Success: {self.command}"
        if self.kind is OutcomeKind.TIMEOUT:
            return f"Child process timed out: {self.command}"

        code = int(self.returncode or 0)
        detail = _text(self.stderr) or _text(self.stdout) or describe_returncode(code)
        return f"Error {code}: {detail}"


class CommandRunner:
    """Expand, execute and classify one command per call.

    Captured output is also copied byte for byte to this process's own
    stdout/stderr.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        shell: str = shellcmd.DEFAULT_SHELL,
        expander: Expander | None = None,
        executor: Executor | None = None,
        stdout: BinaryIO | None = None,
        stderr: BinaryIO | None = None,
    ) -> None:
        self.timeout = float(timeout)
        self.shell = shell
        self._expand = expander or shellcmd.expand
        self._execute = executor or self._execute_in_shell
        self._stdout = stdout
        self._stderr = stderr

    def _execute_in_shell(self, command: str, timeout: float) -> ExecResult:
        return shellcmd.execute(command, timeout, shell=self.shell)

    def run(self, expression: str, paths: Sequence[str]) -> CommandOutcome:
        command = self._expand(expression, paths)
        if not command:
            _logger.warning("no command for expression %r", expression)
            return CommandOutcome(OutcomeKind.NO_COMMAND)

        result = self._execute(command, self.timeout)
        self._mirror(result)

        if result.timed_out:
            kind = OutcomeKind.TIMEOUT
        elif result.returncode == 0:
            kind = OutcomeKind.SUCCESS
        else:
            kind = OutcomeKind.FAILURE
            _logger.warning("command failed: rc=%d cmd=%s", result.returncode, command)

        return CommandOutcome(
            kind=kind,
            command=command,
            returncode=None if result.timed_out else result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    def _mirror(self, result: ExecResult) -> None:
        if result.stdout:
            _write_raw(self._stdout, sys.stdout, result.stdout)
        if result.stderr:
            _write_raw(self._stderr, sys.stderr, result.stderr)


def _write_raw(target: BinaryIO | None, fallback, data: bytes) -> None:
    # Resolve the process stream at call time; test runners swap sys.stdout.
    if target is None:
        target = getattr(fallback, "buffer", None)
        if target is None:
            fallback.write(data.decode("utf-8", errors="replace"))
            fallback.flush()
            return
        fallback.flush()
    target.write(data)
    target.flush()
