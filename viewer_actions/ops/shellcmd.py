"""Shell command construction and execution primitives.

Headless helpers: build a command line from an expression and a list of file
paths, run it through the shell with a time budget and capture its output.
"""

from __future__ import annotations

import contextlib
import os
import shlex
import signal
import subprocess
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO

from viewer_actions.infra.logger import get_logger

_logger = get_logger("shellcmd")

PLACEHOLDER = "{}"
DEFAULT_SHELL = "/bin/sh"
# seconds to keep reading pipes after the shell is gone
DRAIN_GRACE = 0.2
_READ_SIZE = 65536


@dataclass(frozen=True)
class ExecResult:
    """Raw result of one child process run.

    `stdout`/`stderr` are None when the stream produced no bytes.
    `returncode` is meaningless when `timed_out` is set.
    """

    returncode: int
    timed_out: bool = False
    stdout: bytes | None = None
    stderr: bytes | None = None


def expand(expression: str, paths: Sequence[str]) -> str | None:
    """Substitute `paths` into `expression`.

    Every ``{}`` is replaced with the shell-quoted paths joined by spaces; an
    expression without a placeholder is used as is. Returns None when there is
    nothing to execute.
    """
    expr = (expression or "").strip()
    if not expr:
        return None

    # reject expressions the shell could not tokenize either
    try:
        shlex.split(expr)
    except ValueError as e:
        _logger.warning("malformed command expression %r: %s", expr, e)
        return None

    if PLACEHOLDER not in expr:
        return expr
    quoted = " ".join(shlex.quote(p) for p in paths)
    return expr.replace(PLACEHOLDER, quoted)


class _PipeReader(threading.Thread):
    """Drains one child pipe until EOF so a full pipe never stalls the child."""

    def __init__(self, stream: IO[bytes]) -> None:
        super().__init__(daemon=True)
        self._stream = stream
        self._chunks: list[bytes] = []

    def run(self) -> None:
        with self._stream:
            for chunk in iter(lambda: self._stream.read1(_READ_SIZE), b""):
                self._chunks.append(chunk)

    def collect(self, grace: float) -> bytes | None:
        # a background job may keep the pipe open; take what has arrived so far
        self.join(grace)
        return b"".join(list(self._chunks)) or None


def _kill_group(proc: subprocess.Popen) -> None:
    if hasattr(os, "killpg"):
        # the shell leads its own session, so its pid is the group id
        with contextlib.suppress(ProcessLookupError):
            os.killpg(proc.pid, signal.SIGKILL)
    else:
        proc.kill()
    proc.wait()


def execute(command: str, timeout: float, shell: str = DEFAULT_SHELL) -> ExecResult:
    """Run `command` via ``<shell> -c`` and capture both output streams.

    The shell runs in a new session. On timeout the whole process group is
    killed before this returns. Once the shell itself has exited, jobs it left
    in the background are not waited for and keep running.
    """
    argv = [shell, "-c", command]
    _logger.info("exec: %s", command)
    started = time.perf_counter()
    try:
        proc = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            start_new_session=True,
        )
    except OSError as e:
        _logger.warning("exec failed to start %s: %s", shell, e)
        return ExecResult(returncode=e.errno or 1, stderr=str(e).encode("utf-8"))

    readers = (_PipeReader(proc.stdout), _PipeReader(proc.stderr))
    for reader in readers:
        reader.start()

    try:
        returncode = proc.wait(timeout=timeout)
    except subprocess.TimeoutExpired:
        _logger.warning("exec timed out after %.1fs: %s", timeout, command)
        _kill_group(proc)
        out, err = (r.collect(DRAIN_GRACE) for r in readers)
        return ExecResult(returncode=-1, timed_out=True, stdout=out, stderr=err)

    out, err = (r.collect(DRAIN_GRACE) for r in readers)
    _logger.debug(
        "exec finished: rc=%d elapsed=%.3fs out=%d err=%d",
        returncode,
        time.perf_counter() - started,
        len(out or b""),
        len(err or b""),
    )
    return ExecResult(returncode=returncode, stdout=out, stderr=err)
