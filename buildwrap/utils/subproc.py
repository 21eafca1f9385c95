# buildwrap/utils/subproc.py
from __future__ import annotations

import os
import subprocess
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO

from buildwrap.core import get_logger
from buildwrap.utils.platform import shell_prefix
from buildwrap.utils.progress import format_progress
from buildwrap.utils.window import BoundedLogWindow

log = get_logger("subproc")


class ProcessStartError(RuntimeError):
    """The child process could not be spawned."""


@dataclass(frozen=True)
class Command:
    """
    A command line as typed by the user.

    argv() splits on whitespace only: quoting is not understood, so an
    argument that itself contains spaces cannot be expressed.
    """

    command: str

    def for_current_os(self) -> List[str]:
        return shell_prefix() + self.command.split()

    def argv(self) -> List[str]:
        return self.for_current_os()

    def __str__(self) -> str:
        return self.command


def _noop_failure(rc: int) -> None:
    pass


def _noop_success() -> None:
    pass


@dataclass
class RunHooks:
    """
    Per-call behaviour of run_command.

    on_output is given the child's merged stdout/stderr pipe and runs on a
    worker thread; leave it as None to let the child write straight to the
    console.
    """

    on_output: Optional[Callable[[TextIO], None]] = None
    on_failure: Callable[[int], None] = field(default=_noop_failure)
    on_success: Callable[[], None] = field(default=_noop_success)


def _ensure_parent(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _discard(stream: TextIO) -> None:
    # Keep the pipe empty so the child never blocks on a full buffer.
    try:
        for _ in stream:
            pass
    except (OSError, ValueError):
        pass


def tee_stream(
    stream: TextIO,
    log_path: str,
    window: BoundedLogWindow,
    echo: Callable[[str], None] = print,
) -> None:
    """
    Drain a line stream: echo progress lines, write every line to log_path
    (truncated first) and keep it in the window.

    I/O errors stop the consumption but are not raised; the caller's exit
    code check decides the outcome.
    """
    try:
        _ensure_parent(log_path)
        with open(log_path, "w", encoding="utf-8") as log_fh:
            for raw in stream:
                line = raw.rstrip("\r\n")
                progress = format_progress(line)
                if progress is not None:
                    echo(progress)
                log_fh.write(line + "\n")
                window.append(line)
    except (OSError, ValueError) as e:
        log.warning(f"Stream consumption stopped after {len(window)} lines: {e}")
        _discard(stream)


def _drain_output(on_output: Callable[[TextIO], None], stream: TextIO) -> None:
    try:
        on_output(stream)
    except Exception:
        log.exception("Output handler failed; discarding remaining output")
    finally:
        _discard(stream)


def _exit_status(rc: int) -> int:
    # Popen reports death by signal N as -N; shells report 128 + N.
    return 128 - rc if rc < 0 else rc


def run_command(
    command: Command,
    hooks: Optional[RunHooks] = None,
    cwd: Optional[str] = None,
) -> int:
    """
    Run command to completion and dispatch to the failure or success hook.
    Returns the child's exit code.

    Raises ProcessStartError when the child cannot be started.
    """
    hooks = hooks or RunHooks()
    capture = hooks.on_output is not None
    argv = command.argv()
    log.debug(f"CMD: {' '.join(argv)}")

    try:
        proc = subprocess.Popen(
            argv,
            cwd=cwd or os.getcwd(),
            env=dict(os.environ),
            stdout=subprocess.PIPE if capture else None,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            bufsize=1,  # line-buffered
        )
    except OSError as e:
        raise ProcessStartError(f"Failed to start '{command}': {e}") from e

    worker = None
    try:
        if capture:
            worker = threading.Thread(
                target=_drain_output,
                args=(hooks.on_output, proc.stdout),
                name=f"tee:{argv[0]}",
                daemon=True,
            )
            worker.start()
        rc = _exit_status(proc.wait())
        if worker is not None:
            worker.join()
    finally:
        if proc.stdout is not None:
            proc.stdout.close()

    log.info(f"'{command}' exited with rc={rc}")
    if rc != 0:
        hooks.on_failure(rc)
    else:
        hooks.on_success()
    return rc
