"""
Console reports produced once the build process has exited.

A failed build dumps the whole retained window so the operator sees the
trailing context of the error. A successful build prints only the final
reactor summary block, without the "[INFO] " noise.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from buildwrap.config.schemas import INFO_PREFIX, SEPARATOR_MARKER, SUMMARY_MARKER
from buildwrap.core import get_logger
from buildwrap.utils.subproc import RunHooks, tee_stream
from buildwrap.utils.window import BoundedLogWindow

log = get_logger("reporting")


def console(line: str) -> None:
    print(line, flush=True)


def summary_range(
    lines: Sequence[str],
    summary_prefix: str = SUMMARY_MARKER,
    separator_prefix: str = SEPARATOR_MARKER,
) -> Tuple[int, int]:
    """
    Locate the last reactor summary block.

    start is one line before the last summary marker (the separator that
    opens the block), end is one past the last separator line. Missing
    markers fall back to the whole sequence.
    """
    start = 0
    end = len(lines)
    for i, line in enumerate(lines):
        if line.startswith(summary_prefix):
            start = max(0, i - 1)
        elif line.startswith(separator_prefix):
            end = i + 1
    return start, end


def _strip_prefix(line: str, prefix: str) -> str:
    if prefix and line.startswith(prefix):
        return line[len(prefix):]
    return line


def failure_report(window: BoundedLogWindow) -> List[str]:
    return [""] + window.lines()


def success_report(
    window: BoundedLogWindow,
    summary_prefix: str = SUMMARY_MARKER,
    separator_prefix: str = SEPARATOR_MARKER,
    strip_prefix: str = INFO_PREFIX,
) -> List[str]:
    lines = window.lines()
    start, end = summary_range(lines, summary_prefix, separator_prefix)
    return [""] + [_strip_prefix(line, strip_prefix) for line in lines[start:end]]


class BuildReporter:
    """Captured-output behaviour for the main build command."""

    def __init__(
        self,
        window: BoundedLogWindow,
        log_path: str,
        echo: Callable[[str], None] = console,
        summary_prefix: str = SUMMARY_MARKER,
        separator_prefix: str = SEPARATOR_MARKER,
        strip_prefix: str = INFO_PREFIX,
    ):
        self.window = window
        self.log_path = log_path
        self.echo = echo
        self.summary_prefix = summary_prefix
        self.separator_prefix = separator_prefix
        self.strip_prefix = strip_prefix

    def consume(self, stream) -> None:
        tee_stream(stream, self.log_path, self.window, echo=self.echo)

    def on_failure(self, rc: int) -> None:
        for line in failure_report(self.window):
            self.echo(line)
        log.error(f"Build failed (rc={rc}); printed the last {len(self.window)} lines, full log in {self.log_path}")

    def on_success(self) -> None:
        for line in success_report(
            self.window, self.summary_prefix, self.separator_prefix, self.strip_prefix
        ):
            self.echo(line)

    def hooks(self) -> RunHooks:
        return RunHooks(
            on_output=self.consume,
            on_failure=self.on_failure,
            on_success=self.on_success,
        )
