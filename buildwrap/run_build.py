#!/usr/bin/env python3
"""
Build wrapper entry point.

Runs the version check with the console attached, then the full build with
its output streamed through the progress filter into build.log. Exits with
the code of the first command that fails.
"""

import sys
from typing import List, Optional

from buildwrap.cli.args import build_parser
from buildwrap.config.schemas import BuildConfig
from buildwrap.contracts.exit_codes import OK as EC_OK
from buildwrap.contracts.exit_codes import START_FAILED as EC_START_FAILED
from buildwrap.core import get_logger, load_config, load_env, set_log_level
from buildwrap.reporting import BuildReporter
from buildwrap.utils.subproc import Command, ProcessStartError, run_command
from buildwrap.utils.window import BoundedLogWindow

log = get_logger("run_build")


def build_banner(command: Command) -> List[str]:
    return ["Building all projects", "", f"+ {command}", ""]


def run_version_check(cfg: BuildConfig) -> int:
    return run_command(Command(cfg.commands.version))


def run_main_build(cfg: BuildConfig) -> int:
    command = Command(cfg.commands.build)
    for line in build_banner(command):
        print(line, flush=True)

    reporter = BuildReporter(
        BoundedLogWindow(cfg.window.capacity),
        cfg.log.path,
        summary_prefix=cfg.markers.summary,
        separator_prefix=cfg.markers.separator,
        strip_prefix=cfg.markers.strip_prefix,
    )
    return run_command(command, reporter.hooks())


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    set_log_level(cfg.log.level)
    load_env()

    if args.dry_run:
        print(f"+ {cfg.commands.version}")
        print(f"+ {cfg.commands.build}")
        return EC_OK

    try:
        rc = run_version_check(cfg)
        if rc != 0:
            log.error(f"Version check failed with rc={rc}")
            return rc
        print(flush=True)
        rc = run_main_build(cfg)
    except ProcessStartError as e:
        log.error(str(e))
        return EC_START_FAILED

    return rc


if __name__ == "__main__":
    sys.exit(main())
