# buildwrap/utils/platform.py
from __future__ import annotations

import platform


def is_windows() -> bool:
    """Check if running on Windows."""
    return platform.system().lower().startswith("windows")


def shell_prefix() -> list[str]:
    """Interpreter words prepended to a command line on this OS family."""
    if is_windows():
        return ["cmd.exe", "/c"]
    return []
