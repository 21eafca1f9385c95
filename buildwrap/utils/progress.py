# buildwrap/utils/progress.py
import re
from typing import NamedTuple, Optional

PROGRESS_RE = re.compile(
    r"^\[INFO\] Building (?P<name>.+) \[(?P<index>\d+)/(?P<size>\d+)\]$"
)


class ProgressMatch(NamedTuple):
    name: str
    index: str
    size: str


def match_progress(line: str) -> Optional[ProgressMatch]:
    m = PROGRESS_RE.fullmatch(line)
    if not m:
        return None
    return ProgressMatch(m.group("name"), m.group("index"), m.group("size"))


def format_progress(line: str) -> Optional[str]:
    """
    Render a module progress line as "index/size| name", with the index
    right-aligned to the width of size. Returns None for any other line.

    >>> format_progress("[INFO] Building api [2/12]")
    ' 2/12| api'
    """
    match = match_progress(line)
    if match is None:
        return None
    padding = " " * max(0, len(match.size) - len(match.index))
    return f"{padding}{match.index}/{match.size}| {match.name}"
