import pytest

from buildwrap.utils.progress import format_progress, match_progress


def test_progress_scenario_lines():
    lines = ["[INFO] Building core [1/3]", "x", "[INFO] Building api [2/3]"]
    out = [format_progress(line) for line in lines]
    assert out == ["1/3| core", None, "2/3| api"]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("[INFO] Building api [2/12]", " 2/12| api"),
        ("[INFO] Building api [12/12]", "12/12| api"),
        ("[INFO] Building api [7/100]", "  7/100| api"),
        ("[INFO] Building My Module :: Core [3/4]", "3/4| My Module :: Core"),
        # index wider than size: padding clamps to zero
        ("[INFO] Building odd [100/9]", "100/9| odd"),
    ],
)
def test_progress_padding(line, expected):
    assert format_progress(line) == expected


@pytest.mark.parametrize(
    "line",
    [
        "",
        "[INFO] Building jar: /tmp/core.jar",
        "  [INFO] Building core [1/3]",
        "[INFO] Building core [1/3] ",
        "[WARNING] Building core [1/3]",
        "[INFO] Building core [a/3]",
        "[INFO] Building  [1/3]x",
    ],
)
def test_progress_ignores_other_lines(line):
    assert format_progress(line) is None


def test_match_progress_fields():
    m = match_progress("[INFO] Building web [4/10]")
    assert m is not None
    assert (m.name, m.index, m.size) == ("web", "4", "10")
