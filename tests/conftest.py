"""
Shared fixtures for the build wrapper tests.

Child processes are real: each test writes a tiny Python script into
tmp_path and runs it with the current interpreter.
"""

import os
import sys
import textwrap

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from buildwrap.utils.subproc import Command


@pytest.fixture
def script_command(tmp_path):
    """Return a factory turning Python source into a runnable Command."""
    counter = {"n": 0}

    def _make(source: str) -> Command:
        counter["n"] += 1
        path = tmp_path / f"child_{counter['n']}.py"
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return Command(f"{sys.executable} {path}")

    return _make


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


SEP = "[INFO] " + "-" * 72

MAVEN_SUCCESS_TAIL = [
    "[INFO] Building core [1/2]",
    "[INFO] compiling core",
    "[INFO] Building api [2/2]",
    "[INFO] compiling api",
    SEP,
    "[INFO] Reactor Summary for parent 1.0:",
    "[INFO] ",
    "[INFO] core ............................................... SUCCESS [  1.000 s]",
    "[INFO] api ................................................ SUCCESS [  2.000 s]",
    SEP,
    "[INFO] BUILD SUCCESS",
    SEP,
    "[INFO] Total time:  3.000 s",
    SEP,
]


@pytest.fixture
def maven_success_lines():
    return list(MAVEN_SUCCESS_TAIL)


@pytest.fixture
def separator():
    return SEP
