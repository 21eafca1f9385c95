import argparse


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="buildwrap",
        description="Run the project build, streaming module progress and printing a condensed summary.",
    )
    ap.add_argument("--config", default=None, help="Path to build YAML config (default: conf/build.yaml if present)")
    ap.add_argument("--dry-run", action="store_true", help="Print the commands without executing subprocesses")
    return ap
