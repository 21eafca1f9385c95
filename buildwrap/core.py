import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from buildwrap.config.schemas import BuildConfig

DEFAULT_CONFIG_PATH = os.path.join("conf", "build.yaml")

# ---------------- Logging ----------------

_ROOT_LOGGER = "buildwrap"


def get_logger(name="buildwrap"):
    """
    Diagnostics logger. Handlers live on the package root logger and write to
    stderr, so stdout stays reserved for build progress and summaries.
    """
    root = logging.getLogger(_ROOT_LOGGER)
    if not root.handlers:
        root.setLevel(logging.INFO)
        fmt = logging.Formatter(
            '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'
        )
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(fmt)
        root.addHandler(sh)
        root.propagate = False
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")


def set_log_level(level: str) -> None:
    get_logger().setLevel(getattr(logging, level.upper(), logging.INFO))


log = get_logger("core")

# ---------------- Config ----------------


def _read_yaml(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"YAML at {path} must be a mapping/object.")
        return data


def load_config(path: Optional[str] = None) -> BuildConfig:
    """
    Load the build configuration.

    An explicit path must exist. Without one, conf/build.yaml in the working
    directory is used when present, otherwise the built-in defaults.
    """
    if path is not None:
        if not Path(path).exists():
            raise FileNotFoundError(f"Configuration file missing: {path}")
        raw = _read_yaml(path)
    else:
        raw = _read_yaml(DEFAULT_CONFIG_PATH)

    try:
        cfg = BuildConfig(**raw)
    except ValidationError as e:
        log.error(f"Config validation failed: {e}")
        raise
    return cfg


# ---------------- Env ----------------


def load_env(path: str = ".env") -> dict:
    # Existing variables win over the file.
    load_dotenv(path, override=False)
    return dict(os.environ)
