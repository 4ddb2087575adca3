"""Filesystem locations for the settings file and logs.

Where: src/cmus_notify/config/paths.py
What: Resolve the settings file and the log file of a cmus-notify checkout.
Why: Keep a checkout self-contained unless ``CMUS_NOTIFY_CONFIG`` points elsewhere.

Layout:
- Settings: ``<root>/config/config.toml``, or ``$CMUS_NOTIFY_CONFIG``.
- Logs: ``<root>/logs/cmus-notify.log``.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "CMUS_NOTIFY_CONFIG"
LOG_FILE_NAME: Final[str] = "cmus-notify.log"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the explicit path, then a non-blank environment value, then the default."""

    if explicit_path is not None:
        chosen = Path(explicit_path)
    else:
        variables = env if env is not None else os.environ
        override = variables.get(env_var, "").strip() if env_var else ""
        chosen = Path(override) if override else default_factory()
    return chosen.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor of ``start`` holding a project marker.

    Falls back to the current working directory when no ancestor has one.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Location of the TOML settings file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=CONFIG_ENV_VAR,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / LOG_FILE_NAME


__all__ = [
    "CONFIG_ENV_VAR",
    "LOG_FILE_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
