"""Shared path utilities for configuration and data locations.

This module centralizes how the application discovers locations for
config, cache and log files.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/brandfork.toml`` unless
  overridden by ``BRANDFORK_CONFIG``.
- Data: repository-root ``<repo_root>/.brandfork`` unless overridden by
  ``BRANDFORK_DATA_DIR``. Scratch files and the content-hash cache live here.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_PATH: Final[str] = "BRANDFORK_CONFIG"
_ENV_DATA_DIR: Final[str] = "BRANDFORK_DATA_DIR"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up from the working directory.

    Looks for markers like ``config/brandfork.toml`` or ``.git``.

    Args:
        start: Starting directory. Defaults to the current working directory.

    Returns:
        Path: Detected repository root, or ``start`` itself when no marker
        is found.
    """
    here = (start or Path.cwd()).resolve()
    for p in [here, *here.parents]:
        if (p / "config" / "brandfork.toml").exists() or (p / ".git").exists():
            return p
    return here


def repo_root() -> Path:
    """Return the repository root used to resolve relative configuration paths."""

    return _detect_repo_root()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the main TOML config file.

    Portable layout: ``<repo_root>/config/brandfork.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_PATH,
        default_factory=lambda: _detect_repo_root() / "config" / "brandfork.toml",
    )


def default_data_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the directory for scratch files and caches."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_DATA_DIR,
        default_factory=lambda: _detect_repo_root() / ".brandfork",
    )


def default_tmp_dir() -> Path:
    """Get the scratch directory used for intermediate icon frames."""

    return (default_data_dir() / "tmp").resolve()


def default_hash_cache_file() -> Path:
    """Get the file that persists processed artwork hashes."""

    return (default_data_dir() / "cache" / "hashes").resolve()


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "brandfork.log").resolve()


__all__ = [
    "default_config_path",
    "default_data_dir",
    "default_hash_cache_file",
    "default_log_dir",
    "default_log_file",
    "default_tmp_dir",
    "repo_root",
    "resolve_overridable_path",
]
