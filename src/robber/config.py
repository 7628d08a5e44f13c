# SPDX-License-Identifier: MIT
"""
Report configuration loader for Robber.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from robber.core.exceptions import RobberConfigError
from robber.core.levels import Level
from robber.core.settings import ReportSettings

log = logging.getLogger(__name__)

CONFIG_NAMES = [".robber.yml", ".robber.yaml"]
ENV_COLOR_PREFIX = "ROBBER_COLOR_"
_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_env_colors(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Read per-level color overrides from ``ROBBER_COLOR_<LEVEL>`` variables.

    Returns:
        Mapping of level name to the raw ``"<color> [bold]"`` value; unset or
        empty variables are left out.
    """
    environ = os.environ if environ is None else environ
    colors = {}
    for level in Level:
        value = environ.get(ENV_COLOR_PREFIX + level.value.upper(), "")
        if value.strip():
            colors[level.value] = value
    return colors


def _env_flag(environ: Mapping[str, str], name: str) -> Optional[bool]:
    value = environ.get(name)
    if value is None or value == "":
        return None
    return value.strip().lower() in _TRUE_VALUES


def load_report_config(config_path: Optional[str] = None, repo_root: str = ".") -> Dict[str, Any]:
    """
    Load report configuration following the search order.

    Args:
        config_path: Explicit config path from --config CLI flag
        repo_root: Directory searched for .robber.yml/.robber.yaml

    Returns:
        Dictionary containing report configuration

    Raises:
        RobberConfigError: If config file is malformed or explicitly provided config is missing
    """
    repo_path = Path(repo_root).resolve()

    # 1. If CLI --config provided → load it
    if config_path:
        config_abs_path = Path(config_path).resolve()
        if not config_abs_path.exists():
            raise RobberConfigError(
                f"Specified config file not found: {config_abs_path}",
                config_path=str(config_abs_path)
            )
        config = _load_yaml_config(config_abs_path)
        log.info("Loaded config: %s", config_abs_path)
        return config

    # 2. Look for .robber.yml or .robber.yaml at repo root
    for config_name in CONFIG_NAMES:
        config_file = repo_path / config_name
        if config_file.exists():
            config = _load_yaml_config(config_file)
            log.info("Loaded config: %s", config_file)
            return config

    # 3. Use built-in defaults
    log.debug("Using default report config")
    return get_default_report_config()


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load and validate YAML config file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise RobberConfigError(f"Failed to parse config file: {e}", config_path=str(config_path))

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise RobberConfigError("Config must be a dictionary", config_path=str(config_path))

    colors = config.get("colors")
    if colors is not None and not isinstance(colors, dict):
        raise RobberConfigError(
            "colors must map level names to color strings",
            config_path=str(config_path),
            section="colors",
        )

    context = config.get("context")
    if context is not None and (isinstance(context, bool) or not isinstance(context, int) or context < 0):
        raise RobberConfigError(
            "context must be a non-negative integer",
            config_path=str(config_path),
            section="context",
        )

    return _apply_report_defaults(config)


def _apply_report_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply default values to report configuration."""
    defaults = get_default_report_config()
    for key, value in defaults.items():
        if config.get(key) is None:
            config[key] = value
    return config


def get_default_report_config() -> Dict[str, Any]:
    """
    Get the default report configuration.

    Returns:
        Dictionary with default report settings
    """
    return {
        "verbose": False,
        "no_context": False,
        "context": 3,
        "save": None,
        "colors": {},
    }


def build_report_settings(config: Optional[Dict[str, Any]] = None,
                          environ: Optional[Mapping[str, str]] = None) -> ReportSettings:
    """
    Combine file configuration with environment overrides.

    Environment values win over the file: ``ROBBER_COLOR_<LEVEL>``,
    ``ROBBER_VERBOSE``, ``ROBBER_NO_CONTEXT`` and ``ROBBER_SAVE``.
    """
    defaults = get_default_report_config()
    config = config if config is not None else defaults
    environ = os.environ if environ is None else environ

    colors = {str(k): str(v) for k, v in (config.get("colors") or {}).items() if v is not None}
    colors.update(get_env_colors(environ))

    verbose = _env_flag(environ, "ROBBER_VERBOSE")
    no_context = _env_flag(environ, "ROBBER_NO_CONTEXT")
    context = config.get("context")
    if context is None:
        context = defaults["context"]

    return ReportSettings(
        verbose=bool(config.get("verbose")) if verbose is None else verbose,
        no_context=bool(config.get("no_context")) if no_context is None else no_context,
        context=int(context),
        save=environ.get("ROBBER_SAVE") or config.get("save"),
        colors=colors,
    )
