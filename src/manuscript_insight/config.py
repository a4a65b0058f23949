"""Configuration loading and management for Manuscript Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in EngineConfig)
    2. Global config (~/.manuscript-insight.toml)
    3. Project config (./manuscript-insight.toml)
    4. Explicit config file
    5. Environment variables (MANUSCRIPT_* prefix)
    6. Keyword overrides (typically CLI flags)

Scoring weights and thresholds are fixed and cannot be configured.

Example:
    >>> config = load_config(verbose=True, default_genre="thriller")
    >>> config.verbosity
    'verbose'
    >>> config.default_genre
    'thriller'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["rich", "json"]

GLOBAL_CONFIG_NAME = ".manuscript-insight.toml"
PROJECT_CONFIG_NAME = "manuscript-insight.toml"
ENV_PREFIX = "MANUSCRIPT_"


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for analysis runs and report rendering.

    Attributes:
        default_genre: Genre used when neither the call nor the manuscript names one
        words_per_minute: Reading speed used for the reading-time metric
        output_format: CLI output format ("rich" or "json")
        max_suggestions: Suggestions listed in rich output
        show_details: Print principle detail lines in rich output
        verbosity: Logging verbosity level
    """

    default_genre: str = "general"
    words_per_minute: int = 250
    output_format: OutputFormat = "rich"
    max_suggestions: int = 3
    show_details: bool = True
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.default_genre or not self.default_genre.strip():
            raise ValueError("default_genre must be a non-empty string")
        if self.words_per_minute < 1:
            raise ValueError("words_per_minute must be at least 1")
        if self.output_format not in ("rich", "json"):
            raise ValueError("output_format must be 'rich' or 'json'")
        if self.max_suggestions < 0:
            raise ValueError("max_suggestions must be non-negative")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of: quiet, normal, verbose")


DEFAULT_CONFIG = EngineConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> EngineConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are translated to ``verbosity``.

    Returns:
        Validated EngineConfig instance

    Raises:
        ConfigurationError: If a config source is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_source(global_config, "global config"))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_source(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_source(config_file, "config file"))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return EngineConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_toml_source(path: Path, label: str) -> dict:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from MANUSCRIPT_* environment variables.

    Supported environment variables:
        MANUSCRIPT_DEFAULT_GENRE: str
        MANUSCRIPT_WORDS_PER_MINUTE: int
        MANUSCRIPT_OUTPUT_FORMAT: rich/json
        MANUSCRIPT_MAX_SUGGESTIONS: int
        MANUSCRIPT_SHOW_DETAILS: bool (true/false/1/0)
        MANUSCRIPT_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(EngineConfig)

    result: dict[str, Any] = {}

    for field_name in EngineConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the annotated type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Python < 3.11: tomli is a declared install requirement there
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        return tomllib.load(f)
