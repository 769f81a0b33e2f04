"""Configuration loading and management."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, MAX_LABEL_DEPTH, MAX_LABEL_SIZE


@dataclass
class LabelConfig:
    """Configuration for tokenizing bracketed labels.

    Attributes:
        label_type: Span type of a whole label.
        marker_type: Span type of the opening and closing brackets.
        string_type: Span type of the content between the brackets.
        disallow_eol: Whether line endings inside a label make it malformed.
        max_depth: Deepest bracket nesting allowed, counting the outer brackets.
        max_escapes: Escaped characters allowed in one label.
        max_file_size: Maximum file size in bytes that the CLI will read.

    Examples:
        LabelConfig(disallow_eol=True, max_depth=2)
    """

    # Span types
    label_type: str = "label"
    marker_type: str = "labelMarker"
    string_type: str = "labelString"

    # Grammar
    disallow_eol: bool = False

    # Limits
    max_depth: int = MAX_LABEL_DEPTH
    max_escapes: int = MAX_LABEL_SIZE
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_depth` must be a positive integer")
    """


_MISSING = object()


def load_config(search_path: Path) -> LabelConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root,
    reading the ``[tool.mdc-label]`` table from `pyproject.toml` and the
    ``[mdc-label]`` or ``[tool.mdc-label]`` table from `.mdc-label.toml`.
    TOML files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for the lookup.

    Returns:
        LabelConfig: Loaded configuration, or defaults when nothing is found.

    Raises:
        ConfigError: If a table is present but is not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "mdc-label")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".mdc-label.toml",
            table_paths=[("mdc-label",), ("tool", "mdc-label")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return LabelConfig()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> LabelConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> LabelConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    # TOML keys are written with dashes more often than not
    options = {key.replace("-", "_"): value for key, value in raw_config.items()}
    try:
        return LabelConfig(**options)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: LabelConfig) -> None:
    """Validate a `LabelConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a span type is empty or not a string, `disallow_eol` is
            not a boolean, or a limit is out of range.

    Examples:
        validate_config(LabelConfig(max_depth=1))
    """
    for key in ("label_type", "marker_type", "string_type"):
        value = getattr(config, key)
        if not isinstance(value, str) or not value:
            raise ConfigError(f"`{key}` must be a non-empty string")

    if not isinstance(config.disallow_eol, bool):
        raise ConfigError("`disallow_eol` must be a boolean")

    _ensure_integers(
        {
            "max_depth": config.max_depth,
            "max_escapes": config.max_escapes,
            "max_file_size": config.max_file_size,
        }
    )
    if config.max_depth <= 0:
        raise ConfigError("`max_depth` must be a positive integer")
    if config.max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")
    if config.max_escapes < 0:
        raise ConfigError("`max_escapes` must not be negative")


def apply_overrides(config: LabelConfig, **overrides: object) -> LabelConfig:
    """Apply override values to a `LabelConfig`.

    Args:
        config: Base configuration to update.
        overrides: Values keyed by field name; None values are ignored.

    Returns:
        LabelConfig: New configuration, or `config` itself when nothing changes.

    Raises:
        TypeError: If an override name is not a `LabelConfig` field.

    Examples:
        updated = apply_overrides(config, disallow_eol=True, max_depth=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> LabelConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Values keyed by field name; None values are ignored.

    Returns:
        LabelConfig: Validated configuration.

    Raises:
        ConfigError: If loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), disallow_eol=True)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
