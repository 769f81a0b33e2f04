"""Filesystem helpers for mdc-label."""

from __future__ import annotations

import os
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE

MAX_FILE_SIZE_ENV_VAR = "MDC_LABEL_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed file size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["MDC_LABEL_MAX_FILE_SIZE"] = "204800"
        limit = get_max_file_size(default=102400)
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def read_source(filepath: Path, max_file_size: int) -> str:
    """Read a UTF-8 source file, refusing files above a size limit.

    Line endings are kept as written so positions match the file.

    Args:
        filepath: File to read.
        max_file_size: Largest accepted size in bytes.

    Returns:
        str: File contents.

    Raises:
        IOError: If the file is too large, cannot be read, or is not valid UTF-8.

    Examples:
        read_source(Path("README.md"), 1024 * 1024)
    """
    try:
        size = filepath.stat().st_size
    except OSError as error:
        raise IOError(f"Unable to stat {filepath}: {error}") from error

    if size > max_file_size:
        raise IOError(
            f"{filepath} is {size} bytes, which exceeds the maximum allowed size "
            f"of {max_file_size} bytes."
        )

    try:
        with open(filepath, encoding="utf-8", newline="") as file:
            return file.read()
    except UnicodeDecodeError as error:
        raise IOError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
