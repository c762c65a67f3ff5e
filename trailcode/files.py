"""File access for the command-line tool.

Every file name is resolved under the configured data directory. Outputs
are written in one call once fully produced, so a failed run leaves no file
behind.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from .errors import InputFileError

logger = structlog.get_logger(__name__)


def resolve(file_name: str, data_dir: str) -> Path:
    """Apply the data directory prefix to ``file_name``."""
    return Path(data_dir) / file_name


def read_bytes(file_name: str, data_dir: str) -> bytes:
    path = resolve(file_name, data_dir)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise InputFileError(str(path), f"Failed to read file: {e.strerror or e}") from e
    logger.debug("file_read", path=str(path), bytes=len(data))
    return data


def read_text(file_name: str, data_dir: str) -> str:
    path = resolve(file_name, data_dir)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileError(str(path), f"Failed to read file: {e}") from e


def write_bytes(file_name: str, data: bytes, data_dir: str) -> Path:
    path = resolve(file_name, data_dir)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise InputFileError(str(path), f"Failed to write file: {e.strerror or e}") from e
    logger.debug("file_written", path=str(path), bytes=len(data))
    return path


def write_text(file_name: str, text: str, data_dir: str) -> Path:
    return write_bytes(file_name, text.encode("utf-8"), data_dir)


def byte_diff(first: bytes, second: bytes) -> list[tuple[int, int, int]]:
    """List the positions where two equal-length byte strings differ.

    Returns:
        ``(position, first_value, second_value)`` tuples in order.

    Raises:
        ValueError: If the inputs differ in length.
    """
    if len(first) != len(second):
        raise ValueError(f"Length mismatch: {len(first)} != {len(second)}")
    return [(i, a, b) for i, (a, b) in enumerate(zip(first, second)) if a != b]
