"""File reading and writing utilities.

Thin wrappers around pathlib that turn OS failures into dep-changelog
errors, keeping the original exception as the cause.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from .errors import ManifestParseError, ReadError, WriteError
from .models import Manifest


def file_exists(path: str | Path) -> bool:
    return Path(path).is_file()


def read_file(path: str | Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        ReadError: If the file cannot be read.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ReadError(f"Failed to read file {path}: {exc}") from exc


def write_file(path: str | Path, content: str) -> None:
    """Write a UTF-8 text file, replacing any existing content.

    Raises:
        WriteError: If the file cannot be written.
    """
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Failed to write file {path}: {exc}") from exc


def parse_manifest(content: str, source: str) -> Manifest:
    """Decode package.json content into a Manifest.

    Args:
        content: Raw JSON text.
        source: Where the content came from, used in the error message.

    Raises:
        ManifestParseError: If the content is not valid JSON or a dependency
            class is not a map of strings.
    """
    try:
        return Manifest.model_validate_json(content)
    except ValidationError as exc:
        raise ManifestParseError(f"Failed to parse {source}: {exc}") from exc


def load_manifest(path: str | Path) -> Manifest:
    """Read and decode a package.json file."""
    return parse_manifest(read_file(path), str(path))
