"""Exceptions raised by dep-changelog.

Every failure is fatal to the run. The CLI catches them in one place and
reports the message as the step's failure.
"""

from __future__ import annotations


class DepChangelogError(Exception):
    """Base class for all dep-changelog errors."""


class InputValidationError(DepChangelogError):
    """A required input file does not exist."""


class ManifestParseError(DepChangelogError):
    """A manifest is not valid JSON or has malformed dependency maps."""


class SectionNotFoundError(DepChangelogError):
    """The changelog has no version section to merge into."""

    def __init__(self, version: str | None = None) -> None:
        self.version = version
        if version:
            msg = f"Version [{version}] not found in changelog"
        else:
            msg = "No version section found in changelog"
        super().__init__(msg)


class ReadError(DepChangelogError):
    """A file could not be read."""


class WriteError(DepChangelogError):
    """A file could not be written."""


class PublishError(DepChangelogError):
    """A git step of committing and pushing the changelog failed."""
