"""Rendering of dependency changes as changelog entries.

The default output looks like:

    - updated dependencies
        - left-pad ^1.0.0 → ^1.1.0
    - added devDependencies
        - vitest@^4.0.7
    - removed peerDependencies
        - react@^17.0.0

The changelog merger finds and replaces these entries on later runs, so
both sides share the grammar constants defined here.
"""

from __future__ import annotations

import re
from typing import Protocol

from .models import (
    DEPENDENCY_TYPES,
    AddedDependency,
    DependencyChanges,
    PackageChanges,
    RemovedDependency,
    UpdatedDependency,
)

ENTRY_VERBS: tuple[str, ...] = ("updated", "added", "removed")
ENTRY_INDENT = "    "
ARROW = "→"

# Header line of a generated entry group, e.g. "- added devDependencies".
ENTRY_HEADER_RE = re.compile(
    rf"^- ({'|'.join(ENTRY_VERBS)}) ({'|'.join(DEPENDENCY_TYPES)})"
)


def is_entry_header(line: str) -> bool:
    """Return True if line opens a generated entry group."""
    return ENTRY_HEADER_RE.match(line) is not None


def is_entry_item(line: str) -> bool:
    """Return True if line is an indented item under an entry header."""
    return line.startswith(f"{ENTRY_INDENT}-")


class ChangelogFormatter(Protocol):
    """Strategy for turning PackageChanges into changelog text."""

    def format(self, changes: PackageChanges) -> str: ...


class DefaultChangelogFormatter:
    """Formatter producing the entry grammar the changelog merger understands."""

    def format(self, changes: PackageChanges) -> str:
        lines: list[str] = []
        for dep_type, section in changes.sections():
            lines.extend(self._format_section(dep_type, section))
        return "\n".join(lines)

    def _format_section(self, dep_type: str, section: DependencyChanges) -> list[str]:
        # Empty classes produce nothing, not even a header
        lines: list[str] = []
        if section.updated:
            lines.append(f"- updated {dep_type}")
            lines.extend(self._format_updated(dep) for dep in section.updated)
        if section.added:
            lines.append(f"- added {dep_type}")
            lines.extend(self._format_pinned(dep) for dep in section.added)
        if section.removed:
            lines.append(f"- removed {dep_type}")
            lines.extend(self._format_pinned(dep) for dep in section.removed)
        return lines

    @staticmethod
    def _format_updated(dep: UpdatedDependency) -> str:
        return f"{ENTRY_INDENT}- {dep.name} {dep.old_version} {ARROW} {dep.new_version}"

    @staticmethod
    def _format_pinned(dep: AddedDependency | RemovedDependency) -> str:
        return f"{ENTRY_INDENT}- {dep.name}@{dep.version}"


class ChangeFormatter:
    """Formats PackageChanges using a pluggable ChangelogFormatter.

    Only DefaultChangelogFormatter output can be found and replaced by
    update_changelog(). Entries from a custom formatter will pile up on
    repeated runs instead of being replaced.
    """

    def __init__(self, formatter: ChangelogFormatter | None = None) -> None:
        self._formatter = formatter or DefaultChangelogFormatter()

    @property
    def formatter(self) -> ChangelogFormatter:
        return self._formatter

    def set_formatter(self, formatter: ChangelogFormatter) -> None:
        self._formatter = formatter

    def format(self, changes: PackageChanges) -> str:
        return self._formatter.format(changes)
