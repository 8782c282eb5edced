"""Merging dependency changes into a Keep a Changelog style document.

The target is a version section (``## [1.2.0] - 2025-11-06``) and, within
it, the ``### Changed`` subsection. Entries written by a previous run are
recognised by the formatter grammar and replaced. Manual notes, other
subsections and other versions are left as they are.
"""

from __future__ import annotations

from .errors import SectionNotFoundError
from .formatter import is_entry_header, is_entry_item

VERSION_HEADING_PREFIX = "## ["
SUBSECTION_PREFIX = "###"
CHANGED_HEADING = "### Changed"


def update_changelog(
    document: str, formatted_changes: str, version: str | None = None
) -> str:
    """Merge formatted dependency changes into a changelog document.

    Args:
        document: Full changelog text.
        formatted_changes: Entries as produced by DefaultChangelogFormatter.
            An empty or whitespace-only string leaves the document untouched.
        version: Version whose section should be updated. If omitted, the
            first ``## [`` section in the document is used.

    Returns:
        The updated changelog text. A trailing line break on the input is
        kept on the output.

    Raises:
        SectionNotFoundError: If the version (or any version) has no section.
    """
    if not formatted_changes.strip():
        return document

    separator = "\r\n" if "\r\n" in document else "\n"
    newline = separator if document.endswith(separator) else ""
    lines = document[: len(document) - len(newline)].split(separator)
    entries = _strip_blank_edges(formatted_changes.splitlines())

    version_index = find_version_section(lines, version)
    if version_index is None:
        raise SectionNotFoundError(version)

    changed_index = find_changed_section(lines, version_index)
    if changed_index is None:
        updated = _insert_changed_section(lines, version_index, entries)
    else:
        updated = _update_changed_section(lines, changed_index, entries)

    return separator.join(updated) + newline


def find_version_section(lines: list[str], version: str | None = None) -> int | None:
    """Return the index of the version heading, or None if there is none.

    Without a version this is simply the topmost ``## [`` heading, which is
    the newest release in a reverse-chronological changelog.
    """
    prefix = f"{VERSION_HEADING_PREFIX}{version}]" if version else VERSION_HEADING_PREFIX
    for i, line in enumerate(lines):
        if line.startswith(prefix):
            return i
    return None


def find_changed_section(lines: list[str], version_index: int) -> int | None:
    """Return the index of ``### Changed`` within a version section, or None."""
    for i in range(version_index + 1, len(lines)):
        if lines[i].startswith(VERSION_HEADING_PREFIX):
            break
        if lines[i].strip() == CHANGED_HEADING:
            return i
    return None


def find_section_end(lines: list[str], start: int) -> int:
    """Return the index of the next ``###`` or ``## [`` heading after start.

    Returns len(lines) if the section runs to the end of the document.
    """
    for i in range(start + 1, len(lines)):
        if lines[i].startswith((SUBSECTION_PREFIX, VERSION_HEADING_PREFIX)):
            return i
    return len(lines)


def find_version_end(lines: list[str], version_index: int) -> int:
    """Return the index just past the last subsection of a version section."""
    i = version_index + 1
    while i < len(lines):
        if lines[i].startswith(VERSION_HEADING_PREFIX):
            return i
        if lines[i].startswith(SUBSECTION_PREFIX):
            i = find_section_end(lines, i)
        else:
            i += 1
    return len(lines)


def remove_generated_entries(lines: list[str]) -> list[str]:
    """Drop entry groups written by the formatter, keeping everything else.

    A group is a header line such as ``- updated dependencies`` followed
    directly by its ``    - `` item lines. Any other line (blank lines and
    manual bullets included) ends the group and is kept.
    """
    result: list[str] = []
    in_group = False
    for line in lines:
        if is_entry_header(line):
            in_group = True
            continue
        if in_group and is_entry_item(line):
            continue
        in_group = False
        result.append(line)
    return result


def _strip_blank_edges(lines: list[str]) -> list[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def _update_changed_section(
    lines: list[str], changed_index: int, entries: list[str]
) -> list[str]:
    end = find_section_end(lines, changed_index)
    kept = _strip_blank_edges(remove_generated_entries(lines[changed_index + 1 : end]))

    result = lines[: changed_index + 1]
    if kept:
        result += ["", *kept]
    result += ["", *entries]
    if end < len(lines):
        result += ["", *lines[end:]]
    return result


def _insert_changed_section(
    lines: list[str], version_index: int, entries: list[str]
) -> list[str]:
    insert_at = find_version_end(lines, version_index)
    result = lines[:insert_at] + ["", CHANGED_HEADING, "", *entries]
    if insert_at < len(lines):
        result += ["", *lines[insert_at:]]
    return result
