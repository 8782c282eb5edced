"""Update pipeline: validate → load → diff → format → merge → publish.

This module orchestrates a single dep-changelog run:
1. Check that the manifest and changelog exist
2. Load the current manifest and the manifest at the latest git tag
3. Diff the dependency classes of the two manifests
4. Format the changes as changelog entries
5. Merge the entries into the changelog's version section
6. Write the changelog and, optionally, commit and push it

Having no previous tag or no dependency changes is not an error: the run
ends early and reports that nothing was updated.
"""

from __future__ import annotations

from .changelog import update_changelog
from .deps import compare, has_changes
from .errors import InputValidationError
from .files import file_exists, load_manifest, read_file, write_file
from .formatter import ChangeFormatter
from .git import manifest_at_latest_tag, publish_changelog
from .models import PackageChanges, RunResult
from .shell import fatal, info, set_output, step

COMMIT_MESSAGE = "chore: update changelog with dependency changes"


def validate_inputs(package_json_path: str, changelog_path: str) -> None:
    """Make sure both input files exist before doing any work.

    Raises:
        InputValidationError: If either file is missing.
    """
    step("Validating inputs")
    info(f"Using package.json path: {package_json_path}")
    info(f"Using changelog path: {changelog_path}")

    if not file_exists(package_json_path):
        raise InputValidationError(f"package.json not found at: {package_json_path}")
    if not file_exists(changelog_path):
        raise InputValidationError(f"Changelog not found at: {changelog_path}")


def detect_changes(package_json_path: str) -> PackageChanges | None:
    """Diff the current manifest against the one at the latest tag.

    Returns:
        The PackageChanges, or None if there is no previous manifest to
        compare against.
    """
    step("Detecting dependency changes")

    current = load_manifest(package_json_path)
    previous = manifest_at_latest_tag(package_json_path)
    if previous is None:
        info("Nothing to compare against")
        return None

    changes = compare(previous, current)
    for dep_type, section in changes.sections():
        if section.has_changes:
            info(
                f"{dep_type}: {len(section.updated)} updated, "
                f"{len(section.added)} added, {len(section.removed)} removed"
            )
    return changes


def merge_changes(
    changelog_path: str,
    formatted: str,
    version: str | None = None,
) -> bool:
    """Merge formatted entries into the changelog file.

    Returns:
        True if the file content changed and was written.
    """
    step("Updating changelog")

    content = read_file(changelog_path)
    updated = update_changelog(content, formatted, version)
    if updated == content:
        info("Changelog already up to date")
        return False

    write_file(changelog_path, updated)
    target = f"[{version}]" if version else "latest version"
    info(f"Updated {target} section of {changelog_path}")
    return True


def run_update(
    *,
    package_json_path: str = "package.json",
    changelog_path: str = "CHANGELOG.md",
    version: str | None = None,
    commit: bool = True,
    formatter: ChangeFormatter | None = None,
) -> RunResult:
    """Execute the full update pipeline.

    Args:
        package_json_path: Path to the package.json to diff.
        changelog_path: Path to the changelog to update.
        version: Version section to update. Defaults to the topmost section.
        commit: If True, commit and push the changelog when it changed.
        formatter: Formatter to render entries with. Defaults to the
                   standard entry grammar.

    Returns:
        RunResult describing whether changes were found and written.
    """
    validate_inputs(package_json_path, changelog_path)

    changes = detect_changes(package_json_path)
    if changes is None or not has_changes(changes):
        info("No dependency changes detected")
        return RunResult()

    formatted = (formatter or ChangeFormatter()).format(changes)
    updated = merge_changes(changelog_path, formatted, version)

    if updated and commit:
        step("Publishing changelog")
        publish_changelog(changelog_path, COMMIT_MESSAGE)

    return RunResult(changes_detected=True, changelog_updated=updated)


def run_action(
    *,
    package_json_path: str = "package.json",
    changelog_path: str = "CHANGELOG.md",
    version: str | None = None,
    commit: bool = True,
    github_output: str | None = None,
) -> RunResult:
    """Run the pipeline as a workflow step.

    Writes the ``changes-detected`` and ``changelog-updated`` outputs. Any
    error fails the step with its message.
    """
    try:
        result = run_update(
            package_json_path=package_json_path,
            changelog_path=changelog_path,
            version=version,
            commit=commit,
        )
    except Exception as exc:
        fatal(str(exc))

    set_output("changes-detected", result.changes_detected, github_output)
    set_output("changelog-updated", result.changelog_updated, github_output)
    print(f"\n{'=' * 60}\nDone!\n{'=' * 60}")
    return result
