"""CLI entry point for dep-changelog."""

from __future__ import annotations

import click

from dep_changelog.deps import compare, has_changes
from dep_changelog.errors import DepChangelogError
from dep_changelog.files import load_manifest
from dep_changelog.formatter import ChangeFormatter
from dep_changelog.pipeline import run_action


@click.group()
@click.version_option(package_name="dep-changelog")
def cli() -> None:
    """Record package.json dependency changes in CHANGELOG.md."""


@cli.command()
@click.option(
    "--github-token",
    envvar="INPUT_GITHUB-TOKEN",
    required=True,
    help="GitHub token provided to the action.",
)
@click.option(
    "--package-json-path",
    envvar="INPUT_PACKAGE-JSON-PATH",
    default="package.json",
    show_default=True,
    help="Path to package.json.",
)
@click.option(
    "--changelog-path",
    envvar="INPUT_CHANGELOG-PATH",
    default="CHANGELOG.md",
    show_default=True,
    help="Path to the changelog to update.",
)
@click.option(
    "--version-section",
    envvar="INPUT_VERSION",
    default=None,
    help="Version section to update (e.g., 1.2.0). Defaults to the topmost one.",
)
@click.option(
    "--commit",
    envvar="INPUT_COMMIT",
    type=click.BOOL,
    default=True,
    show_default=True,
    help="Commit and push the changelog when it changes.",
)
@click.option(
    "--github-output",
    envvar="GITHUB_OUTPUT",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the GitHub step output file.",
)
def run(
    github_token: str,
    package_json_path: str,
    changelog_path: str,
    version_section: str | None,
    commit: bool,
    github_output: str | None,
) -> None:
    """Run the changelog update (usually called from CI)."""
    run_action(
        package_json_path=package_json_path,
        changelog_path=changelog_path,
        version=version_section or None,
        commit=commit,
        github_output=github_output,
    )


@cli.command()
@click.argument("old", type=click.Path(exists=True, dir_okay=False))
@click.argument("new", type=click.Path(exists=True, dir_okay=False))
def diff(old: str, new: str) -> None:
    """Print the changelog entries for the changes between two package.json files."""
    try:
        changes = compare(load_manifest(old), load_manifest(new))
    except DepChangelogError as exc:
        raise click.ClickException(str(exc)) from exc

    if not has_changes(changes):
        click.echo("No dependency changes.")
        return
    click.echo(ChangeFormatter().format(changes))
