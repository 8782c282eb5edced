"""Git history lookups and publishing of the updated changelog."""

from __future__ import annotations

import subprocess

from .errors import PublishError
from .files import parse_manifest
from .models import Manifest
from .shell import git, info, warning

DEFAULT_AUTHOR_NAME = "github-actions[bot]"
DEFAULT_AUTHOR_EMAIL = "41898282+github-actions[bot]@users.noreply.github.com"


def latest_tag() -> str | None:
    """Return the most recent tag reachable from HEAD, or None if there is none."""
    tag = git("describe", "--tags", "--abbrev=0", check=False)
    if not tag:
        info("No version tags found in repository")
        return None
    info(f"Found last tag: {tag}")
    return tag


def file_at(tag: str, path: str) -> str | None:
    """Return a file's content as of a tag, or None if it did not exist there."""
    content = git("show", f"{tag}:{path}", check=False)
    if not content:
        warning(f"Could not find {path} in tag {tag}")
        return None
    return content


def manifest_at_latest_tag(path: str) -> Manifest | None:
    """Load the manifest as it was at the latest tag.

    Returns:
        The decoded Manifest, or None if there are no tags or the file
        did not exist at the latest tag.

    Raises:
        ManifestParseError: If the file at the tag is not a valid manifest.
    """
    tag = latest_tag()
    if not tag:
        return None

    content = file_at(tag, path)
    if content is None:
        return None

    manifest = parse_manifest(content, f"{path} from tag {tag}")
    info(f"Loaded {path} from tag {tag}")
    return manifest


def publish_changelog(
    path: str,
    message: str,
    *,
    name: str = DEFAULT_AUTHOR_NAME,
    email: str = DEFAULT_AUTHOR_EMAIL,
) -> None:
    """Commit the changelog and push it to the current branch.

    Raises:
        PublishError: If any git step fails. Nothing is retried.
    """
    steps = [
        ("config", "user.name", name),
        ("config", "user.email", email),
        ("add", path),
        ("commit", "-m", message),
        ("push",),
    ]
    for args in steps:
        try:
            git(*args)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit code {exc.returncode}"
            raise PublishError(f"git {args[0]} failed: {detail}") from exc
    info(f"Committed and pushed {path}")
