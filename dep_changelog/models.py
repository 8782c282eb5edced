"""Data models for dep-changelog.

These Pydantic models represent the manifests being compared and the
structured change-set produced by diffing them.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Order matters: it decides the order of sections in the changelog output.
DEPENDENCY_TYPES: tuple[str, ...] = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)

_FIELD_NAMES: dict[str, str] = {
    "dependencies": "dependencies",
    "devDependencies": "dev_dependencies",
    "peerDependencies": "peer_dependencies",
    "optionalDependencies": "optional_dependencies",
}


class Manifest(BaseModel):
    """The dependency-bearing part of a package.json document.

    Only the four dependency classes are modelled. Every other key is
    accepted and carried along untouched.

    Attributes:
        dependencies: Runtime dependencies (name → version range).
        dev_dependencies: Development-only dependencies.
        peer_dependencies: Peer dependencies.
        optional_dependencies: Optional dependencies.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )
    peer_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="peerDependencies"
    )
    optional_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="optionalDependencies"
    )

    @field_validator(
        "dependencies",
        "dev_dependencies",
        "peer_dependencies",
        "optional_dependencies",
        mode="before",
    )
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def dependency_map(self, dep_type: str) -> dict[str, str]:
        """Return the name → range map for a class like "devDependencies"."""
        return getattr(self, _FIELD_NAMES[dep_type])


class AddedDependency(BaseModel):
    """A dependency present only in the new manifest."""

    name: str
    version: str


class RemovedDependency(BaseModel):
    """A dependency present only in the old manifest."""

    name: str
    version: str


class UpdatedDependency(BaseModel):
    """A dependency whose version range string changed."""

    name: str
    old_version: str
    new_version: str


class DependencyChanges(BaseModel):
    """Changes within a single dependency class.

    Each list is sorted by package name.
    """

    added: list[AddedDependency] = Field(default_factory=list)
    removed: list[RemovedDependency] = Field(default_factory=list)
    updated: list[UpdatedDependency] = Field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.updated)


class PackageChanges(BaseModel):
    """All dependency changes between two manifests, one entry per class."""

    model_config = ConfigDict(populate_by_name=True)

    dependencies: DependencyChanges = Field(default_factory=DependencyChanges)
    dev_dependencies: DependencyChanges = Field(
        default_factory=DependencyChanges, alias="devDependencies"
    )
    peer_dependencies: DependencyChanges = Field(
        default_factory=DependencyChanges, alias="peerDependencies"
    )
    optional_dependencies: DependencyChanges = Field(
        default_factory=DependencyChanges, alias="optionalDependencies"
    )

    def for_type(self, dep_type: str) -> DependencyChanges:
        return getattr(self, _FIELD_NAMES[dep_type])

    def sections(self) -> Iterator[tuple[str, DependencyChanges]]:
        """Yield (class name, changes) pairs in DEPENDENCY_TYPES order."""
        for dep_type in DEPENDENCY_TYPES:
            yield dep_type, self.for_type(dep_type)


class RunResult(BaseModel):
    """Outcome of a single run, reported as the two action outputs.

    Attributes:
        changes_detected: True if any dependency changed since the last tag.
        changelog_updated: True if the changelog was rewritten.
    """

    changes_detected: bool = False
    changelog_updated: bool = False
