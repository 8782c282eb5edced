"""Dependency diffing.

Compares the four dependency classes of two manifests. Version ranges are
opaque strings: "^1.0.0" and "^1.0" are different versions, and no range
is ever resolved.
"""

from __future__ import annotations

from .models import (
    DEPENDENCY_TYPES,
    AddedDependency,
    DependencyChanges,
    Manifest,
    PackageChanges,
    RemovedDependency,
    UpdatedDependency,
)


def compare(old: Manifest, new: Manifest) -> PackageChanges:
    """Compute the dependency changes between two manifests.

    Each class is diffed independently. A class missing from a manifest is
    treated as empty, so the result is always complete.

    Args:
        old: Manifest from the previous release.
        new: Current manifest.

    Returns:
        PackageChanges with one DependencyChanges per dependency class.
    """
    return PackageChanges(
        **{
            dep_type: compare_dependencies(
                old.dependency_map(dep_type), new.dependency_map(dep_type)
            )
            for dep_type in DEPENDENCY_TYPES
        }
    )


def compare_dependencies(
    old_deps: dict[str, str], new_deps: dict[str, str]
) -> DependencyChanges:
    """Classify every name in either map as added, removed or updated.

    Names whose version string is unchanged are dropped. Names are visited
    in sorted order so all three lists come out sorted.

    Example:
        old={"a": "1.0", "b": "1.0"}, new={"b": "2.0", "c": "1.0"}
        → added=[c@1.0], removed=[a@1.0], updated=[b 1.0 → 2.0]
    """
    changes = DependencyChanges()

    for name in sorted(old_deps.keys() | new_deps.keys()):
        if name not in old_deps:
            changes.added.append(AddedDependency(name=name, version=new_deps[name]))
        elif name not in new_deps:
            changes.removed.append(
                RemovedDependency(name=name, version=old_deps[name])
            )
        elif old_deps[name] != new_deps[name]:
            changes.updated.append(
                UpdatedDependency(
                    name=name,
                    old_version=old_deps[name],
                    new_version=new_deps[name],
                )
            )

    return changes


def has_changes(changes: PackageChanges) -> bool:
    """Return True if at least one dependency class has a change."""
    return any(section.has_changes for _, section in changes.sections())
