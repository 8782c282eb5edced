"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dep_changelog.models import Manifest


@pytest.fixture
def old_manifest() -> Manifest:
    """Manifest as it was at the previous release."""
    return Manifest.model_validate(
        {
            "name": "my-app",
            "version": "1.0.0",
            "dependencies": {"express": "^4.18.0", "lodash": "^4.17.20"},
            "devDependencies": {"typescript": "^5.0.0", "jest": "^29.0.0"},
        }
    )


@pytest.fixture
def new_manifest() -> Manifest:
    """Current manifest: one update, one addition, one removal."""
    return Manifest.model_validate(
        {
            "name": "my-app",
            "version": "1.1.0",
            "dependencies": {"express": "^4.19.0", "lodash": "^4.17.20"},
            "devDependencies": {"typescript": "^5.0.0", "vitest": "^4.0.7"},
        }
    )


@pytest.fixture
def sample_changelog() -> str:
    """A changelog with manual and generated entries in the newest version."""
    return """\
# Changelog

All notable changes to this project will be documented in this file.

## [1.0.0] - 2025-11-06

### Added

- New feature A
- New feature B

### Changed

- Manual change 1
- updated dependencies
    - @actions/core ^1.10.0 → ^1.11.0
- Manual change 2
- added devDependencies
    - typescript@^5.0.0

### Fixed

- Bug fix 1

## [0.9.0] - 2025-11-05

### Added

- Initial release
"""


@pytest.fixture
def project_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write a package.json and CHANGELOG.md into a temporary directory."""
    package_json = tmp_path / "package.json"
    package_json.write_text(
        json.dumps(
            {
                "name": "my-app",
                "dependencies": {"express": "^4.19.0"},
                "devDependencies": {"vitest": "^4.0.7"},
            }
        )
    )
    changelog = tmp_path / "CHANGELOG.md"
    changelog.write_text("# Changelog\n\n## [1.1.0] - 2025-11-10\n")
    return package_json, changelog
