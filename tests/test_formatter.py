"""Tests for dep_changelog.formatter."""

from __future__ import annotations

from dep_changelog.deps import compare, has_changes
from dep_changelog.formatter import (
    ChangeFormatter,
    DefaultChangelogFormatter,
    is_entry_header,
    is_entry_item,
)
from dep_changelog.models import Manifest, PackageChanges


class TestDefaultChangelogFormatter:
    def test_no_changes_is_empty_string(self) -> None:
        assert DefaultChangelogFormatter().format(PackageChanges()) == ""

    def test_full_output(
        self, old_manifest: Manifest, new_manifest: Manifest
    ) -> None:
        output = DefaultChangelogFormatter().format(
            compare(old_manifest, new_manifest)
        )
        assert output == (
            "- updated dependencies\n"
            "    - express ^4.18.0 → ^4.19.0\n"
            "- added devDependencies\n"
            "    - vitest@^4.0.7\n"
            "- removed devDependencies\n"
            "    - jest@^29.0.0"
        )

    def test_updated_before_added_before_removed(self) -> None:
        old = Manifest.model_validate({"dependencies": {"a": "1", "b": "1"}})
        new = Manifest.model_validate({"dependencies": {"b": "2", "c": "1"}})
        lines = DefaultChangelogFormatter().format(compare(old, new)).split("\n")
        headers = [line for line in lines if not line.startswith(" ")]
        assert headers == [
            "- updated dependencies",
            "- added dependencies",
            "- removed dependencies",
        ]

    def test_classes_in_declared_order(self) -> None:
        new = Manifest.model_validate(
            {
                "optionalDependencies": {"d": "1"},
                "peerDependencies": {"c": "1"},
                "devDependencies": {"b": "1"},
                "dependencies": {"a": "1"},
            }
        )
        output = DefaultChangelogFormatter().format(compare(Manifest(), new))
        assert output.split("\n")[::2] == [
            "- added dependencies",
            "- added devDependencies",
            "- added peerDependencies",
            "- added optionalDependencies",
        ]

    def test_no_trailing_newline(
        self, old_manifest: Manifest, new_manifest: Manifest
    ) -> None:
        output = DefaultChangelogFormatter().format(
            compare(old_manifest, new_manifest)
        )
        assert not output.endswith("\n")

    def test_empty_iff_no_changes(
        self, old_manifest: Manifest, new_manifest: Manifest
    ) -> None:
        formatter = DefaultChangelogFormatter()
        for old, new in [
            (old_manifest, new_manifest),
            (old_manifest, old_manifest),
            (Manifest(), Manifest()),
        ]:
            changes = compare(old, new)
            assert (formatter.format(changes) == "") == (not has_changes(changes))


class TestGrammar:
    def test_headers(self) -> None:
        assert is_entry_header("- updated dependencies")
        assert is_entry_header("- removed optionalDependencies")
        assert not is_entry_header("- updated docs")
        assert is_entry_header("- updated dependencies ")
        assert is_entry_header("- added devDependencies\r")
        assert not is_entry_header("  - added dependencies")

    def test_items(self) -> None:
        assert is_entry_item("    - lodash@^4.0.0")
        assert not is_entry_item("  - lodash@^4.0.0")
        assert not is_entry_item("- lodash@^4.0.0")


class UpperCaseFormatter:
    def format(self, changes: PackageChanges) -> str:
        return DefaultChangelogFormatter().format(changes).upper()


class TestChangeFormatter:
    def test_uses_default_formatter(
        self, old_manifest: Manifest, new_manifest: Manifest
    ) -> None:
        changes = compare(old_manifest, new_manifest)
        assert ChangeFormatter().format(changes) == (
            DefaultChangelogFormatter().format(changes)
        )

    def test_injected_formatter(
        self, old_manifest: Manifest, new_manifest: Manifest
    ) -> None:
        service = ChangeFormatter(UpperCaseFormatter())
        output = service.format(compare(old_manifest, new_manifest))
        assert output.startswith("- UPDATED DEPENDENCIES")

    def test_set_formatter(
        self, old_manifest: Manifest, new_manifest: Manifest
    ) -> None:
        service = ChangeFormatter()
        custom = UpperCaseFormatter()
        service.set_formatter(custom)
        assert service.formatter is custom
        assert "VITEST" in service.format(compare(old_manifest, new_manifest))
