"""Tests for package module."""

from __future__ import annotations

import pytest

from global_installer.errors import InvalidPackageSpecError
from global_installer.package import PackageSpec


class TestPackageSpec:
    """Tests for PackageSpec.parse."""

    @pytest.mark.parametrize(
        ("spec", "name", "version"),
        [
            ("left-pad", "left-pad", None),
            ("typescript@5.3.3", "typescript", "5.3.3"),
            ("eslint@latest", "eslint", "latest"),
            ("@angular/cli", "@angular/cli", None),
            ("@angular/cli@^17.0.0", "@angular/cli", "^17.0.0"),
            ("yarn@", "yarn", None),
        ],
    )
    def test_parse(self, spec: str, name: str, version: str | None) -> None:
        parsed = PackageSpec.parse(spec)
        assert parsed.name == name
        assert parsed.version == version

    def test_raw_is_preserved(self) -> None:
        """str() gives back what npm receives."""
        assert str(PackageSpec.parse("  @scope/pkg@1.0.0 ")) == "@scope/pkg@1.0.0"

    @pytest.mark.parametrize(
        "spec",
        [
            "",
            "   ",
            "@",
            "@scope/",
            "@1.0.0",
            "./x",
            "../x",
            "a/b",
            "/abs",
            ".",
            "..",
            "../../escape",
            "@scope/a/b",
            "@../x",
            "@scope/..",
            "a\\b",
        ],
    )
    def test_invalid(self, spec: str) -> None:
        with pytest.raises(InvalidPackageSpecError):
            PackageSpec.parse(spec)

    def test_invalid_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            PackageSpec.parse("")

    def test_immutable(self) -> None:
        parsed = PackageSpec.parse("left-pad")
        with pytest.raises(AttributeError):
            parsed.name = "right-pad"  # type: ignore[misc]
