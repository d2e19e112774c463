"""Package specifications as requested by the user."""

from __future__ import annotations

from dataclasses import dataclass

from global_installer.errors import InvalidPackageSpecError

__all__ = ["PackageSpec"]


def _valid_segment(segment: str) -> bool:
    """One path-safe part of a registry name."""
    return bool(segment) and segment not in (".", "..") and not any(
        sep in segment for sep in ("/", "\\")
    )


def _valid_name(name: str) -> bool:
    """Plain names are a single segment; scoped names are exactly ``@scope/name``."""
    if not name.startswith("@"):
        return _valid_segment(name)
    scope, slash, rest = name[1:].partition("/")
    return bool(slash) and _valid_segment(scope) and _valid_segment(rest)


@dataclass(frozen=True)
class PackageSpec:
    """A requested package, optionally pinned to a version, tag or range.

    Attributes:
        raw: The specification exactly as handed to the package manager.
        name: Package name, including the scope for scoped packages.
        version: Version, tag or range after the ``@`` separator, if any.
    """

    raw: str
    name: str
    version: str | None = None

    @classmethod
    def parse(cls, spec: str) -> PackageSpec:
        """Parse a specification such as ``left-pad``, ``typescript@5``
        or ``@angular/cli@^17``.

        Args:
            spec: User supplied package specification.

        Returns:
            Parsed PackageSpec.

        Raises:
            InvalidPackageSpecError: If the specification is empty or its name
                is not a single registry name (plain or ``@scope/name``).
        """
        raw = spec.strip()
        if not raw:
            raise InvalidPackageSpecError("Package specification cannot be empty")

        # A leading "@" belongs to the scope, not the version separator
        separator = raw.find("@", 1)
        if separator == -1:
            name, version = raw, None
        else:
            name, version = raw[:separator], raw[separator + 1 :] or None

        if not name or not _valid_name(name):
            raise InvalidPackageSpecError(f"Invalid package specification: '{spec}'")

        return cls(raw=raw, name=name, version=version)

    def __str__(self) -> str:
        return self.raw
