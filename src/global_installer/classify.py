"""Classification of failed installs from package manager diagnostics.

npm reports most failures with the same exit status, so the only signal for
*why* an install failed is the error code it prints to stderr. Matching on
that text is best-effort: the format is an npm convention, not a contract,
and may change between npm releases. Unmatched failures fall back to the
generic install failure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from global_installer.errors import (
    PackageError,
    PackageInstallFailedError,
    PackageNotFoundError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_RULES",
    "ClassificationRule",
    "OutcomeClassifier",
    "stderr_contains",
]


@dataclass(frozen=True)
class ClassificationRule:
    """Maps diagnostic text matching ``predicate`` to an error type."""

    predicate: Callable[[str], bool]
    error: Callable[[str], PackageError]
    description: str = ""


def stderr_contains(marker: str) -> Callable[[str], bool]:
    """Build a predicate matching text that contains ``marker``."""

    def predicate(text: str) -> bool:
        return marker in text

    return predicate


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        predicate=stderr_contains("code E404"),
        error=PackageNotFoundError,
        description="npm E404: package not found",
    ),
)


class OutcomeClassifier:
    """Chooses the error for a failed install from an ordered rule list.

    The first matching rule wins. New heuristics are added by passing extra
    rules, without touching the installer.
    """

    def __init__(
        self,
        rules: Iterable[ClassificationRule] = DEFAULT_RULES,
        fallback: Callable[[str], PackageError] = PackageInstallFailedError,
    ) -> None:
        self.rules = tuple(rules)
        self.fallback = fallback

    def with_rules(self, *rules: ClassificationRule) -> OutcomeClassifier:
        """Return a classifier that checks ``rules`` before the existing ones."""
        return OutcomeClassifier((*rules, *self.rules), self.fallback)

    def classify(self, package: str, stderr: str) -> PackageError:
        """Get the error for a failed install.

        Args:
            package: Package specification being installed.
            stderr: Captured standard error of the package manager.

        Returns:
            Error from the first matching rule, else the fallback error.
        """
        for rule in self.rules:
            if rule.predicate(stderr):
                logger.debug("Classified failure of %s as: %s", package, rule.description)
                return rule.error(package)
        return self.fallback(package)
