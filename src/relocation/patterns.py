# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Normalize relocation namespace patterns into dotted and path spellings."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_SHADED_PREFIX = "hidden"

_PACKAGE_SUBTREE_SUFFIX = re.compile(r"\.\*\*?$")
_PATH_SUBTREE_SUFFIX = re.compile(r"/\*\*?$")


@dataclass(frozen=True)
class NamespacePattern:
    """Store both spellings of one namespace.

    Attributes:
        dotted: Class-name spelling, e.g. ``org.foo``.
        path: Resource-path spelling, e.g. ``org/foo``.
    """

    dotted: str
    path: str

    @classmethod
    def parse(cls, text: str | None) -> "NamespacePattern":
        """Derive both spellings from either separator style.

        Args:
            text: Namespace in dotted or path spelling; ``None`` is empty.

        Returns:
            Namespace pattern.
        """
        if text is None:
            return cls(dotted="", path="")
        return cls(dotted=text.replace("/", "."), path=text.replace(".", "/"))

    def prefixed(self, prefix: str) -> "NamespacePattern":
        """Return this namespace nested below a prefix namespace."""
        return NamespacePattern(
            dotted=f"{prefix}.{self.dotted}",
            path=f"{prefix}/{self.path}",
        )


def resolve_patterns(
    pattern: str | None, shaded_pattern: str | None
) -> tuple[NamespacePattern, NamespacePattern]:
    """Resolve source and target namespaces of one rule.

    Args:
        pattern: Source namespace.
        shaded_pattern: Target namespace; defaults to the source below
            ``DEFAULT_SHADED_PREFIX``.

    Returns:
        Source and target namespace patterns.
    """
    source = NamespacePattern.parse(pattern)
    if shaded_pattern is None:
        target = source.prefixed(DEFAULT_SHADED_PREFIX)
    else:
        target = NamespacePattern.parse(shaded_pattern)
    return source, target


def derive_source_excludes(
    source: NamespacePattern, excludes: Iterable[str]
) -> tuple[frozenset[str], frozenset[str]]:
    """Collect exclusion suffixes for source text relocation.

    Only excludes nested in the source namespace contribute; each one is
    reduced to the part following the source namespace.

    Args:
        source: Source namespace.
        excludes: Normalized exclude patterns.

    Returns:
        Package-spelling suffixes and path-spelling suffixes.
    """
    package_excludes: set[str] = set()
    path_excludes: set[str] = set()
    for exclude in excludes:
        if exclude.startswith(source.dotted):
            remainder = exclude[len(source.dotted) :]
            package_excludes.add(_PACKAGE_SUBTREE_SUFFIX.sub("", remainder, count=1))
        if exclude.startswith(source.path):
            remainder = exclude[len(source.path) :]
            path_excludes.add(_PATH_SUBTREE_SUFFIX.sub("", remainder, count=1))
    return frozenset(package_excludes), frozenset(path_excludes)
