# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Include and exclude filtering of relocation candidates."""

import logging
from collections.abc import Iterable

from relocation.globbing import GlobMatcher

logger = logging.getLogger(__name__)

_SUBTREE_SUFFIXES = ("/*", "/**")


def normalize_patterns(patterns: Iterable[str] | None) -> frozenset[str]:
    """Normalize include or exclude globs to path spelling.

    Every glob is converted to ``/`` separators. Subtree globs (``a/b/*`` and
    ``a/b/**``) also contribute their root (``a/b``). The unmodified inputs are
    kept as well, so globs such as ``META-INF/maven/org.foo`` still match.

    Args:
        patterns: Configured globs; ``None`` means none.

    Returns:
        Normalized glob set.
    """
    if not patterns:
        return frozenset()
    normalized: set[str] = set()
    for pattern in patterns:
        normalized.add(pattern)
        path_pattern = pattern.replace(".", "/")
        normalized.add(path_pattern)
        if path_pattern.endswith(_SUBTREE_SUFFIXES):
            root = path_pattern[: path_pattern.rindex("/")]
            if root:
                normalized.add(root)
    return frozenset(normalized)


class PathSelector:
    """Decide whether a path passes include and exclude globs."""

    def __init__(self, includes: Iterable[str], excludes: Iterable[str]) -> None:
        """Compile include and exclude globs.

        Args:
            includes: Normalized include globs; empty includes everything.
            excludes: Normalized exclude globs; empty excludes nothing.

        Raises:
            ConfigurationError: If any glob is malformed.
        """
        self._includes = GlobMatcher(includes)
        self._excludes = GlobMatcher(excludes)

    def is_included(self, path: str) -> bool:
        if not self._includes:
            return True
        return self._includes.matches(path)

    def is_excluded(self, path: str) -> bool:
        return self._excludes.matches(path)

    def accepts(self, path: str) -> bool:
        """Check that a path is included and not excluded."""
        return self.is_included(path) and not self.is_excluded(path)
