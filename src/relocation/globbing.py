# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Ant-style glob matching over ``/``-delimited paths."""

import logging
import re
from collections.abc import Iterable

import pathspec

logger = logging.getLogger(__name__)

# Final segment appended to both glob and path. Gitignore patterns match a
# path and everything below it; the sentinel forces whole-path matches.
_END_OF_PATH = "\x00"

_LITERAL_ESCAPES = str.maketrans({"\\": "\\\\", "[": "\\[", "]": "\\]"})


class ConfigurationError(ValueError):
    """Represent an invalid relocation rule configuration."""


class GlobMatcher:
    """Match paths against a fixed set of Ant-style globs.

    ``*`` matches within one segment, ``?`` matches one character and ``**``
    matches zero or more whole segments. Every other character, brackets
    included, matches itself. A glob has to match the whole path.
    """

    def __init__(self, globs: Iterable[str], case_sensitive: bool = True) -> None:
        """Compile globs.

        Args:
            globs: Glob patterns using ``/`` as separator.
            case_sensitive: Whether matching distinguishes letter case.

        Raises:
            ConfigurationError: If any glob is blank or malformed.
        """
        self._globs = tuple(sorted(set(globs)))
        self._case_sensitive = case_sensitive
        lines = [self._to_gitignore_line(glob) for glob in self._globs]
        try:
            spec = pathspec.GitIgnoreSpec.from_lines(lines)
        except (ValueError, re.error) as exc:
            raise ConfigurationError(f"Malformed glob pattern: {exc}") from exc
        for glob, pattern in zip(self._globs, spec.patterns):
            if pattern.include is None:
                raise ConfigurationError(f"Malformed glob pattern: {glob!r}")
        self._spec = spec
        logger.debug("Compiled glob matcher (count=%s)", len(self._globs))

    @property
    def globs(self) -> tuple[str, ...]:
        return self._globs

    def __bool__(self) -> bool:
        return bool(self._globs)

    def matches(self, path: str) -> bool:
        """Check whether any glob matches the path.

        Args:
            path: Candidate path using ``/`` as separator.

        Returns:
            True when at least one glob matches the whole path.
        """
        if not self._globs:
            return False
        candidate = path.strip("/")
        if not self._case_sensitive:
            candidate = candidate.lower()
        if candidate:
            candidate = f"{candidate}/{_END_OF_PATH}"
        else:
            candidate = _END_OF_PATH
        return self._spec.match_file(candidate)

    def _to_gitignore_line(self, glob: str) -> str:
        body = glob.strip("/")
        if not body:
            raise ConfigurationError(f"Blank glob pattern: {glob!r}")
        if not self._case_sensitive:
            body = body.lower()
        # Only "*", "?" and "**" are wildcards; brackets and backslashes are literal.
        body = body.translate(_LITERAL_ESCAPES)
        # Leading slash anchors the pattern to the root.
        return f"/{body}/{_END_OF_PATH}"


def match_path(pattern: str, path: str, case_sensitive: bool = True) -> bool:
    """Match one path against one glob.

    Args:
        pattern: Ant-style glob.
        path: Candidate path.
        case_sensitive: Whether matching distinguishes letter case.

    Returns:
        True when the glob matches the whole path.

    Raises:
        ConfigurationError: If the glob is blank or malformed.
    """
    return GlobMatcher([pattern], case_sensitive=case_sensitive).matches(path)
