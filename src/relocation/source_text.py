# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Rename namespace references inside free-form source text."""

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")

# Text ending in ".", "/" or a space reads as the middle of a longer name.
_ENDS_WITH_CONTINUATION = re.compile(r"[./ ]$")

_ENDS_WITH_KEYWORD = re.compile(
    r"\b(?:import|package|public|protected|private|static|final|synchronized"
    r"|abstract|volatile) $"
)

# Javadoc links and "see" references, optionally wrapped onto "*" lines.
_ENDS_WITH_DOC_REFERENCE = re.compile(
    r"(?:\{@link(?:plain)?|@see|(?://+|/\*+|\*|#) see)(?: \*)* $"
)


@dataclass(frozen=True)
class Occurrence:
    """Represent one pattern occurrence and its surrounding segments.

    Attributes:
        preceding: Text between the previous occurrence (or text start) and
            this one.
        following: Text between this occurrence and the next one (or text end).
    """

    preceding: str
    following: str


def iter_occurrences(text: str, pattern: str) -> Iterator[Occurrence]:
    """Yield whole-word literal occurrences of a pattern.

    Args:
        text: Source text.
        pattern: Literal namespace spelling.

    Yields:
        One occurrence per match, in text order.
    """
    matcher = re.compile(rf"\b{re.escape(pattern)}\b")
    segment_start = 0
    pending: tuple[str, int] | None = None
    for match in matcher.finditer(text):
        if pending is not None:
            preceding, following_start = pending
            yield Occurrence(
                preceding=preceding, following=text[following_start : match.start()]
            )
        pending = (text[segment_start : match.start()], match.end())
        segment_start = match.end()
    if pending is not None:
        preceding, following_start = pending
        yield Occurrence(preceding=preceding, following=text[following_start:])


def should_keep(occurrence: Occurrence, excluded_suffixes: Iterable[str]) -> bool:
    """Decide whether an occurrence must keep its original spelling.

    Exclusion suffixes win over everything else. Doc references and keyword
    contexts are renamed; any other context ending in a separator or a space
    is kept.

    Args:
        occurrence: Pattern occurrence.
        excluded_suffixes: Sub-namespace suffixes that must not be renamed.

    Returns:
        True when the occurrence must stay unchanged.
    """
    if any(occurrence.following.startswith(suffix) for suffix in excluded_suffixes):
        return True
    one_line = _WHITESPACE_RUN.sub(" ", occurrence.preceding)
    if _ENDS_WITH_DOC_REFERENCE.search(one_line):
        return False
    if _ENDS_WITH_KEYWORD.search(one_line):
        return False
    return _ENDS_WITH_CONTINUATION.search(one_line) is not None


def relocate_source_text(
    text: str,
    pattern: str,
    shaded_pattern: str,
    excluded_suffixes: Iterable[str] = (),
) -> str:
    """Rename namespace references in source text.

    Args:
        text: Source text.
        pattern: Namespace spelling to rename.
        shaded_pattern: Replacement spelling.
        excluded_suffixes: Sub-namespace suffixes that must not be renamed.

    Returns:
        Rewritten text; unchanged when the pattern is empty.
    """
    if not pattern:
        return text
    suffixes = tuple(excluded_suffixes)
    parts: list[str] = []
    renamed = 0
    kept = 0
    for occurrence in iter_occurrences(text, pattern):
        if not parts:
            parts.append(occurrence.preceding)
        if should_keep(occurrence, suffixes):
            parts.append(pattern)
            kept += 1
        else:
            parts.append(shaded_pattern)
            renamed += 1
        parts.append(occurrence.following)
    if not parts:
        return text
    logger.debug(
        "Relocated source text (pattern=%s renamed=%s kept=%s)",
        pattern,
        renamed,
        kept,
    )
    return "".join(parts)
