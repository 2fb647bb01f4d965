# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Relocator contract shared by relocation strategies.

The ``first_relocator_for_*`` helpers are for host tools that apply several
rules in order, stopping at the first rule that accepts an entry. The
``relocate`` CLI applies a single rule and does not use them.
"""

from collections.abc import Iterable
from typing import Protocol, TypeVar


class Relocator(Protocol):
    """Define name and text relocation behavior for one rule."""

    def can_relocate_path(self, path: str) -> bool:
        """Check whether a resource path belongs to the relocated namespace."""

    def can_relocate_class(self, class_name: str) -> bool:
        """Check whether a class name belongs to the relocated namespace."""

    def relocate_path(self, path: str) -> str:
        """Rename an accepted resource path."""

    def relocate_class(self, class_name: str) -> str:
        """Rename an accepted class name."""

    def apply_to_source_content(self, source_content: str) -> str:
        """Rename namespace references in source text."""


RelocatorT = TypeVar("RelocatorT", bound=Relocator)


def first_relocator_for_path(
    relocators: Iterable[RelocatorT], path: str
) -> RelocatorT | None:
    """Return the first relocator accepting a resource path.

    Args:
        relocators: Relocators in precedence order.
        path: Resource path.

    Returns:
        First accepting relocator, or ``None``.
    """
    for relocator in relocators:
        if relocator.can_relocate_path(path):
            return relocator
    return None


def first_relocator_for_class(
    relocators: Iterable[RelocatorT], class_name: str
) -> RelocatorT | None:
    """Return the first relocator accepting a class name.

    Args:
        relocators: Relocators in precedence order.
        class_name: Fully qualified class name.

    Returns:
        First accepting relocator, or ``None``.
    """
    for relocator in relocators:
        if relocator.can_relocate_class(class_name):
            return relocator
    return None
