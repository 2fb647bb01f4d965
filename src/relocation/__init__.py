# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for relocation components."""

from relocation.globbing import ConfigurationError, GlobMatcher, match_path
from relocation.patterns import DEFAULT_SHADED_PREFIX, NamespacePattern
from relocation.relocation_spec import RelocationSpec
from relocation.relocator import (
    Relocator,
    first_relocator_for_class,
    first_relocator_for_path,
)
from relocation.selectors import PathSelector, normalize_patterns
from relocation.source_text import relocate_source_text

__all__ = [
    "DEFAULT_SHADED_PREFIX",
    "ConfigurationError",
    "GlobMatcher",
    "NamespacePattern",
    "PathSelector",
    "RelocationSpec",
    "Relocator",
    "first_relocator_for_class",
    "first_relocator_for_path",
    "match_path",
    "normalize_patterns",
    "relocate_source_text",
]
