# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for relocation decisions and renaming."""

import pytest

from relocation import ConfigurationError, RelocationSpec


def test_ph3_rel_201_can_relocate_path_requires_source_prefix() -> None:
    spec = RelocationSpec("org.foo")

    assert spec.can_relocate_path("org/foo/Class")
    assert spec.can_relocate_path("org/foo/Class.class")
    assert spec.can_relocate_path("org/foo/bar/Class")
    assert not spec.can_relocate_path("com/foo/bar/Class")
    assert not spec.can_relocate_path("org/Foo/Class")


def test_ph3_rel_202_leading_slash_and_class_suffix_are_normalized() -> None:
    spec = RelocationSpec("x")

    assert spec.can_relocate_path("/x/y.class") == spec.can_relocate_path("x/y")
    assert spec.can_relocate_path("/x/y.class")
    assert not spec.can_relocate_path("//x/y")


def test_ph3_rel_203_excludes_block_relocation() -> None:
    spec = RelocationSpec(
        "org.foo",
        excludes=[
            "org.foo.Excluded",
            "org.foo.public.*",
            "org.foo.recurse.**",
            "org.foo.Public*Stuff",
        ],
    )

    assert spec.can_relocate_path("org/foo/Class")
    assert not spec.can_relocate_path("org/foo/Excluded")
    assert not spec.can_relocate_path("org/foo/public")
    assert not spec.can_relocate_path("org/foo/public/Class")
    assert spec.can_relocate_path("org/foo/public/sub/Class")
    assert spec.can_relocate_path("org/foo/publicRELOC/Class")
    assert spec.can_relocate_path("org/foo/PrivateStuff")
    assert not spec.can_relocate_path("org/foo/PublicStuff")
    assert not spec.can_relocate_path("org/foo/PublicUtilStuff")
    assert not spec.can_relocate_path("org/foo/recurse")
    assert not spec.can_relocate_path("org/foo/recurse/Class")
    assert not spec.can_relocate_path("org/foo/recurse/sub/Class")


def test_ph3_rel_204_includes_limit_relocation() -> None:
    spec = RelocationSpec(
        "org.foo",
        includes=["org.foo.Included", "org.foo.public.*", "org.foo.recurse.**"],
    )

    assert not spec.can_relocate_path("org/foo/Class")
    assert spec.can_relocate_path("org/foo/Included")
    assert spec.can_relocate_path("org/foo/public")
    assert spec.can_relocate_path("org/foo/public/Class")
    assert spec.can_relocate_path("org/foo/recurse/sub/Class")


def test_ph3_rel_205_include_subtree_with_excluded_subpackage() -> None:
    spec = RelocationSpec("com.foo", includes=["com/foo/**"], excludes=["com/foo/impl/**"])

    assert not spec.can_relocate_path("com/foo/impl/X")
    assert spec.can_relocate_path("com/foo/Bar")


def test_ph3_rel_206_can_relocate_class_rejects_paths() -> None:
    spec = RelocationSpec("org.foo", excludes=["org.foo.Excluded"])

    assert spec.can_relocate_class("org.foo.Class")
    assert spec.can_relocate_class("org.foo.bar.Class")
    assert not spec.can_relocate_class("org/foo/Class")
    assert not spec.can_relocate_class("com.foo.Class")
    assert not spec.can_relocate_class("org.foo.Excluded")


def test_ph3_rel_207_relocate_class_uses_target_namespace() -> None:
    spec = RelocationSpec("com.foo", "com.foo.shaded")

    assert spec.relocate_class("com.foo.Bar") == "com.foo.shaded.Bar"


def test_ph3_rel_208_default_target_uses_hidden_prefix() -> None:
    spec = RelocationSpec("org.foo")

    assert spec.relocate_class("org.foo.Class") == "hidden.org.foo.Class"
    assert spec.relocate_path("org/foo/Class.class") == "hidden/org/foo/Class.class"
    assert spec.shaded_pattern == "hidden.org.foo"
    assert spec.shaded_path_pattern == "hidden/org/foo"


def test_ph3_rel_209_normal_mode_renames_first_occurrence_only() -> None:
    spec = RelocationSpec("a.b", "x.y")

    assert spec.relocate_path("a/b/c/a/b/d") == "x/y/c/a/b/d"
    assert spec.relocate_class("a.b.c.a.b.D") == "x.y.c.a.b.D"


def test_ph3_rel_210_class_pattern_dots_are_literal() -> None:
    spec = RelocationSpec("org.foo", "org.bar")

    assert spec.relocate_class("org.foo.orgXfoo.C") == "org.bar.orgXfoo.C"


def test_ph3_rel_211_relocated_path_leaves_source_namespace() -> None:
    spec = RelocationSpec("org.foo", "org.shaded.foo")
    original = "org/foo/Bar.class"

    relocated = spec.relocate_path(original)

    assert spec.can_relocate_path(original)
    assert relocated == "org/shaded/foo/Bar.class"
    assert not spec.can_relocate_path(relocated)


def test_ph3_rel_212_raw_mode_replaces_globally() -> None:
    spec = RelocationSpec("a/b", "x/y", raw_string=True)

    assert spec.can_relocate_path("META-INF/a/b/c")
    assert not spec.can_relocate_path("META-INF/a/c")
    assert spec.relocate_path("a/b/c/a/b/d") == "x/y/c/x/y/d"


def test_ph3_rel_213_raw_mode_supports_regex_groups() -> None:
    spec = RelocationSpec(
        r"^META-INF/(\w+)/", r"META-INF/shaded-\1/", raw_string=True
    )

    assert spec.can_relocate_path("META-INF/services/org.foo.Spi")
    assert spec.relocate_path("META-INF/services/org.foo.Spi") == (
        "META-INF/shaded-services/org.foo.Spi"
    )


def test_ph3_rel_214_raw_mode_leaves_classes_and_sources_alone() -> None:
    spec = RelocationSpec("org.foo", "org.shaded", raw_string=True)

    assert not spec.can_relocate_class("org.foo.Class")
    assert spec.relocate_class("org.foo.Class") == "org.foo.Class"
    assert spec.apply_to_source_content("import org.foo.Class;") == (
        "import org.foo.Class;"
    )
    assert spec.pattern is None
    assert spec.path_pattern == "org.foo"


def test_ph3_rel_215_exposes_normalized_configuration() -> None:
    spec = RelocationSpec(
        "org/foo", "org/shaded/foo", includes=["org.foo.*"], excludes=["org.foo.impl.*"]
    )

    assert spec.pattern == "org.foo"
    assert spec.path_pattern == "org/foo"
    assert spec.shaded_pattern == "org.shaded.foo"
    assert spec.shaded_path_pattern == "org/shaded/foo"
    assert spec.includes == {"org.foo.*", "org/foo/*", "org/foo"}
    assert spec.source_package_excludes == {".impl"}
    assert spec.source_path_excludes == {"/impl"}
    assert not spec.raw_string


def test_ph3_rel_216_missing_pattern_defaults_to_empty_namespace() -> None:
    spec = RelocationSpec(None)

    assert spec.pattern == ""
    assert spec.path_pattern == ""
    assert spec.can_relocate_path("any/Thing")
    assert spec.apply_to_source_content("import any.Thing;") == "import any.Thing;"


def test_ph3_rel_217_blank_globs_fail_at_construction() -> None:
    with pytest.raises(ConfigurationError):
        RelocationSpec("org.foo", excludes=["org.foo.impl.*", "/"])


def test_ph3_rel_218_malformed_raw_pattern_fails_at_construction() -> None:
    with pytest.raises(ConfigurationError):
        RelocationSpec("org(foo", "x", raw_string=True)
