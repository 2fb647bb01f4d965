# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Run the relocation copy-and-transform flow over an exploded archive tree."""

import argparse
import logging
import shutil
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from relocation import ConfigurationError, RelocationSpec
from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_SUFFIXES: tuple[str, ...] = (
    ".java",
    ".groovy",
    ".kt",
    ".scala",
    ".xml",
    ".properties",
)


@dataclass(frozen=True)
class RelocationRule:
    """Describe one configured relocation rule.

    Attributes:
        pattern: Source namespace or raw regular expression.
        shaded_pattern: Target namespace; ``None`` uses the default prefix.
        includes: Include globs.
        excludes: Exclude globs.
        raw_string: Whether the pattern is a raw regular expression.
    """

    pattern: str | None
    shaded_pattern: str | None
    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()
    raw_string: bool = False

    def build(self) -> RelocationSpec:
        """Build the relocation rule.

        Raises:
            ConfigurationError: If a glob or raw pattern is malformed.
        """
        return RelocationSpec(
            pattern=self.pattern,
            shaded_pattern=self.shaded_pattern,
            includes=list(self.includes),
            excludes=list(self.excludes),
            raw_string=self.raw_string,
        )


@dataclass(frozen=True)
class RelocationSummary:
    """Represent relocation phase counters."""

    files_copied: int
    paths_relocated: int
    sources_rewritten: int
    sources_unchanged: int
    elapsed_ms: int


class ValidationError(RuntimeError):
    """Represent user input validation failure."""


class RelocationError(RuntimeError):
    """Represent relocation phase failure."""


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(prog="relocate")
    parser.add_argument("--input", required=True, help="Exploded archive path.")
    parser.add_argument("--output", required=True, help="Output folder path.")
    parser.add_argument("--pattern", required=True, help="Namespace to relocate.")
    parser.add_argument("--shaded-pattern", default=None, help="Target namespace.")
    parser.add_argument(
        "--include", action="append", default=[], help="Include glob (repeatable)."
    )
    parser.add_argument(
        "--exclude", action="append", default=[], help="Exclude glob (repeatable)."
    )
    parser.add_argument(
        "--raw-string",
        action="store_true",
        help="Treat the pattern as a raw regular expression over paths.",
    )
    parser.add_argument(
        "--source-suffix",
        action="append",
        default=None,
        help="Suffix of files whose text is rewritten (repeatable).",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run relocation command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning("Argument parsing failed (argv=%s)", argv)
        return 2

    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    _emit_marker(console=console, phase="validation", state="start")
    try:
        input_path, output_path = _validate_paths(
            input_path=Path(args.input), output_path=Path(args.output)
        )
        source_suffixes = _validate_source_suffixes(
            args.source_suffix or DEFAULT_SOURCE_SUFFIXES
        )
    except ValidationError as exc:
        logger.warning("Validation failed (error=%s)", exc)
        stderr.write(f"{exc}\n")
        return 2

    rule = RelocationRule(
        pattern=args.pattern,
        shaded_pattern=args.shaded_pattern,
        includes=tuple(args.include),
        excludes=tuple(args.exclude),
        raw_string=args.raw_string,
    )
    try:
        relocation_spec = rule.build()
    except ConfigurationError as exc:
        logger.warning("Invalid relocation rule (error=%s)", exc)
        stderr.write(f"Invalid relocation rule: {exc}\n")
        return 2
    _emit_marker(console=console, phase="validation", state="done")

    _emit_marker(console=console, phase="relocate", state="start")
    try:
        summary = _relocate_tree(
            input_root=input_path,
            output_root=output_path,
            relocation_spec=relocation_spec,
            source_suffixes=source_suffixes,
        )
    except RelocationError as exc:
        logger.warning("Relocation failed (error=%s)", exc)
        stderr.write(f"Relocation failed: {exc}\n")
        return 2
    _emit_marker(console=console, phase="relocate", state="done")
    _emit_summary(
        console=console,
        summary={
            "files_copied": summary.files_copied,
            "paths_relocated": summary.paths_relocated,
            "sources_rewritten": summary.sources_rewritten,
            "sources_unchanged": summary.sources_unchanged,
            "elapsed_ms": summary.elapsed_ms,
        },
    )
    console.print("status=success")
    return 0


def _emit_marker(console: Console, phase: str, state: str) -> None:
    console.print(f"{phase}:{state}")


def _emit_summary(console: Console, summary: dict[str, int]) -> None:
    fields = " ".join(f"{key}={value}" for key, value in summary.items())
    console.print(fields)


def _validate_paths(input_path: Path, output_path: Path) -> tuple[Path, Path]:
    """Validate required input and output path constraints.

    Args:
        input_path: Input path from user args.
        output_path: Output path from user args.

    Returns:
        Normalized absolute input and output paths.

    Raises:
        ValidationError: If path constraints are not met.
    """
    input_abs = input_path.resolve()
    output_abs = output_path.resolve()

    if not input_abs.exists():
        raise ValidationError(f"Input path does not exist: {input_abs}")
    if not input_abs.is_dir():
        raise ValidationError(f"Input path must be a directory: {input_abs}")
    if output_abs.exists() and not output_abs.is_dir():
        raise ValidationError(f"Output path must be a directory: {output_abs}")
    if output_abs.exists() and output_abs.is_dir() and any(output_abs.iterdir()):
        raise ValidationError(f"Output path must be empty: {output_abs}")
    if input_abs == output_abs:
        raise ValidationError("Input and output paths must not overlap")
    if input_abs in output_abs.parents or output_abs in input_abs.parents:
        raise ValidationError("Input and output paths must not overlap")
    return input_abs, output_abs


def _validate_source_suffixes(suffixes: list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Validate suffixes of files whose text is rewritten.

    Suffixes are compared with ``Path.suffix``, so each one has to be a single
    dot followed by at least one character and no further dot or separator.

    Raises:
        ValidationError: If a suffix could never match a file.
    """
    for suffix in suffixes:
        if Path(f"entry{suffix}").suffix != suffix:
            raise ValidationError(f"Invalid source suffix: {suffix!r}")
    return tuple(suffixes)


def _relocate_tree(
    input_root: Path,
    output_root: Path,
    relocation_spec: RelocationSpec,
    source_suffixes: tuple[str, ...],
) -> RelocationSummary:
    """Copy a tree, relocating entry paths and rewriting source text.

    Args:
        input_root: Exploded archive root.
        output_root: Target root.
        relocation_spec: Relocation rule to apply.
        source_suffixes: Suffixes of files whose text is rewritten.

    Returns:
        Relocation summary counters.

    Raises:
        RelocationError: If reading or writing fails, or two entries relocate
            onto the same path.
    """
    started = time.monotonic()
    files_copied = 0
    paths_relocated = 0
    sources_rewritten = 0
    sources_unchanged = 0
    claimed: dict[str, str] = {}

    files = sorted(
        path
        for path in input_root.rglob("*")
        if path.is_file() and ".git" not in path.relative_to(input_root).parts
    )
    for file_path in files:
        entry = file_path.relative_to(input_root).as_posix()
        destination_entry = entry
        if relocation_spec.can_relocate_path(entry):
            destination_entry = relocation_spec.relocate_path(entry)
        if destination_entry in claimed:
            raise RelocationError(
                f"Entries {claimed[destination_entry]} and {entry} both relocate to "
                f"{destination_entry}"
            )
        claimed[destination_entry] = entry
        if destination_entry != entry:
            paths_relocated += 1

        destination = output_root / destination_entry
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            if file_path.suffix not in source_suffixes:
                shutil.copy2(file_path, destination)
            else:
                source = _read_source(file_path)
                transformed = relocation_spec.apply_to_source_content(source)
                if transformed == source:
                    sources_unchanged += 1
                    shutil.copy2(file_path, destination)
                else:
                    sources_rewritten += 1
                    _write_source(destination, transformed)
        except OSError as exc:
            logger.warning("Failed relocating entry (path=%s error=%s)", entry, exc)
            raise RelocationError(str(exc)) from exc
        files_copied += 1

    elapsed_ms = int(round((time.monotonic() - started) * 1000))
    return RelocationSummary(
        files_copied=files_copied,
        paths_relocated=paths_relocated,
        sources_rewritten=sources_rewritten,
        sources_unchanged=sources_unchanged,
        elapsed_ms=elapsed_ms,
    )


def _read_source(path: Path) -> str:
    """Read source text keeping line endings and undecodable bytes.

    Non UTF-8 bytes (e.g. ISO-8859-1 ``.properties``) are carried as surrogate
    escapes so they are written back unchanged.
    """
    with path.open(encoding="utf-8", errors="surrogateescape", newline="") as handle:
        return handle.read()


def _write_source(path: Path, text: str) -> None:
    with path.open(
        "w", encoding="utf-8", errors="surrogateescape", newline=""
    ) as handle:
        handle.write(text)


def main() -> None:
    """Run relocation CLI."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
