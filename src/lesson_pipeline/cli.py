"""CLI entrypoint for the lesson annotation pipeline."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from lesson_pipeline.config import GLOBAL_DEFAULT_TARGET, PipelineConfig
from lesson_pipeline.io.json_io import write_lesson_json
from lesson_pipeline.io.text_source import read_lesson_text
from lesson_pipeline.pipeline import PipelineResult, run_pipeline
from lesson_pipeline.reporting.report_md import (
    build_report_md,
    collect_phoneme_counts,
    words_without_hints,
)


def _cell(value: str) -> str:
    # Phonemes and explanations are free text; keep each cell on one line.
    return " ".join(value.split()).replace("|", "\\|")


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Cell values are flattened to a single line and ``|`` is escaped so the
    column separators stay unambiguous.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    cells = [[_cell(value) for value in row] for row in [headers, *data_rows]]
    widths = [max(len(row[idx]) for row in cells) for idx in range(len(headers))]
    lines = [" | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in cells]
    lines.insert(1, "-+-".join("-" * width for width in widths))
    return "\n".join(line.rstrip() for line in lines)


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the annotate command.
    """

    parser = argparse.ArgumentParser(
        description="Segment a lesson and annotate its words with pronunciation hints."
    )
    parser.add_argument(
        "--input", required=True, type=Path, help="Lesson text (.txt/.md) or PDF file."
    )
    parser.add_argument("--output", required=True, type=Path, help="Destination JSON path.")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Markdown report output path (default: report.md next to the JSON).",
    )
    parser.add_argument(
        "--target",
        default=GLOBAL_DEFAULT_TARGET,
        help=f"Language being learned (default: {GLOBAL_DEFAULT_TARGET}).",
    )
    parser.add_argument(
        "--native",
        default=None,
        help="Learner's native language (default: the target's default).",
    )
    parser.add_argument("--page-start", type=int, default=1, help="1-based start page for PDFs.")
    parser.add_argument("--page-end", type=int, default=None, help="1-based end page for PDFs.")
    parser.add_argument(
        "--no-strict",
        action="store_true",
        help="Skip re-checking match invariants for every word.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _print_output_analysis(result: PipelineResult) -> None:
    """Print phoneme usage and unannotated words for an annotated lesson."""

    if not result.annotations:
        print("No words parsed; skipping output analysis.")
        return

    phoneme_counts = collect_phoneme_counts(result)
    phoneme_rows = [
        [letters, phoneme, str(count)]
        for (letters, phoneme), count in sorted(
            phoneme_counts.items(), key=lambda item: (-item[1], item[0])
        )
    ]
    print("\nPronunciation hints used:")
    print(_format_table(["letters", "phoneme", "count"], phoneme_rows))

    unannotated = words_without_hints(result)
    if unannotated:
        print(f"\nWARNING: {len(unannotated)} words without hints: {', '.join(unannotated)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.input.exists():
        raise SystemExit(f"Lesson file not found: {args.input}")

    try:
        text = read_lesson_text(args.input, page_start=args.page_start, page_end=args.page_end)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    report_path = args.report if args.report is not None else args.output.parent / "report.md"
    config = PipelineConfig(
        target_lang=args.target,
        native_lang=args.native,
        strict=not args.no_strict,
    )

    result = run_pipeline(text, config)

    write_lesson_json(result, output_path=args.output)
    report_path.write_text(build_report_md(result), encoding="utf-8")

    sentence_count = sum(len(paragraph.sentences) for paragraph in result.lesson.paragraphs)
    print(f"Lesson: {result.lesson.title}")
    print(
        f"Wrote {len(result.lesson.paragraphs)} paragraphs, {sentence_count} sentences, "
        f"{len(result.annotations)} words to {args.output}"
    )
    print(f"Wrote report to {report_path}")
    _print_output_analysis(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
