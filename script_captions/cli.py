"""Command-line interface for Script Captions.

WHY: The video pipeline calls this step between transcription and
burn-in: it takes the transcription's SRT and the author's script and
leaves the corrected SRT and the styled ASS next to them.

HOW: Uses argparse to accept the transcript path, an optional script
path (auto-discovered as ``{stem}-script.txt`` when omitted), output
format selection, caption options and an output directory. Runs
run_pipeline() and saves each output. Status messages go to stderr.

RULES:
- Positional argument: transcript (.srt) path
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-styled-2.ass)
- Status output goes to stderr (not stdout)
- Exit codes: 0 = success, 1 = error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from script_captions.config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_STRICT_TIMING,
    DEFAULT_STYLE,
    TRANSCRIPT_EXTENSIONS,
    CaptionOptions,
)
from script_captions.core.pipeline import run_pipeline
from script_captions.core.script import load_script, resolve_companion_script
from script_captions.formatters import FORMATTERS
from script_captions.formatters.base import FormatterOutput
from script_captions.styles import STYLES


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: People re-run the step after editing the script. Overwriting
    the previous output would lose the version they may already have
    rendered, so numeric suffixes (-styled-2.ass) keep both.

    RULES:
    - First attempt: {stem}{suffix} (e.g. episode-styled.ass)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. episode-styled-2.ass)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # "-styled.ass" → ("-styled", ".ass")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _run(args: argparse.Namespace) -> None:
    """Execute the pipeline for the parsed arguments."""
    input_path = Path(args.input_file).resolve()

    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    ext = input_path.suffix.lower()
    if ext not in TRANSCRIPT_EXTENSIONS:
        _fail("Unsupported file type '{}'. Supported formats: {}".format(
            ext, ", ".join(sorted(TRANSCRIPT_EXTENSIONS))
        ))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    format_keys: Optional[List[str]] = None
    if args.formats:
        format_keys = [f.strip() for f in args.formats.split(",")]
        for key in format_keys:
            if key not in FORMATTERS:
                _fail("Unknown format '{}'. Available formats: {}".format(
                    key, ", ".join(sorted(FORMATTERS.keys()))
                ))

    if args.style not in STYLES:
        _fail("Unknown style '{}'. Available: {}".format(args.style, ", ".join(STYLES.keys())))
    if args.chunk_size < 1:
        _fail("--chunk-size must be at least 1")

    # Script: explicit flag or auto-discovered
    script_text: Optional[str] = None
    try:
        if args.script:
            script_text = load_script(args.script)
            _status("Script: {} (explicit)".format(args.script))
        else:
            companion = resolve_companion_script(input_path)
            if companion is not None:
                script_text = load_script(companion)
                _status("Script: {} (auto-discovered)".format(companion))
            else:
                _status("No reference script found, keeping transcript wording")

        transcript_text = input_path.read_text(encoding="utf-8-sig")
    except OSError as e:
        _fail("Cannot read input: {}".format(e))

    options = CaptionOptions(
        chunk_size=args.chunk_size,
        style=args.style,
        strict_timing=args.strict_timing,
    )

    try:
        result = run_pipeline(transcript_text, script_text, format_keys, options)
    except ValueError as e:
        # includes MalformedTimingError in strict mode
        _fail(str(e))

    _status("  {} blocks, {} content lines, {} of {} script sentences used".format(
        len(result.document),
        result.document.content_line_count(),
        result.sentences_used,
        len(result.script),
    ))

    stem = input_path.stem
    saved_files: List[Path] = []
    try:
        for output in result.outputs:
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))
    except OSError as e:
        _fail("Cannot write output: {}".format(e))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Positional: input_file (required)
    - Optional: --script, --formats, --output-dir
    - Optional: --chunk-size, --style, --strict-timing/--no-strict-timing
    - Optional: -v/--verbose for log output
    """
    parser = argparse.ArgumentParser(
        prog="script_captions",
        description="Align an SRT transcript with its reference script and produce "
                    "a corrected SRT and styled ASS captions for burn-in.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the timestamped transcript (.srt).",
    )

    parser.add_argument(
        "--script",
        default=None,
        help="Path to the reference script. Defaults to {stem}-script.txt next "
             "to the transcript when it exists.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help="Words per styled caption (default: %(default)s).",
    )

    parser.add_argument(
        "--style",
        default=DEFAULT_STYLE,
        help="ASS style preset. Available: {} (default: %(default)s).".format(
            ", ".join(STYLES.keys())
        ),
    )

    parser.add_argument(
        "--strict-timing",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_STRICT_TIMING,
        help="Fail on malformed timing lines instead of using zero (default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show log output.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _run(args)


if __name__ == "__main__":
    main()
