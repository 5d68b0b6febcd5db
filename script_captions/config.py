"""Configuration constants, file formats, and .env loading.

WHY: Chunk size, style preset, timing strictness and fade durations are
the knobs people tune between videos. Keeping them as plain module-level
values (overridable from the environment) means nobody has to dig
through the compiler to change them.

HOW: python-dotenv loads the .env file on import. Constants are read
from os.environ with hard-coded fallbacks. CaptionOptions bundles the
per-run knobs so the CLI and the HTTP layer pass one value around.

RULES:
- DEFAULT_CHUNK_SIZE is the number of words per caption (default 4)
- DEFAULT_STRICT_TIMING=false keeps the lenient zero-duration fallback
- SENTENCE_DELIMITER splits the reference script (". ")
- All defaults can be overridden via environment variables
- A non-integer numeric variable fails with a ValueError naming it
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            "Environment variable {} must be an integer, got {!r}".format(name, raw)
        ) from None


# ---------------------------------------------------------------------------
# Supported input files
# ---------------------------------------------------------------------------

TRANSCRIPT_EXTENSIONS: set[str] = {".srt"}
"""Timestamped transcript extensions accepted by the CLI and API."""

SCRIPT_EXTENSIONS: set[str] = {".txt"}
"""Reference script extensions accepted by the API upload."""

SENTENCE_DELIMITER = ". "

# ---------------------------------------------------------------------------
# Caption defaults
# ---------------------------------------------------------------------------

DEFAULT_CHUNK_SIZE = _env_int("CAPTIONS_CHUNK_SIZE", "4")
DEFAULT_STYLE = os.getenv("CAPTIONS_STYLE", "shorts")
DEFAULT_STRICT_TIMING = _env_bool("CAPTIONS_STRICT_TIMING", "false")
DEFAULT_FADE_IN_MS = _env_int("CAPTIONS_FADE_IN_MS", "150")
DEFAULT_FADE_OUT_MS = _env_int("CAPTIONS_FADE_OUT_MS", "150")


@dataclass(frozen=True)
class CaptionOptions:
    """Per-run settings shared by the pipeline, CLI, and HTTP API.

    RULES:
    - chunk_size: words per dialogue event, must be >= 1
    - style: key into script_captions.styles.STYLES
    - strict_timing: raise on malformed timing lines instead of using 0.0
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    style: str = DEFAULT_STYLE
    strict_timing: bool = DEFAULT_STRICT_TIMING
