"""Helper functions for loading reference scripts.

WHY: The reference script is the authoritative wording for the captions.
People keep it next to the transcript (e.g. ``episode-12.srt`` and
``episode-12-script.txt``), so the CLI discovers it by naming convention
when no explicit path is given.

HOW: resolve_companion_script() looks for ``{stem}-script.txt`` next to
the transcript. load_script() reads a UTF-8 file and
load_reference_script() turns it into a ReferenceScript.

RULES:
- Companion file: {stem}-script.txt in the transcript's directory
- The stem is the filename with all extensions stripped
- Files are UTF-8; a leading BOM is dropped
- OSError (missing, unreadable file) propagates to the caller
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from script_captions.config import SENTENCE_DELIMITER
from script_captions.core.ir import ReferenceScript


def _stem(path: Path) -> str:
    # Strip all extensions (e.g. "episode.en.srt" → "episode")
    stem = path.name
    while "." in stem:
        stem = stem.rsplit(".", 1)[0]
    return stem


def resolve_companion_script(transcript_path: str | Path) -> Optional[Path]:
    """Return ``{stem}-script.txt`` next to the transcript, or None if it doesn't exist."""
    transcript = Path(transcript_path)
    candidate = transcript.parent / "{}-script.txt".format(_stem(transcript))
    if candidate.is_file():
        return candidate
    return None


def load_script(path: str | Path) -> str:
    """Load a reference script as text, stripped of surrounding whitespace."""
    return Path(path).read_text(encoding="utf-8-sig").strip()


def load_reference_script(path: str | Path, delimiter: str = SENTENCE_DELIMITER) -> ReferenceScript:
    """Load a reference script file and split it into sentences.

    Args:
        path: Path to the UTF-8 script file.
        delimiter: Sentence delimiter, ". " by default.

    Returns:
        The script's sentences, in order.

    Raises:
        OSError: If the file cannot be read.
    """
    return ReferenceScript.from_text(load_script(path), delimiter=delimiter)
