"""Styled caption compiler — re-chunk captions into short, timed word groups.

WHY: Burned-in captions on vertical video read best as a few words at a
time. A transcript cue may hold a whole sentence; this module splits
each cue into groups of ``chunk_size`` words and shares the cue's window
between them in proportion to word count, so the groups play back to
back without overlapping.

HOW: A state machine over the SRT line stream (see lines.py). Its state
is local to one compile_captions() call:
  window_start / window_end — the current timing window
  buffer                    — content text accumulated since the last flush
Line handling:
  INDEX   — ignored
  TIMING  — flush under the previous window, then open the new window
  CONTENT — appended to the buffer
  BLANK   — flush under the current window
End of input flushes under the current window.

Flush (chunk_words()):
  1. Split the buffer on whitespace; no words → nothing
  2. per_word = (window_end - window_start) / word_count
  3. Group i covers words [i*k, min((i+1)*k, n)):
       start = window_start + i*k*per_word
       end   = window_start + min((i+1)*k, n)*per_word
  4. Clamp: start = max(start, last_end), end = min(end, window_end)
  5. last_end starts at 0 for every flush, so the no-overlap guarantee
     holds within one window only; overlap across windows is accepted

RULES:
- ceil(word_count / chunk_size) events per flushed window
- Within a window, event[i].end <= event[i+1].start
- Events never end after their window's end
- Each event carries the style's \\fad tag
- chunk_size < 1 raises ValueError
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from script_captions.config import DEFAULT_CHUNK_SIZE
from script_captions.core.ir import (
    CaptionChunk,
    DialogueEvent,
    StyledSubtitleDocument,
    TranscriptDocument,
)
from script_captions.core.lines import LineKind, classify_lines
from script_captions.core.timing import parse_timing_line
from script_captions.styles import STYLE_SHORTS, AssStyle

logger = logging.getLogger(__name__)


def chunk_words(
    text: str,
    window_start: float,
    window_end: float,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> List[CaptionChunk]:
    """Split ``text`` into word groups and share the window between them.

    Args:
        text: The accumulated cue text.
        window_start: Start of the cue window in seconds.
        window_end: End of the cue window in seconds.
        chunk_size: Words per group.

    Returns:
        One CaptionChunk per group, in order. Empty for blank text.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1, got {}".format(chunk_size))

    words = text.split()
    if not words:
        return []

    word_count = len(words)
    per_word = (window_end - window_start) / word_count

    chunks: List[CaptionChunk] = []
    last_end = 0.0
    for first in range(0, word_count, chunk_size):
        last = min(first + chunk_size, word_count)
        start = max(window_start + first * per_word, last_end)
        end = min(window_start + last * per_word, window_end)
        chunks.append(CaptionChunk(start=start, end=end, words=tuple(words[first:last])))
        last_end = end
    return chunks


def format_event_text(words: List[str], style: AssStyle) -> str:
    """Escape words for an ASS Text field and prefix the fade tag.

    Braces would open an override block, and a raw newline would end the
    event, so braces are removed and newlines become ``\\N``.
    """
    text = " ".join(words)
    text = text.replace("{", "").replace("}", "").replace("\n", "\\N")
    if style.uppercase:
        text = text.upper()
    return style.fade_tag + text


def compile_captions(
    source: Union[TranscriptDocument, str],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    style: Optional[AssStyle] = None,
    strict: bool = False,
) -> StyledSubtitleDocument:
    """Compile an (aligned) transcript into a styled ASS document.

    Args:
        source: A TranscriptDocument, or raw SRT text.
        chunk_size: Words per dialogue event (default 4).
        style: Style preset for the header and fade tag (default "shorts").
        strict: Only used for raw SRT text: raise on malformed timing.

    Returns:
        The StyledSubtitleDocument, ready to render().
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1, got {}".format(chunk_size))
    if style is None:
        style = STYLE_SHORTS

    lines = source.iter_lines() if isinstance(source, TranscriptDocument) else source

    events: List[DialogueEvent] = []
    window_start = 0.0
    window_end = 0.0
    buffer: List[str] = []

    def flush() -> None:
        if not buffer:
            return
        for chunk in chunk_words(" ".join(buffer), window_start, window_end, chunk_size):
            events.append(DialogueEvent(
                start=chunk.start,
                end=chunk.end,
                style=style.name,
                text=format_event_text(list(chunk.words), style),
            ))
        buffer.clear()

    for line in classify_lines(lines):
        if line.kind is LineKind.TIMING:
            flush()
            window_start, window_end = parse_timing_line(
                line.raw, strict=strict, line_number=line.number
            )
        elif line.kind is LineKind.CONTENT:
            buffer.append(line.raw.strip())
        elif line.kind is LineKind.BLANK:
            flush()
    flush()

    logger.info("Compiled %d dialogue events (chunk size %d)", len(events), chunk_size)
    return StyledSubtitleDocument(style=style, events=tuple(events))
