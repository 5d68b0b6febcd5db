"""Intermediate representation dataclasses for transcripts and captions.

WHY: The parser, the aligner, and the caption compiler each hand a value
to the next stage. Immutable dataclasses make that hand-off explicit:
no stage can quietly edit what an earlier stage produced, and the same
document can be formatted several times (corrected SRT, styled ASS).

HOW: Six dataclasses:
  TimedBlock             — one SRT cue (index, window, text lines)
  TranscriptDocument     — the ordered cues of one SRT file
  ReferenceScript        — the ordered sentences of a reference script
  CaptionChunk           — a re-timed group of words
  DialogueEvent          — one styled ASS event built from a chunk
  StyledSubtitleDocument — style header plus dialogue events (ASS)

RULES:
- All times are float seconds
- Every dataclass is frozen; sequences are tuples
- TimedBlock.timing_line keeps the raw "start --> end" line when the
  block came from a parsed file, so re-serialisation is byte-identical
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from script_captions.core.timing import format_ass_timestamp, format_srt_timestamp
from script_captions.styles import AssStyle


@dataclass(frozen=True)
class TimedBlock:
    """One timestamped caption cue.

    RULES:
    - index: the SRT sequence number, or None when absent (not validated)
    - start / end: window in float seconds (start <= end for valid input)
    - text: the cue's content lines, in order
    - timing_line: raw source timing line, or None for built blocks
    """

    start: float
    end: float
    text: Tuple[str, ...] = ()
    index: Optional[int] = None
    timing_line: Optional[str] = None

    def render_timing_line(self) -> str:
        """Return the block's ``start --> end`` line.

        The raw source line wins when present; otherwise the window is
        formatted as ``HH:MM:SS,mmm --> HH:MM:SS,mmm``.
        """
        if self.timing_line is not None:
            return self.timing_line
        return "{} --> {}".format(
            format_srt_timestamp(self.start), format_srt_timestamp(self.end)
        )


@dataclass(frozen=True)
class TranscriptDocument:
    """The parsed content of one timestamped transcript (SRT) file.

    WHY: Both the aligner and the compiler work on the SRT line stream,
    but callers want a structured value they can inspect and test.
    TranscriptDocument is both: a tuple of blocks that can replay itself
    as SRT lines.

    RULES:
    - blocks keep source order; nothing is sorted or merged
    - iter_lines() yields index, timing, content lines, then one blank
      line per block (the index line only when the block has one)
    - to_srt() joins iter_lines() with "\\n"
    """

    blocks: Tuple[TimedBlock, ...] = ()

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[TimedBlock]:
        return iter(self.blocks)

    def content_line_count(self) -> int:
        return sum(len(block.text) for block in self.blocks)

    def iter_lines(self) -> Iterator[str]:
        for block in self.blocks:
            if block.index is not None:
                yield str(block.index)
            yield block.render_timing_line()
            for line in block.text:
                yield line
            yield ""

    def to_srt(self) -> str:
        return "\n".join(self.iter_lines())


@dataclass(frozen=True)
class ReferenceScript:
    """Ordered sentences from the authoritative reference script.

    WHY: The aligner consumes sentences left to right. Holding them in a
    frozen tuple means a run cannot "use up" the script for later runs.

    HOW: from_text() splits on the sentence delimiter (". "), collapses
    whitespace inside each piece to single spaces, and drops empty pieces.

    RULES:
    - The delimiter itself is not kept ("One. Two." → "One", "Two.")
    - Empty pieces (blank text, trailing delimiter) are dropped
    - A sentence never contains a line break; each one fills exactly one
      SRT content line
    """

    sentences: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.sentences)

    @classmethod
    def from_text(cls, text: str, delimiter: str = ". ") -> "ReferenceScript":
        pieces = (" ".join(piece.split()) for piece in text.split(delimiter))
        return cls(sentences=tuple(piece for piece in pieces if piece))


@dataclass(frozen=True)
class CaptionChunk:
    """A group of consecutive words with its share of the block window."""

    start: float
    end: float
    words: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        return " ".join(self.words)


@dataclass(frozen=True)
class DialogueEvent:
    """One timed, styled caption entry in the ASS [Events] section.

    RULES:
    - text is already escaped and carries the fade override tag
    - layer, margins, name and effect are left at ASS defaults
    """

    start: float
    end: float
    style: str
    text: str
    layer: int = 0

    def render(self) -> str:
        return "Dialogue: {},{},{},{},,0,0,0,,{}".format(
            self.layer,
            format_ass_timestamp(self.start),
            format_ass_timestamp(self.end),
            self.style,
            self.text,
        )


@dataclass(frozen=True)
class StyledSubtitleDocument:
    """A complete ASS document: one style header and ordered events.

    RULES:
    - The header is rendered verbatim from the style preset
    - render() ends with a trailing newline
    """

    style: AssStyle
    events: Tuple[DialogueEvent, ...] = ()

    def __len__(self) -> int:
        return len(self.events)

    def render(self) -> str:
        lines = [self.style.render_header()]
        lines.extend(event.render() for event in self.events)
        return "\n".join(lines) + "\n"
