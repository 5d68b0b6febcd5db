"""Timestamped-transcript (SRT) parser.

WHY: Transcription tools hand us SRT text: an index line, a
``start --> end`` timing line, one or more text lines, and a blank line
between cues. Everything downstream wants that as structured blocks.

HOW: A small state machine over classified lines (see lines.py):
  INDEX   — remembered as the next block's index
  TIMING  — closes any open block, opens a new one with the parsed window
  CONTENT — appended to the open block (opening a 0–0 block if needed)
  BLANK   — closes the open block
End of input closes the last block.

RULES:
- Blocks come out in document order; nothing is reordered or validated
- Malformed timing is lenient by default (0.0, logged); strict=True
  raises MalformedTimingError with the line number
- The raw timing line is kept on each block for byte-identical output
- A line made only of digits is always an index line, even inside a cue
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from script_captions.core.ir import TimedBlock, TranscriptDocument
from script_captions.core.lines import LineKind, classify_lines
from script_captions.core.timing import parse_timing_line

logger = logging.getLogger(__name__)


@dataclass
class _OpenBlock:
    """Mutable builder for the block currently being read."""

    start: float = 0.0
    end: float = 0.0
    index: Optional[int] = None
    timing_line: Optional[str] = None
    text: List[str] = field(default_factory=list)

    def freeze(self) -> TimedBlock:
        return TimedBlock(
            start=self.start,
            end=self.end,
            text=tuple(self.text),
            index=self.index,
            timing_line=self.timing_line,
        )


def parse_srt(text: str, strict: bool = False) -> TranscriptDocument:
    """Parse SRT text into a TranscriptDocument.

    Args:
        text: Raw SRT content.
        strict: Raise MalformedTimingError on a bad timing line instead of
                falling back to a zero time.

    Returns:
        The parsed document; empty when the text has no cues.
    """
    blocks: List[TimedBlock] = []
    current: Optional[_OpenBlock] = None
    pending_index: Optional[int] = None

    for line in classify_lines(text):
        if line.kind is LineKind.INDEX:
            pending_index = int(line.raw.strip())

        elif line.kind is LineKind.TIMING:
            if current is not None:
                blocks.append(current.freeze())
            start, end = parse_timing_line(line.raw, strict=strict, line_number=line.number)
            current = _OpenBlock(
                start=start,
                end=end,
                index=pending_index,
                timing_line=line.raw,
            )
            pending_index = None

        elif line.kind is LineKind.CONTENT:
            if current is None:
                logger.warning("Text before any timing line (line %d), using a zero window", line.number)
                current = _OpenBlock(index=pending_index)
                pending_index = None
            current.text.append(line.raw)

        else:  # BLANK
            if current is not None:
                blocks.append(current.freeze())
                current = None

    if current is not None:
        blocks.append(current.freeze())

    logger.debug("Parsed %d blocks", len(blocks))
    return TranscriptDocument(blocks=tuple(blocks))
