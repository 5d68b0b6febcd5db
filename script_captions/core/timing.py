"""Timestamp parsing and rendering for SRT and ASS.

WHY: The transcript uses SRT time (``HH:MM:SS,mmm``) and the styled
output uses ASS time (``H:MM:SS.cc``). Keeping both conversions in one
place keeps the rounding rules consistent, and makes the round trip
parse → format → parse testable on its own.

HOW: parse_srt_timestamp() pulls hours, minutes, seconds and
milliseconds out with a fixed positional pattern. parse_timing_line()
splits a ``start --> end`` line and parses each side. A side that does
not match becomes 0.0 unless ``strict`` is set, in which case
MalformedTimingError is raised.

RULES:
- seconds = h*3600 + m*60 + s + ms/1000
- Lenient mode never raises; it logs a warning and uses 0.0
- format_srt_timestamp() rounds to the nearest millisecond
- format_ass_timestamp() rounds to the nearest centisecond, hours
  unpadded, minutes two digits, seconds "SS.cc"
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

SRT_TIME_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2}),(\d{3})")


class MalformedTimingError(ValueError):
    """A timing line did not match ``HH:MM:SS,mmm --> HH:MM:SS,mmm``."""

    def __init__(self, line: str, line_number: Optional[int] = None) -> None:
        self.line = line
        self.line_number = line_number
        where = " on line {}".format(line_number) if line_number else ""
        super().__init__("Malformed timing{}: {!r}".format(where, line))


def parse_srt_timestamp(value: str) -> Optional[float]:
    """Parse ``HH:MM:SS,mmm`` into float seconds, or None when it does not match."""
    match = SRT_TIME_RE.search(value)
    if match is None:
        return None
    hours, minutes, seconds, millis = (int(part) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds + millis / 1000


def parse_timing_line(
    line: str,
    strict: bool = False,
    line_number: Optional[int] = None,
) -> Tuple[float, float]:
    """Parse a ``start --> end`` line into a (start, end) pair of seconds.

    WHY: Transcription tools occasionally emit a broken timing line. The
    historical behaviour is to carry on with a zero time instead of
    rejecting the whole transcript; callers that prefer to fail can pass
    ``strict=True``.

    Args:
        line: The raw timing line.
        strict: Raise instead of falling back to 0.0.
        line_number: Source line number, used in messages only.

    Returns:
        (start, end) in float seconds.

    Raises:
        MalformedTimingError: In strict mode, when either side fails to parse.
    """
    if "-->" in line:
        left, right = line.split("-->", 1)
    else:
        left, right = line, ""

    start = parse_srt_timestamp(left)
    end = parse_srt_timestamp(right)

    if start is None or end is None:
        if strict:
            raise MalformedTimingError(line, line_number)
        logger.warning("Malformed timing line %r, using zero duration", line)

    return (start if start is not None else 0.0, end if end is not None else 0.0)


def format_srt_timestamp(seconds: float) -> str:
    """Convert seconds to SRT timestamp format: HH:MM:SS,mmm"""
    total_ms = max(0, int(round(seconds * 1000)))
    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    secs, millis = divmod(rem, 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, secs, millis)


def format_ass_timestamp(seconds: float) -> str:
    """Convert seconds to ASS timestamp format: H:MM:SS.cc

    Rounding happens on whole centiseconds first so 59.999 becomes
    ``0:01:00.00`` rather than ``0:00:60.00``.
    """
    total_cs = max(0, int(round(seconds * 100)))
    hours, rem = divmod(total_cs, 360_000)
    minutes, rem = divmod(rem, 6000)
    secs = rem / 100
    return "{}:{:02d}:{:05.2f}".format(hours, minutes, secs)
