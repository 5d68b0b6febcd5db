"""Tagged line classifier for the SRT line stream.

WHY: Both the parser and the caption compiler walk an SRT file line by
line and react to four kinds of lines. Classifying once, into a small
tagged value, keeps their state machines to a single dispatch on
``kind`` instead of a cascade of regex probes.

HOW: classify_line() checks, in order: blank, pure index, timing marker,
content. classify_lines() maps it over a text or an iterable of lines.

RULES:
- BLANK: empty after stripping whitespace
- INDEX: stripped line is all ASCII digits (the value is not validated)
- TIMING: the line contains the "-->" separator
- CONTENT: everything else, kept verbatim in ``raw``
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

TIMING_SEPARATOR = "-->"

INDEX_RE = re.compile(r"^[0-9]+$")


class LineKind(enum.Enum):
    INDEX = "index"
    TIMING = "timing"
    CONTENT = "content"
    BLANK = "blank"


@dataclass(frozen=True)
class ClassifiedLine:
    """One source line tagged with its kind."""

    kind: LineKind
    raw: str
    number: int = 0  # 1-based line number, 0 when unknown


def classify_line(line: str, number: int = 0) -> ClassifiedLine:
    stripped = line.strip()
    if not stripped:
        kind = LineKind.BLANK
    elif INDEX_RE.match(stripped):
        kind = LineKind.INDEX
    elif TIMING_SEPARATOR in line:
        kind = LineKind.TIMING
    else:
        kind = LineKind.CONTENT
    return ClassifiedLine(kind=kind, raw=line, number=number)


def split_lines(text: str) -> list[str]:
    """Split text into lines, normalising line endings and dropping a BOM."""
    if text.startswith("\ufeff"):
        text = text[1:]
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def classify_lines(source: Union[str, Iterable[str]]) -> Iterator[ClassifiedLine]:
    """Classify every line of ``source`` (a whole text or an iterable of lines)."""
    lines = split_lines(source) if isinstance(source, str) else source
    for number, line in enumerate(lines, 1):
        yield classify_line(line, number)
