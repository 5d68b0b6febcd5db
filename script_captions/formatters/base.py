"""Formatter interface and the file container formatters return.

WHY: The corrected SRT and the styled ASS are both rendered from the
same aligned TranscriptDocument. A shared interface lets the pipeline,
the CLI and the HTTP API loop over whichever formats were requested
without knowing what each one does.

HOW: BaseFormatter holds the run's CaptionOptions and asks subclasses
for a display ``name`` and a ``format()`` implementation.
FormatterOutput pairs the generated text with its file suffix and MIME
type.

RULES:
- ``format()`` returns a list so a formatter may emit several files
- ``suffix`` starts with a hyphen, e.g. ``"-styled.ass"``
- Callers prepend the transcript's filename stem to the suffix
- Constructors accept an optional CaptionOptions and nothing else
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from script_captions.config import CaptionOptions
from script_captions.core.ir import TranscriptDocument


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-styled.ass"`` → ``"episode-styled.ass"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"text/x-ssa"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Common parent of the caption output formats.

    New formats subclass this, implement ``name`` and ``format()``, and
    get a key in formatters/__init__.py FORMATTERS.
    """

    def __init__(self, options: Optional[CaptionOptions] = None) -> None:
        self.options = options if options is not None else CaptionOptions()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Styled ASS Captions'."""

    @abstractmethod
    def format(self, document: TranscriptDocument) -> List[FormatterOutput]:
        """Convert an aligned TranscriptDocument into one or more output files.

        Args:
            document: The transcript after script alignment.

        Returns:
            List of FormatterOutput objects, each containing a file suffix,
            content string, and MIME type.
        """
