"""Corrected SRT formatter — the aligned transcript as an SRT file.

WHY: Editors want the script-corrected transcript on its own, e.g. as a
closed-caption track or to review the alignment before burning in.

HOW: Replays the document's SRT line stream. Parsed blocks keep their
raw index and timing lines, so only the wording differs from the input.

RULES:
- Registered as "corrected_srt"
- Suffix "-corrected.srt", media type "application/x-subrip"
- An empty document gives an empty file
"""

from __future__ import annotations

from typing import List

from script_captions.core.ir import TranscriptDocument
from script_captions.formatters.base import BaseFormatter, FormatterOutput


class CorrectedSRTFormatter(BaseFormatter):
    """Formatter that writes the aligned transcript back out as SRT."""

    @property
    def name(self) -> str:
        return "Corrected SRT"

    def format(self, document: TranscriptDocument) -> List[FormatterOutput]:
        content = document.to_srt()
        if content:
            content += "\n"
        return [
            FormatterOutput(
                suffix="-corrected.srt",
                content=content,
                media_type="application/x-subrip",
            )
        ]
