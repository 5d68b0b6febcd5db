"""Styled ASS formatter — short word-group captions for burn-in.

WHY: Short-form video captions show a few words at a time with a soft
fade. The renderer that burns subtitles into the frames reads ASS, which
carries the font, colours, margins and the fade override.

HOW: Resolves the style preset from the options, runs compile_captions()
over the aligned document, and renders the StyledSubtitleDocument.

RULES:
- Registered as "styled_ass"
- Suffix "-styled.ass", media type "text/x-ssa"
- chunk_size and style come from CaptionOptions
- An empty document still produces a valid header with no events
"""

from __future__ import annotations

from typing import List

from script_captions.core.compiler import compile_captions
from script_captions.core.ir import TranscriptDocument
from script_captions.formatters.base import BaseFormatter, FormatterOutput
from script_captions.styles import get_style


class StyledASSFormatter(BaseFormatter):
    """Formatter producing the styled ASS caption track."""

    @property
    def name(self) -> str:
        return "Styled ASS Captions"

    def format(self, document: TranscriptDocument) -> List[FormatterOutput]:
        """Compile the document into ASS.

        Raises:
            ValueError: Unknown style name or chunk_size below 1.
        """
        style = get_style(self.options.style)
        styled = compile_captions(
            document,
            chunk_size=self.options.chunk_size,
            style=style,
            strict=self.options.strict_timing,
        )
        return [
            FormatterOutput(
                suffix="-styled.ass",
                content=styled.render(),
                media_type="text/x-ssa",
            )
        ]
