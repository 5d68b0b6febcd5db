"""End-to-end pipeline: parse → align → format.

WHY: The CLI and the HTTP API run the same three stages on a transcript
and a reference script. One function keeps them from drifting apart.

HOW: run_pipeline() validates the requested format keys, parses the SRT
text, splits the script, aligns, and hands the aligned document to each
selected formatter. Everything stays in memory; callers do the I/O.

RULES:
- format_keys=None means every registered formatter
- Unknown format keys raise ValueError before any work is done
- script_text=None (or blank) skips alignment: the transcript's own
  wording is used
- Errors from parsing in strict mode (MalformedTimingError) propagate
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from script_captions.config import SENTENCE_DELIMITER, CaptionOptions
from script_captions.core.aligner import align_transcript, sentences_used
from script_captions.core.ir import ReferenceScript, TranscriptDocument
from script_captions.core.parser import parse_srt
from script_captions.formatters import FORMATTERS
from script_captions.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything one pipeline run produced.

    RULES:
    - document: the transcript as parsed
    - aligned: the transcript after script alignment
    - script: the reference sentences that were available
    - outputs: formatter outputs in the order the keys were given
    """

    document: TranscriptDocument
    aligned: TranscriptDocument
    script: ReferenceScript
    outputs: List[FormatterOutput] = field(default_factory=list)

    @property
    def sentences_used(self) -> int:
        return sentences_used(self.document, self.script)


def resolve_format_keys(format_keys: Optional[Sequence[str]]) -> List[str]:
    """Validate format keys, defaulting to all registered formatters.

    Raises:
        ValueError: If a key is not in FORMATTERS.
    """
    if not format_keys:
        return list(FORMATTERS.keys())
    keys = [key.strip() for key in format_keys if key.strip()]
    for key in keys:
        if key not in FORMATTERS:
            raise ValueError(
                "Unknown format '{}'. Available formats: {}".format(
                    key, ", ".join(sorted(FORMATTERS.keys()))
                )
            )
    return keys


def run_pipeline(
    transcript_text: str,
    script_text: Optional[str] = None,
    format_keys: Optional[Sequence[str]] = None,
    options: Optional[CaptionOptions] = None,
) -> PipelineResult:
    """Run parse → align → format for one transcript/script pair.

    Args:
        transcript_text: Raw SRT content.
        script_text: Reference script text, or None to keep the transcript wording.
        format_keys: Formatter keys to run (default: all).
        options: Chunk size, style and timing strictness.

    Returns:
        PipelineResult with the parsed and aligned documents and the outputs.

    Raises:
        ValueError: Unknown format key or style, bad chunk size, or
            MalformedTimingError in strict mode.
    """
    if options is None:
        options = CaptionOptions()
    keys = resolve_format_keys(format_keys)

    document = parse_srt(transcript_text, strict=options.strict_timing)
    script = ReferenceScript.from_text(script_text or "", delimiter=SENTENCE_DELIMITER)
    if len(script):
        aligned = align_transcript(document, script)
    else:
        logger.info("No reference script given, keeping transcript wording")
        aligned = document

    outputs: List[FormatterOutput] = []
    for key in keys:
        formatter = FORMATTERS[key](options)
        logger.debug("Running %s formatter", formatter.name)
        outputs.extend(formatter.format(aligned))

    return PipelineResult(document=document, aligned=aligned, script=script, outputs=outputs)
