"""Script aligner — swap transcript wording for reference script sentences.

WHY: Speech-to-text timing is good but its wording drifts (names,
numbers, homophones). The reference script has the right words. Since
the transcription of a read script produces roughly one cue line per
sentence, replacing each content line with the next script sentence
fixes the wording while keeping the recognised timing.

HOW: One forward cursor over the script sentences, shared by the whole
document. Every content line, in document order, takes the next unused
sentence while any remain. Timing lines, indices and blank separators
pass through untouched and never consume a sentence.

RULES:
- Same block count, same windows, same raw timing lines as the input
- Line driven: a block with two content lines consumes two sentences
- Inserted sentences are flattened to a single line so the SRT cue
  structure survives
- Once the script runs out, original lines are kept (not an error)
- Extra sentences are dropped silently
- The cursor is local to each call; the script value is never mutated,
  so repeated calls with the same inputs give the same document
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List

from script_captions.core.ir import ReferenceScript, TimedBlock, TranscriptDocument

logger = logging.getLogger(__name__)


def align_transcript(
    document: TranscriptDocument,
    script: ReferenceScript,
) -> TranscriptDocument:
    """Replace content lines with reference sentences, in order.

    Args:
        document: Parsed transcript.
        script: Reference sentences to draw from.

    Returns:
        A new TranscriptDocument with the same structure and timing.
    """
    sentences = iter(script.sentences)
    used = 0
    exhausted = False
    aligned: List[TimedBlock] = []

    for block in document.blocks:
        new_text = []
        for line in block.text:
            if not exhausted:
                sentence = next(sentences, None)
                if sentence is None:
                    exhausted = True
                    logger.debug("Reference script exhausted after %d sentences", used)
                else:
                    new_text.append(" ".join(sentence.split()))
                    used += 1
                    continue
            new_text.append(line)
        aligned.append(replace(block, text=tuple(new_text)))

    dropped = len(script) - used
    if dropped > 0:
        logger.debug("%d reference sentences left unused", dropped)
    logger.info(
        "Aligned %d of %d content lines with the reference script",
        used,
        document.content_line_count(),
    )
    return TranscriptDocument(blocks=tuple(aligned))


def sentences_used(document: TranscriptDocument, script: ReferenceScript) -> int:
    """Number of sentences align_transcript() consumes for this pair."""
    return min(document.content_line_count(), len(script))
