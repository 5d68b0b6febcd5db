"""Script Captions — script-aligned, styled captions for short-form video.

WHY: Speech-to-text gives good timing but imperfect wording, while the
author's reference script has the right wording but no timing. Burned-in
captions for vertical video need both, cut into short word groups that
pop on screen one after another.

HOW: Three-stage pipeline — parse the SRT transcript into a document,
align its content lines with the reference script sentences, then format
the aligned document (corrected SRT, styled ASS). Each stage is a pure
function over immutable values and is independently testable.

RULES:
- Parser → Aligner → Compiler, strictly forward
- All formatters consume the same TranscriptDocument
- Adding an output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
