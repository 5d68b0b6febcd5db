"""Output formatter registry.

WHY: The CLI and the HTTP API need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``FORMATTERS["styled_ass"](options)``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API fields)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from script_captions.formatters.corrected_srt import CorrectedSRTFormatter
from script_captions.formatters.styled_ass import StyledASSFormatter

if TYPE_CHECKING:
    from script_captions.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "corrected_srt": CorrectedSRTFormatter,
    "styled_ass": StyledASSFormatter,
}
