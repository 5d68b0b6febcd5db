"""Shared test fixtures for the script_captions test suite.

WHY: Most test modules need the same small transcript and reference
script. Centralising them keeps the expected numbers (windows, word
counts, event counts) in one place.

HOW: SAMPLE_SRT has three cues; the first reproduces the eight-word,
1s–9s window used throughout the compiler tests. SAMPLE_SCRIPT has one
sentence per cue.

RULES:
- Cue 1: 00:00:01,000 --> 00:00:09,000, eight words
- Cue 2: 00:00:09,500 --> 00:00:12,500, two words (misrecognised)
- Cue 3: 00:00:13,000 --> 00:00:14,000, two words
- The script's third sentence keeps its final period (nothing follows it)
"""

import pytest

from script_captions.core.ir import ReferenceScript
from script_captions.core.parser import parse_srt

SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:09,000\n"
    "one two three for five six seven ate\n"
    "\n"
    "2\n"
    "00:00:09,500 --> 00:00:12,500\n"
    "helo wrld\n"
    "\n"
    "3\n"
    "00:00:13,000 --> 00:00:14,000\n"
    "extra lime\n"
    "\n"
)

SAMPLE_SCRIPT = (
    "One two three four five six seven eight. "
    "Hello world. "
    "Extra line here."
)


@pytest.fixture
def sample_srt():
    return SAMPLE_SRT


@pytest.fixture
def sample_script_text():
    return SAMPLE_SCRIPT


@pytest.fixture
def sample_document():
    return parse_srt(SAMPLE_SRT)


@pytest.fixture
def sample_script():
    return ReferenceScript.from_text(SAMPLE_SCRIPT)
