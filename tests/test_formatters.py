"""Tests for the formatter registry and the two output formatters.

WHY: The CLI and API only ever see FormatterOutput objects. These tests
pin the suffixes, media types and content each formatter hands back.
"""

import pytest

from script_captions.config import CaptionOptions
from script_captions.core.aligner import align_transcript
from script_captions.core.ir import ReferenceScript, TranscriptDocument
from script_captions.core.parser import parse_srt
from script_captions.formatters import FORMATTERS
from script_captions.formatters.base import BaseFormatter
from script_captions.formatters.corrected_srt import CorrectedSRTFormatter
from script_captions.formatters.styled_ass import StyledASSFormatter
from script_captions.styles import STYLE_BOLD_YELLOW, STYLE_WIDESCREEN


class TestRegistry:

    def test_keys(self):
        assert set(FORMATTERS) == {"corrected_srt", "styled_ass"}

    def test_values_are_formatter_classes(self):
        for formatter_cls in FORMATTERS.values():
            assert issubclass(formatter_cls, BaseFormatter)

    def test_default_options(self):
        formatter = StyledASSFormatter()
        assert formatter.options == CaptionOptions()

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            BaseFormatter()


class TestCorrectedSRT:

    def test_output_metadata(self, sample_document):
        outputs = CorrectedSRTFormatter().format(sample_document)
        assert len(outputs) == 1
        assert outputs[0].suffix == "-corrected.srt"
        assert outputs[0].media_type == "application/x-subrip"

    def test_unaligned_document_is_byte_identical(self, sample_srt, sample_document):
        output = CorrectedSRTFormatter().format(sample_document)[0]
        assert output.content == sample_srt

    def test_aligned_wording(self, sample_document, sample_script):
        aligned = align_transcript(sample_document, sample_script)
        content = CorrectedSRTFormatter().format(aligned)[0].content
        assert "Hello world\n" in content
        assert "helo wrld" not in content
        assert "00:00:09,500 --> 00:00:12,500" in content

    def test_empty_document(self):
        output = CorrectedSRTFormatter().format(TranscriptDocument())[0]
        assert output.content == ""

    def test_paragraph_break_in_script_keeps_cues(self, sample_document):
        script = ReferenceScript.from_text("Para one.\n\nPara two. Three")
        aligned = align_transcript(sample_document, script)
        content = CorrectedSRTFormatter().format(aligned)[0].content
        reparsed = parse_srt(content)
        assert len(reparsed) == len(sample_document)
        assert [block.text for block in reparsed] == [
            ("Para one. Para two",),
            ("Three",),
            ("extra lime",),
        ]
        assert [(b.start, b.end) for b in reparsed] == [(b.start, b.end) for b in sample_document]


class TestStyledASS:

    def test_output_metadata(self, sample_document):
        outputs = StyledASSFormatter().format(sample_document)
        assert len(outputs) == 1
        assert outputs[0].suffix == "-styled.ass"
        assert outputs[0].media_type == "text/x-ssa"

    def test_event_count(self, sample_document):
        content = StyledASSFormatter().format(sample_document)[0].content
        dialogue = [line for line in content.splitlines() if line.startswith("Dialogue:")]
        # 8 words → 2 events, then 1 + 1
        assert len(dialogue) == 4

    def test_chunk_size_option(self, sample_document):
        options = CaptionOptions(chunk_size=1)
        content = StyledASSFormatter(options).format(sample_document)[0].content
        assert content.count("Dialogue:") == 12

    def test_style_option(self, sample_document):
        options = CaptionOptions(style="bold_yellow")
        content = StyledASSFormatter(options).format(sample_document)[0].content
        assert STYLE_BOLD_YELLOW.style_line() in content
        assert ",BoldYellow,,0,0,0,," in content
        assert "HELO WRLD" in content

    def test_widescreen_resolution(self, sample_document):
        options = CaptionOptions(style="widescreen")
        content = StyledASSFormatter(options).format(sample_document)[0].content
        assert "PlayResX: {}".format(STYLE_WIDESCREEN.play_res_x) in content

    def test_unknown_style(self, sample_document):
        with pytest.raises(ValueError, match="Unknown style"):
            StyledASSFormatter(CaptionOptions(style="nope")).format(sample_document)

    def test_empty_document_gives_header(self):
        content = StyledASSFormatter().format(TranscriptDocument())[0].content
        assert content.startswith("[Script Info]")
        assert "Dialogue:" not in content
