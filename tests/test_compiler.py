"""Unit tests for the styled caption compiler.

WHY: The compiler carries the timing algorithm: word groups, the
proportional share of each window, and the clamping that keeps groups
from overlapping. A mistake here shows up as captions flashing out of
order on screen.

HOW: chunk_words() is tested directly for the timing law;
compile_captions() is tested for the line-stream state machine and the
rendered ASS text.
"""

import math

import pytest

from script_captions.core.aligner import align_transcript
from script_captions.core.compiler import chunk_words, compile_captions, format_event_text
from script_captions.core.ir import DialogueEvent, TimedBlock, TranscriptDocument
from script_captions.styles import STYLE_BOLD_YELLOW, STYLE_SHORTS, STYLES, get_style

EIGHT_WORDS = "one two three four five six seven eight"


class TestChunkWords:

    def test_eight_words_two_chunks(self):
        chunks = chunk_words(EIGHT_WORDS, 1.0, 9.0, chunk_size=4)
        assert len(chunks) == 2
        assert (chunks[0].start, chunks[0].end) == (pytest.approx(1.0), pytest.approx(5.0))
        assert (chunks[1].start, chunks[1].end) == (pytest.approx(5.0), pytest.approx(9.0))
        assert chunks[0].text == "one two three four"
        assert chunks[1].text == "five six seven eight"

    def test_remainder_chunk_gets_its_share(self):
        # 5 words over 10s: 2s per word, last chunk holds 1 word
        chunks = chunk_words("a b c d e", 0.0, 10.0, chunk_size=4)
        assert [c.words for c in chunks] == [("a", "b", "c", "d"), ("e",)]
        assert chunks[0].end == pytest.approx(8.0)
        assert chunks[1].start == pytest.approx(8.0)
        assert chunks[1].end == pytest.approx(10.0)

    def test_empty_text(self):
        assert chunk_words("", 0.0, 5.0) == []
        assert chunk_words("   ", 0.0, 5.0) == []

    def test_splits_on_any_whitespace(self):
        chunks = chunk_words("a\tb   c", 0.0, 3.0, chunk_size=2)
        assert [c.words for c in chunks] == [("a", "b"), ("c",)]

    def test_zero_window(self):
        chunks = chunk_words("a b c d e", 4.0, 4.0, chunk_size=2)
        assert len(chunks) == 3
        assert all(c.start == 4.0 and c.end == 4.0 for c in chunks)

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError, match="chunk_size"):
            chunk_words("a b", 0.0, 1.0, chunk_size=0)

    @pytest.mark.parametrize("word_count", [1, 2, 3, 4, 5, 7, 8, 9, 13, 31])
    @pytest.mark.parametrize("chunk_size", [1, 2, 3, 4, 6])
    @pytest.mark.parametrize("window", [(0.0, 1.0), (1.0, 9.0), (12.345, 13.1), (100.0, 100.7)])
    def test_count_order_and_bounds(self, word_count, chunk_size, window):
        start, end = window
        text = " ".join("w{}".format(i) for i in range(word_count))
        chunks = chunk_words(text, start, end, chunk_size=chunk_size)

        assert len(chunks) == math.ceil(word_count / chunk_size)
        assert sum(len(c.words) for c in chunks) == word_count
        for current, following in zip(chunks, chunks[1:]):
            assert current.end <= following.start
        assert all(c.end <= end for c in chunks)
        assert chunks[0].start == pytest.approx(start)


class TestCompileCaptions:

    def test_eight_word_window(self):
        srt = "1\n00:00:01,000 --> 00:00:09,000\n{}\n\n".format(EIGHT_WORDS)
        styled = compile_captions(srt, chunk_size=4)
        lines = [event.render() for event in styled.events]
        fade = STYLE_SHORTS.fade_tag
        assert lines == [
            "Dialogue: 0,0:00:01.00,0:00:05.00,Default,,0,0,0,," + fade + "one two three four",
            "Dialogue: 0,0:00:05.00,0:00:09.00,Default,,0,0,0,," + fade + "five six seven eight",
        ]

    def test_aligned_document(self, sample_document, sample_script):
        styled = compile_captions(align_transcript(sample_document, sample_script))
        assert len(styled) == 4
        texts = [event.text.replace(STYLE_SHORTS.fade_tag, "") for event in styled.events]
        assert texts == [
            "One two three four",
            "five six seven eight",
            "Hello world",
            "Extra line here.",
        ]
        assert styled.events[2].start == pytest.approx(9.5)
        assert styled.events[2].end == pytest.approx(12.5)

    def test_multi_line_cue_is_space_joined(self):
        srt = "1\n00:00:00,000 --> 00:00:04,000\na b\nc d\n\n"
        styled = compile_captions(srt, chunk_size=3)
        texts = [event.text.replace(STYLE_SHORTS.fade_tag, "") for event in styled.events]
        assert texts == ["a b c", "d"]

    def test_timing_line_flushes_under_previous_window(self):
        srt = (
            "00:00:00,000 --> 00:00:02,000\n"
            "a b\n"
            "00:00:10,000 --> 00:00:12,000\n"
            "c d\n"
        )
        styled = compile_captions(srt)
        assert [(e.start, e.end) for e in styled.events] == [
            (pytest.approx(0.0), pytest.approx(2.0)),
            (pytest.approx(10.0), pytest.approx(12.0)),
        ]

    def test_final_block_without_blank_line(self):
        styled = compile_captions("1\n00:00:00,000 --> 00:00:01,000\nlast words")
        assert len(styled) == 1

    def test_cross_window_overlap_is_kept(self):
        doc = TranscriptDocument(blocks=(
            TimedBlock(start=0.0, end=10.0, text=("a b c d",)),
            TimedBlock(start=5.0, end=6.0, text=("e",)),
        ))
        styled = compile_captions(doc)
        assert styled.events[0].end == pytest.approx(10.0)
        assert styled.events[1].start == pytest.approx(5.0)

    def test_index_lines_ignored(self):
        styled = compile_captions("7\n00:00:00,000 --> 00:00:01,000\nhello\n\n")
        assert len(styled) == 1
        assert styled.events[0].text.endswith("hello")

    def test_empty_blocks_emit_nothing(self):
        doc = TranscriptDocument(blocks=(TimedBlock(start=0.0, end=1.0),))
        assert len(compile_captions(doc)) == 0

    def test_malformed_timing_lenient(self):
        styled = compile_captions("00:00:01 --> 00:00:02\nhi there\n")
        assert [(e.start, e.end) for e in styled.events] == [(0.0, 0.0)]

    def test_malformed_timing_strict(self):
        with pytest.raises(ValueError):
            compile_captions("00:00:01 --> 00:00:02\nhi there\n", strict=True)

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            compile_captions("", chunk_size=0)

    def test_repeated_calls_are_independent(self, sample_document):
        first = compile_captions(sample_document).render()
        second = compile_captions(sample_document).render()
        assert first == second


class TestRendering:

    def test_header_then_events(self):
        styled = compile_captions("00:00:00,000 --> 00:00:01,000\nhi\n")
        text = styled.render()
        assert text.startswith("[Script Info]\n")
        assert "[V4+ Styles]" in text
        assert STYLE_SHORTS.style_line() in text
        assert "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text" in text
        assert text.index("[Events]") < text.index("Dialogue:")
        assert text.endswith("\n")

    def test_empty_document_has_header_only(self):
        text = compile_captions(TranscriptDocument()).render()
        assert "[Events]" in text
        assert "Dialogue:" not in text

    def test_style_line_fields(self):
        fields = STYLE_SHORTS.style_line()[len("Style: "):].split(",")
        assert len(fields) == 23
        assert fields[0] == "Default"
        assert fields[1] == "Arial"

    def test_play_resolution(self):
        header = STYLE_SHORTS.render_header()
        assert "PlayResX: 720" in header
        assert "PlayResY: 1280" in header

    def test_fade_tag(self):
        assert STYLE_SHORTS.fade_tag == "{{\\fad({},{})}}".format(
            STYLE_SHORTS.fade_in_ms, STYLE_SHORTS.fade_out_ms
        )

    def test_event_render(self):
        event = DialogueEvent(start=3725.5, end=3726.0, style="Default", text="hi")
        assert event.render() == "Dialogue: 0,1:02:05.50,1:02:06.00,Default,,0,0,0,,hi"

    def test_braces_removed(self):
        text = format_event_text(["{\\b1}bold", "word"], STYLE_SHORTS)
        assert text == STYLE_SHORTS.fade_tag + "\\b1bold word"

    def test_uppercase_style(self):
        styled = compile_captions(
            "00:00:00,000 --> 00:00:01,000\nsay it loud\n", style=STYLE_BOLD_YELLOW
        )
        assert styled.events[0].text == STYLE_BOLD_YELLOW.fade_tag + "SAY IT LOUD"
        assert styled.events[0].style == "BoldYellow"


class TestStyles:

    def test_presets_registered(self):
        assert set(STYLES) == {"shorts", "bold_yellow", "widescreen"}

    def test_get_style(self):
        assert get_style("shorts") is STYLE_SHORTS

    def test_unknown_style(self):
        with pytest.raises(ValueError, match="Unknown style"):
            get_style("comic_sans")
