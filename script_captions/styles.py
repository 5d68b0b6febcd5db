"""ASS style presets for burned-in captions.

WHY: The styled subtitle header (font, size, colours, margins, fade) is
configuration, not something computed per video. Keeping presets as
named constants lets the CLI and API select one by name and keeps the
header byte-stable for the downstream renderer.

HOW: AssStyle is a frozen dataclass holding one [V4+ Styles] entry plus
the script resolution and the fade durations applied to every event.
STYLES maps preset names to instances. render_header() produces the
[Script Info], [V4+ Styles] and [Events] format sections verbatim.

RULES:
- Presets are frozen; use dataclasses.replace() to derive a variant
- Colours use the ASS &HAABBGGRR notation
- "shorts" is the default: 720x1280 vertical video, bottom-centred text
- Fade durations come from config (CAPTIONS_FADE_IN_MS / _OUT_MS)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from script_captions.config import DEFAULT_FADE_IN_MS, DEFAULT_FADE_OUT_MS

STYLE_FORMAT_FIELDS = (
    "Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, "
    "BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, "
    "Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, "
    "Encoding"
)

EVENT_FORMAT_FIELDS = "Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"


@dataclass(frozen=True)
class AssStyle:
    """One named ASS style plus the script-level settings that go with it.

    Attributes:
        name: Style name referenced by every Dialogue line.
        font_name / font_size: Typeface and size in script pixels.
        primary_colour / secondary_colour / outline_colour / back_colour:
            &HAABBGGRR colours.
        bold: Rendered as -1 (on) or 0 (off).
        outline / shadow: Border and drop-shadow widths.
        alignment: Numpad alignment (2 = bottom centre).
        margin_l / margin_r / margin_v: Margins in script pixels.
        play_res_x / play_res_y: Script resolution.
        fade_in_ms / fade_out_ms: Values for the \\fad override tag.
        uppercase: Upper-case caption words.
    """

    name: str = "Default"
    font_name: str = "Arial"
    font_size: int = 48
    primary_colour: str = "&H00FFFFFF"
    secondary_colour: str = "&H000000FF"
    outline_colour: str = "&H00000000"
    back_colour: str = "&H64000000"
    bold: bool = True
    outline: float = 3.0
    shadow: float = 1.0
    alignment: int = 2
    margin_l: int = 40
    margin_r: int = 40
    margin_v: int = 180
    play_res_x: int = 720
    play_res_y: int = 1280
    fade_in_ms: int = DEFAULT_FADE_IN_MS
    fade_out_ms: int = DEFAULT_FADE_OUT_MS
    uppercase: bool = False

    @property
    def fade_tag(self) -> str:
        return "{{\\fad({},{})}}".format(self.fade_in_ms, self.fade_out_ms)

    def style_line(self) -> str:
        return "Style: " + ",".join([
            self.name,
            self.font_name,
            str(self.font_size),
            self.primary_colour,
            self.secondary_colour,
            self.outline_colour,
            self.back_colour,
            "-1" if self.bold else "0",
            "0", "0", "0",          # italic, underline, strikeout
            "100", "100", "0", "0",  # scale x/y, spacing, angle
            "1",                     # border style: outline + shadow
            _num(self.outline),
            _num(self.shadow),
            str(self.alignment),
            str(self.margin_l),
            str(self.margin_r),
            str(self.margin_v),
            "1",
        ])

    def render_header(self) -> str:
        lines: List[str] = [
            "[Script Info]",
            "ScriptType: v4.00+",
            "PlayResX: {}".format(self.play_res_x),
            "PlayResY: {}".format(self.play_res_y),
            "WrapStyle: 0",
            "ScaledBorderAndShadow: yes",
            "",
            "[V4+ Styles]",
            "Format: " + STYLE_FORMAT_FIELDS,
            self.style_line(),
            "",
            "[Events]",
            "Format: " + EVENT_FORMAT_FIELDS,
        ]
        return "\n".join(lines)


def _num(value: float) -> str:
    # 3.0 → "3", 2.5 → "2.5"
    return "{:g}".format(value)


STYLE_SHORTS = AssStyle()

# Bigger, upper-case words with a yellow fill for punchier reels
STYLE_BOLD_YELLOW = AssStyle(
    name="BoldYellow",
    font_name="Impact",
    font_size=60,
    primary_colour="&H0000FFFF",
    outline=4.0,
    shadow=0.0,
    margin_v=220,
    uppercase=True,
)

# Landscape fallback for 16:9 sources
STYLE_WIDESCREEN = AssStyle(
    name="Widescreen",
    font_size=42,
    margin_l=60,
    margin_r=60,
    margin_v=60,
    play_res_x=1280,
    play_res_y=720,
)

STYLES: Dict[str, AssStyle] = {
    "shorts": STYLE_SHORTS,
    "bold_yellow": STYLE_BOLD_YELLOW,
    "widescreen": STYLE_WIDESCREEN,
}


def get_style(name: str) -> AssStyle:
    """Look up a preset by name.

    Raises:
        ValueError: If the name is not a known preset.
    """
    if name not in STYLES:
        raise ValueError(
            "Unknown style '{}'. Available: {}".format(name, ", ".join(STYLES.keys()))
        )
    return STYLES[name]
