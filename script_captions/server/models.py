"""Pydantic response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for response
serialization and automatic OpenAPI documentation. Pydantic models
enforce field types at runtime and generate JSON Schema that appears in
the /docs UI.

HOW: Each endpoint has its own response model. All models include Field
descriptions.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Response models never expose internal implementation details
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class OutputFile(BaseModel):
    """One generated output file, inline."""

    filename: str = Field(description="Suggested filename ({stem}{suffix}).")
    media_type: str = Field(description="MIME type of the content.")
    content: str = Field(description="Full file content.")


class CaptionResponse(BaseModel):
    """Result of one caption run.

    RULES:
    - block_count / content_lines describe the parsed transcript
    - sentences_used <= sentence_count; the rest of the script was unused
    - event_count is the number of ASS dialogue events (0 when styled_ass
      was not requested)
    """

    filename: str = Field(description="Uploaded transcript filename.")
    block_count: int = Field(description="Number of caption blocks in the transcript.")
    content_lines: int = Field(description="Number of text lines in the transcript.")
    sentence_count: int = Field(description="Number of sentences in the reference script.")
    sentences_used: int = Field(description="Script sentences substituted into the transcript.")
    event_count: int = Field(description="Dialogue events in the styled ASS output.")
    files: List[OutputFile] = Field(description="Generated output files.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "filename": "episode.srt",
                "block_count": 2,
                "content_lines": 2,
                "sentence_count": 2,
                "sentences_used": 2,
                "event_count": 3,
                "files": [
                    {
                        "filename": "episode-styled.ass",
                        "media_type": "text/x-ssa",
                        "content": "[Script Info]\n...",
                    }
                ],
            }
        ]
    }}


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-styled.ass').")


class StyleInfo(BaseModel):
    """Description of an ASS style preset."""

    key: str = Field(description="Preset identifier used in API requests.")
    style_name: str = Field(description="ASS style name written to the header.")
    font_name: str = Field(description="Font family.")
    font_size: int = Field(description="Font size in script pixels.")
    play_res_x: int = Field(description="Script width in pixels.")
    play_res_y: int = Field(description="Script height in pixels.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
