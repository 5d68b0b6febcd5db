"""FastAPI application exposing the caption pipeline over HTTP.

WHY: The video pipeline runs on a different machine from the
transcription service, and automation tools (n8n, curl, render workers)
find an HTTP call easier than shelling out. FastAPI provides request
validation for multipart uploads and automatic OpenAPI docs.

HOW: POST /captions accepts the SRT transcript and the reference script
as uploads plus caption options as form fields, runs run_pipeline() in
memory, and returns the generated files inline. GET /formats,
GET /styles and GET /health describe the service.

RULES:
- Nothing is written to disk; uploads are decoded as UTF-8 in memory
- Error responses use a consistent ErrorResponse schema
- 400: bad extension, unknown format/style, chunk size below 1
- 422: undecodable upload or malformed timing in strict mode
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from script_captions import __version__
from script_captions.config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_STRICT_TIMING,
    DEFAULT_STYLE,
    SCRIPT_EXTENSIONS,
    TRANSCRIPT_EXTENSIONS,
    CaptionOptions,
)
from script_captions.core.ir import TranscriptDocument
from script_captions.core.pipeline import run_pipeline
from script_captions.core.timing import MalformedTimingError
from script_captions.formatters import FORMATTERS
from script_captions.server.models import (
    CaptionResponse,
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    OutputFile,
    StyleInfo,
)
from script_captions.styles import STYLES

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Script Captions API",
    description=(
        "Align a machine-generated SRT transcript with its reference script "
        "and produce a corrected SRT and styled ASS captions for burn-in."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _validate_extension(filename: str, allowed: set, label: str) -> None:
    """Raise HTTPException if the file extension is not in ``allowed``."""
    ext = Path(filename).suffix.lower()
    if ext not in allowed:
        raise HTTPException(
            status_code=400,
            detail="Unsupported {} file type '{}'. Supported formats: {}".format(
                label, ext, ", ".join(sorted(allowed))
            ),
        )


async def _read_text(upload: UploadFile) -> str:
    content = await upload.read()
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=422,
            detail="File '{}' is not valid UTF-8 text".format(upload.filename),
        )


def _count_events(content: str) -> int:
    return sum(1 for line in content.splitlines() if line.startswith("Dialogue:"))


# ---------------------------------------------------------------------------
# Endpoints: Captions
# ---------------------------------------------------------------------------


@app.post(
    "/captions",
    response_model=CaptionResponse,
    tags=["captions"],
    summary="Align a transcript with its script and build captions",
    description=(
        "Upload an SRT transcript and (optionally) the reference script. "
        "Returns the corrected SRT and the styled ASS captions inline."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Invalid file type or option"},
        422: {"model": ErrorResponse, "description": "Undecodable upload or malformed timing"},
    },
)
async def create_captions(
    transcript: Annotated[
        UploadFile,
        File(description="Timestamped transcript (.srt) from the transcription step."),
    ],
    script: Annotated[
        Optional[UploadFile],
        File(description="Reference script (.txt), sentences separated by '. '."),
    ] = None,
    output_formats: Annotated[
        Optional[str],
        Form(description="Comma-separated output formats: corrected_srt, styled_ass. Defaults to all."),
    ] = None,
    chunk_size: Annotated[
        int,
        Form(description="Words per styled caption."),
    ] = DEFAULT_CHUNK_SIZE,
    style: Annotated[
        str,
        Form(description="ASS style preset name."),
    ] = DEFAULT_STYLE,
    strict_timing: Annotated[
        bool,
        Form(description="Reject malformed timing lines instead of using zero."),
    ] = DEFAULT_STRICT_TIMING,
) -> CaptionResponse:
    # Sanitize filename to prevent path traversal in suggested names
    filename = Path(transcript.filename or "transcript.srt").name
    _validate_extension(filename, TRANSCRIPT_EXTENSIONS, "transcript")

    format_keys: Optional[List[str]] = None
    if output_formats:
        format_keys = [f.strip() for f in output_formats.split(",") if f.strip()]
        for key in format_keys:
            if key not in FORMATTERS:
                raise HTTPException(
                    status_code=400,
                    detail="Unknown output format '{}'. Available: {}".format(
                        key, ", ".join(sorted(FORMATTERS.keys()))
                    ),
                )

    if style not in STYLES:
        raise HTTPException(
            status_code=400,
            detail="Unknown style '{}'. Available: {}".format(style, ", ".join(STYLES.keys())),
        )
    if chunk_size < 1:
        raise HTTPException(status_code=400, detail="chunk_size must be at least 1")

    script_text: Optional[str] = None
    if script is not None:
        _validate_extension(script.filename or "", SCRIPT_EXTENSIONS, "script")
        script_text = await _read_text(script)

    transcript_text = await _read_text(transcript)
    options = CaptionOptions(chunk_size=chunk_size, style=style, strict_timing=strict_timing)

    try:
        result = run_pipeline(transcript_text, script_text, format_keys, options)
    except MalformedTimingError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    stem = Path(filename).stem
    files = []
    event_count = 0
    for output in result.outputs:
        if output.media_type == "text/x-ssa":
            event_count += _count_events(output.content)
        files.append(OutputFile(
            filename="{}{}".format(stem, output.suffix),
            media_type=output.media_type,
            content=output.content,
        ))

    logger.info(
        "Captions for %s: %d blocks, %d/%d sentences, %d events",
        filename,
        len(result.document),
        result.sentences_used,
        len(result.script),
        event_count,
    )

    return CaptionResponse(
        filename=filename,
        block_count=len(result.document),
        content_lines=result.document.content_line_count(),
        sentence_count=len(result.script),
        sentences_used=result.sentences_used,
        event_count=event_count,
        files=files,
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats and styles
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
)
async def list_formats() -> List[FormatInfo]:
    result = []
    empty = TranscriptDocument()
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        # Format an empty document to learn the suffix
        outputs = formatter.format(empty)
        suffix = outputs[0].suffix if outputs else ""
        result.append(FormatInfo(key=key, name=formatter.name, suffix=suffix))
    return result


@app.get(
    "/styles",
    response_model=List[StyleInfo],
    tags=["formats"],
    summary="List ASS style presets",
)
async def list_styles() -> List[StyleInfo]:
    return [
        StyleInfo(
            key=key,
            style_name=preset.name,
            font_name=preset.font_name,
            font_size=preset.font_size,
            play_res_x=preset.play_res_x,
            play_res_y=preset.play_res_y,
        )
        for key, preset in STYLES.items()
    ]


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the script-captions-api console script."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
