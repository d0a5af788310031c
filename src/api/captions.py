"""
src/api/captions.py
====================
Caption API — Vaani Caption Service

Responsibility:
    - Expose POST /api/v1/simplify (transcript → Caption JSON)
    - Expose POST /api/v1/readability (text → score + reading level)
    - Expose GET /api/v1/languages and GET /health
    - Apply service-wide option defaults from the environment
    - Reject transcripts longer than VAANI_MAX_TEXT_LENGTH

Environment:
    VAANI_MAX_TEXT_LENGTH          Max characters per request (default 5000)
    VAANI_MAX_WORDS_PER_SENTENCE   Default sentence bound (default 10)
    VAANI_ADD_EMOJIS               Default emoji annotation flag (default true)
    VAANI_EXPAND_ABBREVIATIONS     Default abbreviation flag (default true)
    VAANI_DEFAULT_LANGUAGE         Default language tag/name, or "auto"

This module does NOT:
    - Capture audio or transcribe speech
    - Persist captions
    - Implement any simplification logic (see src.simplifier)
"""

import asyncio
import dataclasses
import logging
import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from src.simplifier import (
    SUPPORTED_LANGUAGES,
    SimplificationOptions,
    build_caption,
    get_readability_score,
    get_reading_level,
    resolve_options,
)

logger = logging.getLogger("vaani.api")

_TRUE_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r — using default %d.", name, raw, default)
        return default


MAX_TEXT_LENGTH: int = _env_int("VAANI_MAX_TEXT_LENGTH", 5000)

SERVICE_DEFAULTS: SimplificationOptions = resolve_options(
    max_words_per_sentence=_env_int("VAANI_MAX_WORDS_PER_SENTENCE", 10),
    add_emojis=_env_flag("VAANI_ADD_EMOJIS", True),
    expand_abbreviations=_env_flag("VAANI_EXPAND_ABBREVIATIONS", True),
    language=os.getenv("VAANI_DEFAULT_LANGUAGE", "en-US"),
)


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class SimplifyOptions(BaseModel):
    """
    Per-request option overrides. Omitted fields keep the service defaults.

    Flags and the sentence limit are strict: "false" or 5.5 is rejected
    with a 422 instead of being coerced. ``language: null`` requests
    script detection.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    max_words_per_sentence: StrictInt | None = Field(default=None, alias="maxWordsPerSentence")
    remove_complex_words: StrictBool | None = Field(default=None, alias="removeComplexWords")
    add_emojis: StrictBool | None = Field(default=None, alias="addEmojis")
    expand_abbreviations: StrictBool | None = Field(default=None, alias="expandAbbreviations")
    language: StrictStr | None = None


class SimplifyRequest(BaseModel):
    text: str
    options: SimplifyOptions | None = None


class ReadabilityRequest(BaseModel):
    text: str


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Vaani",
    description="Real-time caption simplification for Deaf and hard-of-hearing users.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    """422 with field locations and messages; rejected values are not echoed."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.info("Rejected request to %s: %d invalid field(s).", request.url.path, len(errors))
    return JSONResponse(status_code=422, content={"detail": errors})


def _check_length(text: str) -> None:
    if len(text) > MAX_TEXT_LENGTH:
        raise HTTPException(
            status_code=413,
            detail=f"Text exceeds {MAX_TEXT_LENGTH} characters.",
        )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health")
async def health():
    return {"status": "ok", "languages": len(SUPPORTED_LANGUAGES)}


@app.get("/api/v1/languages")
async def languages():
    """Languages offered by the caption language picker."""
    return [dataclasses.asdict(lang) for lang in SUPPORTED_LANGUAGES]


@app.post("/api/v1/simplify")
async def simplify_text(request: SimplifyRequest):
    """
    Simplify one transcript update into a caption.

    Request options are merged over the service defaults; unknown option
    keys are ignored. The engine never raises: on an internal fault the
    caption's ``simplified`` field carries the original text.

    Returns:
        Caption JSON: original, simplified, language, readability_score,
        reading_level.
    """
    _check_length(request.text)

    overrides = request.options.model_dump(exclude_unset=True) if request.options else {}
    options = resolve_options(SERVICE_DEFAULTS, **overrides)
    logger.info(
        "Simplify request: %d chars, language=%s.",
        len(request.text), options.language or "auto",
    )

    caption = await asyncio.to_thread(build_caption, request.text, options)
    return dataclasses.asdict(caption)


@app.post("/api/v1/readability")
async def readability(request: ReadabilityRequest):
    """Flesch reading-ease score and reading level of ``text``."""
    _check_length(request.text)

    score = get_readability_score(request.text)
    return {
        "score": round(score, 2),
        "reading_level": get_reading_level(score),
    }
