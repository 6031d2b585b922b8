"""
numwords — FastAPI Server
=========================

RESTful API for spelling out numbers in words.

Endpoints:
    POST /convert           Convert one number (cardinal, ordinal or currency)
    GET  /languages         Registered languages, their modes and options
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from numwords import __version__
from numwords.config import get_settings
from numwords.converter import NumberConverter
from numwords.exceptions import NumWordsError, UnsupportedLanguageError
from numwords.models import ConversionMode
from numwords.registry import available_languages

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (pre-warm converter) ──────────────────────

_converter: NumberConverter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the converter (settings, default language) on startup."""
    global _converter  # noqa: PLW0603
    _converter = NumberConverter(get_settings())
    _converter.language()
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="numwords API",
    description=(
        "Spell out numbers in words. Exact arbitrary-precision input, "
        "cardinal, ordinal and currency renderings in eleven languages."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    value: Union[int, float, str] = Field(
        ...,
        description="Number to convert. Send large or exact values as strings.",
        json_schema_extra={"example": "1234.56"},
    )
    lang: Optional[str] = Field(
        default=None,
        description="Language tag or English name; defaults to NUMWORDS_DEFAULT_LANGUAGE.",
        json_schema_extra={"example": "fr"},
    )
    mode: ConversionMode = ConversionMode.CARDINAL
    options: dict[str, Any] = Field(default_factory=dict)


class ConvertResponse(BaseModel):
    value: str
    lang: str
    mode: ConversionMode
    words: str

    model_config = {"json_schema_extra": {"example": {
        "value": "1234.56",
        "lang": "en",
        "mode": "currency",
        "words": "one thousand two hundred thirty-four dollars and fifty-six cents",
    }}}


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class LanguageOut(BaseModel):
    code: str
    name: str
    modes: list[ConversionMode]
    options: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int
    default_language: str


# ─── Error Handling ──────────────────────────────────────────────────


@app.exception_handler(NumWordsError)
async def numwords_error_handler(request: Request, exc: NumWordsError) -> JSONResponse:
    status = 404 if isinstance(exc, UnsupportedLanguageError) else 422
    logger.info("Conversion rejected: %s (%s)", exc.code, exc.message)
    body = ErrorResponse(code=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> NumberConverter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell out a number",
    tags=["Conversion"],
    responses={
        404: {"model": ErrorResponse, "description": "Unknown language"},
        422: {"model": ErrorResponse, "description": "Invalid input or options"},
        503: {"description": "Converter not yet initialised"},
    },
)
async def convert(request: ConvertRequest) -> ConvertResponse:
    """Convert one number to words.

    - **value**: int, float or numeric string (scientific notation allowed)
    - **mode**: `cardinal`, `ordinal` or `currency`
    - **options**: common (`negative_word`, …) and language-specific toggles
    """
    converter = _get_converter()
    match = converter.resolve(request.lang)
    words = await asyncio.to_thread(
        converter.convert, request.value, match.resolved, request.mode, request.options
    )
    return ConvertResponse(
        value=str(request.value),
        lang=match.resolved,
        mode=request.mode,
        words=words,
    )


@app.get("/languages", summary="List supported languages", tags=["Conversion"])
def list_languages() -> list[LanguageOut]:
    return [LanguageOut.model_validate(entry) for entry in available_languages()]


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    converter = _get_converter()
    return HealthResponse(
        status="healthy",
        version=__version__,
        languages_loaded=len(available_languages()),
        default_language=converter.settings.default_language,
    )
