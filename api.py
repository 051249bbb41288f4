"""
Number Words — FastAPI Server
=============================

RESTful API for spelling numbers, amounts, ordinals and dates in English.

Endpoints:
    POST /convert           Number / "$" / "%" / "°" string → words
    GET  /ordinal/{number}  Integer → ordinal words
    POST /date              Date + PHP-style pattern → words
    GET  /health            Health check / readiness

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from number_words import __version__
from number_words.config import load_mode, load_options
from number_words.converter import WordConverter, resolve_mode
from number_words.dates import DEFAULT_PATTERN, DateAdapter
from number_words.exceptions import NumberWordsError
from number_words.models import ConversionMode

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Application Lifespan (pre-build converter) ─────────────────────

_converter: WordConverter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared converter from NUMBER_WORDS_* settings on startup."""
    global _converter  # noqa: PLW0603
    _converter = WordConverter(load_options(), load_mode())
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Words API",
    description=(
        "English word phrases for numbers: cardinals, decimals, currency, "
        "percentages, degrees, ordinals and calendar dates."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    value: Union[int, float, str] = Field(
        ...,
        description="A number, or a string such as '$1,235.50', '32%' or '32.8°'.",
        json_schema_extra={"example": "$1,235.506"},
    )
    mode: Optional[ConversionMode] = Field(
        default=None,
        description=(
            "Reading for bare numbers (server default if omitted); "
            "'$', '%' and '°' markers override it."
        ),
    )


class ConvertResponse(BaseModel):
    input: str
    mode: ConversionMode
    words: str

    model_config = {"json_schema_extra": {"example": {
        "input": "$1,235.506",
        "mode": "currency",
        "words": "One Thousand, Two Hundred and Thirty-five Dollars and Fifty-one Cents",
    }}}


class OrdinalResponse(BaseModel):
    number: int
    words: str


class DateRequest(BaseModel):
    """Request body for the /date endpoint."""

    date: str = Field(
        ...,
        min_length=1,
        description="ISO 8601, m/d/Y, m/d/y, Y/m/d, 'F j, Y' or 'j F Y'.",
        json_schema_extra={"example": "03/21/2012"},
    )
    pattern: str = Field(
        default=DEFAULT_PATTERN,
        min_length=1,
        description="PHP date() pattern; numeric tokens are spelled out.",
    )


class DateResponse(BaseModel):
    date: str
    pattern: str
    words: str


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str
    version: str
    default_mode: ConversionMode


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> WordConverter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter


def _unprocessable(error: NumberWordsError) -> HTTPException:
    """Turn a returned conversion error into a 422 with a machine-readable body."""
    detail = ErrorDetail(code=error.code, message=error.message, details=error.details)
    return HTTPException(status_code=422, detail=detail.model_dump())


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell out a number, amount, percentage or degree value",
    tags=["Conversion"],
    responses={
        422: {"description": "Input is not numeric or is out of range"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert(request: ConvertRequest) -> ConvertResponse:
    """Convert a value to words.

    - **"$..."** is read as money (dollars and cents, half-up to the cent)
    - **"...%"** and **"...°"** get a percent / degree unit
    - anything else follows **mode**
    """
    converter = _get_converter()
    # Always pass the mode explicitly: the shared converter's default never changes
    mode = request.mode or converter.mode
    result = converter.convert_to_words(request.value, mode)
    if isinstance(result, NumberWordsError):
        raise _unprocessable(result)
    applied = resolve_mode(request.value, mode)
    return ConvertResponse(input=str(request.value), mode=applied, words=result)


@app.get(
    "/ordinal/{number}",
    summary="Spell out an ordinal",
    tags=["Conversion"],
    responses={
        422: {"description": "Number is too large to spell"},
        503: {"description": "Converter not yet initialised"},
    },
)
def ordinal(number: int) -> OrdinalResponse:
    """Ordinal words for an integer; the sign is ignored (-3 → "Third")."""
    converter = _get_converter()
    try:
        words = converter.get_number_ordinal(number)
    except NumberWordsError as exc:
        raise _unprocessable(exc) from exc
    return OrdinalResponse(number=number, words=words)


@app.post(
    "/date",
    summary="Spell out a date",
    tags=["Conversion"],
    responses={
        422: {"description": "Date string not recognised"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert_date(request: DateRequest) -> DateResponse:
    """Render a date through a PHP-style pattern with every number in words."""
    adapter = DateAdapter(_get_converter())
    result = adapter.convert_date_to_words(request.date, request.pattern)
    if isinstance(result, NumberWordsError):
        raise _unprocessable(result)
    return DateResponse(date=request.date, pattern=request.pattern, words=result)


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
        default_mode=converter.mode,
    )
