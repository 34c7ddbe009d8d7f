from __future__ import annotations

import argparse
from collections.abc import Iterable

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .api import build_api
from .cli import parse_seed
from .errors import InvalidCharacterError
from .models import (
    AutocompleteConfig,
    DirectorySnapshot,
    PrefixDirectoryConfig,
    SentenceRecord,
)


class InputRequest(BaseModel):
    """A single keystroke sent to the autocomplete system."""

    char: str = Field(..., min_length=1, max_length=1)


class SuggestionsResponse(BaseModel):
    suggestions: list[str]


class NumberRequest(BaseModel):
    number: int


class NumberResponse(BaseModel):
    number: int


class AvailabilityResponse(BaseModel):
    number: int
    available: bool


def create_app(
    config: PrefixDirectoryConfig | None = None, *, cors_origins: Iterable[str] | None = None
) -> FastAPI:
    """Construct a FastAPI app backed by PrefixDirectoryAPI."""

    api = build_api(config)
    app = FastAPI(title="Prefix Directory", version="0.1.0")
    app.state.api = api

    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(cors_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(InvalidCharacterError)
    async def invalid_character(request: Request, exc: InvalidCharacterError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.get("/healthz", status_code=status.HTTP_200_OK)
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/autocomplete/input", response_model=SuggestionsResponse)
    def autocomplete_input(payload: InputRequest) -> SuggestionsResponse:
        return SuggestionsResponse(suggestions=app.state.api.input(payload.char))

    @app.get("/autocomplete/snapshot", response_model=list[SentenceRecord])
    def autocomplete_snapshot() -> list[SentenceRecord]:
        return app.state.api.sentences()

    @app.post("/directory/get", response_model=NumberResponse)
    def directory_get() -> NumberResponse:
        return NumberResponse(number=app.state.api.get_number())

    @app.get("/directory/check/{number}", response_model=AvailabilityResponse)
    def directory_check(number: int) -> AvailabilityResponse:
        return AvailabilityResponse(number=number, available=app.state.api.check_number(number))

    @app.post("/directory/release", response_model=AvailabilityResponse)
    def directory_release(payload: NumberRequest) -> AvailabilityResponse:
        available = app.state.api.release_number(payload.number)
        return AvailabilityResponse(number=payload.number, available=available)

    @app.get("/directory/snapshot", response_model=DirectorySnapshot)
    def directory_snapshot() -> DirectorySnapshot:
        return app.state.api.directory_snapshot()

    return app


def run(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the prefix directory HTTP service.")
    parser.add_argument("--host", default="127.0.0.1", help="Host interface to bind.")
    parser.add_argument("--port", type=int, default=8000, help="TCP port for the service.")
    parser.add_argument(
        "--max-numbers", type=int, default=1000, help="Size of the phone directory."
    )
    parser.add_argument(
        "--top-k", type=int, default=3, help="Suggestions returned per keystroke."
    )
    parser.add_argument(
        "--seed",
        action="append",
        type=parse_seed,
        default=[],
        metavar="SENTENCE=COUNT",
        help="Historical sentence with its count (repeatable).",
    )
    parser.add_argument(
        "--cors-origin",
        action="append",
        dest="cors_origins",
        default=None,
        help="Optional CORS origin (repeatable).",
    )
    args = parser.parse_args(argv)

    config = PrefixDirectoryConfig(
        seed_sentences=[sentence for sentence, _ in args.seed],
        seed_times=[count for _, count in args.seed],
        max_numbers=args.max_numbers,
        autocomplete=AutocompleteConfig(top_k=args.top_k),
    )
    app = create_app(config=config, cors_origins=args.cors_origins)
    uvicorn.run(app, host=args.host, port=args.port, log_level="info")


app = create_app()
