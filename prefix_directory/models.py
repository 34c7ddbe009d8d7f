"""Typed data models used across the autocomplete and directory components."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SentenceRecord(BaseModel):
    """A committed sentence and how often it was entered."""

    text: str
    frequency: int = Field(..., ge=1)


class DirectorySnapshot(BaseModel):
    """Point-in-time view of a phone directory."""

    capacity: int = Field(..., ge=0)
    high_water_mark: int = Field(..., ge=0)
    released: list[int] = Field(default_factory=list)
    available_count: int = Field(..., ge=0)


class AutocompleteConfig(BaseModel):
    """Runtime switches for the autocomplete system."""

    top_k: int = Field(3, ge=1)
    commit_char: str = Field("#", min_length=1, max_length=1)
    strict: bool = True


class PrefixDirectoryConfig(BaseModel):
    """Configuration for the facade owning both components."""

    seed_sentences: list[str] = Field(default_factory=list)
    seed_times: list[int] = Field(default_factory=list)
    max_numbers: int = Field(1000, ge=0)
    autocomplete: AutocompleteConfig = Field(default_factory=AutocompleteConfig)
