"""Exceptions raised for caller mistakes."""

from __future__ import annotations


class PrefixDirectoryError(Exception):
    """Base class for errors raised by this package."""


class InvalidCharacterError(PrefixDirectoryError, ValueError):
    """A character outside the autocomplete alphabet was supplied."""

    def __init__(self, char: str, *, context: str = "input") -> None:
        self.char = char
        super().__init__(f"unsupported character {char!r} in {context}")


class SeedMismatchError(PrefixDirectoryError, ValueError):
    """Seed sentences and seed counts differ in length."""

    def __init__(self, sentences: int, times: int) -> None:
        self.sentences = sentences
        self.times = times
        super().__init__(f"got {sentences} seed sentences but {times} seed counts")
