"""Public API facade sharing one autocomplete system and one phone directory."""

from __future__ import annotations

import threading

from .autocomplete import AutocompleteSystem
from .directory import PhoneDirectory
from .models import DirectorySnapshot, PrefixDirectoryConfig, SentenceRecord


class PrefixDirectoryAPI:
    """High-level façade safe to call from several threads.

    Each component is guarded by its own lock; a call holds it for exactly one
    component operation.
    """

    def __init__(self, config: PrefixDirectoryConfig) -> None:
        self.config = config
        self._autocomplete = AutocompleteSystem(
            config.seed_sentences, config.seed_times, config=config.autocomplete
        )
        self._directory = PhoneDirectory(config.max_numbers)
        self._autocomplete_lock = threading.Lock()
        self._directory_lock = threading.Lock()

    def input(self, char: str) -> list[str]:
        """Feed one character to the autocomplete system."""
        with self._autocomplete_lock:
            return self._autocomplete.input(char)

    def sentences(self) -> list[SentenceRecord]:
        """Return the autocomplete history in ranking order."""
        with self._autocomplete_lock:
            return self._autocomplete.snapshot()

    def get_number(self) -> int:
        """Hand out a phone number, or -1 when the directory is exhausted."""
        with self._directory_lock:
            return self._directory.get()

    def check_number(self, number: int) -> bool:
        with self._directory_lock:
            return self._directory.check(number)

    def release_number(self, number: int) -> bool:
        """Release ``number`` and report whether it is now available."""
        with self._directory_lock:
            self._directory.release(number)
            return self._directory.check(number)

    def directory_snapshot(self) -> DirectorySnapshot:
        with self._directory_lock:
            return self._directory.snapshot()


def build_api(config: PrefixDirectoryConfig | None = None) -> PrefixDirectoryAPI:
    """Convenience constructor with defaults."""
    return PrefixDirectoryAPI(config or PrefixDirectoryConfig())
