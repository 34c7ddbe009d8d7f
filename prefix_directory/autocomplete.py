"""Search autocomplete driven one keystroke at a time."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import InvalidCharacterError, SeedMismatchError
from .models import AutocompleteConfig, SentenceRecord
from .trie import SentenceTrie, first_invalid_char, is_sentence_char, rank_key

logger = logging.getLogger(__name__)


class AutocompleteSystem:
    """Suggests the most popular past sentences for the text typed so far.

    Every call to :meth:`input` extends the pending query by one character and
    returns up to ``top_k`` sentences sharing that prefix, ranked by how often
    they were entered and then alphabetically (space sorts before letters).
    The commit character finishes the query, records it in the history and
    returns an empty list.
    """

    def __init__(
        self,
        sentences: Sequence[str] = (),
        times: Sequence[int] = (),
        *,
        config: AutocompleteConfig | None = None,
    ) -> None:
        self.config = config or AutocompleteConfig()
        if is_sentence_char(self.config.commit_char):
            raise ValueError(
                f"commit character {self.config.commit_char!r} collides with the alphabet"
            )
        if len(sentences) != len(times):
            raise SeedMismatchError(len(sentences), len(times))
        for sentence, count in zip(sentences, times):
            bad = first_invalid_char(sentence)
            if bad is not None:
                raise InvalidCharacterError(bad, context=f"seed sentence {sentence!r}")
            if count < 1:
                raise ValueError(f"seed count for {sentence!r} must be positive, got {count}")

        self.history: dict[str, int] = {}
        self.trie = SentenceTrie()
        self._buffer: list[str] = []
        for sentence, count in zip(sentences, times):
            self.history[sentence] = count
            self.trie.insert(sentence, count)
        logger.info("Seeded autocomplete with %d sentences", len(self.history))

    @property
    def pending(self) -> str:
        """Characters typed since the last commit."""
        return "".join(self._buffer)

    def input(self, c: str) -> list[str]:
        """Feed one character and return the ranked suggestions for the new prefix."""
        if c == self.config.commit_char:
            self._commit()
            return []
        if len(c) != 1 or not is_sentence_char(c):
            if self.config.strict:
                raise InvalidCharacterError(c)
            logger.debug("Ignoring unsupported character %r", c)
            return []
        self._buffer.append(c)
        return self.trie.search(self.pending, self.config.top_k)

    def type_text(self, text: str) -> list[list[str]]:
        """Feed ``text`` character by character, collecting every result."""
        return [self.input(char) for char in text]

    def frequency(self, sentence: str) -> int:
        """Number of times ``sentence`` was seeded or committed."""
        return self.history.get(sentence, 0)

    def snapshot(self) -> list[SentenceRecord]:
        """Return the whole history in ranking order."""
        ordered = sorted(self.history.items(), key=rank_key)
        return [SentenceRecord(text=text, frequency=count) for text, count in ordered]

    def _commit(self) -> None:
        sentence = self.pending
        self._buffer.clear()
        count = self.history.get(sentence, 0) + 1
        self.history[sentence] = count
        self.trie.insert(sentence, count)
        logger.debug("Committed %r (count=%d)", sentence, count)
