"""Prefix index over sentences with bounded ranked retrieval."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from string import ascii_lowercase

ALPHABET = frozenset(ascii_lowercase + " ")

Candidate = tuple[str, int]


def is_sentence_char(char: str) -> bool:
    """Return True when ``char`` may appear inside an indexed sentence."""
    return char in ALPHABET


def first_invalid_char(text: str) -> str | None:
    """Return the first character of ``text`` outside the alphabet, if any."""
    for char in text:
        if char not in ALPHABET:
            return char
    return None


def rank_key(candidate: Candidate) -> tuple[int, str]:
    """Sort key placing higher frequency first, then smaller text."""
    text, frequency = candidate
    return (-frequency, text)


def top_k(candidates: Iterable[Candidate], k: int = 3) -> list[str]:
    """Return the texts of the ``k`` best candidates, best first."""
    return [text for text, _ in heapq.nsmallest(k, candidates, key=rank_key)]


@dataclass
class TrieNode:
    """Single node of the prefix index."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    frequency: int = 0


class SentenceTrie:
    """Character trie whose terminal nodes carry sentence frequencies."""

    def __init__(self) -> None:
        self.root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, text: str, frequency: int) -> None:
        """Write ``frequency`` at the node spelling ``text``, creating nodes as needed."""
        node = self.root
        for char in text:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child
        if node.frequency == 0 and frequency > 0:
            self._size += 1
        node.frequency = frequency

    def find(self, prefix: str) -> TrieNode | None:
        """Return the node reached by walking ``prefix``, or None if the walk falls off."""
        node = self.root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def frequency(self, text: str) -> int:
        node = self.find(text)
        return node.frequency if node is not None else 0

    def iter_terminals(self, node: TrieNode, prefix: str) -> Iterator[Candidate]:
        """Yield ``(text, frequency)`` for every terminal at or below ``node``."""
        stack = [(node, prefix)]
        while stack:
            current, path = stack.pop()
            if current.frequency > 0:
                yield path, current.frequency
            for char, child in current.children.items():
                stack.append((child, path + char))

    def search(self, prefix: str, k: int = 3) -> list[str]:
        """Return the ``k`` highest ranked sentences starting with ``prefix``."""
        node = self.find(prefix)
        if node is None:
            return []
        return top_k(self.iter_terminals(node, prefix), k)
