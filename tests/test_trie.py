from __future__ import annotations

from prefix_directory.trie import SentenceTrie, first_invalid_char, top_k


def test_insert_and_find_tracks_terminals() -> None:
    trie = SentenceTrie()
    trie.insert("island", 3)
    trie.insert("is", 1)

    assert len(trie) == 2
    assert trie.frequency("island") == 3
    assert trie.frequency("is") == 1
    assert trie.frequency("isl") == 0
    assert trie.find("iz") is None


def test_insert_overwrites_frequency() -> None:
    trie = SentenceTrie()
    trie.insert("ab", 1)
    trie.insert("ab", 4)

    assert len(trie) == 1
    assert trie.frequency("ab") == 4


def test_search_collects_everything_under_prefix() -> None:
    trie = SentenceTrie()
    for text, freq in [("ab", 1), ("abc", 1), ("abd", 1), ("b", 9)]:
        trie.insert(text, freq)

    assert sorted(trie.iter_terminals(trie.find("ab"), "ab")) == [
        ("ab", 1),
        ("abc", 1),
        ("abd", 1),
    ]
    assert trie.search("ab", k=10) == ["ab", "abc", "abd"]
    assert trie.search("c") == []


def test_top_k_orders_by_frequency_then_text() -> None:
    candidates = [("i love you", 5), ("island", 3), ("ironman", 2), ("i love leetcode", 2)]
    assert top_k(candidates, 3) == ["i love you", "island", "i love leetcode"]


def test_space_sorts_before_letters_on_ties() -> None:
    assert top_k([("ab", 1), ("a b", 1), ("aa", 1)], 3) == ["a b", "aa", "ab"]


def test_first_invalid_char() -> None:
    assert first_invalid_char("hello world") is None
    assert first_invalid_char("Hello") == "H"
    assert first_invalid_char("a#b") == "#"
