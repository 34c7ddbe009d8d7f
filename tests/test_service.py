from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from prefix_directory.api import PrefixDirectoryAPI, build_api
from prefix_directory.models import AutocompleteConfig, PrefixDirectoryConfig


def test_facade_routes_both_components() -> None:
    api = PrefixDirectoryAPI(
        PrefixDirectoryConfig(
            seed_sentences=["i love you", "island"],
            seed_times=[5, 3],
            max_numbers=2,
            autocomplete=AutocompleteConfig(top_k=1),
        )
    )

    assert api.input("i") == ["i love you"]
    assert api.input("#") == []
    assert [(r.text, r.frequency) for r in api.sentences()] == [
        ("i love you", 5),
        ("island", 3),
        ("i", 1),
    ]

    assert api.get_number() == 0
    assert api.check_number(0) is False
    assert api.release_number(0) is True
    assert api.release_number(1) is True
    assert api.directory_snapshot().released == [0]


def test_concurrent_gets_hand_out_distinct_numbers() -> None:
    api = build_api(PrefixDirectoryConfig(max_numbers=200))

    with ThreadPoolExecutor(max_workers=8) as pool:
        numbers = list(pool.map(lambda _: api.get_number(), range(250)))

    issued = [n for n in numbers if n != -1]
    assert sorted(issued) == list(range(200))
    assert numbers.count(-1) == 50
