import pytest
from redmine_client.core.params import normalize, query_items


@pytest.mark.parametrize(
    "value, expected",
    [
        ([], ""),
        ([7], "7"),
        ([1, 2, 3], "1,2,3"),
        (("attachments", "relations"), "attachments,relations"),
        ([True, False], "true,false"),
    ],
)
def test_sequences_are_joined(value, expected):
    assert normalize(value) == expected


def test_scalars_pass_through():
    assert normalize(5) == 5
    assert normalize("a,b") == "a,b"
    assert normalize(None) is None
    assert normalize(True) is True


def test_nested_mappings_are_normalized_at_any_depth():
    params = {
        "limit": 5,
        "include": ["journals", "watchers"],
        "filter": {"status_id": [1, 2], "deep": {"ids": [3]}},
    }

    assert normalize(params) == {
        "limit": 5,
        "include": "journals,watchers",
        "filter": {"status_id": "1,2", "deep": {"ids": "3"}},
    }


def test_normalize_does_not_mutate_input():
    params = {"issue_id": [1, 2], "nested": {"ids": [3, 4]}}

    normalize(params)

    assert params == {"issue_id": [1, 2], "nested": {"ids": [3, 4]}}


def test_normalize_is_idempotent():
    params = {"a": [1, 2], "b": {"c": [], "d": "x"}, "e": 1.5}

    once = normalize(params)

    assert normalize(once) == once


def test_query_items_flattens_nested_keys_and_drops_none():
    items = query_items(
        {"limit": 5, "sort": None, "cf": {"1": ["a", "b"]}, "include": ["journals"]}
    )

    assert ("limit", 5) in items
    assert ("cf[1]", "a,b") in items
    assert ("include", "journals") in items
    assert all(key != "sort" for key, _ in items)
