import pytest

from mindset.linq import (
    Query,
    characters,
    doubled,
    select,
    select_many,
    transformed_flattened,
)


def test_select_keeps_length_and_order():
    source = [3, 1, 2]
    result = list(select(source, lambda n: n * 10))

    assert len(result) == len(source)
    assert result == [30, 10, 20]


def test_select_applies_selector_per_element():
    words = ["a", "bb", "ccc"]
    assert list(select(words, len)) == [1, 2, 3]


def test_select_on_empty_source():
    assert list(select([], lambda n: n)) == []


@pytest.mark.parametrize(
    "source",
    [
        [[1, 2], [3], []],
        [[], [], []],
        [["x"], ["y", "z"]],
    ],
)
def test_select_many_length_is_sum_of_sub_sequences(source: list[list[object]]):
    result = list(select_many(source, lambda inner: inner))
    assert len(result) == sum(len(inner) for inner in source)


def test_select_many_concatenates_in_source_order():
    result = list(select_many([1, 2, 3], lambda n: [n] * n))
    assert result == [1, 2, 2, 3, 3, 3]


def test_select_many_skips_empty_sub_sequences():
    result = list(select_many(["ab", "", "c"], lambda word: word))
    assert result == ["a", "b", "c"]


def test_select_many_flattens_strings_into_characters():
    assert list(select_many(["Hi", "Bye"], lambda word: word)) == ["H", "i", "B", "y", "e"]


def test_select_is_lazy():
    calls: list[int] = []

    def selector(n: int) -> int:
        calls.append(n)
        return n

    result = select([1, 2, 3], selector)
    assert calls == []

    next(result)
    assert calls == [1]


def test_select_does_not_mutate_source():
    source = [1, 2, 3]
    list(select(source, lambda n: n + 1))
    list(select_many(source, lambda n: [n, n]))
    assert source == [1, 2, 3]


def test_lesson_values():
    assert doubled() == [2, 4, 6]
    assert characters() == ["H", "i", "B", "y", "e"]
    assert transformed_flattened() == [2, 4, 6, 8, 10, 12, 14, 16, 18]


def test_query_chains_select_and_select_many():
    query = Query([[1, 2], [3]]).select_many(lambda xs: xs).select(str)
    assert query.to_list() == ["1", "2", "3"]


def test_query_can_be_iterated_twice():
    query = Query([1, 2, 3]).select(lambda n: n * 2)
    assert list(query) == list(query) == [2, 4, 6]


def test_query_steps_return_new_queries():
    base = Query([1, 2])
    doubled_query = base.select(lambda n: n * 2)

    assert doubled_query is not base
    assert base.to_list() == [1, 2]
