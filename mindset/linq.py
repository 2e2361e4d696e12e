"""
Collection transformations in the style of LINQ's `Select` and `SelectMany`.

`select` is a map: every element goes through the selector and the result has
exactly as many elements as the source.

`select_many` maps every element to a sub-sequence and flattens the
sub-sequences, in source order, into a single sequence.

>>> list(select([1, 2, 3], lambda n: n * 2))
[2, 4, 6]
>>> list(select_many(["Hi", "Bye"], lambda word: word))
['H', 'i', 'B', 'y', 'e']

Both are lazy: nothing is computed until the result is iterated.
"""

from itertools import chain
from typing import Callable, Generic, Iterable, Iterator

from .interfaces import ManySelector, R, Selector, T


def select(source: Iterable[T], selector: Selector[T, R]) -> Iterator[R]:
    return map(selector, source)


def select_many(source: Iterable[T], selector: ManySelector[T, R]) -> Iterator[R]:
    return chain.from_iterable(map(selector, source))


class Query(Generic[T]):
    """
    A re-iterable, chainable view over a source sequence.

    ```python
    Query([[1, 2], [3]]).select_many(lambda xs: xs).select(str).to_list()
    # ['1', '2', '3']
    ```

    Each step returns a new `Query`; the source is never mutated.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Iterable[T]):
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._source!r})"

    def select(self, selector: Selector[T, R]) -> "Query[R]":
        source = self._source
        return Query(_Deferred(lambda: select(source, selector)))

    def select_many(self, selector: ManySelector[T, R]) -> "Query[R]":
        source = self._source
        return Query(_Deferred(lambda: select_many(source, selector)))

    def to_list(self) -> list[T]:
        return list(self)


class _Deferred(Generic[T]):
    "Re-creates its iterator on every iteration so a Query can be consumed twice"

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterator[T]]):
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def __repr__(self) -> str:
        return "<deferred>"


# ============== Lesson values ===========


def doubled() -> list[int]:
    numbers = [1, 2, 3]
    return list(select(numbers, lambda n: n * 2))


def characters() -> list[str]:
    words = ["Hi", "Bye"]
    return list(select_many(words, lambda word: word))


def transformed_flattened() -> list[int]:
    nested_ints = [
        [1, 2, 3],
        [4, 5, 6],
        [7, 8, 9],
    ]
    return list(
        select_many(nested_ints, lambda inner: select(inner, lambda n: n * 2))
    )
