from typing import Callable, Iterable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
R = TypeVar("R")

Selector = Callable[[T], R]
"""
per-element transformation used by `select`
"""

ManySelector = Callable[[T], Iterable[R]]
"""
per-element transformation into a sub-sequence used by `select_many`
"""


@runtime_checkable
class IOutput(Protocol):
    """
    Where collaborators send their observable effects.
    """

    def write(self, line: str) -> None: ...


@runtime_checkable
class Named(Protocol):
    name: str


@runtime_checkable
class Addressable(Protocol):
    email: str
