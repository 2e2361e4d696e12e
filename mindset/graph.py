"""
A small dependency graph: builds collaborators from the annotations of their
constructors, so the output boundary they write through is chosen in one place.

```python
graph = Graph()
graph.register_singleton(CapturingOutput(), IOutput)

repository = graph.resolve(UserRepository)
assert isinstance(repository.output, CapturingOutput)
```
"""

import logging
from abc import ABC
from inspect import Parameter, isabstract, signature
from types import MappingProxyType, UnionType
from typing import Any, Final, Generic, Protocol, TypeVar, Union, get_args, get_origin

from .errors import (
    CircularDependencyDetectedError,
    PositionalOverrideError,
    UnsolvableDependencyError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

VAR_KINDS: Final[tuple[Any, ...]] = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)

IGNORED_BASES: Final[tuple[Any, ...]] = (object, ABC, Protocol, Generic)

BUILTIN_TYPES: Final[tuple[type, ...]] = (
    int, float, complex, str, bool, bytes, bytearray,
    list, tuple, dict, set, frozenset, type, type(None),
)  # fmt: skip


def resolve_annotation(annotation: Any) -> Any:
    """
    Optional[IOutput] -> IOutput
    Union[IOutput, None] -> IOutput
    """
    if get_origin(annotation) in (Union, UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return args[0] if args else annotation
    return annotation


def is_unsolvable(dependent: Any) -> bool:
    if not isinstance(dependent, type) or get_origin(dependent) or dependent in BUILTIN_TYPES:
        return True
    return bool(getattr(dependent, "_is_protocol", False)) or isabstract(dependent)


class Graph:
    """
    Maps a type to the class that builds it, and keeps what it built.

    Registering a class also registers it for every base it can stand in for,
    the last registration for a type wins.
    """

    __slots__ = ("_nodes", "_singletons", "_resolved")

    def __init__(self) -> None:
        self._nodes: dict[type, type] = {}
        self._singletons: dict[type, Any] = {}
        self._resolved: dict[type, Any] = {}

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"nodes={len(self._nodes)}, "
            f"resolved={len(self.resolved)})"
        )

    def __contains__(self, dependent: Any) -> bool:
        return dependent in self._nodes

    @property
    def nodes(self) -> "MappingProxyType[type, type]":
        return MappingProxyType(self._nodes)

    @property
    def resolved(self) -> "MappingProxyType[type, Any]":
        return MappingProxyType({**self._resolved, **self._singletons})

    def node(self, dependent: type[T]) -> type[T]:
        """
        Register a class, usable as a class decorator.

        ```python
        @graph.node
        class ConsoleOutput(IOutput): ...

        graph.resolve(IOutput)  # a ConsoleOutput
        ```
        """
        for base in dependent.__mro__:
            if base in IGNORED_BASES:
                continue
            self._nodes[base] = dependent
            self._singletons.pop(base, None)
        # instances built before may hold what the bases used to stand for
        self._resolved.clear()

        logger.debug("registered %s", dependent.__name__)
        return dependent

    def register_singleton(self, instance: Any, dependent_type: Union[type, None] = None) -> None:
        dependent_type = dependent_type or type(instance)
        self._nodes[dependent_type] = type(instance)
        self._singletons[dependent_type] = instance
        self._resolved.clear()

    def resolve(self, dependent: type[T], /, *args: Any, **overrides: Any) -> T:
        """
        Build `dependent` and everything it needs.

        Keyword overrides replace parameters by name at any depth,
        resolves with overrides are never cached.
        """
        if args:
            raise PositionalOverrideError(args)
        return self._resolve(dependent, overrides, [])

    def _resolve(self, dependent: type[T], overrides: dict[str, Any], path: list[type]) -> T:
        if dependent in self._singletons:
            return self._singletons[dependent]
        if not overrides and dependent in self._resolved:
            return self._resolved[dependent]

        if dependent in path:
            raise CircularDependencyDetectedError(path[path.index(dependent) :] + [dependent])

        concrete = self._nodes.get(dependent, dependent)
        if is_unsolvable(concrete):
            raise UnsolvableDependencyError(
                f"Unable to build {getattr(dependent, '__name__', dependent)}, "
                "register an implementation or provide it as an override"
            )

        path.append(dependent)
        params: dict[str, Any] = {}
        for name, param in signature(concrete, eval_str=True).parameters.items():
            if param.kind in VAR_KINDS:
                continue
            if name in overrides:
                params[name] = overrides[name]
                continue

            has_default = param.default is not Parameter.empty
            param_type = resolve_annotation(param.annotation)
            # a default wins over anything the graph would have to guess
            if has_default and param_type not in self._nodes:
                continue

            if param_type is Parameter.empty:
                raise UnsolvableDependencyError(
                    f"Parameter {name!r} of {concrete.__name__} needs an annotation or a default"
                )

            try:
                params[name] = self._resolve(param_type, overrides, path)
            except UnsolvableDependencyError as ude:
                ude.add_context(concrete, name, param_type)
                raise

        path.pop()
        instance = concrete(**params)
        logger.debug("resolved %s as %s", dependent.__name__, concrete.__name__)

        if not overrides:
            self._resolved[dependent] = instance
            self._resolved.setdefault(concrete, instance)
        return instance
