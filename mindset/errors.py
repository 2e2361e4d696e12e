from typing import Any, Iterable


class MindsetError(Exception):
    """
    Base class for all mindset exceptions.
    """

    def __init__(self, message: str, /):
        self.message = message
        super().__init__(self.message)


# =============== Lesson Errors ===============


class UnknownLessonError(MindsetError):
    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = tuple(available)
        choices = ", ".join(repr(n) for n in self.available)
        super().__init__(f"Unknown lesson {name!r}, choose from: {choices}")


# =============== Graph Errors ===============


class GraphError(MindsetError):
    """
    Base class for all graph related exceptions.
    """


class PositionalOverrideError(GraphError):
    """
    Raised when a positional override is used.
    """

    def __init__(self, args: Any):
        super().__init__(
            f"Positional overrides {args} are not supported, use keyword arguments instead"
        )


class UnsolvableDependencyError(GraphError):
    """
    Raised when the graph can't build a dependency: a builtin, a protocol or ABC
    with nothing registered for it, or a parameter with neither annotation nor default.

    Every dependent on the way down adds a note, outermost last:
    `-> UserRepository(output: IOutput)`
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.__notes__: list[str] = []

    def add_context(self, dependent: Any, param_name: str, param_type: Any) -> None:
        dep_repr = getattr(dependent, "__name__", str(dependent))
        type_repr = getattr(param_type, "__name__", str(param_type))
        self.__notes__.append(f"-> {dep_repr}({param_name}: {type_repr})")


class CircularDependencyDetectedError(GraphError):
    """Raised when a circular dependency is detected in the dependency graph."""

    def __init__(self, cycle_path: list[type]):
        cycle_str = " -> ".join(t.__name__ for t in cycle_path)
        self._cycle_path = cycle_path
        super().__init__(f"Circular dependency detected: {cycle_str}")

    @property
    def cycle_path(self) -> list[type]:
        return self._cycle_path
