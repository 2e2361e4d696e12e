"""
Implementations of `IOutput`, the boundary collaborators write their effects through.

- `ConsoleOutput` prints, this is what the lessons use by default.
- `CapturingOutput` keeps lines in memory so tests can assert on them.
- `LoggingOutput` turns lines into log records.
"""

import logging
import sys
from typing import IO, Iterator, Union

from typing_extensions import override

from .interfaces import IOutput


class ConsoleOutput(IOutput):
    __slots__ = ("_stream",)

    def __init__(self, stream: Union[IO[str], None] = None):
        self._stream = stream

    @override
    def write(self, line: str) -> None:
        # resolve stdout lazily, it may be swapped out after construction
        print(line, file=self._stream or sys.stdout)


class CapturingOutput(IOutput):
    __slots__ = ("_lines",)

    def __init__(self) -> None:
        self._lines: list[str] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(lines={self._lines!r})"

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __contains__(self, line: object) -> bool:
        return line in self._lines

    @property
    def lines(self) -> list[str]:
        return self._lines.copy()

    @override
    def write(self, line: str) -> None:
        self._lines.append(line)

    def clear(self) -> None:
        self._lines.clear()


class LoggingOutput(IOutput):
    __slots__ = ("_logger", "_level")

    def __init__(
        self, logger: Union[logging.Logger, None] = None, level: int = logging.INFO
    ):
        self._logger = logger or logging.getLogger(__name__)
        self._level = level

    @override
    def write(self, line: str) -> None:
        self._logger.log(self._level, line)
