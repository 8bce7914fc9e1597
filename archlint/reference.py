"""Source code references and values bound to them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

__all__ = [
    "Reference",
    "Referable",
    "Project",
    "single_line_reference",
    "range_reference",
    "empty_reference",
    "empty_referable",
]

T = TypeVar("T")

_MAX_INT32 = 2**31 - 1
_UNKNOWN = "<unknown_file_ref>"


def _clamp(num: int, a: int, b: int) -> int:
    low, high = (a, b) if a <= b else (b, a)
    return max(low, min(num, high))


# Field metadata key "json" holds the serialized field name; None omits the field.
@dataclass(frozen=True)
class Reference:
    """A location in a file: a main line inside a line range, plus a column."""

    valid: bool = field(default=False, metadata={"json": "Valid"})
    file: str = field(default="", metadata={"json": "File"})
    line: int = field(default=0, metadata={"json": "Line"})
    line_from: int = field(default=0, metadata={"json": None})
    line_to: int = field(default=0, metadata={"json": None})
    column: int = field(default=0, metadata={"json": "Offset"})

    def __str__(self) -> str:
        if not self.valid:
            return _UNKNOWN
        return f"{self.file}:{self.line}"

    def extend_range(self, lower: int, upper: int) -> Reference:
        """Grow the line range by ``lower`` lines up and ``upper`` lines down."""
        if not self.valid:
            return self
        return replace(
            self, line_from=self.line_from - lower, line_to=self.line_to + upper
        )._settled()

    def clamp_with_real_lines_count(self, lines_count: int) -> Reference:
        """Clamp every line into ``1..lines_count``."""
        if not self.valid:
            return self
        return replace(
            self,
            line_from=_clamp(self.line_from, 1, lines_count),
            line=_clamp(self.line, 1, lines_count),
            line_to=_clamp(self.line_to, 1, lines_count),
        )._settled()

    def _settled(self) -> Reference:
        if not self.file:
            return Reference()
        line_from, line_to = sorted((self.line_from, self.line_to))
        line_from = _clamp(line_from, 1, line_to)
        line_to = _clamp(line_to, line_from, _MAX_INT32)
        return Reference(
            valid=True,
            file=self.file,
            line=_clamp(self.line, line_from, line_to),
            line_from=line_from,
            line_to=line_to,
            column=_clamp(self.column, 0, _MAX_INT32),
        )


@dataclass(frozen=True)
class Referable(Generic[T]):
    """A value together with the place it was defined."""

    value: T
    reference: Reference = field(default_factory=Reference)


@dataclass(frozen=True)
class Project:
    """Location and module information of an analysed project."""

    directory: str
    go_arch_file_path: str
    go_mod_file_path: str
    module_name: str


def single_line_reference(file: str, line: int, column: int) -> Reference:
    """Reference pointing to one line and column."""
    return Reference(
        valid=True, file=file, line=line, line_from=line, line_to=line, column=column
    )._settled()


def range_reference(file: str, line_from: int, line_main: int, line_to: int) -> Reference:
    """Reference covering ``line_from..line_to`` with a main line inside it."""
    return Reference(
        valid=True,
        file=file,
        line=line_main,
        line_from=line_from,
        line_to=line_to,
        column=0,
    )._settled()


def empty_reference() -> Reference:
    """Reference that points nowhere."""
    return Reference()


def empty_referable(value: T) -> Referable[T]:
    """Wrap ``value`` without a known source location."""
    return Referable(value, empty_reference())