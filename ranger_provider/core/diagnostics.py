"""Structured diagnostics returned to the host runtime.

The host collects diagnostics instead of catching exceptions. Every lifecycle
operation returns a `Result` that carries either a value or at least one
error `Diagnostic`, never both.

Usage:
- Build a `Diagnostics` collection, call `add_error` / `add_warning` /
  `add_attribute_error` as problems are found.
- Wrap the outcome in `Result(value=..., diagnostics=...)`; check `ok`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class Severity(str, Enum):
    """Severity of a diagnostic as understood by the host runtime."""
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """One (severity, summary, detail) record.

    Attributes
    ----------
    severity:
        Whether the host should fail the operation or only surface a warning.
    summary:
        Short, operation-specific headline (e.g. "Error creating policy").
    detail:
        Full explanation, usually ending with the underlying error text.
    attribute:
        Optional configuration attribute the diagnostic is scoped to.
    """

    severity: Severity
    summary: str
    detail: str
    attribute: Optional[str] = None


class Diagnostics:
    """Ordered, append-only collection of `Diagnostic` records."""

    def __init__(self, items: Optional[Iterable[Diagnostic]] = None) -> None:
        self._items: List[Diagnostic] = list(items or [])

    def append(self, diagnostic: Diagnostic) -> None:
        self._items.append(diagnostic)

    def extend(self, other: Iterable[Diagnostic]) -> None:
        for d in other:
            self._items.append(d)

    def add_error(self, summary: str, detail: str) -> None:
        self.append(Diagnostic(Severity.ERROR, summary, detail))

    def add_warning(self, summary: str, detail: str) -> None:
        self.append(Diagnostic(Severity.WARNING, summary, detail))

    def add_attribute_error(self, attribute: str, summary: str, detail: str) -> None:
        self.append(Diagnostic(Severity.ERROR, summary, detail, attribute=attribute))

    def has_error(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self._items)

    def errors(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity is Severity.ERROR]

    def warnings(self) -> List[Diagnostic]:
        return [d for d in self._items if d.severity is Severity.WARNING]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Diagnostics({self._items!r})"


@dataclass
class Result(Generic[T]):
    """Outcome of a lifecycle operation.

    An ok result with ``value=None`` means the entity has no state any more
    (deleted, or found missing on read) and the host should drop it.
    """

    value: Optional[T] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    def __post_init__(self) -> None:
        if self.value is not None and self.diagnostics.has_error():
            raise ValueError("A result cannot carry both a value and error diagnostics")

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_error()

    @classmethod
    def failure(cls, diagnostics: Diagnostics) -> "Result[T]":
        if not diagnostics.has_error():
            raise ValueError("A failed result needs at least one error diagnostic")
        return cls(value=None, diagnostics=diagnostics)
