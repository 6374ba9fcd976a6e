"""How an adapter holds the iterable it traverses.

Three holders share one adapter implementation:

* ``OwnedHolder``: the adapter is the only owner (a private copy, a range it
  built itself, or a one-shot iterator it will consume).
* ``BorrowedMutHolder``: a reference to the caller's mutable sequence;
  elements may be replaced through the adapter, resizing is rejected.
* ``BorrowedConstHolder``: a reference to the caller's iterable; nothing is
  written through the adapter.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator, MutableSequence, Sized
from typing import Any, Iterable, Optional

from tickbar.exceptions import ReadOnlySequenceError, SequenceResizedError


class Holder:
    """Common behaviour of the three holding modes."""

    kind = "holder"
    writable = False

    def __init__(self, source: Iterable[Any], total: Optional[int] = None):
        self.source = source
        self._total = total

    def total(self) -> Optional[int]:
        """Explicit total if one was given, else the length when it is known."""
        if self._total is not None:
            return self._total
        return self.length()

    def length(self) -> Optional[int]:
        if isinstance(self.source, Sized):
            return len(self.source)
        return None

    def open(self) -> Iterator:
        return iter(self.source)

    def check_size(self, expected: Optional[int]) -> None:
        if expected is None:
            return
        actual = self.length()
        if actual is not None and actual != expected:
            raise SequenceResizedError(
                f"{self.kind} sequence changed size during traversal "
                f"({expected} -> {actual})",
                expected=expected,
                actual=actual,
            )

    def store(self, index: int, value: Any) -> None:
        if not self.writable:
            raise ReadOnlySequenceError(
                f"cannot assign through a {self.kind} holder over "
                f"{type(self.source).__name__}"
            )
        self.source[index] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self.source).__name__})"


class OwnedHolder(Holder):
    """The adapter owns the iterable outright."""

    kind = "owned"

    def __init__(self, source: Iterable[Any], total: Optional[int] = None):
        super().__init__(source, total)
        self.writable = isinstance(source, MutableSequence)

    def length(self) -> Optional[int]:
        if isinstance(self.source, Iterator):
            hint = operator.length_hint(self.source, -1)
            return hint if hint >= 0 else None
        return super().length()

    def check_size(self, expected: Optional[int]) -> None:
        # A consumed iterator shrinks by design
        if isinstance(self.source, Iterator):
            return
        super().check_size(expected)


class BorrowedMutHolder(Holder):
    """Borrows the caller's mutable sequence; elements may be replaced in place."""

    kind = "mutable borrow"
    writable = True


class BorrowedConstHolder(Holder):
    """Borrows the caller's iterable read-only."""

    kind = "read-only borrow"


def resolve_holder(
    iterable: Iterable[Any],
    total: Optional[int] = None,
    owned: bool = False,
    readonly: bool = False,
) -> Holder:
    """Pick the holder for ``iterable``.

    An explicit ``owned`` request takes a private list copy. A one-shot
    iterator is owned as-is since the adapter becomes its only consumer. A
    mutable sequence is borrowed mutably unless ``readonly`` is set; anything
    else is borrowed read-only.
    """
    if owned:
        holder = OwnedHolder(list(iterable), total)
        if readonly:
            holder.writable = False
        return holder
    if isinstance(iterable, Iterator):
        return OwnedHolder(iterable, total)
    if isinstance(iterable, MutableSequence) and not readonly:
        return BorrowedMutHolder(iterable, total)
    return BorrowedConstHolder(iterable, total)
