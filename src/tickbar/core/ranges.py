"""Arithmetic integer sequences for ``trange``."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterator, Optional, Union


class IntRange(Sequence):
    """The integers ``[first, last)`` stepping by ``step``.

    ``IntRange(5)`` is ``0, 1, 2, 3, 4``; ``IntRange(100, 105)`` is
    ``100 ... 104``. A negative step counts down.
    """

    __slots__ = ("first", "last", "step")

    def __init__(self, first: int, last: Optional[int] = None, step: int = 1):
        if last is None:
            first, last = 0, first
        if step == 0:
            raise ValueError("IntRange step must not be zero")
        self.first = int(first)
        self.last = int(last)
        self.step = int(step)

    def __len__(self) -> int:
        span = self.last - self.first
        return max(0, -(-span // self.step))

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            start, stop, stride = index.indices(len(self))
            return IntRange(
                self.first + start * self.step,
                self.first + stop * self.step,
                self.step * stride,
            )
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("IntRange index out of range")
        return self.first + index * self.step

    def __iter__(self) -> Iterator[int]:
        value = self.first
        if self.step > 0:
            while value < self.last:
                yield value
                value += self.step
        else:
            while value > self.last:
                yield value
                value += self.step

    def __repr__(self) -> str:
        if self.step == 1:
            return f"IntRange({self.first}, {self.last})"
        return f"IntRange({self.first}, {self.last}, {self.step})"
