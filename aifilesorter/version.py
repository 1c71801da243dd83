"""Dotted numeric version numbers with zero-padded comparison."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest


class Version:
    """A version made of integer segments, e.g. ``1.2.3``.

    Missing trailing segments compare as zero, so ``1.2`` equals ``1.2.0``.
    """

    __slots__ = ("digits",)

    def __init__(self, *args: int | Iterable[int]) -> None:
        if len(args) == 1 and not isinstance(args[0], int):
            segments = tuple(args[0])
        else:
            segments = args
        self.digits: tuple[int, ...] = tuple(int(segment) for segment in segments)

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Build a version from a string such as ``"1.2.3"``.

        An empty string gives an empty version; a segment that is not an
        integer raises ``ValueError``.
        """
        if not text:
            return cls()
        return cls(int(segment) for segment in text.split("."))

    def _compare(self, other: "Version") -> int:
        for lhs, rhs in zip_longest(self.digits, other.digits, fillvalue=0):
            if lhs != rhs:
                return 1 if lhs > rhs else -1
        return 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) >= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) > 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) <= 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) == 0

    def __hash__(self) -> int:
        digits = list(self.digits)
        while digits and digits[-1] == 0:
            digits.pop()
        return hash(tuple(digits))

    def __str__(self) -> str:
        if not self.digits:
            return "0"
        return ".".join(str(digit) for digit in self.digits)

    def __repr__(self) -> str:
        return f"Version({', '.join(str(digit) for digit in self.digits)})"