from __future__ import annotations

from rational import IntLike, Rational, lift_rational


class RationalRange:
    """Closed range [start, end] over Rational values.

    The endpoints are stored as given; a range whose start lies above its end
    is empty rather than an error.
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Rational | IntLike, end: Rational | IntLike):
        lo, hi = lift_rational(start), lift_rational(end)
        if lo is None or hi is None:
            raise TypeError("RationalRange endpoints must be Rational or integer")
        self._start = lo
        self._end = hi

    @property
    def start(self) -> Rational:
        return self._start

    @property
    def end(self) -> Rational:
        return self._end

    def is_empty(self) -> bool:
        return self._start.compare(self._end) > 0

    def contains(self, value: Rational | IntLike) -> bool:
        return self._start.compare(value) <= 0 and self._end.compare(value) >= 0

    def __contains__(self, value: object) -> bool:
        # integers are members by value; other foreign types never are
        if lift_rational(value) is None:
            return False
        return self.contains(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RationalRange):
            return False
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def to_string(self) -> str:
        return f"[{self._start}, {self._end}]"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"RationalRange({self._start!r}, {self._end!r})"


def range_to(start: Rational | IntLike, end: Rational | IntLike) -> RationalRange:
    return RationalRange(start, end)
