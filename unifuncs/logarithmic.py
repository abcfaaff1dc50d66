"""Logarithmic functions of the form k * log_b(x)."""

from __future__ import annotations

import math

from .function import Function, _fmt


def _log2(x: float) -> float:
    return -math.inf if x == 0 else math.log2(x)


class Logarithmic(Function):
    """y = k * log_b(x), with b positive and different from 1."""

    def __init__(self, b: float = 10.0, k: float = 0.0) -> None:
        self.set(b, k)

    def set(self, b: float, k: float) -> None:
        """Set base and coefficient; an invalid base is replaced by 10."""
        if b > 0.0 and b != 1:
            self._b = b
        else:
            self.error_message("Cannot set base < 0 or equal to 1,\n\t  b_coef set to 10")
            self._b = 10.0
        self._k = k

    @property
    def b(self) -> float:
        return self._b

    @b.setter
    def b(self, value: float) -> None:
        self.set(value, self._k)

    @property
    def k(self) -> float:
        return self._k

    @k.setter
    def k(self, value: float) -> None:
        self.set(self._b, value)

    def value(self, x: float) -> float:
        if x < 0:
            self.error_message("'in' value should be > 0")
            return 0.0
        return self._k * (_log2(x) / _log2(self._b))

    def reset(self) -> None:
        """Restore base 10 and coefficient 0."""
        self.set(10.0, 0.0)

    def copy_from(self, other: Logarithmic) -> None:
        """Assign from another logarithmic function.

        The other's coefficient is taken as the base and its base as the
        coefficient, as assignment has always behaved.
        """
        if other is self:
            return
        self.set(other._k, other._b)

    def describe(self) -> str:
        return f"Dump of Logarithmic\n{_fmt(self._k)}log{_fmt(self._b)}(x)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Logarithmic):
            return NotImplemented
        return self._k == other._k and self._b == other._b

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Logarithmic(b={self._b!r}, k={self._k!r})"