"""Exponential functions of the form k * b^(c*x)."""

from __future__ import annotations

from .function import Function, _fmt, _ieee_pow


class Exponential(Function):
    """y = k * b^(c*x), with b kept strictly positive."""

    def __init__(self, k: float = 0.0, b: float = 1.0, c: float = 0.0) -> None:
        self.set(k, b, c)

    def set(self, k: float, b: float, c: float) -> None:
        """Set all coefficients; a base that is not positive is replaced by 1."""
        self._k = k
        if b > 0:
            self._b = b
        else:
            self.error_message("B coeff should be > 0,\n\t  b_coeff set to 1")
            self._b = 1.0
        self._c = c

    @property
    def k(self) -> float:
        return self._k

    @k.setter
    def k(self, value: float) -> None:
        self.set(value, self._b, self._c)

    @property
    def b(self) -> float:
        return self._b

    @b.setter
    def b(self, value: float) -> None:
        self.set(self._k, value, self._c)

    @property
    def c(self) -> float:
        return self._c

    @c.setter
    def c(self, value: float) -> None:
        self.set(self._k, self._b, value)

    def value(self, x: float) -> float:
        return self._k * _ieee_pow(self._b, self._c * x)

    def reset(self) -> None:
        """Set every coefficient to zero (the base then falls back to 1)."""
        self.set(0, 0, 0)

    def copy_from(self, other: Exponential) -> None:
        """Take over the coefficients of another exponential."""
        self.set(other._k, other._b, other._c)

    def describe(self) -> str:
        return f"Dump of Exponential\n{_fmt(self._k)}*{_fmt(self._b)}^({_fmt(self._c)} x)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Exponential):
            return NotImplemented
        return (self._k, self._b, self._c) == (other._k, other._b, other._c)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Exponential(k={self._k!r}, b={self._b!r}, c={self._c!r})"