"""Power functions of the form k * x^e."""

from __future__ import annotations

from .function import Function, _fmt, _ieee_pow


class Power(Function):
    """y = k * x^e."""

    def __init__(self, k: float = 0.0, e: float = 0.0) -> None:
        self.set(k, e)

    def set(self, k: float, e: float) -> None:
        """Set the multiplier and the exponent."""
        self.k = k
        self.e = e

    def value(self, x: float) -> float:
        return self.k * _ieee_pow(x, self.e)

    def reset(self) -> None:
        """Set both coefficients to zero."""
        self.set(0, 0)

    def copy_from(self, other: Power) -> None:
        """Take over the coefficients of another power function."""
        self.set(other.k, other.e)

    def describe(self) -> str:
        return f"Dump of Power\n{_fmt(self.k)}x^{_fmt(self.e)}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Power):
            return NotImplemented
        return self.k == other.k and self.e == other.e

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Power(k={self.k!r}, e={self.e!r})"