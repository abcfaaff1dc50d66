"""Polynomial functions c0 + c1*x + c2*x^2 + ..."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest

from .function import Function, _fmt


class Polynomial(Function):
    """A polynomial held by its coefficients, lowest degree first.

    A polynomial built without coefficients is uninitialized: it has degree -1
    and cannot be evaluated.
    """

    def __init__(self, coefficients: Iterable[float] | None = None) -> None:
        self._coeffs: tuple[float, ...] | None = None
        if coefficients is not None:
            self.set(coefficients)

    @property
    def degree(self) -> int:
        """Degree of the polynomial, or -1 when uninitialized."""
        return -1 if self._coeffs is None else len(self._coeffs) - 1

    @property
    def coefficients(self) -> tuple[float, ...] | None:
        """The coefficients, lowest degree first, or None when uninitialized."""
        return self._coeffs

    def set(self, coefficients: Iterable[float]) -> None:
        """Replace the coefficients; at least one is required."""
        values = tuple(float(c) for c in coefficients)
        if not values:
            raise ValueError(
                "SetPolynomial: the degree of the Polynomial cannot be negative"
            )
        self._coeffs = values

    def value(self, x: float) -> float:
        if self._coeffs is None:
            raise ValueError("cannot evaluate an uninitialized polynomial")
        result = self._coeffs[0]
        power = x
        for coeff in self._coeffs[1:]:
            result += coeff * power
            power *= x
        return result

    def reset(self) -> None:
        """Drop the coefficients, leaving the polynomial uninitialized."""
        self._coeffs = None

    def describe(self) -> str:
        if self._coeffs is None:
            return "Uninitialized polynomial"
        parts = []
        for i, coeff in enumerate(self._coeffs):
            if coeff == 0.0:
                continue
            term = (" +" if coeff > 0 and i > 0 else " ") + _fmt(coeff)
            if i > 0:
                term += "x"
                if i > 1:
                    term += f"^{i}"
            parts.append(term)
        return "".join(parts)

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        mine = self._coeffs or ()
        theirs = other._coeffs or ()
        return Polynomial(a + b for a, b in zip_longest(mine, theirs, fillvalue=0.0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Polynomial({list(self._coeffs) if self._coeffs is not None else None!r})"