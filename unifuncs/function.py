"""Abstract base for real functions of a single real variable."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TextIO


def _fmt(number: float) -> str:
    """Format a float the way a default-configured output stream does."""
    return f"{number:g}"


def _is_odd_integer(number: float) -> bool:
    return math.isfinite(number) and float(number).is_integer() and number % 2 == 1


def _ieee_pow(base: float, exponent: float) -> float:
    """Raise base to exponent, yielding inf or nan where math.pow would raise."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if _is_odd_integer(exponent) and math.copysign(1.0, base) < 0:
                return -math.inf
            return math.inf
        return math.nan


class Function(ABC):
    """A real-valued function of one real variable."""

    @abstractmethod
    def value(self, x: float) -> float:
        """Evaluate the function at x."""

    def __call__(self, x: float) -> float:
        return self.value(x)

    @abstractmethod
    def describe(self) -> str:
        """Return the text that dump writes."""

    def dump(self, file: TextIO | None = None) -> None:
        """Write a description of the function to file (standard output by default)."""
        print(self.describe(), file=file, flush=True)

    def error_message(self, message: str, file: TextIO | None = None) -> None:
        """Write an error notice to file (standard output by default)."""
        print(f"\n[ ERROR ] {message}", file=file, flush=True)

    def warning_message(self, message: str, file: TextIO | None = None) -> None:
        """Write a warning notice to file (standard output by default)."""
        print(f"\n[ WARNING ] {message}", file=file, flush=True)