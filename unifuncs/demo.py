"""Demonstration run over the function classes."""

from __future__ import annotations

import argparse
import sys
from contextlib import redirect_stdout
from typing import TextIO

from .exponential import Exponential
from .function import Function, _fmt
from .logarithmic import Logarithmic
from .power import Power

_RULE = "#" * 42


def _evaluate_all(functions: list[Function], x: float, label: str) -> None:
    for function in functions:
        function.dump()
        print(f"value in x= {label} : ", end="")
        result = function(x)
        print(f"{_fmt(result)}\n")


def run(file: TextIO | None = None) -> None:
    """Exercise every function class, writing the report to file (stdout by default)."""
    with redirect_stdout(file if file is not None else sys.stdout):
        e1 = Exponential()
        e2 = Exponential(1, 2, 1)
        l1 = Logarithmic(10, 5)
        l2 = Logarithmic()
        p0 = Power()
        p1 = Power(-2, 4)
        p2 = Power(1, 0)

        e1.set(1, 2, 0)
        functions: list[Function] = [e1, e2, l1, l2, p0, p1, p2]

        _evaluate_all(functions, 3.0, "3")
        print(_RULE)
        e2.b = -1
        print(_RULE)
        _evaluate_all(functions, -5.0, "-5")

        print(_RULE)
        pairs = (("E1", "E2", e1, e2), ("L1", "L2", l1, l2), ("P1", "P2", p1, p2))
        for left_name, right_name, left, right in pairs:
            if not left == right:
                print(f"{left_name} and {right_name} are NOT Equal! ")
                left.copy_from(right)
                print(f" Setting {left_name} = {right_name} and dumping them ")
                left.dump()
                right.dump()
            if not left == right:
                print("something is wrong!!! ")

        print(_RULE)
        e1.reset()
        e1.set(1, -3, 16)
        e1.set(1, 20, 1000000)
        print(f"20^(1000000*10) = {_fmt(e1(10))}")
        e1.set(1, 20, -1000000)
        print(f"20^(-1000000*10) = {_fmt(e1(10))}")
        e1.dump()

        print(_RULE)
        l1.reset()
        l1.set(1, 10000000000000)
        print(f"10000000000000 * log10(10) = {_fmt(l1(10))}")
        l1.set(-111111111, -111111111)
        print(f"-111111111 * log10(10) = {_fmt(l1(10))}")


def main(argv: list[str] | None = None) -> int:
    """Command entry point: print the demonstration report."""
    parser = argparse.ArgumentParser(
        prog="unifuncs-demo",
        description="Evaluate sample exponential, logarithmic and power functions.",
    )
    parser.parse_args(argv)
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())