import math

import pytest

from unifuncs.power import Power


def test_default_is_zero_function():
    p = Power()
    assert (p.k, p.e) == (0, 0)
    assert p.value(3) == 0


def test_worked_example():
    assert Power(-2, 4)(3) == -162


@pytest.mark.parametrize("x", [-5.0, 0.0, 3.0])
def test_zero_exponent_gives_k(x):
    assert Power(1, 0).value(x) == 1


def test_negative_base_fractional_exponent_is_nan():
    result = Power(1, 0.5).value(-4)
    assert str(result) == "nan"


def test_zero_base_negative_exponent_is_infinite():
    assert Power(1, -2).value(0.0) == math.inf
    assert Power(1, -1).value(-0.0) == -math.inf


def test_overflow_is_infinite():
    assert Power(1, 1000).value(1e10) == math.inf
    assert Power(1, 1001).value(-1e10) == -math.inf


def test_set_and_reset():
    p = Power()
    p.set(2, 3)
    assert (p.k, p.e) == (2, 3)
    p.reset()
    assert p == Power()


def test_copy_from_and_equality():
    a = Power(-2, 4)
    b = Power(1, 0)
    assert (a == b) is False
    a.copy_from(b)
    assert a == b


def test_equality_with_other_types():
    assert (Power() == "Power") is False


def test_describe(capsys):
    p = Power(-2, 4)
    assert p.describe() == "Dump of Power\n-2x^4"
    p.dump()
    assert capsys.readouterr().out == "Dump of Power\n-2x^4\n"