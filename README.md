# unifuncs

A small library of functions of a single real variable. They all share the
abstract `Function` interface from `unifuncs.function`:

- `Exponential` (`unifuncs.exponential`): `y = k * b^(c*x)`. The base `b` must be positive.
- `Logarithmic` (`unifuncs.logarithmic`): `y = k * log_b(x)`. The base must be positive and must not be 1.
- `Power` (`unifuncs.power`): `y = k * x^e`.
- `Polynomial` (`unifuncs.polynomial`): `y = c0 + c1*x + c2*x^2 + ...`.

You can evaluate a function with `value(x)` or by calling it directly.
`describe()` returns a text form of the function. `dump(file=None)` prints that
text to `file`, or to standard output if no file is given.

## Installation

```
pip install .
```

To install the test dependencies as well, run `pip install .[test]`.

## Usage

```python
from unifuncs.exponential import Exponential
from unifuncs.logarithmic import Logarithmic
from unifuncs.power import Power
from unifuncs.polynomial import Polynomial

e = Exponential(1, 2, 1)        # 1 * 2^(1*x)
print(e(3))                     # 8.0

log = Logarithmic(10, 5)        # 5 * log10(x)
print(log.value(100))           # 10.0

p = Power(-2, 4)                # -2 * x^4
print(p(3))                     # -162.0

q = Polynomial([1, 0, 2]) + Polynomial([0, 3])   # 1 + 3x + 2x^2
print(q(2))                     # 15.0
print(q.degree)                 # 2

e.dump()                        # Dump of Exponential / 1*2^(1 x)
```

### Coefficients

- `Exponential` has the properties `k`, `b` and `c`, and `set(k, b, c)`. The defaults are `k=0`, `b=1` and `c=0`.
- `Logarithmic` has the properties `b` and `k`, and `set(b, k)`. The defaults are `b=10` and `k=0`.
- `Power` has the attributes `k` and `e`, and `set(k, e)`. The defaults are `k=0` and `e=0`.
- `Polynomial` takes an iterable of coefficients, lowest degree first. `set(coefficients)` replaces them. The read-only properties `coefficients` and `degree` report the current values.

### Invalid values

For the exponential and logarithmic functions, an invalid parameter is not
raised as an exception. Instead, the function prints an `[ ERROR ]` message to
standard output and uses a fallback value:

- A base of zero or less for `Exponential` becomes 1.
- A base of zero or less, or a base of 1, for `Logarithmic` becomes 10.
- A negative argument to `Logarithmic.value` returns 0.

If a result overflows, it is returned as `inf` and no exception is raised.

`Polynomial` raises `ValueError` in two cases:

- when it is given an empty list of coefficients;
- when it is evaluated while uninitialized, that is, when it was built without coefficients or after `reset()`.

### Comparison, copying and reset

Two functions of the same kind are equal (`==`) when their coefficients are
equal. Adding two polynomials with `+` gives a new polynomial.

`copy_from(other)` is available on `Exponential`, `Logarithmic` and `Power`.
On `Exponential` and `Power` it copies the other function's coefficients.
`Logarithmic.copy_from` does not copy them as they are: it swaps them. The
other function's `k` becomes the base, and its base becomes `k`.

`reset()` behaves differently for each class:

| Class | Effect of `reset()` |
|-------|---------------------|
| `Exponential` | Sets every coefficient to 0. Because 0 is not a valid base, the base falls back to 1 and an error message is printed. |
| `Logarithmic` | Restores base 10 and `k = 0`. |
| `Power` | Sets `k` and `e` to 0. |
| `Polynomial` | Leaves the polynomial uninitialized, with degree -1. |

## Demo

The `unifuncs-demo` command runs a demonstration. It builds sample
exponential, logarithmic and power functions. It prints each one and its value
at 3 and at -5. It then compares and copies the functions, and tries a few
extreme values.

```
unifuncs-demo
```

You can also run the same report from Python with `unifuncs.demo.run(file)`.