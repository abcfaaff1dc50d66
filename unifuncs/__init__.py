"""Functions of a single real variable: exponential, logarithmic, power and polynomial."""

__version__ = "0.1.0"
__all__ = ["function", "exponential", "logarithmic", "power", "polynomial", "demo"]