"""Exceptions raised by gdregression."""


class ShapeError(ValueError):
    """Features and labels have mismatched lengths, ragged rows or non-numeric values."""


class RangeError(ValueError):
    """A scalar setting (split ratio, iteration count, learning rate) is out of range."""


class DegenerateInputError(ArithmeticError):
    """The closed-form starting weights are undefined, e.g. for constant input."""


class DivergenceError(ArithmeticError):
    """Gradient descent produced a non-finite error."""
