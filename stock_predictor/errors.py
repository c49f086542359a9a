"""
Errors raised by the stock predictor.

Numerical degeneracy that has a defined fallback (a singular 3x3 system,
a constant actual series in R²) is handled in place and never raised.
Everything else that would otherwise divide by zero is rejected here.
"""


class PredictionError(Exception):
    """Base error for all stock predictor errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidInputError(PredictionError):
    """Raised when an input series or parameter cannot be used."""


class EmptySeriesError(InvalidInputError):
    """Raised when an operation receives an empty series."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} requires a non-empty series")
        self.operation = operation


class MismatchedLengthError(InvalidInputError):
    """Raised when two parallel sequences differ in length."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(
            f"Sequences must have equal length: got {left} and {right}"
        )
        self.left = left
        self.right = right


class DegenerateSeriesError(InvalidInputError):
    """Raised when all x values are identical and no line can be fit."""

    def __init__(self, n: int) -> None:
        super().__init__(
            f"Cannot fit a line: x values have zero variance (n={n})"
        )
        self.n = n


class InvalidHorizonError(InvalidInputError):
    """Raised when the prediction horizon is not a positive integer."""

    def __init__(self, horizon: int) -> None:
        super().__init__(
            f"Invalid prediction horizon: {horizon}. Must be at least 1."
        )
        self.horizon = horizon


class InvalidWindowError(InvalidInputError):
    """Raised when a moving-average window is not a positive integer."""

    def __init__(self, window: int) -> None:
        super().__init__(
            f"Invalid moving-average window: {window}. Must be at least 1."
        )
        self.window = window


class InsufficientDataError(InvalidInputError):
    """Raised when a series is too short for an analysis pass."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Insufficient data: required {required} observations, "
            f"available {available}"
        )
        self.required = required
        self.available = available
