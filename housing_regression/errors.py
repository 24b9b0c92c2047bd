# exception types raised by the housing regression pipeline


class HousingRegressionError(Exception):
    """Base class for every error this package raises on purpose."""


class ParseError(HousingRegressionError):
    """The input CSV is missing, empty or has ragged rows."""


class MissingColumnError(HousingRegressionError, KeyError):
    def __init__(self, column, available=()):
        self.column = column
        self.available = list(available)
        super().__init__(f"column {column!r} not found (available: {', '.join(self.available) or 'none'})")

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class NonNumericColumnError(HousingRegressionError, TypeError):
    def __init__(self, column, dtype):
        self.column = column
        self.dtype = dtype
        super().__init__(f"column {column!r} must be numeric, got dtype {dtype}")


class DegenerateFeatureError(HousingRegressionError, ValueError):
    """All feature values are identical so the slope is undefined."""
