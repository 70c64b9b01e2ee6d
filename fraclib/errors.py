class FractionError(Exception):
    pass


class ParseError(FractionError, ValueError):
    """Input does not look like a fraction, or the numerator is missing."""


class DegenerateFractionError(FractionError, ZeroDivisionError):
    """Zero denominator, or a term that is not a finite number."""
