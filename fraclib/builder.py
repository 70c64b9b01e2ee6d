import logging
import math

from .errors import DegenerateFractionError
from .factors import gcf
from .utils import is_float, round_half_up, round_to_places, decimal_scale, as_int


class FractionBuilder:
    """
    Mutable numerator/denominator pair.

    Fraction itself is immutable; construction and arithmetic are done on
    builders, which are changed in place and then frozen into a Fraction.
    All in-place methods return self, to allow chaining:
        FractionBuilder(1, 2).add(other).normalize()

    Terms may hold decimals (floats) until normalize is called.
    """

    # decimals are rounded to that many places before being scaled to integers
    decimal_places = 9

    def __init__(self, numerator, denominator=1, simplify=True):
        self.numerator = numerator
        self.denominator = denominator
        self.simplify = simplify

    def copy(self):
        return type(self)(self.numerator, self.denominator, self.simplify)

    def rescale(self, factor):
        """Multiply both terms by factor, in place."""
        self.numerator *= factor
        self.denominator *= factor
        return self

    def normalize(self):
        """
        Reduce to lowest terms, in place; does nothing if simplify is off.

        Decimal terms are first turned into integers: the term is rounded to
        decimal_places, and both terms are multiplied by 10**(digits after the point).
        That is an approximation: 1/3 as float becomes 333333333/1000000000.
        Then both terms are divided by their greatest common factor;
        a zero numerator gives 0/1.
        """
        self._check_terms()
        if not self.simplify:
            return self

        if is_float(self.denominator):
            scale = self._get_scale(self.denominator)
            logging.debug('normalize: scale decimal denominator %r by %d', self.denominator, scale)
            self.denominator = round_half_up(self.denominator * scale)
            self.numerator *= scale

        if is_float(self.numerator):
            scale = self._get_scale(self.numerator)
            logging.debug('normalize: scale decimal numerator %r by %d', self.numerator, scale)
            self.numerator = round_half_up(self.numerator * scale)
            self.denominator *= scale

        self.numerator = as_int(self.numerator)
        self.denominator = as_int(self.denominator)
        self._check_terms()

        # zero has no common factor with anything, all zeros are 0/1
        if self.numerator == 0:
            self.denominator = 1
            return self

        g = gcf(self.numerator, self.denominator)
        self.numerator //= g
        self.denominator //= g
        return self

    def _get_scale(self, value):
        places = self.decimal_places
        if round_to_places(value, places) != value:
            logging.info('normalize: %r rounded to %d decimal places', value, places)
        return decimal_scale(value, places)

    def _check_terms(self):
        for term in (self.numerator, self.denominator):
            if isinstance(term, float) and not math.isfinite(term):
                raise DegenerateFractionError("Fraction term is not a finite number: {!r}".format(term))
        if self.denominator == 0:
            raise DegenerateFractionError("Division by zero!")

    def _cross_rescale(self, other):
        """Bring self and a copy of other to the common denominator; return the copy."""
        other = other.copy()
        denominator = self.denominator
        self.rescale(other.denominator)
        other.rescale(denominator)
        return other

    def add(self, other):
        other = self._cross_rescale(other)
        self.numerator += other.numerator
        return self.normalize()

    def subtract(self, other):
        other = self._cross_rescale(other)
        self.numerator -= other.numerator
        return self.normalize()

    def multiply(self, other):
        """Multiply by a builder, or scale the numerator by a plain number."""
        if isinstance(other, FractionBuilder):
            self.numerator *= other.numerator
            self.denominator *= other.denominator
        else:
            self.numerator *= other
        return self.normalize()

    def divide(self, other):
        """Divide by a builder, or scale the denominator by a plain number."""
        if isinstance(other, FractionBuilder):
            numerator = other.numerator
            self.numerator *= other.denominator
            self.denominator *= numerator
        else:
            self.denominator *= other
        return self.normalize()

    def __repr__(self):
        return 'FractionBuilder({!r}, {!r}, simplify={})'.format(self.numerator, self.denominator, self.simplify)
