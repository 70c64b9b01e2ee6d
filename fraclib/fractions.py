import math

from .builder import FractionBuilder
from .utils import format_number, rational_hash
from . import parsing


class Fraction:
    """
    Fraction numerator/denominator, kept in lowest terms.

    Immutable and hashable. Can be made from:
        Fraction(1, 2), Fraction('1', '2')   -- pair of numbers or of digit strings
        Fraction(3), Fraction(0.25)          -- single number
        Fraction('2/3'), Fraction('1 2/3'), Fraction('0.5'), Fraction('7')
        Fraction(other_fraction)             -- copy

    With simplify=False the terms are stored as given and never reduced.
    The sign is not moved from denominator to numerator: Fraction(1, -2) is 1/-2.
    """

    __slots__ = ('_numerator', '_denominator', '_simplify')

    def __init__(self, numerator=None, denominator=None, simplify=True):
        if isinstance(numerator, Fraction) and denominator is None:
            builder = parsing.from_fraction(numerator, simplify)
        else:
            builder = parsing.from_value(numerator, denominator, simplify)
        self._set(builder.normalize())

    def _set(self, builder):
        self._numerator = builder.numerator
        self._denominator = builder.denominator
        self._simplify = builder.simplify

    @classmethod
    def from_builder(cls, builder):
        """Freeze the builder as it is, without normalization."""
        obj = object.__new__(cls)
        obj._set(builder)
        return obj

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    @property
    def simplify(self):
        return self._simplify

    def to_builder(self):
        return FractionBuilder(self._numerator, self._denominator, self._simplify)

    def clone(self):
        return Fraction.from_builder(self.to_builder())

    @staticmethod
    def _operand(other):
        if isinstance(other, Fraction):
            return other.to_builder()
        return Fraction(other).to_builder()

    def add(self, other):
        return Fraction.from_builder(self.to_builder().add(self._operand(other)))

    def subtract(self, other):
        return Fraction.from_builder(self.to_builder().subtract(self._operand(other)))

    def multiply(self, other):
        """Product; a plain number only scales the numerator."""
        if not parsing.is_number(other):
            other = self._operand(other)
        return Fraction.from_builder(self.to_builder().multiply(other))

    def divide(self, other):
        """Quotient; a plain number only scales the denominator."""
        if not parsing.is_number(other):
            other = self._operand(other)
        return Fraction.from_builder(self.to_builder().divide(other))

    def _key(self):
        builder = FractionBuilder(self._numerator, self._denominator).normalize()
        return (builder.numerator, builder.denominator)

    def equals(self, other):
        """
        Equality of normalized forms, term by term.

        No cross-multiplication: 1/-2 does not equal -1/2, and a decimal
        that normalizes with rounding may differ from the exact fraction.
        """
        if not isinstance(other, Fraction):
            other = Fraction(other)
        return self._key() == other._key()

    def to_string(self, mixed=False):
        """
        'n/d', or with mixed=True whole part and proper fraction: '1 2/3'.

        In mixed form the whole part is floored, so -5/3 is '-2 1/3';
        zero is '0'.
        """
        n, d = self._numerator, self._denominator
        if not mixed:
            return '{}/{}'.format(format_number(n), format_number(d))

        whole = n // d
        rest = n % d
        result = []
        if whole != 0:
            result.append(format_number(whole))
        if rest != 0:
            result.append('{}/{}'.format(format_number(rest), format_number(d)))
        return ' '.join(result) if result else '0'

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return 'Fraction({}, {})'.format(format_number(self._numerator), format_number(self._denominator))

    def __float__(self):
        return self._numerator / self._denominator

    def __neg__(self):
        return Fraction.from_builder(FractionBuilder(-self._numerator, self._denominator, self._simplify))

    def __eq__(self, other):
        if not (isinstance(other, Fraction) or parsing.is_number(other)):
            return NotImplemented
        # nan and inf have no fraction form and equal no fraction
        if isinstance(other, float) and not math.isfinite(other):
            return False
        return self.equals(other)

    def __hash__(self):
        return rational_hash(*self._key())

    def __lt__(self, other):
        return compare(self, other) < 0

    def __le__(self, other):
        return compare(self, other) <= 0

    def __gt__(self, other):
        return compare(self, other) > 0

    def __ge__(self, other):
        return compare(self, other) >= 0

    def __add__(self, other):
        if not (isinstance(other, Fraction) or parsing.is_number(other)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not parsing.is_number(other):
            return NotImplemented
        return Fraction(other).add(self)

    def __sub__(self, other):
        if not (isinstance(other, Fraction) or parsing.is_number(other)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not parsing.is_number(other):
            return NotImplemented
        return Fraction(other).subtract(self)

    def __mul__(self, other):
        if not (isinstance(other, Fraction) or parsing.is_number(other)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not parsing.is_number(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not (isinstance(other, Fraction) or parsing.is_number(other)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not parsing.is_number(other):
            return NotImplemented
        return Fraction(other).divide(self)


def compare(a, b):
    """
    Compare two values: -1 if a < b, 0 if equal, 1 if a > b.

    Fractions are compared by the float ratio numerator/denominator,
    other values as they are. Approximate for large terms.
    """
    if isinstance(a, Fraction):
        a = float(a)
    if isinstance(b, Fraction):
        b = float(b)

    if a < b:
        return -1
    if a == b:
        return 0
    if a > b:
        return 1
    raise ValueError("Values are not comparable: {!r}, {!r}".format(a, b))
