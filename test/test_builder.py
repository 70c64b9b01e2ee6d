import unittest

from fraclib.builder import FractionBuilder
from fraclib.errors import DegenerateFractionError


class TestNormalize(unittest.TestCase):

    def get_terms(self, builder):
        return (builder.numerator, builder.denominator)

    def test_reduce(self):
        assert self.get_terms(FractionBuilder(4, 16).normalize()) == (1, 4)
        assert self.get_terms(FractionBuilder(14, 28).normalize()) == (1, 2)
        assert self.get_terms(FractionBuilder(-6, 4).normalize()) == (-3, 2)
        assert self.get_terms(FractionBuilder(3, 7).normalize()) == (3, 7)

    def test_negative_denominator_kept(self):
        self.assertEqual(self.get_terms(FractionBuilder(2, -4).normalize()), (1, -2))

    def test_zero(self):
        self.assertEqual(self.get_terms(FractionBuilder(0, 8).normalize()), (0, 1))
        self.assertEqual(self.get_terms(FractionBuilder(0, -3).normalize()), (0, 1))

    def test_decimal_numerator(self):
        self.assertEqual(self.get_terms(FractionBuilder(0.5).normalize()), (1, 2))
        self.assertEqual(self.get_terms(FractionBuilder(0.75).normalize()), (3, 4))
        self.assertEqual(self.get_terms(FractionBuilder(-2.5).normalize()), (-5, 2))

    def test_decimal_denominator(self):
        self.assertEqual(self.get_terms(FractionBuilder(1, 0.25).normalize()), (4, 1))
        self.assertEqual(self.get_terms(FractionBuilder(3, 1.5).normalize()), (2, 1))

    def test_ints(self):
        builder = FractionBuilder(0.5, 2.0).normalize()
        assert type(builder.numerator) is int
        assert type(builder.denominator) is int

    def test_repeating_decimal(self):
        """Repeating decimals are cut at 9 places."""
        with self.assertLogs(level='INFO'):
            builder = FractionBuilder(1 / 3).normalize()
        self.assertEqual(self.get_terms(builder), (333333333, 10 ** 9))

    def test_idempotent(self):
        for n, d in [(4, 16), (0.125, 1), (7, 0.5), (-9, 12), (5, -10)]:
            once = FractionBuilder(n, d).normalize()
            twice = once.copy().normalize()
            assert self.get_terms(once) == self.get_terms(twice)

    def test_no_simplify(self):
        builder = FractionBuilder(4, 16, simplify=False).normalize()
        self.assertEqual(self.get_terms(builder), (4, 16))

    def test_degenerate(self):
        for n, d in [(1, 0), (0, 0), (float('nan'), 1), (1, float('inf')), (1, 1e-10)]:
            with self.assertRaises(DegenerateFractionError):
                FractionBuilder(n, d).normalize()
        with self.assertRaises(ZeroDivisionError):
            FractionBuilder(1, 0, simplify=False).normalize()


class TestArithmetic(unittest.TestCase):

    def test_rescale(self):
        builder = FractionBuilder(1, 2)
        assert builder.rescale(3) is builder
        assert (builder.numerator, builder.denominator) == (3, 6)

    def test_add(self):
        a = FractionBuilder(1, 3)
        b = FractionBuilder(1, 6)
        a.add(b)
        assert (a.numerator, a.denominator) == (1, 2)
        # argument is rescaled on a copy
        assert (b.numerator, b.denominator) == (1, 6)

    def test_subtract(self):
        a = FractionBuilder(1, 2).subtract(FractionBuilder(1, 6))
        assert (a.numerator, a.denominator) == (1, 3)

    def test_multiply(self):
        a = FractionBuilder(2, 3).multiply(FractionBuilder(-1, 2))
        assert (a.numerator, a.denominator) == (-1, 3)
        a = FractionBuilder(2, 3).multiply(3)
        assert (a.numerator, a.denominator) == (2, 1)

    def test_divide(self):
        a = FractionBuilder(1, 2).divide(FractionBuilder(1, 4))
        assert (a.numerator, a.denominator) == (2, 1)
        a = FractionBuilder(1, 2).divide(2)
        assert (a.numerator, a.denominator) == (1, 4)

    def test_divide_by_itself(self):
        a = FractionBuilder(2, 3)
        a.divide(a)
        assert (a.numerator, a.denominator) == (1, 1)

    def test_divide_by_zero(self):
        with self.assertRaises(DegenerateFractionError):
            FractionBuilder(1, 2).divide(FractionBuilder(0, 1))
