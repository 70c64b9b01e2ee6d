from decimal import Decimal
import math
import sys


def is_float(x):
    """Is x a finite float with a non-zero fractional part."""
    return isinstance(x, float) and math.isfinite(x) and not x.is_integer()


def round_half_up(x):
    """Round to nearest integer, halves go up (-2.5 -> -2, 2.5 -> 3)."""
    return math.floor(x + 0.5)


def round_to_places(x, places):
    if not places:
        return round_half_up(x)
    scalar = 10 ** places
    return round_half_up(x * scalar) / scalar


def decimal_scale(x, places):
    """
    Power of ten that turns x into a whole number, after rounding x to given places.

    The digits are counted in the shortest repr of the rounded value:
    0.1 -> 10, 0.25 -> 100, 1/3 -> 0.333333333 -> 10**9.
    """
    rounded = round_to_places(x, places)
    exponent = Decimal(repr(rounded)).normalize().as_tuple().exponent
    return 10 ** max(0, -exponent)


def as_int(x):
    """Integral floats become ints, everything else is left as is."""
    if isinstance(x, float) and x.is_integer():
        return int(x)
    return x


def format_number(x):
    return str(as_int(x))


def rational_hash(n, d):
    """
    Hash of the rational n/d, equal to hash() of an int or float of the same value.

    Same modular scheme as the built-in numeric types: n * d**-1 mod P.
    """
    modulus = sys.hash_info.modulus
    if d < 0:
        n, d = -n, -d
    # P is prime, so d**(P-2) is the inverse of d; zero if P divides d
    inv = pow(d, modulus - 2, modulus)
    if not inv:
        h = sys.hash_info.inf
    else:
        h = hash(hash(abs(n)) * inv)
    result = h if n >= 0 else -h
    return -2 if result == -1 else result
