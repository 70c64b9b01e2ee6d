import math


def prime_factors(n):
    """
    Prime factors of a natural number by trial division.

    Factors go in increasing order, repeated with multiplicity: 12 -> [2, 2, 3].
    Only the integer part of n is used; 1 has no factors.
    """
    num = int(n)
    if num < 1:
        raise ValueError("Prime factors are defined for natural numbers, got {!r}".format(n))

    factors = []
    factor = 2
    while factor * factor <= num:
        if num % factor == 0:
            factors.append(factor)
            num //= factor
        else:
            factor += 1

    # what remains is the last prime
    if num != 1:
        factors.append(num)
    return factors


def gcf(a, b):
    """
    Greatest common factor: product of prime factors shared by |a| and |b|.

    Shared factors are taken with multiplicity, so gcf(12, 18) = 2*3 = 6.
    Returns 1 if there are no shared factors, in particular if a or b is zero.
    """
    a, b = abs(int(a)), abs(int(b))
    if a == 0 or b == 0:
        return 1

    rest = prime_factors(b)
    common = []
    for factor in prime_factors(a):
        if factor in rest:
            common.append(factor)
            rest.remove(factor)
    return math.prod(common)
