"""
Named constructors for fractions.

Each from_* function returns a FractionBuilder, not yet normalized
(except from_mixed_string, which adds two fractions).
from_value picks the right constructor by the shape of its arguments.

Accepted single-string forms:
    '3'        whole number
    '2/3'      simple fraction
    '0.25'     decimal
    '1 2/3'    mixed number, i.e. 1 + 2/3
"""

import logging
import re

from .builder import FractionBuilder
from .errors import ParseError


# leading part of a string that reads as an int / float; the rest is ignored
_int_re = re.compile(r'\s*([+-]?\d+)')
_float_re = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')
_number_re = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def parse_int(text):
    """Read base-10 integer from the start of text: '12abc' -> 12."""
    match = _int_re.match(text)
    if not match:
        raise ParseError("Not an integer: {!r}".format(text))
    return int(match.group(1))


def parse_float(text):
    """Read decimal number from the start of text: '2.5kg' -> 2.5."""
    match = _float_re.match(text)
    if not match:
        raise ParseError("Not a number: {!r}".format(text))
    return float(match.group(1))


def is_number(x):
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _is_whole_literal(text):
    # '1', '-1', also '1.0'
    return bool(_number_re.fullmatch(text)) and float(text).is_integer()


def from_integers(numerator, denominator, simplify=True):
    return FractionBuilder(numerator, denominator, simplify)


def from_strings(numerator, denominator, simplify=True):
    return FractionBuilder(parse_int(numerator), parse_int(denominator), simplify)


def from_number(number, simplify=True):
    return FractionBuilder(number, 1, simplify)


def from_fraction(fraction, simplify=True):
    return FractionBuilder(fraction.numerator, fraction.denominator, simplify)


def from_whole_string(text, simplify=True):
    return FractionBuilder(parse_int(text), 1, simplify)


def from_decimal_string(text, simplify=True):
    return from_number(parse_float(text), simplify)


def from_simple_string(text, simplify=True):
    """'A/B'; anything after a second slash is ignored."""
    parts = text.split('/')
    return from_strings(parts[0], parts[1], simplify)


def from_mixed_string(whole, part, simplify=True):
    """Sum of whole number and fraction: ('1', '2/3') -> 5/3, ('-1', '1/2') -> -1/2."""
    whole = from_string(whole, simplify).normalize()
    part = from_string(part, simplify).normalize()
    return whole.add(part)


def from_string(text, simplify=True):
    """Parse one of the single-string forms, see module docstring."""
    if not text:
        raise ParseError("Numerator is required")

    # only the first two space-separated parts are considered
    parts = text.split(' ')
    a = parts[0]
    b = parts[1] if len(parts) > 1 else ''

    if _is_whole_literal(a) and '/' in b:
        logging.debug('from_string: %r is a mixed number', text)
        return from_mixed_string(a, b, simplify)

    if a and not b:
        if '/' in a:
            logging.debug('from_string: %r is a simple fraction', text)
            return from_simple_string(a, simplify)
        elif '.' in a:
            logging.debug('from_string: %r is a decimal', text)
            return from_decimal_string(a, simplify)
        else:
            logging.debug('from_string: %r is a whole number', text)
            return from_whole_string(a, simplify)

    raise ParseError("Can't parse fraction: {!r}".format(text))


def from_value(numerator, denominator=None, simplify=True):
    """
    Builder for any accepted argument shape:
        two numbers, two strings, one number or one string.
    """
    if denominator is not None:
        if is_number(numerator) and is_number(denominator):
            return from_integers(numerator, denominator, simplify)
        elif isinstance(numerator, str) and isinstance(denominator, str):
            return from_strings(numerator, denominator, simplify)
        raise ParseError(
            "Numerator and denominator must be both numbers or both strings, got {!r} and {!r}".format(
                numerator, denominator,
            )
        )

    if numerator is None:
        raise ParseError("Numerator is required")
    elif is_number(numerator):
        return from_number(numerator, simplify)
    elif isinstance(numerator, str):
        return from_string(numerator, simplify)
    raise ParseError("Can't make fraction from {!r}".format(numerator))
