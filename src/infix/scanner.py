'''
Character classification and literal reading.

Everything here is stateless: functions take the source text and a cursor
position, and return what they read along with the position just past it.
Which reads are attempted at any point is decided by the parser, not here.
'''

from functools import reduce
import operator
import math

import regex

from .util import LexError, LiteralOverflow, wrap_user_errors


# Default regex flags for all patterns below
FLAGS = reduce(operator.__or__,
               {regex.VERSION1,
                regex.VERBOSE},
               0)

SPACE = regex.compile(r'\s*', flags=FLAGS)
IDENTIFIER = regex.compile(r'[A-Za-z]+', flags=FLAGS)
# Deliberately permissive: empty fractional or exponent digits still match,
# so that read_number can report what was missing.
NUMBER = regex.compile(r'''
                       (?<integral>
                           [0-9]*
                       )
                       (?:
                           # 1.5, .5 but also 1. (rejected later)
                           (?<point>\.)
                           (?<fractional>
                               [0-9]*
                           )
                       )?
                       (?:
                           # 1e5, 1E+5, 1e-5 but also 1e (rejected later)
                           [eE]
                           [+-]?
                           (?<exponent>
                               [0-9]*
                           )
                       )?
                       ''', flags=FLAGS)

BINARY_OPERATORS = '+-*/^'


def isdigit(c):
    return '0' <= c <= '9'


def isnumberstart(c):
    return isdigit(c) or c == '.'


def isletter(c):
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z'


def isbinaryoperator(c):
    return c in BINARY_OPERATORS


def skip_spaces(text, pos):
    '''
    Return position of the first non-space character at or after pos.
    '''
    return SPACE.match(text, pos).end()


def read_identifier(text, pos):
    '''
    Read contiguous ASCII letters starting at pos.

    Returns the letters read (possibly empty) and the position after them.
    '''
    match = IDENTIFIER.match(text, pos)
    if match is None:
        return '', pos
    return match.group(0), match.end()


def read_number(text, pos):
    '''
    Read a numeric literal starting at pos.

    Returns its value and the position just after it.

    :raises LexError: point or exponent marker not followed by a digit.
    :raises LiteralOverflow: literal too large for a double.
    '''
    match = NUMBER.match(text, pos)
    if match.group('point') and not match.group('fractional'):
        raise LexError('digit expected after point')
    if match.group('exponent') == '':
        raise LexError('digit expected in exponent')
    return _convert(match.group(0)), match.end()


@wrap_user_errors(LiteralOverflow, 'number {0} out of range')
def _convert(literal):
    value = float(literal)
    # float() saturates rather than raising
    if math.isinf(value):
        raise OverflowError(literal)
    return value
