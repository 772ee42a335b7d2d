'''
Scanner tests
'''

import math

import regex

from infix.util import LexError, LiteralOverflow
from infix.scanner import (isbinaryoperator, isdigit, isletter,
                           isnumberstart, read_identifier, read_number,
                           skip_spaces)

from pytest import mark, raises


def test_classifiers():
    assert isdigit('7') and not isdigit('a') and not isdigit('٣')
    assert isnumberstart('.') and isnumberstart('0')
    assert not isnumberstart('e')
    assert isletter('Q') and not isletter('_') and not isletter('é')
    assert all(isbinaryoperator(c) for c in '+-*/^')
    assert not isbinaryoperator('!')


def test_skip_spaces():
    assert skip_spaces('  \t1', 0) == 3
    assert skip_spaces('1', 0) == 0
    assert skip_spaces('1  ', 1) == 3


def test_read_identifier():
    assert read_identifier('sqrt 4', 0) == ('sqrt', 4)
    assert read_identifier('2*abc1', 2) == ('abc', 5)
    assert read_identifier('1', 0) == ('', 0)


@mark.parametrize('text, value, end', [
    ('42', 42.0, 2),
    ('3.25+1', 3.25, 4),
    ('.5', 0.5, 2),
    ('1e3', 1000.0, 3),
    ('1.5E-2*x', 0.015, 6),
    ('2e+2', 200.0, 4),
    ('1e-400', 0.0, 6),
])
def test_read_number(text, value, end):
    assert read_number(text, 0) == (value, end)


def test_read_number_from_middle():
    assert read_number('x+12.5)', 2) == (12.5, 6)


@mark.parametrize('text, pos', [
    ('3.', 0),
    ('.', 0),
    ('3.e5', 0),
    ('1+2.', 2),
])
def test_digit_expected_after_point(text, pos):
    with raises(LexError, match='digit expected after point'):
        read_number(text, pos)


@mark.parametrize('text', ['2e', '2E+', '2e-x'])
def test_digit_expected_in_exponent(text):
    with raises(LexError, match='digit expected in exponent'):
        read_number(text, 0)


def test_overflow():
    with raises(LiteralOverflow,
                match=regex.escape('number 1e400 out of range')):
        read_number('1e400', 0)
    with raises(OverflowError):
        read_number('9' * 400, 0)


def test_largest_literal_is_fine():
    value, _ = read_number('1.7976931348623157e308', 0)
    assert math.isfinite(value)
