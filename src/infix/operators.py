'''
Tokens and the static operator table.

Operators are immutable descriptors: arity, priority, associativity and a
pure function of their operands. They hold no state, so one table serves
every expression.
'''

from collections import namedtuple
from enum import Enum, IntEnum
import math

import numpy as np


class Priority(IntEnum):
    BRACKET = 0
    ADDITIVE = 1
    MULTIPLICATIVE = 2
    POWER = 3
    FUNCTION = 4


class Associativity(Enum):
    LEFT = 'left'
    RIGHT = 'right'


class Kind(Enum):
    NUMBER = 'number'
    VARIABLE = 'variable'
    OPERATOR = 'operator'
    # Parse-time only. Never in a compiled sequence.
    LEFT_BRACKET = '('
    RIGHT_BRACKET = ')'


# function of None means the operator has no effect on the stack.
Operator = namedtuple('Operator',
                      'name symbol arity priority associativity function')


def factorial(operand):
    '''
    n! of a non-negative integral double, +inf for anything else.

    Stops multiplying as soon as the product overflows.
    '''
    if not math.isfinite(operand) or operand < 0 or \
       operand != math.floor(operand):
        return math.inf
    result = 1.0
    for i in range(2, int(operand) + 1):
        if math.isinf(result):
            break
        result *= i
    return result


ADD = Operator('add', '+', 2,
               Priority.ADDITIVE, Associativity.LEFT, np.add)
SUBTRACT = Operator('subtract', '-', 2,
                    Priority.ADDITIVE, Associativity.LEFT, np.subtract)
MULTIPLY = Operator('multiply', '*', 2,
                    Priority.MULTIPLICATIVE, Associativity.LEFT, np.multiply)
DIVIDE = Operator('divide', '/', 2,
                  Priority.MULTIPLICATIVE, Associativity.LEFT, np.true_divide)
POWER = Operator('power', '^', 2,
                 Priority.POWER, Associativity.RIGHT, np.power)

UNARY_PLUS = Operator('plus', '+', 1,
                      Priority.FUNCTION, Associativity.RIGHT, None)
UNARY_MINUS = Operator('minus', '-', 1,
                       Priority.FUNCTION, Associativity.RIGHT, np.negative)
FACTORIAL = Operator('factorial', '!', 1,
                     Priority.FUNCTION, Associativity.RIGHT, factorial)

# Sentinel kept on the operator stack while parsing a group.
BRACKET = Operator('bracket', '(', 0,
                   Priority.BRACKET, Associativity.LEFT, None)

BINARY_OPERATORS = {
    operator.symbol: operator
    for operator
    in (ADD, SUBTRACT, MULTIPLY, DIVIDE, POWER)
}

UNARY_OPERATORS = {
    operator.symbol: operator
    for operator
    in (UNARY_PLUS, UNARY_MINUS)
}


def _function(name, f):
    return Operator(name, name, 1, Priority.FUNCTION, Associativity.RIGHT, f)


FUNCTIONS = {
    function.name: function
    for function
    in (_function('sqrt', np.sqrt),
        _function('sin', np.sin),
        _function('cos', np.cos),
        _function('tan', np.tan),
        _function('log', np.log),
        _function('asin', np.arcsin),
        _function('acos', np.arccos),
        _function('atan', np.arctan))
}


class Token(namedtuple('Token', 'kind value')):
    '''
    One element of an expression.

    value is the number for NUMBER, the Cell for VARIABLE, the Operator for
    OPERATOR and None for brackets.
    '''

    __slots__ = ()

    @classmethod
    def number(cls, value):
        return cls(Kind.NUMBER, float(value))

    @classmethod
    def variable(cls, cell):
        return cls(Kind.VARIABLE, cell)

    @classmethod
    def operator(cls, operator):
        return cls(Kind.OPERATOR, operator)

    @property
    def isoperand(self):
        return self.kind in (Kind.NUMBER, Kind.VARIABLE)

    @property
    def isbinary(self):
        return self.kind is Kind.OPERATOR and self.value.arity == 2

    def __str__(self):
        if self.kind is Kind.NUMBER:
            return repr(self.value)
        elif self.kind is Kind.VARIABLE:
            return self.value.name
        elif self.kind is Kind.OPERATOR:
            # Tell unary +/- apart from binary in postfix text
            if self.value in UNARY_OPERATORS.values():
                return self.value.name
            return self.value.symbol
        return self.kind.value


LEFT_BRACKET = Token(Kind.LEFT_BRACKET, None)
RIGHT_BRACKET = Token(Kind.RIGHT_BRACKET, None)
