'''
Infix arithmetic expression compiler and evaluator.

Compiles expressions like "-x^2 + sqrt(y) * 3!" once into postfix form,
folding constant subexpressions along the way, then evaluates them as often
as needed on a small stack machine, picking up the current variable values
each time.

Supports + - * / ^ (right associative), unary + and -, postfix factorial,
brackets, the functions sqrt sin cos tan log asin acos atan (applied prefix
style, "sin x" or "sin(x)"), and the predefined variables pi, e, inf, NaN,
Epsilon, MinValue and MaxValue.

Arithmetic follows IEEE-754: evaluation yields NaN or infinities rather than
raising.
'''

from .cli import CLI
from .expression import Expression
from .variables import Registry
from .util import (ExpressionError, ExpressionSyntaxError, LexError,
                   LiteralOverflow, UnbalancedBracket, UnknownVariable)


__all__ = ('Expression', 'Registry', 'CLI',
           'ExpressionError', 'ExpressionSyntaxError', 'LexError',
           'LiteralOverflow', 'UnbalancedBracket', 'UnknownVariable')
