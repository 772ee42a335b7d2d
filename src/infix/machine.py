from collections import deque

import numpy as np

from .operators import Kind
from .util import ExpressionError


class Machine:
    '''
    Arithmetic stack machine.

    Runs compiled postfix token sequences. Not safe to share between threads;
    the value stack is scratch space reused by every run.
    '''

    def __init__(self):
        self.stack = deque()

    def run(self, tokens):
        '''
        Execute tokens in order and return the single value left over.

        Numeric edge cases come out as NaN or infinities, never warnings or
        exceptions.
        '''
        self.stack.clear()
        with np.errstate(all='ignore'):
            for token in tokens:
                self.feed(token)
        if len(self.stack) != 1:
            raise ExpressionError('{} element(s) left on stack'
                                  .format(len(self.stack)))
        return self._popstack()[0]

    def feed(self, token):
        '''
        Push operand, or apply operator, to stack.
        '''
        if token.kind is Kind.NUMBER:
            self._pshstack(token.value)
        elif token.kind is Kind.VARIABLE:
            # Read fresh every time, the cell may have changed since
            self._pshstack(token.value.value)
        else:
            self._apply(token.value)

    def _apply(self, operator):
        '''
        Pop operator's arguments, and push its result.
        '''
        if operator.function is None:
            return
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        args = reversed(self._popstack(operator.arity))
        self._pshstack(float(operator.function(*args)))

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise ExpressionError('Less than {} element(s) on stack'.format(n))
        return [self.stack.pop() for _ in range(n)]
