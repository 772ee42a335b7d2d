import math

from .machine import Machine
from .operators import Token
from .parser import Parser
from .util import ExpressionError
from .variables import Registry


class Expression:
    '''
    Compiled arithmetic expression.

    Parsed once, on construction, then evaluated as many times as needed.
    Variable values are read at evaluation time, so set_variable() between
    evaluate() calls is reflected in the result.

    One instance must not be evaluated from several threads at once.
    '''

    def __init__(self, source, registry=None, fold=True):
        '''
        Compile source.

        :param registry: Variables to use; a fresh Registry by default.
        :param fold: Fold constant subexpressions while compiling.
        :raises ExpressionError: source couldn't be compiled. The instance
                                 is then unusable.
        '''
        self.source = source
        self.variables = Registry() if registry is None else registry
        self.machine = Machine()
        try:
            self.tokens = Parser(self.variables, fold=fold).parse(source)
        except ExpressionError:
            self.tokens = [Token.number(math.nan)]
            raise

    def evaluate(self):
        '''
        Return the value of the expression with current variable values.

        Never raises: division by zero, out of domain functions and the like
        give NaN or infinities.
        '''
        return self.machine.run(self.tokens)

    def set_variable(self, name, value):
        '''
        Set a variable. Does nothing if name never appeared (see Registry).
        '''
        self.variables.set(name, value)

    def get_variable(self, name):
        return self.variables.get(name)

    @property
    def postfix(self):
        '''
        Compiled sequence as space separated text.
        '''
        return ' '.join(map(str, self.tokens))

    def __repr__(self):
        return 'Expression({!r})'.format(self.source)
