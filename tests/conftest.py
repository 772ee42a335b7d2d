from pytest import fixture

from infix.expression import Expression
from infix.variables import Registry


@fixture
def registry():
    return Registry()


@fixture
def evaluate():
    '''
    Compile and evaluate in one go.
    '''
    def evaluate(source, **kwargs):
        return Expression(source, **kwargs).evaluate()
    return evaluate
