import logging
import math
import sys

from .util import UnknownVariable


log = logging.getLogger(__name__)

# Pre-registered, but ordinary (reassignable) variables.
CONSTANTS = {
    'pi': math.pi,
    'e': math.e,
    'inf': math.inf,
    'NaN': math.nan,
    # Smallest positive subnormal, not sys.float_info.min
    'Epsilon': math.ulp(0.0),
    'MinValue': -sys.float_info.max,
    'MaxValue': sys.float_info.max,
}


class Cell:
    '''
    Named, mutable number shared by every reference to that name.
    '''

    __slots__ = 'name', 'value'

    def __init__(self, name, value=math.nan):
        self.name = name
        self.value = value

    def __repr__(self):
        return 'Cell({!r}, {!r})'.format(self.name, self.value)


class Registry:
    '''
    Mapping of variable names to cells.

    Seeded from a constant provider (CONSTANTS unless told otherwise). Cells
    are never removed.
    '''

    def __init__(self, constants=None, strict=False):
        '''
        :param constants: Mapping of name to initial value to pre-register.
        :param strict: Make set() of an undeclared name raise UnknownVariable
                       rather than do nothing.
        '''
        self.cells = dict()
        self.strict = strict
        if constants is None:
            constants = CONSTANTS
        for name, value in constants.items():
            self.declare(name).value = float(value)

    def declare(self, name):
        '''
        Return cell for name, creating it as NaN if it doesn't exist yet.
        '''
        cell = self.cells.get(name)
        if cell is None:
            cell = self.cells[name] = Cell(name)
        return cell

    def set(self, name, value):
        '''
        Set value of an already declared variable.

        Undeclared names are ignored, unless strict.
        '''
        cell = self.cells.get(name)
        if cell is None:
            if self.strict:
                raise UnknownVariable('no such variable {!r}'.format(name))
            log.debug('ignoring assignment to undeclared %r', name)
            return
        cell.value = float(value)

    def get(self, name):
        '''
        Return current value of a declared variable.
        '''
        try:
            return self.cells[name].value
        except KeyError:
            raise UnknownVariable('no such variable {!r}'.format(name)) \
                from None

    def __contains__(self, name):
        return name in self.cells

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return len(self.cells)
