'''
Infix to postfix compiler (shunting-yard).

Literal-only subexpressions are folded into a single number as soon as their
operator is emitted, so "2 + 3 * 4" compiles to just 14.
'''

import logging

from .machine import Machine
from .operators import (Associativity, Kind, Token, BRACKET, FACTORIAL,
                        BINARY_OPERATORS, UNARY_OPERATORS, FUNCTIONS,
                        LEFT_BRACKET, RIGHT_BRACKET)
from .scanner import (isbinaryoperator, isletter, isnumberstart,
                      read_identifier, read_number, skip_spaces)
from .util import ExpressionSyntaxError, UnbalancedBracket


log = logging.getLogger(__name__)


class Parser:
    '''
    Compiles expression text into postfix tokens.

    Identifiers that aren't function names are declared in variables as they
    are read.
    '''

    LEFT_BRACKET_CHAR = '('
    RIGHT_BRACKET_CHAR = ')'
    FACTORIAL_CHAR = '!'

    def __init__(self, variables, fold=True):
        '''
        :param variables: Registry to resolve and declare identifiers in.
        :param fold: Fold constant subexpressions.
        '''
        self.variables = variables
        self.fold = fold
        # Scratch space for folding
        self.machine = Machine()

    def parse(self, text):
        '''
        Return postfix token list for text.

        :raises LexError: bad numeric literal.
        :raises UnbalancedBracket: unmatched ( or ).
        :raises ExpressionSyntaxError: anything else malformed.
        '''
        self.text = text
        self.pos = 0
        self.output = []
        self.operators = []
        # Whether the next token must be a binary operator (or ), !) rather
        # than a value. Also how unary and binary +/- are told apart.
        expectbinary = False
        while True:
            if expectbinary:
                token = self._read_operator()
            else:
                token = self._read_value()
            if token is None:
                break
            if token.kind is Kind.LEFT_BRACKET:
                self.operators.append(BRACKET)
            elif token.kind is Kind.RIGHT_BRACKET:
                self._close_bracket()
            elif token.kind is Kind.OPERATOR:
                self._push_operator(token.value)
                if token.isbinary:
                    expectbinary = False
            else:
                self.output.append(token)
                expectbinary = True

        if not expectbinary or self.pos < len(text):
            raise ExpressionSyntaxError('syntax error at position {}'
                                        .format(self.pos))
        while self.operators:
            operator = self.operators.pop()
            if operator is BRACKET:
                raise UnbalancedBracket('missing close bracket(s)')
            self._emit(operator)

        # Cheap global check, not a per-subexpression proof
        operands = sum(token.isoperand for token in self.output)
        binaries = sum(token.isbinary for token in self.output)
        if operands != binaries + 1:
            raise ExpressionSyntaxError('operand count mismatch')

        log.debug('compiled %r to %s', text,
                  ' '.join(map(str, self.output)))
        return self.output

    def _push_operator(self, operator):
        '''
        Put operator on the operator stack, emitting what it outranks first.
        '''
        # Postfix, its operand is already complete.
        if operator is FACTORIAL:
            self._emit(operator)
            return
        if not self.operators or \
           operator.priority > self.operators[-1].priority or \
           operator.priority == self.operators[-1].priority and \
           operator.associativity is Associativity.RIGHT:
            self.operators.append(operator)
            return
        while self.operators and \
              operator.priority <= self.operators[-1].priority:
            self._emit(self.operators.pop())
        self.operators.append(operator)

    def _close_bracket(self):
        while self.operators:
            operator = self.operators.pop()
            if operator is BRACKET:
                return
            self._emit(operator)
        raise UnbalancedBracket('right bracket mismatch')

    def _emit(self, operator):
        '''
        Append operator to output, or fold it with its literal operands.
        '''
        arity = operator.arity
        start = len(self.output) - arity
        operands = self.output[start:]
        if self.fold and start >= 0 and \
           all(token.kind is Kind.NUMBER for token in operands):
            value = self.machine.run(operands + [Token.operator(operator)])
            log.debug('folded %s %s to %r',
                      ' '.join(map(str, operands)), operator.symbol, value)
            del self.output[start:]
            self.output.append(Token.number(value))
        else:
            self.output.append(Token.operator(operator))

    def _read_value(self):
        '''
        Read (, number, identifier, or unary +/-.

        Returns None when none of those is next.
        '''
        self.pos = skip_spaces(self.text, self.pos)
        if self.pos >= len(self.text):
            return None
        c = self.text[self.pos]
        if c == self.LEFT_BRACKET_CHAR:
            self.pos += 1
            return LEFT_BRACKET
        if isnumberstart(c):
            value, self.pos = read_number(self.text, self.pos)
            return Token.number(value)
        if isletter(c):
            name, self.pos = read_identifier(self.text, self.pos)
            if name in FUNCTIONS:
                return Token.operator(FUNCTIONS[name])
            return Token.variable(self.variables.declare(name))
        if c in UNARY_OPERATORS:
            self.pos += 1
            return Token.operator(UNARY_OPERATORS[c])
        return None

    def _read_operator(self):
        '''
        Read binary operator, ), or !.

        Returns None when none of those is next.
        '''
        self.pos = skip_spaces(self.text, self.pos)
        if self.pos >= len(self.text):
            return None
        c = self.text[self.pos]
        if isbinaryoperator(c):
            self.pos += 1
            return Token.operator(BINARY_OPERATORS[c])
        if c == self.RIGHT_BRACKET_CHAR:
            self.pos += 1
            return RIGHT_BRACKET
        if c == self.FACTORIAL_CHAR:
            self.pos += 1
            return Token.operator(FACTORIAL)
        return None
