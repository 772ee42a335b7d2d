from os import isatty
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
from time import perf_counter
import logging
import sys

from prompt_toolkit import PromptSession

from .expression import Expression
from .util import ExpressionError


log = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # Persistent
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface: compile expressions and time their evaluation.
    '''

    DEFAULT_PROMPT = '> '
    DEFAULT_TRIALS = 1000

    def _expressions(self):
        '''
        Yield input lines, up to the first empty one.

        Lines of only spaces aren't empty; they go on to fail compilation.
        '''
        for line in self.args.expressions:
            line = line.rstrip('\r\n')
            if not line:
                return
            yield line

    def _compile(self, line):
        '''
        Return compiled Expression, or None after reporting why not.
        '''
        try:
            return Expression(line)
        except ExpressionError as e:
            log.debug('failed to compile %r', line, exc_info=True)
            # Looked up now, so redirection after import is honoured
            print(e, file=sys.stderr)
            return None

    def dumper(self):
        '''
        Print the compiled postfix form of each expression.
        '''
        for line in self._expressions():
            expression = self._compile(line)
            if expression is not None:
                print(expression.postfix)

    def executor(self):
        '''
        Evaluate each expression repeatedly, print result and speed.
        '''
        for line in self._expressions():
            expression = self._compile(line)
            if expression is None:
                continue
            start = perf_counter()
            for _ in range(self.args.trials):
                result = expression.evaluate()
            elapsed = perf_counter() - start
            print(result)
            if elapsed > 0:
                print('{:.0f} calculations per second'.format(
                    self.args.trials / elapsed))

    def _prompting_input(self):
        '''
        Return where expression lines come from when -e isn't given.

        A prompt_toolkit session when a prompt was asked for, or when
        running in a terminal. Plain stdin otherwise, so piped input works.
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix expression calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-n', '--trials',
                                          type=int,
                                          default=self.DEFAULT_TRIALS,
                                          help='evaluations to time per '
                                               'expression')
        input_groups = self.argument_parser.add_mutually_exclusive_group()
        input_groups.add_argument('-e', '--expression',
                                  nargs=REMAINDER,
                                  dest='expressions')
        input_groups.add_argument('-p', '--prompt',
                                  nargs=OPTIONAL,
                                  const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-D', '--dump',
                                          action='store_const',
                                          const=self.dumper,
                                          dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.trials < 1:
            self.argument_parser.error('trials must be at least 1')
        if self.args.verbose:
            logging.basicConfig(level=logging.DEBUG)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
