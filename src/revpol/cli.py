from os import path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import ParseError
from .machine import Machine
from .lexer import Lexer
from .operations import arity


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    history=self.history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN system.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.revpol_history'

    def dumper(self):
        '''
        Dump every word, its parse, and arity.
        '''
        lexer = Lexer()
        print('<word>\t<operation>\t<arity>')
        for line in self.args.expressions:
            for word in lexer.lex(line):
                try:
                    parsed = lexer.parse(word)
                except ParseError as e:
                    print(e.args[0], file=sys.stderr)
                    return 1
                print(repr(word), repr(parsed), arity(parsed), sep='\t')
        return 0

    def _render(self, machine):
        print(machine.render(), file=sys.stderr)

    def _feed(self, machine, lexer, line):
        '''
        Parse and queue a whole line. Return False on the first bad word.
        '''
        for word in lexer.lex(line):
            try:
                machine.push(lexer.parse(word))
            except ParseError as e:
                print(e.args[0], file=sys.stderr)
                # Half a line makes no sense
                machine.clrpending()
                return False
        return True

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        status = 0
        machine = Machine()
        lexer = Lexer()
        observer = self._render if self.args.verbose else None
        for line in self.args.expressions:
            if not self._feed(machine, lexer, line):
                if self._interactive():
                    continue
                status = 1
                break
            outcome = machine.run(observer=observer)
            if outcome.failed:
                print(outcome.message, file=sys.stderr)
                machine.clrpending()
        # Stopped early, so whatever is on the stack isn't an answer
        if status == 0 and len(machine.stack) == 1:
            print(machine.stack[0])
        return status

    def raw_grammar(self):
        '''
        Print current internally defined number grammar.
        '''
        print(Lexer.NUMBER)
        return 0

    def _prompting_input(self):
        '''
        Return stdin, or a prompting session reading it instead...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or sys.stdin.isatty() and sys.stdout.isatty():
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show machine after each step')
        self.argument_parser.add_argument('-d', '--debug',
                                          action='store_true',
                                          help='log debugging information')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.debug:
            logging.basicConfig(level=logging.DEBUG,
                                format='%(name)s: %(levelname)s: %(message)s')
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        self.args.verbose = self.args.verbose or \
            self._interactive() or sys.stdout.isatty()
        logger.debug('Reading from %r', self.args.expressions)
        try:
            return self.args.action()
        except KeyboardInterrupt:
            return 1


def main():
    return CLI().run()
