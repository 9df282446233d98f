from functools import reduce
import operator

import regex

from .util import ParseError
from .operations import Number, Operator


class Lexer:
    '''
    Lexer for the RPN *regular* grammar: whitespace separated words, each one
    an operator or a number.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Words standing for operators. Exact, case sensitive.
    SYMBOLS = dict({op.value: op for op in Operator},
                   # Easier to type than * in a shell
                   x=Operator.MULTIPLY)

    # Number. Deliberately stricter than float(): no 1_000, no padding, ASCII
    # digits only.
    NUMBER = r'''
              [+-]?
              (?:
                  (?:
                      # 1, 12, 12. (notice trailing dot), 1.3
                      \d+
                      (?:
                          \.
                          \d*
                      )?
                      |
                      # .2
                      \.
                      \d+
                  )
                  (?:
                      # 1e9, 1.5E-3
                      [eE]
                      [+-]?
                      \d+
                  )?
                  |
                  # inf, -Infinity, NaN
                  (?i:
                      inf(?:inity)?
                      |
                      nan
                  )
              )
              '''
    # Default regex flags for matching numbers
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all words.
        '''
        yield from line.split()

    def parse(self, word):
        '''
        Parse word into an operation for the machine.

        :raises ParseError: word is neither operator nor number.
        '''
        try:
            return type(self).SYMBOLS[word]
        except KeyError:
            pass
        if regex.fullmatch(type(self).NUMBER, word,
                           flags=type(self).FLAGS) is None:
            raise ParseError(word)
        return Number(float(word))

    def tokens(self, line):
        '''
        Parse every word of a line, stopping on the first bad one.
        '''
        return [self.parse(word) for word in self.lex(line)]


_LEXER = Lexer()


def parse(word):
    '''
    Parse a single word. See Lexer.parse.
    '''
    return _LEXER.parse(word)

