'''
RPN calculator.

Plain old arithmetic, logarithms, a handful of stack operators, and numbered
registers you can stash values in. Not intended to be Turing-complete!

Words are separated by whitespace:

- ``+ - * x / ^ log`` are arithmetic.
- ``%`` swaps, ``#`` duplicates, and ``_`` drops the top of the stack.
- ``set`` pops a register number then a value, and stores the value.
- ``get`` pops a register number, and moves the register's value onto the
  stack. The register is emptied.
- Anything else had better be a number.
'''

from .cli import CLI
from .lexer import Lexer, parse
from .machine import Machine, Outcome
from .operations import Number, Operator
from .util import RevpolError, ParseError


__all__ = ('Machine', 'Outcome', 'Lexer', 'parse', 'Number', 'Operator',
           'RevpolError', 'ParseError', 'CLI')
