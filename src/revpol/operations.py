'''
Everything the machine can be fed: numbers and operators.
'''

from collections import namedtuple
from decimal import Decimal
from enum import Enum
import math


class Number(namedtuple('Number', 'value')):
    '''
    Numeric literal. Always holds a float.
    '''
    __slots__ = ()

    def __new__(cls, value):
        return super().__new__(cls, float(value))

    def __str__(self):
        value = self.value
        if math.isnan(value):
            return 'NaN'
        elif math.isinf(value):
            return 'inf' if value > 0 else '-inf'
        # Shortest round-tripping digits, zero padded, never in scientific
        # notation. normalize() drops the trailing .0 of 7.0 and keeps -0.
        return format(Decimal(repr(value)).normalize(), 'f')


class Operator(Enum):
    '''
    Operators, valued by their canonical symbol.
    '''
    ADD = '+'
    SUBTRACT = '-'
    DIVIDE = '/'
    MULTIPLY = '*'
    POWER = '^'
    LOGARITHM = 'log'
    SWAP = '%'
    DUPLICATE = '#'
    DROP = '_'
    STORE = 'set'
    LOAD = 'get'

    @property
    def arity(self):
        '''
        Number of operands popped off the stack.
        '''
        if self in _UNARY:
            return 1
        return 2

    def __str__(self):
        return self.value


_UNARY = frozenset({Operator.DUPLICATE, Operator.DROP, Operator.LOAD})


def arity(operation):
    '''
    Return number of operands the operation consumes, None for numbers.
    '''
    if isinstance(operation, Operator):
        return operation.arity
    return None
