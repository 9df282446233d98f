from collections import deque
from enum import Enum
from itertools import chain
import logging
import math

from . import floats
from .operations import Number, Operator


logger = logging.getLogger(__name__)


class Outcome(Enum):
    '''
    What a single step of the machine did.

    Valued by the message shown to the user.
    '''
    # Progress
    SHIFTED = 'Shifted number onto stack'
    REDUCED = 'Reduced'
    # No progress, nothing wrong
    EXHAUSTED = 'Nothing left to evaluate'
    # No progress, something wrong
    UNDERFLOW = 'Not enough elements on stack'
    INVALID_OPERAND = 'Operand is not a number'
    UNBOUND_REGISTER = 'No such register'

    @property
    def progressed(self):
        return self in (Outcome.SHIFTED, Outcome.REDUCED)

    @property
    def failed(self):
        return not self.progressed and self is not Outcome.EXHAUSTED

    @property
    def message(self):
        return self.value


class _Abort(Exception):
    '''
    Operator couldn't be applied. Carries the Outcome to report.
    '''
    def __init__(self, outcome):
        super().__init__(outcome.message)
        self.outcome = outcome


def _register_key(value):
    '''
    Narrow a float to a register number in [0, 255].

    Truncates toward zero and saturates; NaN is 0.
    '''
    if math.isnan(value) or value <= 0:
        return 0
    elif value >= 255:
        return 255
    return int(value)


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Operations are pushed onto a pending queue, then evaluated one step at a
    time, oldest first, against the operand stack.
    '''

    # Minimum width of each element when rendered
    WIDTH = 5

    # Binary operators on floats, taking a (top of stack) then b.
    ARITHMETIC = {
        Operator.ADD: lambda a, b: a + b,
        Operator.SUBTRACT: lambda a, b: b - a,
        Operator.DIVIDE: lambda a, b: floats.divide(b, a),
        Operator.MULTIPLY: lambda a, b: a * b,
        Operator.POWER: floats.power,
        Operator.LOGARITHM: floats.logarithm,
    }

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.registers = dict()
        self.stack = deque()
        self.pending = deque()

    def push(self, operation):
        '''
        Queue operation for evaluation.
        '''
        self.pending.append(operation)

    def clrpending(self):
        '''
        Forget every operation not yet evaluated.
        '''
        self.pending.clear()

    def isempty(self):
        return not (self.stack or self.pending or self.registers)

    def step(self):
        '''
        Evaluate the oldest pending operation.

        Operands popped by a failing operator are lost, not restored.
        '''
        if not self.pending:
            return Outcome.EXHAUSTED
        operation = self.pending.popleft()
        if isinstance(operation, Number):
            self._pshstack(operation)
            return Outcome.SHIFTED
        try:
            self._apply(operation)
        except _Abort as e:
            logger.debug('%s failed: %s', operation, e.outcome.message)
            return e.outcome
        return Outcome.REDUCED

    def run(self, observer=None):
        '''
        Step until no more progress is made, returning the final outcome.

        :param observer: Called with the machine after every step that made
                         progress.
        '''
        while True:
            outcome = self.step()
            if not outcome.progressed:
                return outcome
            if observer is not None:
                observer(self)

    def _apply(self, operator):
        f = type(self).ARITHMETIC.get(operator)
        if f is not None:
            a, b = self._popnumbers(2)
            self._pshstack(Number(f(a.value, b.value)))
        else:
            type(self).FUNCTIONS[operator](self)

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self):
        if not self.stack:
            raise _Abort(Outcome.UNDERFLOW)
        return self.stack.pop()

    def _popnumbers(self, n):
        '''
        Pop n numbers from stack, topmost first.

        Pops them all before checking any of them.
        '''
        popped = [self._popstack() for _ in range(n)]
        if not all(isinstance(element, Number) for element in popped):
            raise _Abort(Outcome.INVALID_OPERAND)
        return popped

    def swpstack(self):
        '''
        Swap two elements at top of stack.
        '''
        self._pshstack(*self._popnumbers(2))

    def dupstack(self):
        '''
        Duplicate element at top of stack.
        '''
        top, = self._popnumbers(1)
        self._pshstack(top, top)

    def drpstack(self):
        '''
        Discard element at top of stack.
        '''
        self._popstack()

    def store(self):
        '''
        Pop register number, then value, and store value in register.
        '''
        key, value = self._popstack(), self._popstack()
        if not isinstance(key, Number):
            raise _Abort(Outcome.INVALID_OPERAND)
        key = _register_key(key.value)
        logger.debug('Storing %s in register %d', value, key)
        self.registers[key] = value

    def load(self):
        '''
        Pop register number and move its value onto stack.
        '''
        key, = self._popnumbers(1)
        key = _register_key(key.value)
        try:
            value = self.registers.pop(key)
        except KeyError:
            raise _Abort(Outcome.UNBOUND_REGISTER) from None
        logger.debug('Loaded %s from register %d', value, key)
        self._pshstack(value)

    def render(self):
        '''
        Registers in order, then stack bottom to top, then pending operations.
        '''
        registers = ''.join('({}: {}) '.format(key, self.registers[key])
                            for key
                            in sorted(self.registers))
        return registers + ' '.join(str(element).rjust(type(self).WIDTH)
                                    for element
                                    in chain(self.stack, self.pending))

    def __str__(self):
        return self.render()

    # Operators that aren't plain arithmetic.
    FUNCTIONS = {
        Operator.SWAP: swpstack,
        Operator.DUPLICATE: dupstack,
        Operator.DROP: drpstack,
        Operator.STORE: store,
        Operator.LOAD: load,
    }

    assert set(ARITHMETIC).isdisjoint(FUNCTIONS)
    assert set(ARITHMETIC) | set(FUNCTIONS) == set(Operator)
