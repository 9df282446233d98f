'''
IEEE 754 flavoured float operations.

Python raises on division by zero, overflowing powers, and logarithms outside
their domain. A calculator would rather show inf or NaN and carry on.
'''

import math


def _isodd(n):
    return n.is_integer() and n % 2 == 1


def divide(dividend, divisor):
    '''
    Divide, yielding signed infinity on division by zero and NaN on 0/0.
    '''
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1, divisor)


def power(base, exponent):
    '''
    Raise base to exponent.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        pass
    except ValueError:
        # Negative base, fractional exponent
        if base != 0:
            return math.nan
    # Overflowed, or zero to a negative power
    if _isodd(exponent):
        return math.copysign(math.inf, base)
    return math.inf


def _ln(x):
    if x == 0:
        return -math.inf
    elif x < 0:
        return math.nan
    return math.log(x)


def logarithm(base, x):
    '''
    Logarithm of x in the given base.
    '''
    return divide(_ln(x), _ln(base))
