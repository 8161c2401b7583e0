"""
lineforth Arithmetic - Floored division and comparison words
"""

import math

from .core import DivisionByZeroError, FALSE, TRUE


def _floor_div(a, b):
    """Floored quotient; float operands divide first, keeping Infinity and NaN"""
    if isinstance(a, float) or isinstance(b, float):
        quotient = a / b
        return math.floor(quotient) if math.isfinite(quotient) else quotient
    return a // b


class ForthArithmetic:
    """Mixin providing arithmetic operations"""

    def _register_arithmetic_words(self):
        """Register arithmetic words"""
        self.dictionary.add('+', self._plus)
        self.dictionary.add('*', self._mult)
        self.dictionary.add('/', self._div)
        self.dictionary.add('/mod', self._divmod)
        self.dictionary.add('mod', self._mod)

        self.dictionary.add('=', self._equal)
        self.dictionary.add('<', self._less)
        self.dictionary.add('>', self._greater)

    def _pop_divisor(self, stack):
        """Pop ( a b ) and return (a, b), refusing b == 0"""
        b = stack.pop()
        a = stack.pop()
        if b == 0:
            raise DivisionByZeroError()
        return a, b

    def _plus(self, stack, dictionary):
        stack.push(stack.pop() + stack.pop())

    def _mult(self, stack, dictionary):
        stack.push(stack.pop() * stack.pop())

    def _div(self, stack, dictionary):
        a, b = self._pop_divisor(stack)
        stack.push(_floor_div(a, b))

    def _divmod(self, stack, dictionary):
        dividend, divisor = self._pop_divisor(stack)
        stack.push(dividend % divisor)
        stack.push(_floor_div(dividend, divisor))

    def _mod(self, stack, dictionary):
        a, b = self._pop_divisor(stack)
        stack.push(a % b)

    def _equal(self, stack, dictionary):
        stack.push(TRUE if stack.pop() == stack.pop() else FALSE)

    def _less(self, stack, dictionary):
        b = stack.pop()
        a = stack.pop()
        stack.push(TRUE if a < b else FALSE)

    def _greater(self, stack, dictionary):
        b = stack.pop()
        a = stack.pop()
        stack.push(TRUE if a > b else FALSE)
