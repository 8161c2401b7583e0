"""
lineforth Stack Operations - Stack manipulation and display words
"""

from .core import format_cell


class ForthStack:
    """Mixin providing stack manipulation operations"""

    def _register_stack_words(self):
        """Register stack words"""
        self.dictionary.add('.', self._dot)
        self.dictionary.add('.s', self._dot_s)

        self.dictionary.add('swap', self._swap)
        self.dictionary.add('dup', self._dup)
        self.dictionary.add('over', self._over)
        self.dictionary.add('rot', self._rot)
        self.dictionary.add('drop', self._drop)

    def _dot(self, stack, dictionary):
        return format_cell(stack.pop()) + " "

    def _dot_s(self, stack, dictionary):
        return "\n" + stack.print()

    def _swap(self, stack, dictionary):
        a, b = stack.pop(), stack.pop()
        stack.push(a)
        stack.push(b)

    def _dup(self, stack, dictionary):
        a = stack.pop()
        stack.push(a)
        stack.push(a)

    def _over(self, stack, dictionary):
        a, b = stack.pop(), stack.pop()
        stack.push(b)
        stack.push(a)
        stack.push(b)

    def _rot(self, stack, dictionary):
        # ( x1 x2 x3 -- x2 x3 x1 )
        a, b, c = stack.pop(), stack.pop(), stack.pop()
        stack.push(b)
        stack.push(a)
        stack.push(c)

    def _drop(self, stack, dictionary):
        stack.pop()
