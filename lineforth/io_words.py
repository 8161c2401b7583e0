"""
lineforth I/O Words - Character output
"""

import math


def _to_int(value):
    """Truncate a cell to an int; NaN and infinities count as 0"""
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value)


class ForthIO:
    """Mixin providing character output words"""

    def _register_io_words(self):
        """Register I/O words"""
        self.dictionary.add('emit', self._emit)
        self.dictionary.add('spaces', self._spaces)

    def _bootstrap_io_words(self):
        """Define the words that are plain colon definitions"""
        self.read_line(": cr 10 emit ;")
        self.read_line(": space 32 emit ;")

    def _emit(self, stack, dictionary):
        return chr(_to_int(stack.pop()) % 0x10000)

    def _spaces(self, stack, dictionary):
        return " " * max(0, _to_int(stack.pop()))
