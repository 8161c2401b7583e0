"""
lineforth Core - Base infrastructure shared by every mixin
- Exception classes
- Cell conventions (TRUE/FALSE, number recognition, formatting)
- Stack and dictionary management
- Base initialization
"""

import logging
import math


log = logging.getLogger(__name__)

TRUE = -1
FALSE = 0


class ForthException(Exception):
    """Recoverable interpreter error, reported at the line boundary"""
    code = -1

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class StackUnderflowError(ForthException):
    code = -4

    def __init__(self):
        super().__init__("Stack underflow")


class EndOfInputError(ForthException):
    code = -39

    def __init__(self):
        super().__init__("nextToken called with no more tokens")


class MissingWordError(ForthException):
    code = -13

    def __init__(self, word):
        self.word = word
        super().__init__(f"{word} ? ")


class DivisionByZeroError(ForthException):
    code = -10

    def __init__(self):
        super().__init__("Division by zero")


class CompileOnlyError(ForthException):
    code = -14

    def __init__(self, word):
        self.word = word
        super().__init__(f"{word} is compile-only")


class ControlStructureError(ForthException):
    code = -22

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unbalanced if/else/then in {name}")


class ForthInternalError(RuntimeError):
    """Broken interpreter invariant; never caught by read_line"""


def format_cell(value):
    """Render a cell the way `.` prints it"""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == 0:
            return "0"
        return _format_float(value)
    return str(value)


def _format_float(value):
    """Shortest round-trip digits, laid out positionally for 1e-7 <= |x| < 1e21
    and as d.ddde+n otherwise, with no zero padding in the exponent.
    """
    mantissa, _, exponent = repr(abs(value)).partition('e')
    int_part, _, frac_part = mantissa.partition('.')
    digits = int_part + frac_part
    point = len(int_part) + int(exponent or 0)

    stripped = digits.lstrip('0')
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip('0')
    k = len(digits)

    if k <= point <= 21:
        text = digits + '0' * (point - k)
    elif 0 < point <= 21:
        text = digits[:point] + '.' + digits[point:]
    elif -6 < point <= 0:
        text = '0.' + '0' * -point + digits
    else:
        e = point - 1
        sign = '+' if e >= 0 else '-'
        head = digits[0] if k == 1 else digits[0] + '.' + digits[1:]
        text = f"{head}e{sign}{abs(e)}"

    return '-' + text if value < 0 else text


def parse_number(text):
    """Return the number `text` denotes, or None.

    A text is a number only when formatting the parsed value gives back the
    identical text, so "1.50", "+5" and "1_0" are words, not numbers.
    "Infinity" and "NaN" do pass this test.
    """
    for cast in (int, float):
        try:
            value = cast(text)
        except ValueError:
            continue
        if format_cell(value) == text:
            return value
    return None


def to_text(output):
    """Convert a word's result to output text, None becoming empty"""
    if output is None:
        return ""
    return str(output)


class Stack:
    """LIFO of cells with underflow detection"""

    def __init__(self):
        self._cells = []

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __repr__(self):
        return f"Stack({self._cells!r})"

    def push(self, value):
        self._cells.append(value)

    def pop(self):
        if not self._cells:
            raise StackUnderflowError()
        return self._cells.pop()

    def print(self):
        return " ".join(format_cell(cell) for cell in self._cells) + " <- Top "


class Dictionary:
    """Word list searched newest-first.

    Entries are only ever appended. Adding a name that already exists shadows
    the older entry instead of replacing it, so compiled words that captured
    the older definition keep running it.
    """

    def __init__(self):
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __contains__(self, name):
        return self.lookup(name) is not None

    def add(self, name, definition):
        name = name.lower()
        self._entries.append((name, definition))
        log.debug("added %r to dictionary (%d entries)", name, len(self._entries))

    def lookup(self, name):
        """Return the newest definition for `name`, or None"""
        name = name.lower()
        for entry_name, definition in reversed(self._entries):
            if entry_name == name:
                return definition
        return None


class ForthBase:
    """Base mixin holding the state every other mixin works on"""

    def __init__(self):
        self.stack = Stack()
        self.dictionary = Dictionary()

        self._defining = False
        self._current_definition = None

    def _lookup_word(self, word_name):
        return self.dictionary.lookup(word_name)
