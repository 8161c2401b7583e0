"""
lineforth Tokenizer - Splits one input line into words, comments and strings
"""

import re
from collections import namedtuple

from .core import EndOfInputError


Token = namedtuple('Token', ['text', 'is_string'])

STRING_START = '." '
COMMENT_START = '( '

_valid_token = re.compile(r'\S')
_definition_start = re.compile(r'^\s*:')
_definition_end = re.compile(r';\s*$')


class Tokenizer:
    """Cursor over a single line of source.

    Definitions open at the start of a line and close at its end, so the
    boundary checks look at the whole line, not at the cursor.
    """

    def __init__(self, line):
        self.line = line
        self.index = 0

    def has_more(self):
        """Is there any non-whitespace left after the cursor?"""
        return _valid_token.search(self.line, self.index) is not None

    def is_definition_start(self):
        return _definition_start.match(self.line) is not None

    def is_definition_end(self):
        return _definition_end.search(self.line) is not None

    def _skip_whitespace(self):
        n = len(self.line)
        while self.index < n and self.line[self.index].isspace():
            self.index += 1

    def _read_until(self, delimiter):
        """Consume up to `delimiter` and past it; return what came before"""
        end = self.line.find(delimiter, self.index)
        if end < 0:
            end = len(self.line)
        text = self.line[self.index:end]
        self.index = end + 1
        return text

    def next_token(self):
        self._skip_whitespace()
        is_string = self.line.startswith(STRING_START, self.index)

        if is_string:
            self.index += len(STRING_START)
            text = self._read_until('"')
        elif self.line.startswith(COMMENT_START, self.index):
            self.index += len(COMMENT_START)
            self._read_until(')')
            return self.next_token()
        else:
            start = self.index
            n = len(self.line)
            while self.index < n and not self.line[self.index].isspace():
                self.index += 1
            text = self.line[start:self.index]

        if not text:
            raise EndOfInputError()

        return Token(text, is_string)

    def tokens(self):
        """Yield the remaining tokens of the line"""
        while self.has_more():
            yield self.next_token()
