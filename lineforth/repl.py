"""
lineforth REPL - Interpreter core and interactive Read-Eval-Print Loop
"""

import logging
import sys

from .core import (CompileOnlyError, ForthBase, ForthException,
                   MissingWordError, parse_number, to_text)
from .tokenizer import Tokenizer
from .arithmetic import ForthArithmetic
from .stack_ops import ForthStack
from .control_flow import ForthControlFlow, is_control_marker
from .compiler import ForthCompiler
from .io_words import ForthIO


log = logging.getLogger(__name__)


class Forth(ForthBase, ForthArithmetic, ForthStack, ForthControlFlow,
            ForthCompiler, ForthIO):
    """Complete Forth interpreter combining all mixins"""

    def __init__(self):
        super().__init__()
        self._register_all_words()

    def _register_all_words(self):
        """Register all words from all mixins"""
        self._register_stack_words()
        self._register_arithmetic_words()
        self._register_io_words()
        self._register_control_flow_words()
        self._bootstrap_io_words()

    @property
    def defining(self):
        """True while a colon definition is open across lines"""
        return self._defining

    def read_line(self, line):
        """Evaluate one line and return the response text.

        " <output> ok" after immediate execution, "  ok" when the line closes
        a definition, "" while a definition stays open, and " <message>"
        when the line failed.
        """
        tokenizer = Tokenizer(line)

        if tokenizer.is_definition_start():
            try:
                self._start_definition(tokenizer)
            except ForthException as e:
                self._abort_definition(e.message)
                return " " + e.message

        if self._defining:
            try:
                self._compile_tokens(tokenizer)
                if tokenizer.is_definition_end():
                    self._finish_definition()
                    return "  ok"
            except ForthException as e:
                self._abort_definition(e.message)
                return " " + e.message
            return ""

        output = []
        try:
            for token in tokenizer.tokens():
                output.append(self._process_word(token))
        except ForthException as e:
            log.debug("line %r failed: %s", line, e.message)
            return " " + e.message

        return " " + ''.join(output) + " ok"

    def _process_word(self, token):
        """Run a single token in immediate mode, returning its output"""
        if token.is_string:
            return ""

        word = token.text
        definition = self._lookup_word(word)

        if definition is not None:
            if is_control_marker(definition):
                raise CompileOnlyError(word)
            return to_text(definition(self.stack, self.dictionary))

        value = parse_number(word)
        if value is not None:
            self.stack.push(value)
        elif word != ';':
            raise MissingWordError(word)
        return ""

    def get_stack_display(self):
        return self.stack.print()

    def execute(self, text):
        """Feed each line of `text` to read_line; return the responses"""
        return [self.read_line(line) for line in text.splitlines()]


class ForthREPL:
    """Mixin providing REPL functionality"""

    def _readline_input(self, prompt):
        """Alternative input using sys.stdin.readline for compatibility"""
        sys.stdout.write(prompt)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError()
        return line.rstrip('\n\r')

    def repl(self, readline_mode=False, banner=True):
        """Start interactive REPL

        Args:
            readline_mode: If True, use sys.stdin.readline instead of input().
            banner: If False, skip the greeting.
        """
        if banner:
            print("lineforth - type 'bye' to leave, 'stack' to inspect the stack")

        get_input = self._readline_input if readline_mode else input

        while True:
            try:
                prompt = "...> " if self._defining else "ok> "

                try:
                    line = get_input(prompt)
                except EOFError:
                    break

                command = line.strip().lower()
                if command == 'bye':
                    break
                if command == 'stack' and self.dictionary.lookup('stack') is None:
                    print(self.get_stack_display())
                    continue

                response = self.read_line(line)
                if response:
                    print(response)

            except KeyboardInterrupt:
                if self._defining:
                    self._abort_definition("interrupted")
                print("\n(Ctrl+C) stack and words kept, 'bye' to leave")
            except Exception as e:
                log.error("unexpected error on input: %s", e, exc_info=True)
                print(f"Error: {e}")

        return self


class InteractiveForth(Forth, ForthREPL):
    """Complete Interactive Forth with REPL"""

    def __repr__(self):
        return f"<InteractiveForth stack: {self.get_stack_display().strip()}>"
