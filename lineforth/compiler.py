"""
lineforth Compiler - Colon definitions and their replay
"""

import logging

from .core import (ControlStructureError, ForthInternalError,
                   MissingWordError, parse_number, to_text)
from .control_flow import (ELSE_MARKER, IF_MARKER, THEN_MARKER,
                           is_control_marker, open_frame, should_execute)


log = logging.getLogger(__name__)


class CompiledWord:
    """A word built by `: name ... ;`.

    Its body is a flat list of actions with IF/ELSE/THEN markers left in
    place; which branch runs is worked out on every call.
    """

    def __init__(self, name, actions):
        self.name = name
        self.actions = tuple(actions)

    def __repr__(self):
        return f"<CompiledWord {self.name} ({len(self.actions)} actions)>"

    def __call__(self, stack, dictionary):
        control_stack = []
        output = []

        for action in self.actions:
            op = action[0]

            if action == IF_MARKER:
                open_frame(control_stack, stack)
            elif action == ELSE_MARKER:
                if not control_stack:
                    raise ForthInternalError(f"else without if in {self.name}")
                control_stack[-1].in_if = False
            elif action == THEN_MARKER:
                if not control_stack:
                    raise ForthInternalError(f"then without if in {self.name}")
                control_stack.pop()
            elif not should_execute(control_stack[-1] if control_stack else None):
                continue
            elif op == 'word':
                output.append(to_text(action[2](stack, dictionary)))
            elif op == 'literal':
                stack.push(action[1])
            elif op == 'print_string':
                output.append(action[1])
            else:
                raise ForthInternalError(f"unknown action {action!r} in {self.name}")

        if control_stack:
            raise ForthInternalError(f"unterminated if in {self.name}")

        return ''.join(output)


class Definition:
    """A colon definition being compiled, one token at a time"""

    def __init__(self, name, dictionary):
        self.name = name
        self.dictionary = dictionary
        self.actions = []

    def add_word(self, token):
        text = token.text
        definition = self.dictionary.lookup(text)

        if definition is not None:
            if is_control_marker(definition):
                self.actions.append(definition)
            else:
                # bound now: later redefinitions of `text` do not reach here
                self.actions.append(('word', text, definition))
            return

        value = parse_number(text)
        if value is not None:
            self.actions.append(('literal', value))
        elif token.is_string:
            self.actions.append(('print_string', text))
        elif text != ';':
            raise MissingWordError(text)

    def _check_balance(self):
        depth = 0
        for action in self.actions:
            if action == IF_MARKER:
                depth += 1
            elif action in (ELSE_MARKER, THEN_MARKER):
                if depth == 0:
                    raise ControlStructureError(self.name)
                if action == THEN_MARKER:
                    depth -= 1
        if depth:
            raise ControlStructureError(self.name)

    def compile(self):
        """Install the finished word in the dictionary and return it"""
        self._check_balance()
        word = CompiledWord(self.name, self.actions)
        self.dictionary.add(self.name, word)
        log.debug("compiled %s with %d actions", self.name, len(self.actions))
        return word


class ForthCompiler:
    """Mixin providing the colon-definition life cycle"""

    def _start_definition(self, tokenizer):
        """Open a definition; the line's `:` and name are consumed"""
        if self._defining:
            log.debug("discarding open definition %s", self._current_definition.name)
        self._defining = True
        self._current_definition = None
        tokenizer.next_token()
        name = tokenizer.next_token().text
        self._current_definition = Definition(name, self.dictionary)
        log.debug("defining %s", name)

    def _compile_tokens(self, tokenizer):
        for token in tokenizer.tokens():
            self._current_definition.add_word(token)

    def _finish_definition(self):
        word = self._current_definition.compile()
        self._defining = False
        self._current_definition = None
        return word

    def _abort_definition(self, reason):
        name = self._current_definition.name if self._current_definition else None
        log.debug("aborting definition %s: %s", name, reason)
        self._defining = False
        self._current_definition = None
