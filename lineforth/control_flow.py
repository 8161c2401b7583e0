"""
lineforth Control Flow - IF / ELSE / THEN markers and replay frames
"""

from .core import FALSE


IF_MARKER = ('if_start',)
ELSE_MARKER = ('else_marker',)
THEN_MARKER = ('then_marker',)

CONTROL_MARKERS = (IF_MARKER, ELSE_MARKER, THEN_MARKER)


def is_control_marker(definition):
    return isinstance(definition, tuple) and definition in CONTROL_MARKERS


class ControlFrame:
    """State of one open IF while a compiled word is replayed"""

    __slots__ = ('parent_should_execute', 'in_if', 'true_condition')

    def __init__(self, parent_should_execute, true_condition):
        self.parent_should_execute = parent_should_execute
        self.in_if = True
        self.true_condition = true_condition

    def __repr__(self):
        return (f"ControlFrame(parent={self.parent_should_execute}, "
                f"in_if={self.in_if}, cond={self.true_condition})")


def should_execute(frame):
    """May an action run under `frame` (None when no IF is open)?

    Inside the IF part it runs when the condition held, inside the ELSE part
    when it did not, and never when an enclosing branch is skipped.
    """
    if frame is None:
        return True
    return frame.parent_should_execute and frame.true_condition == frame.in_if


def open_frame(control_stack, stack):
    """Handle IF: push a frame, taking the condition off the stack if live"""
    parent = should_execute(control_stack[-1] if control_stack else None)
    # a skipped IF must leave the stack alone
    condition = parent and stack.pop() != FALSE
    control_stack.append(ControlFrame(parent, condition))


class ForthControlFlow:
    """Mixin providing control flow structures"""

    def _register_control_flow_words(self):
        """Register control flow markers"""
        self.dictionary.add('if', IF_MARKER)
        self.dictionary.add('else', ELSE_MARKER)
        self.dictionary.add('then', THEN_MARKER)
