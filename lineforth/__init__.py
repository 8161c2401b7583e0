"""
lineforth - Line-oriented Forth interpreter

Usage:
    from lineforth import InteractiveForth
    forth = InteractiveForth()
    forth.read_line("1 2 + .")     # ' 3  ok'

Words are compiled line by line with `: name ... ;`, and `if`/`else`/`then`
work inside definitions.
"""

from .core import (ForthException, ForthInternalError, StackUnderflowError,
                   EndOfInputError, MissingWordError, DivisionByZeroError,
                   CompileOnlyError, ControlStructureError, Stack, Dictionary,
                   TRUE, FALSE)
from .tokenizer import Token, Tokenizer
from .compiler import Definition, CompiledWord
from .repl import Forth, ForthREPL, InteractiveForth

__all__ = ['Forth', 'InteractiveForth', 'ForthException']
__version__ = '1.0.0'
