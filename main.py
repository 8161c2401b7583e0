#!/usr/bin/env python3
"""
lineforth - Line-oriented Forth interpreter

Usage:
1. Interactive REPL:      python main.py [repl] [--readline]
2. Batch (piped stdin):   echo "3 4 + ." | python main.py
3. Debug logging:         python main.py --debug   (or LINEFORTH_DEBUG=1)

Standard library only.
"""

import logging
import os
import sys

from lineforth import InteractiveForth


def configure_logging(argv):
    debug = '--debug' in argv or bool(os.environ.get('LINEFORTH_DEBUG'))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )


def run_batch(forth, lines):
    """Feed each line to the interpreter, printing non-empty responses"""
    for line in lines:
        response = forth.read_line(line.rstrip('\n\r'))
        if response:
            print(response)
    return forth


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    configure_logging(argv)

    args = [a for a in argv if not a.startswith('--')]
    if args and args[0] != 'repl':
        print(f"Unrecognized argument: {args[0]}")
        print(__doc__)
        return 2

    f = InteractiveForth()
    if not args and not sys.stdin.isatty():
        run_batch(f, sys.stdin)
    else:
        f.repl(readline_mode='--readline' in argv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
