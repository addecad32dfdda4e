#!/usr/bin/env python3
"""
pyprintf: format and print data.

    python -m printf [-v] [-p SIZE] FORMAT [ARG ...]

Arguments arrive as strings; each one is converted according to the
first specifier that reads it, so "%x" gets an int and "%s" keeps the
text as is.
"""

import argparse
import logging
import sys

from .arguments import BIT_WIDTHS, Pointer
from .directive import Text, parse_template
from .driver import PositionCounter, writef
from .errors import FormatError

PROG = 'pyprintf'

log = logging.getLogger('printf')

integer_chars = set('bdoxX')


def configure_logging(verbosity):
    "0: warnings only, 1: info, 2 and up: debug."
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    log.setLevel(level)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('%(name)s: %(levelname)s: %(message)s'))
        log.addHandler(handler)
    for handler in log.handlers:
        handler.setLevel(level)


def unescape(s):
    "Process backslash escapes (\\n, \\t, \\x41, \\u263a, ...) in s."
    return s.encode('latin-1', 'backslashreplace').decode('unicode_escape')


def argument_chars(template):
    "Map each argument index to the conversion character of the first specifier that reads it."
    chars   = {}
    counter = PositionCounter()
    try:
        for item in parse_template(template):
            if not isinstance(item, Text):
                chars.setdefault(counter.resolve(item), item.char)
    except FormatError:
        # The real run reports it, after printing what comes before.
        pass
    return chars


def parse_int(text):
    try:
        return int(text, 0)
    except ValueError:
        return int(text, 10)


def convert(text, char):
    if char in integer_chars:
        return parse_int(text)
    if char == 'p':
        return Pointer(parse_int(text))
    return text


def build_parser():
    parser = argparse.ArgumentParser(prog=PROG, description='Format and print data.')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='log to stderr; repeat for debug output')
    parser.add_argument('-p', '--pointer-size', type=int, choices=(2, 4, 8), default=None,
                        help='bytes per pointer for %%p (default: this machine)')
    parser.add_argument('--int-bits', type=int, choices=BIT_WIDTHS, default=None,
                        help='width of integer arguments (default: 64)')
    parser.add_argument('format', help='template, with backslash escapes')
    parser.add_argument('args', nargs='*', help='values for the specifiers')
    return parser


def main(argv=None):
    opts = build_parser().parse_args(argv)
    configure_logging(opts.verbose)

    try:
        template = unescape(opts.format)
    except UnicodeDecodeError as e:
        print('{}: bad escape in format: {}'.format(PROG, e.reason), file=sys.stderr)
        return 1

    chars = argument_chars(template)

    try:
        args = [convert(text, chars.get(i)) for i, text in enumerate(opts.args)]
    except ValueError as e:
        print('{}: {}'.format(PROG, e), file=sys.stderr)
        return 1

    options = {}
    if opts.pointer_size is not None:
        options['pointer_size'] = opts.pointer_size
    if opts.int_bits is not None:
        options['int_bits'] = opts.int_bits

    try:
        writef(sys.stdout, template, *args, **options)
    except FormatError as e:
        sys.stdout.flush()
        print('{}: {}'.format(PROG, e), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
