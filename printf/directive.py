"""
Parsing of printf templates.

A template is literal text with %-specifiers in it:

    Specifier      := Position? Flags Width? Precision? ConversionChar
    Position       := Digits '$'
    Flags          := ('-' | '+' | '#' | '0' | ' ')*
    Width          := Digits | '*'
    Precision      := '.' (Digits | '*')?
    ConversionChar := s c b d o x X p e E f F g G a A

plus %% for a literal percent sign and %( ... %) for nested formats,
which are reserved and not implemented.
"""

from enum import IntFlag

import re

from .errors import invalid_formatter, not_implemented

position_pat  = re.compile(r'([0-9]+)\$')
flags_pat     = re.compile(r'[-+#0 ]*')
width_pat     = re.compile(r'\*|[0-9]+')
precision_pat = re.compile(r'\.(\*|[0-9]*)')

# Width or precision taken from the next argument. Parsed, never rendered.
FROM_ARGUMENT = '*'

classes = {}


def conversion(*chars):
    def decorator(clazz):
        for char in chars:
            classes[char] = clazz
        return clazz
    return decorator


class Flag(IntFlag):
    NONE          = 0
    LEFT_JUSTIFY  = 0x01
    SHOW_SIGN     = 0x02
    EXPLICIT_BASE = 0x04
    ZERO_FILL     = 0x08
    ADD_SPACE     = 0x10


flag_chars = {
    '-': Flag.LEFT_JUSTIFY,
    '+': Flag.SHOW_SIGN,
    '#': Flag.EXPLICIT_BASE,
    '0': Flag.ZERO_FILL,
    ' ': Flag.ADD_SPACE,
}


class Directive:

    """
    Base class for conversions. One instance per %-specifier in the
    template; it lives for a single pass of the driver.

    position is a 0-based argument index or None; width and precision
    are None, FROM_ARGUMENT or an int.
    """

    def __init__(self, char, position=None, flags=Flag.NONE, width=None, precision=None):
        self.char      = char
        self.position  = position
        self.flags     = Flag(flags)
        self.width     = width
        self.precision = precision
        self.normalize()

    def __repr__(self):
        return '<{} %{} position: {}; flags: {!r}; width: {}; precision: {}>'.format(
            self.__class__.__name__, self.char, self.position, self.flags, self.width, self.precision)

    def normalize(self):
        "Drop the flags that mean nothing for this conversion."
        if self.char in 'dbs':
            self.flags &= ~Flag.EXPLICIT_BASE
        else:
            self.flags &= ~(Flag.SHOW_SIGN | Flag.ADD_SPACE)

        if self.flags & Flag.SHOW_SIGN:
            self.flags &= ~Flag.ADD_SPACE

        if self.flags & Flag.LEFT_JUSTIFY:
            self.flags &= ~Flag.ZERO_FILL

    def has(self, flag):
        return bool(self.flags & flag)

    def emit(self, arg, sink, settings):
        "Render the classified argument arg into sink."
        raise NotImplementedError('Abstract method.')


class Text:

    "Literal run of the template, copied verbatim."

    def __init__(self, text):
        self.text = text

    def __repr__(self):
        return '<{} "{}">'.format(self.__class__.__name__, self.text)

    def emit(self, sink):
        sink.putn(self.text)


def parse_template(template):
    """
    Yield Text runs and Directives in template order. This is a
    generator so a malformed specifier only fails once everything before
    it has been emitted.
    """
    p = 0
    while True:
        q = template.find('%', p)
        if q < 0:
            if p < len(template):
                yield Text(template[p:])
            return

        if q > p:
            yield Text(template[p:q])

        nxt = template[q + 1:q + 2]
        if nxt == '%':
            yield Text('%')
            p = q + 2
        elif nxt == '(':
            raise not_implemented('nested format at offset {}'.format(q))
        else:
            directive, p = parse_directive(template, q + 1)
            yield directive


def parse_directive(template, pos):
    "Parse the specifier starting just after its %. Return the directive and the position after it."
    position, p  = parse_position(template, pos)
    flags, p     = parse_flags(template, p)
    width, p     = parse_width(template, p)
    precision, p = parse_precision(template, p)
    char, p      = parse_char(template, p)
    return classes[char](char, position, flags, width, precision), p


def parse_position(template, pos):
    # Digits without a trailing $ are left alone; they are the width.
    m = position_pat.match(template, pos)
    if not m:
        return None, pos
    n = int(m.group(1))
    if n == 0:
        raise invalid_formatter('argument positions start at 1')
    return n - 1, m.end()


def parse_flags(template, pos):
    m = flags_pat.match(template, pos)
    flags = Flag.NONE
    for c in m.group(0):
        flags |= flag_chars[c]
    return flags, m.end()


def parse_width(template, pos):
    m = width_pat.match(template, pos)
    if not m:
        return None, pos
    s = m.group(0)
    return (FROM_ARGUMENT if s == '*' else int(s)), m.end()


def parse_precision(template, pos):
    m = precision_pat.match(template, pos)
    if not m:
        return None, pos
    s = m.group(1)
    if s == '*':
        return FROM_ARGUMENT, m.end()
    return int(s or 0), m.end()


def parse_char(template, pos):
    if pos >= len(template):
        raise invalid_formatter('template ends inside a specifier')
    char = template[pos]
    if char not in classes:
        raise invalid_formatter('unknown conversion {!r} at offset {}'.format(char, pos))
    return char, pos + 1
