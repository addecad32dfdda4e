"""
One class per conversion character. Each class maps the argument
kinds it accepts to a renderer; any other kind is an incompatible type.
"""

from .arguments import Kind
from .directive import Directive, Flag, conversion
from .errors import incompatible_type, not_implemented
from .numeric import emit_integer, fill_width, put


def pad_before(sink, directive, size):
    fill = fill_width(directive, size)
    if not directive.has(Flag.LEFT_JUSTIFY):
        put(sink, ' ' * fill)


def pad_after(sink, directive, size):
    if directive.has(Flag.LEFT_JUSTIFY):
        put(sink, ' ' * fill_width(directive, size))


def emit_text(directive, arg, sink, settings):
    text = arg.value
    pad_before(sink, directive, len(text))
    put(sink, text)
    pad_after(sink, directive, len(text))


def emit_bool(directive, arg, sink, settings):
    text = 'true' if arg.value else 'false'
    pad_before(sink, directive, len(text))
    put(sink, text)
    pad_after(sink, directive, len(text))


def put_char(directive, char, sink):
    pad_before(sink, directive, 1)
    sink.putc(char)
    pad_after(sink, directive, 1)


def emit_char(directive, arg, sink, settings):
    put_char(directive, arg.value, sink)


def emit_code_point(directive, arg, sink, settings):
    if not 0 <= arg.value < 0x110000:
        raise incompatible_type('{} is not a code point'.format(arg.value))
    put_char(directive, chr(arg.value), sink)


def emit_one_char_string(directive, arg, sink, settings):
    if len(arg.value) != 1:
        raise incompatible_type('%c needs a single character, got {} of them'.format(len(arg.value)))
    put_char(directive, arg.value, sink)


def emit_pointer(directive, arg, sink, settings):
    # Only width and justification come from the caller.
    shown = Directive('x', directive.position,
                      Flag.EXPLICIT_BASE | (directive.flags & Flag.LEFT_JUSTIFY),
                      directive.width,
                      settings.pointer_size * 2)
    emit_integer(sink, shown, arg.value, 16)


def emit_decimal(directive, arg, sink, settings):
    emit_integer(sink, directive, arg.value, 10)


def emit_unsigned(directive, arg, sink, settings):
    emit_integer(sink, directive, arg.unsigned(), directive.base)


def emit_float(directive, arg, sink, settings):
    raise not_implemented('floating point conversion %{}'.format(directive.char))


class Conversion(Directive):

    handlers = {}

    def emit(self, arg, sink, settings):
        handler = self.handlers.get(arg.kind)
        if handler is None:
            raise incompatible_type('%{} cannot render {} argument {!r}'.format(self.char, arg.kind.value, arg.value))
        handler(self, arg, sink, settings)


@conversion('s')
class String(Conversion):

    "%s: anything with a textual form. Integers print as %d would, booleans as true or false."

    handlers = {
        Kind.BOOL:     emit_bool,
        Kind.CHAR:     emit_char,
        Kind.POINTER:  emit_pointer,
        Kind.STRING:   emit_text,
        Kind.SIGNED:   emit_decimal,
        Kind.UNSIGNED: emit_decimal,
        Kind.FLOAT:    emit_float,
    }


@conversion('c')
class Character(Conversion):

    "%c: one character, from a Char, a code point or a one character string."

    handlers = {
        Kind.CHAR:     emit_char,
        Kind.SIGNED:   emit_code_point,
        Kind.UNSIGNED: emit_code_point,
        Kind.STRING:   emit_one_char_string,
    }


@conversion('d')
class Signed(Conversion):
    handlers = {
        Kind.SIGNED:   emit_decimal,
        Kind.UNSIGNED: emit_decimal,
    }


class Unsigned(Conversion):

    "Integers printed as their unsigned bit pattern."

    base = None

    handlers = {
        Kind.SIGNED:   emit_unsigned,
        Kind.UNSIGNED: emit_unsigned,
    }


@conversion('b')
class Binary(Unsigned):
    base = 2


@conversion('o')
class Octal(Unsigned):
    base = 8


@conversion('x', 'X')
class Hex(Unsigned):
    base = 16


@conversion('p')
class Address(Conversion):
    handlers = {
        Kind.POINTER: emit_pointer,
    }


@conversion('e', 'E', 'f', 'F', 'g', 'G', 'a', 'A')
class Floating(Conversion):

    "Reserved. Every floating point conversion fails, whatever the argument."

    def emit(self, arg, sink, settings):
        emit_float(self, arg, sink, settings)
