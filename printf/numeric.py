"""
Integer rendering for %b %d %o %x %X %p, and for integers under %s.

The layout of a rendered integer is

    [fill spaces] [sign or base prefix] [zeros] digits [fill spaces]

where the leading fill is dropped under ZERO_FILL (it becomes extra
zeros instead) and moves to the end under LEFT_JUSTIFY.
"""

from .directive import FROM_ARGUMENT, Flag
from .errors import not_implemented

lower_digits = '0123456789abcdefghijklmnopqrstuvwxyz'
upper_digits = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ'

BASES = (2, 8, 10, 16)


def digits(value, base, upper=False):
    """
    Digits of value in base, most significant first, without any sign.
    Zero has no digits at all; the default precision of 1 is what makes
    it print as "0".

    Division truncates toward zero, so a negative value yields negative
    remainders. Those are flipped after the division, together with the
    quotient, which is how the most negative value gets rendered without
    ever being negated itself.
    """
    if base not in BASES:
        raise ValueError('unsupported base {}'.format(base))
    table = upper_digits if upper else lower_digits
    out = []
    while value:
        value, digit = divmod(value, base)
        if digit and value < 0:
            value += 1
            digit -= base
        if digit < 0:
            digit = -digit
            value = -value
        out.append(table[digit])
    return ''.join(reversed(out))


def prefix_for(directive, value, base):
    if directive.has(Flag.EXPLICIT_BASE):
        if base == 16:
            if value == 0:
                return ''
            return '0X' if directive.char == 'X' else '0x'
        if base == 8:
            return '0'
        return ''
    if value < 0:
        return '-'
    if directive.has(Flag.SHOW_SIGN):
        return '+'
    if directive.has(Flag.ADD_SPACE):
        return ' '
    return ''


def prefix_width(directive, value, base):
    # A negative value outside base 10 still prints its '-' but does not
    # count it here; unsigned conversions never get there.
    if (value < 0 and base == 10) or directive.has(Flag.SHOW_SIGN) or directive.has(Flag.ADD_SPACE):
        return 1
    if directive.has(Flag.EXPLICIT_BASE):
        if base == 16:
            return 2 if value != 0 else 0
        if base == 8:
            return 1
    return 0


def leading_zeros(directive, ndigits):
    if directive.precision == FROM_ARGUMENT:
        raise not_implemented('precision from argument (.*)')
    wanted = 1 if directive.precision is None else directive.precision
    return max(0, wanted - ndigits)


def put(sink, units):
    if units:
        sink.putn(units)


def fill_width(directive, size):
    if directive.width == FROM_ARGUMENT:
        raise not_implemented('width from argument (*)')
    if directive.width is None:
        return 0
    return max(0, directive.width - size)


def emit_integer(sink, directive, value, base):
    "Write value in base to sink following the directive's flags, width and precision."
    text  = digits(value, base, upper=directive.char == 'X')
    zeros = leading_zeros(directive, len(text))
    fill  = fill_width(directive, len(text) + zeros + prefix_width(directive, value, base))

    if not directive.has(Flag.ZERO_FILL) and not directive.has(Flag.LEFT_JUSTIFY):
        put(sink, ' ' * fill)

    put(sink, prefix_for(directive, value, base))

    if directive.has(Flag.ZERO_FILL):
        zeros += fill
    put(sink, '0' * zeros)

    put(sink, text)

    if directive.has(Flag.LEFT_JUSTIFY):
        put(sink, ' ' * fill)
