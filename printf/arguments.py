from collections import namedtuple
from decimal import Decimal
from enum import Enum
from operator import index

import ctypes
import numbers
import struct

from .errors import too_few_arguments

POINTER_SIZE = struct.calcsize('P')
INT_BITS     = 64
BIT_WIDTHS   = (8, 16, 32, 64)

SIGNED_CTYPES   = (ctypes.c_byte, ctypes.c_short, ctypes.c_int, ctypes.c_long, ctypes.c_longlong)
UNSIGNED_CTYPES = (ctypes.c_ubyte, ctypes.c_ushort, ctypes.c_uint, ctypes.c_ulong, ctypes.c_ulonglong)


class Settings:

    """
    Knobs that depend on the platform being imitated.

    pointer_size is the number of bytes in a pointer; %p always prints
    two hex digits per byte. int_bits is the width assumed for plain
    Python ints, which decides how %x and friends render negative values.
    """

    def __init__(self, pointer_size=POINTER_SIZE, int_bits=INT_BITS):
        if pointer_size not in (2, 4, 8):
            raise ValueError('pointer_size must be 2, 4 or 8, not {!r}'.format(pointer_size))
        if int_bits not in BIT_WIDTHS:
            raise ValueError('int_bits must be one of {}, not {!r}'.format(BIT_WIDTHS, int_bits))
        self.pointer_size = pointer_size
        self.int_bits     = int_bits

    def __repr__(self):
        return '<{} pointer_size: {}; int_bits: {}>'.format(self.__class__.__name__, self.pointer_size, self.int_bits)


class Kind(Enum):
    BOOL        = 'bool'
    CHAR        = 'char'
    SIGNED      = 'signed'
    UNSIGNED    = 'unsigned'
    POINTER     = 'pointer'
    STRING      = 'string'
    FLOAT       = 'float'
    UNSUPPORTED = 'unsupported'


class Char:

    "A single character. Python has no char type, so %c and %s need to be told."

    def __init__(self, value):
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            value = chr(value)
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError('Char needs one character or a code point, not {!r}'.format(value))
        self.value = value

    def __repr__(self):
        return 'Char({!r})'.format(self.value)


class Pointer:

    "A machine address, rendered by %p (and %s) as 0x followed by the full width in hex."

    def __init__(self, address):
        address = 0 if address is None else index(address)
        if address < 0:
            raise ValueError('Pointer address cannot be negative: {}'.format(address))
        self.address = address

    def __repr__(self):
        return 'Pointer({:#x})'.format(self.address)


class Int:

    """
    An integer with a C width and signedness. Out of range values are
    truncated to the low bits, like a C conversion would.
    """

    signed = True

    def __init__(self, value, bits=INT_BITS):
        if bits not in BIT_WIDTHS:
            raise ValueError('bits must be one of {}, not {!r}'.format(BIT_WIDTHS, bits))
        value = index(value) & ((1 << bits) - 1)
        if self.signed and value >> (bits - 1):
            value -= 1 << bits
        self.value = value
        self.bits  = bits

    def __repr__(self):
        return '{}({}, bits={})'.format(self.__class__.__name__, self.value, self.bits)


class UInt(Int):
    signed = False


class Argument(namedtuple('Argument', 'value kind bits')):

    "One classified argument: the normalized value, its Kind and, for integers, its width in bits."

    def unsigned(self):
        "Two's complement reinterpretation of a signed integer, as %b %o %x %X print it."
        if self.value < 0:
            return self.value + (1 << self.bits)
        return self.value


def classify(value, settings):
    if isinstance(value, (bool, ctypes.c_bool)):
        return Argument(bool(getattr(value, 'value', value)), Kind.BOOL, None)

    if isinstance(value, Char):
        return Argument(value.value, Kind.CHAR, None)
    if isinstance(value, ctypes.c_char):
        return Argument(value.value.decode('latin-1'), Kind.CHAR, None)
    if isinstance(value, ctypes.c_wchar):
        return Argument(value.value, Kind.CHAR, None)

    if isinstance(value, (Pointer, ctypes.c_void_p)):
        address = value.address if isinstance(value, Pointer) else value.value or 0
        bits    = settings.pointer_size * 8
        if address >> bits:
            return Argument(address, Kind.UNSUPPORTED, None)
        return Argument(address, Kind.POINTER, bits)

    if isinstance(value, Int):
        return Argument(value.value, Kind.SIGNED if value.signed else Kind.UNSIGNED, value.bits)
    if isinstance(value, SIGNED_CTYPES):
        return Argument(value.value, Kind.SIGNED, ctypes.sizeof(value) * 8)
    if isinstance(value, UNSIGNED_CTYPES):
        return Argument(value.value, Kind.UNSIGNED, ctypes.sizeof(value) * 8)

    if isinstance(value, numbers.Integral):
        value = int(value)
        bits  = settings.int_bits
        if -(1 << (bits - 1)) <= value < (1 << (bits - 1)):
            return Argument(value, Kind.SIGNED, bits)
        if 0 <= value < (1 << bits):
            return Argument(value, Kind.UNSIGNED, bits)
        return Argument(value, Kind.UNSUPPORTED, None)

    if isinstance(value, (numbers.Real, Decimal)):
        return Argument(value, Kind.FLOAT, None)

    if isinstance(value, str):
        return Argument(value, Kind.STRING, None)

    if value is None or isinstance(value, (bytes, bytearray)) or type(value).__str__ is object.__str__:
        return Argument(value, Kind.UNSUPPORTED, None)

    return Argument(str(value), Kind.STRING, None)


class Arguments:

    """
    The call's arguments, classified once, in order. select() is the
    only way the renderers reach them.
    """

    def __init__(self, values, settings=None):
        self.settings = settings or Settings()
        self.items    = [classify(v, self.settings) for v in values]

    def __repr__(self):
        return '<{} {}>'.format(self.__class__.__name__, self.items)

    def __len__(self):
        return len(self.items)

    def select(self, idx):
        # Unused trailing arguments are fine; only a missing one is an error.
        if idx < len(self.items):
            return self.items[idx]
        raise too_few_arguments('argument {} requested but only {} given'.format(idx + 1, len(self.items)))
