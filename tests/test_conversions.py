# tests/test_conversions.py
"""
Tests for the per-conversion renderers and the kind tables.
"""

import pytest

from printf import Char, ErrorKind, Int, Pointer, UInt
from tests.conftest import check, fails


class TestString:

    def test_booleans(self):
        check('%s', [True], 'true')
        check('%s', [False], 'false')
        check('%6s', [False], ' false')
        check('%-6s|', [True], 'true  |')

    def test_text(self):
        check('%s', ['abc'], 'abc')
        check('%5s', ['abc'], '  abc')
        check('%-5s|', ['abc'], 'abc  |')
        check('%2s', ['abc'], 'abc')
        check('%s', [''], '')

    def test_flags_ignored_for_text(self):
        check('%+05s', ['ab'], '   ab')

    def test_char(self):
        check('%s', [Char('x')], 'x')
        check('%3s', [Char('x')], '  x')

    def test_integers_print_as_decimal(self):
        check('%s', [42], '42')
        check('%s', [-42], '-42')
        check('%5s', [-42], '  -42')
        check('%+s', [5], '+5')
        check('%s', [UInt(255, bits=8)], '255')

    def test_pointer(self):
        check('%s', [Pointer(0xab)], '0x00ab', pointer_size=2)

    def test_objects_with_str(self):
        class Name:
            def __str__(self):
                return 'name'
        check('%-6s|', [Name()], 'name  |')

    def test_float(self):
        fails('%s', [1.5], ErrorKind.NOT_IMPLEMENTED)

    def test_unsupported(self):
        fails('%s', [None], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%s', [object()], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%s', [b'bytes'], ErrorKind.INCOMPATIBLE_TYPE)

    def test_star_width(self):
        fails('%*s', ['x'], ErrorKind.NOT_IMPLEMENTED)


class TestCharacter:

    def test_char(self):
        check('%c', [Char('x')], 'x')
        check('%3c', [Char('x')], '  x')
        check('%-3c|', [Char('x')], 'x  |')

    def test_code_points(self):
        check('%c', [65], 'A')
        check('%c', [0x263a], '☺')

    def test_one_character_string(self):
        check('%c', ['z'], 'z')

    def test_incompatible(self):
        fails('%c', ['zz'], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%c', [True], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%c', [-1], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%c', [0x110000], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%c', [1.5], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%c', [Pointer(1)], ErrorKind.INCOMPATIBLE_TYPE)


class TestSigned:

    def test_decimal(self):
        check('%d', [0], '0')
        check('%d', [-(1 << 63)], '-9223372036854775808')
        check('%d', [UInt((1 << 64) - 1)], '18446744073709551615')
        check('%d', [Int(-1, bits=8)], '-1')

    def test_incompatible(self):
        fails('%d', ['abc'], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%d', [True], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%d', [Char('1')], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%d', [Pointer(1)], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%d', [1 << 64], ErrorKind.INCOMPATIBLE_TYPE)


class TestUnsigned:

    def test_bases(self):
        check('%b', [5], '101')
        check('%o', [8], '10')
        check('%x', [0xbeef], 'beef')
        check('%X', [0xbeef], 'BEEF')

    def test_negative_values_print_their_bit_pattern(self):
        check('%x', [-1], 'f' * 16)
        check('%x', [Int(-1, bits=8)], 'ff')
        check('%o', [Int(-1, bits=8)], '377')
        check('%b', [Int(-2, bits=8)], '11111110')
        check('%x', [-1], 'ffffffff', int_bits=32)

    def test_explicit_base_not_for_binary(self):
        check('%#b', [5], '101')

    def test_sign_not_for_hex(self):
        check('%+x', [5], '5')
        check('% x', [5], '5')

    def test_incompatible(self):
        fails('%x', ['ff'], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%o', [False], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%x', [Pointer(1)], ErrorKind.INCOMPATIBLE_TYPE)


class TestAddress:

    def test_full_width(self):
        check('%p', [Pointer(0x1234)], '0x0000000000001234', pointer_size=8)
        check('%p', [Pointer(0x1234)], '0x00001234', pointer_size=4)

    def test_width_and_justify(self):
        check('%20p', [Pointer(0x1234)], '          0x00001234', pointer_size=4)
        check('%-12p|', [Pointer(0x1234)], '0x00001234  |', pointer_size=4)

    def test_caller_flags_and_precision_ignored(self):
        check('%+#0.2p', [Pointer(0x1234)], '0x00001234', pointer_size=4)

    def test_null(self):
        check('%p', [Pointer(None)], '00000000', pointer_size=4)

    def test_address_wider_than_pointer(self):
        fails('%p', [Pointer(1 << 40)], ErrorKind.INCOMPATIBLE_TYPE, pointer_size=4)
        fails('%s', [Pointer(1 << 16)], ErrorKind.INCOMPATIBLE_TYPE, pointer_size=2)
        check('%p', [Pointer(0xffffffff)], '0xffffffff', pointer_size=4)

    def test_incompatible(self):
        fails('%p', [5], ErrorKind.INCOMPATIBLE_TYPE)
        fails('%p', ['0x10'], ErrorKind.INCOMPATIBLE_TYPE)


class TestFloating:

    @pytest.mark.parametrize('char', 'eEfFgGaA')
    def test_not_implemented(self, char):
        fails('%' + char, [1.0], ErrorKind.NOT_IMPLEMENTED)

    def test_whatever_the_argument(self):
        fails('%f', [1], ErrorKind.NOT_IMPLEMENTED)
        fails('%e', ['x'], ErrorKind.NOT_IMPLEMENTED)
