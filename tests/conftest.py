# tests/conftest.py
"""
Shared helpers for the printf tests.
"""

import pytest

from printf import FormatError, StringSink, sprintf
from printf.directive import parse_directive


def check(template, args, expected, **options):
    out = sprintf(template, *args, **options)
    assert out == expected, 'sprintf({!r}, {}) returned {!r} expected {!r}'.format(template, args, out, expected)


def fails(template, args, kind, **options):
    with pytest.raises(FormatError) as info:
        sprintf(template, *args, **options)
    assert info.value.kind is kind
    return info.value


def directive(spec):
    "Parse a specifier written without its leading %."
    d, end = parse_directive(spec, 0)
    assert end == len(spec)
    return d


class RecordingSink:

    "Sink that remembers every call, to check what went through putc and putn."

    def __init__(self):
        self.calls = []

    def putc(self, unit):
        self.calls.append(('putc', unit))

    def putn(self, units):
        self.calls.append(('putn', units))

    def getvalue(self):
        return ''.join(units for _, units in self.calls)


@pytest.fixture
def sink():
    return StringSink()
