"printf-style formatting: %-templates rendered into any sink, left to right."

from .arguments import Char, Int, Kind, Pointer, Settings, UInt
from .driver import Result, format, printf, sprintf, try_format, writef
from .errors import ErrorKind, FormatError
from .sinks import StreamSink, StringSink

__all__ = [
    'Char', 'ErrorKind', 'FormatError', 'Int', 'Kind', 'Pointer', 'Result',
    'Settings', 'StreamSink', 'StringSink', 'UInt',
    'format', 'printf', 'sprintf', 'try_format', 'writef',
]
