from collections import namedtuple

import logging
import sys

from . import conversions  # noqa: F401  (registers the conversion classes)
from .arguments import Arguments, Settings
from .directive import Text, parse_template
from .errors import FormatError
from .sinks import StringSink, as_sink

log = logging.getLogger(__name__)


class Result(namedtuple('Result', 'text error')):

    "What try_format returns: the text produced so far and the FormatError that stopped it, if any."

    @property
    def ok(self):
        return self.error is None


class PositionCounter:

    """
    Decides which argument a directive without an explicit position
    takes. Sequential numbering stops for good at the first explicit
    position: after "%2$s", a bare "%s" means argument 2 again, and so
    does every bare specifier until the next explicit one.
    """

    def __init__(self):
        self.position   = 0
        self.positional = False

    def __repr__(self):
        return '<{} position: {}; positional: {}>'.format(self.__class__.__name__, self.position, self.positional)

    def resolve(self, directive):
        if directive.position is None:
            directive.position = self.position
        else:
            self.positional = True
            self.position   = directive.position

        if not self.positional:
            self.position += 1

        return directive.position


def writef(file, template, *args, **options):
    """
    Render template with args into file, which is either a sink (putc and
    putn) or anything with a write method. options are Settings keywords.
    """
    if not isinstance(template, str):
        raise TypeError('template must be a str, not {}'.format(type(template).__name__))

    sink      = as_sink(file)
    arguments = Arguments(args, Settings(**options))
    counter   = PositionCounter()

    try:
        for item in parse_template(template):
            if isinstance(item, Text):
                item.emit(sink)
                continue
            idx = counter.resolve(item)
            log.debug('%r takes argument %d', item, idx)
            item.emit(arguments.select(idx), sink, arguments.settings)
    except FormatError as e:
        log.info('formatting %r stopped: %s', template, e)
        raise


def format(template, *args, file=None, **options):
    "Emit formatted output to file, or return it as a string when file is None."
    if file is not None:
        writef(file, template, *args, **options)
        return None
    sink = StringSink()
    writef(sink, template, *args, **options)
    return sink.getvalue()


def sprintf(template, *args, **options):
    return format(template, *args, file=None, **options)


def printf(template, *args, **options):
    writef(sys.stdout, template, *args, **options)


def try_format(template, *args, **options):
    sink = StringSink()
    try:
        writef(sink, template, *args, **options)
    except FormatError as e:
        return Result(sink.getvalue(), e)
    return Result(sink.getvalue(), None)
