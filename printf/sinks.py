from io import StringIO


class StreamSink:

    "Sink over anything with a write method: files, sys.stdout, sockets wrapped in makefile()."

    def __init__(self, stream):
        self.stream = stream

    def __repr__(self):
        return '<{} {!r}>'.format(self.__class__.__name__, self.stream)

    def putc(self, unit):
        self.stream.write(unit)

    def putn(self, units):
        if units:
            self.stream.write(units)


class StringSink(StreamSink):

    "Sink that collects the output in memory."

    def __init__(self):
        super().__init__(StringIO())

    def getvalue(self):
        return self.stream.getvalue()


def as_sink(obj):
    """
    Return obj if it already speaks the sink protocol (putc and putn),
    otherwise wrap it in a StreamSink.
    """
    if hasattr(obj, 'putc') and hasattr(obj, 'putn'):
        return obj
    if hasattr(obj, 'write'):
        return StreamSink(obj)
    raise TypeError('{!r} is not a sink: it needs putc/putn or write'.format(obj))
