from enum import Enum


class ErrorKind(Enum):

    "What went wrong while formatting. The value is the human readable message."

    INVALID_FORMATTER  = 'Invalid formatter'
    TOO_FEW_ARGUMENTS  = 'Too few arguments'
    TOO_MANY_ARGUMENTS = 'Too many arguments'
    INCOMPATIBLE_TYPE  = 'Incompatible type'
    NOT_IMPLEMENTED    = 'Not implemented'


class FormatError(Exception):

    """
    The single failure raised by the engine. Output written to the sink
    before the failure is left in place.
    """

    def __init__(self, kind, detail=None):
        self.kind   = kind
        self.detail = detail
        super().__init__(kind, detail)

    def __str__(self):
        if self.detail:
            return '{}: {}'.format(self.kind.value, self.detail)
        return self.kind.value

    def __repr__(self):
        return '<{} {} {!r}>'.format(self.__class__.__name__, self.kind.name, self.detail)


def invalid_formatter(detail=None):
    return FormatError(ErrorKind.INVALID_FORMATTER, detail)


def too_few_arguments(detail=None):
    return FormatError(ErrorKind.TOO_FEW_ARGUMENTS, detail)


def incompatible_type(detail=None):
    return FormatError(ErrorKind.INCOMPATIBLE_TYPE, detail)


def not_implemented(detail=None):
    return FormatError(ErrorKind.NOT_IMPLEMENTED, detail)
