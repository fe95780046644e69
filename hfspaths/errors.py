"""Conversion errors.

There is exactly one exception type, ConversionError, tagged with an
ErrorKind; callers dispatch on ``exc.kind`` rather than on subclasses.
"""

__all__ = [
    'ConversionError',
    'ErrorKind',
]

from enum import Enum


class ErrorKind(Enum):
    INVALID_PATH = 'invalid HFS path format'
    VOLUME_NOT_FOUND = 'volume not found'
    IO = 'I/O error'


class ConversionError(Exception):

    @classmethod
    def invalid_path(cls):
        return cls(ErrorKind.INVALID_PATH)

    @classmethod
    def volume_not_found(cls, volume_name):
        return cls(ErrorKind.VOLUME_NOT_FOUND, volume_name=volume_name)

    @classmethod
    def io(cls, os_error):
        return cls(ErrorKind.IO, os_error=os_error)

    def __init__(self, kind, *, volume_name=None, os_error=None):
        if kind is ErrorKind.VOLUME_NOT_FOUND:
            assert volume_name is not None
            message = 'Volume %s not found' % volume_name
        elif kind is ErrorKind.IO:
            assert os_error is not None
            message = 'I/O error: %s' % os_error
        else:
            message = 'Invalid HFS path format'
        super().__init__(message)
        self.kind = kind
        self.volume_name = volume_name
        self.os_error = os_error

    def __repr__(self):
        if self.kind is ErrorKind.VOLUME_NOT_FOUND:
            return '%s.volume_not_found(%r)' % (
                self.__class__.__name__, self.volume_name,
            )
        elif self.kind is ErrorKind.IO:
            return '%s.io(%r)' % (self.__class__.__name__, self.os_error)
        else:
            return '%s.invalid_path()' % self.__class__.__name__

    def __eq__(self, other):
        if not isinstance(other, ConversionError):
            return NotImplemented
        return (
            self.kind is other.kind and
            self.volume_name == other.volume_name and
            self.os_error is other.os_error
        )

    def __hash__(self):
        return hash((self.kind, self.volume_name, id(self.os_error)))
