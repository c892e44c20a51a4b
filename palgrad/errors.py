"""Exceptions raised by palgrad."""


class PalgradError(Exception):
    """Base class for all palgrad errors."""


class ParseError(PalgradError, ValueError):
    """A color or numeric literal is malformed or out of its declared range."""


class ClockError(PalgradError):
    """The system clock could not provide a time for the default filename."""


class EncodeError(PalgradError, OSError):
    """The pixel buffer could not be written to disk."""
