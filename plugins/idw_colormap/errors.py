"""
Colour Map Errors

Every failure raised by this package is a caller contract violation.
None of them are transient, so nothing here is ever retried.
"""


class ColorMapError(Exception):
    """Base class for all colour map errors."""


class OutOfRangeError(ColorMapError, ValueError):
    """A position, channel or interpolation parameter is outside its domain."""


class EmptyFieldError(ColorMapError, LookupError):
    """A query that needs at least one entry was made on an empty map."""


class AliasError(ColorMapError, ValueError):
    """An output container is the same object as one of the inputs."""
