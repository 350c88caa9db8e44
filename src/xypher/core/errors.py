from __future__ import annotations


class XypherError(Exception):
    """Base class for every error raised by xypher."""


class InvalidInput(XypherError, ValueError):
    """A letter or index outside the alphabet's domain."""


class InvalidConfiguration(XypherError, ValueError):
    """Cipher parameters that cannot produce an invertible transformation."""


class IndexOutOfRange(XypherError, IndexError):
    pass


class UnknownType(XypherError, LookupError):
    pass


class NotFound(XypherError, LookupError):
    pass


class PersistenceError(XypherError, OSError):
    """A saved encoder could not be read, written or decoded."""
