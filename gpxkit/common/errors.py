"""
Exceptions raised by gpxkit
"""


class GPXError(Exception):
    """Base class for all gpxkit errors."""


class GPXDecodeError(GPXError, ValueError):
    """Raised when bytes are not well-formed XML or do not fit the GPX bindings."""


class GPXEncodeError(GPXError, ValueError):
    """Raised when a document holds values that cannot be written as XML."""
