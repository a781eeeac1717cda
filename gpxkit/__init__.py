"""
gpxkit - GPX 1.1 data model with XML decoding and encoding
"""

from .common.errors import GPXDecodeError, GPXEncodeError, GPXError
from .gpx.models import (
    Bounds,
    Copyright,
    Document,
    Email,
    Extension,
    Link,
    Metadata,
    Person,
    Point,
    PointSegment,
    Route,
    Track,
    TrackPointExtension,
    TrackSegment,
    WayPoint,
)
from .gpx.parser import encode, parse, parse_file, parse_string, write_file
from .gpx.types import Fix

__version__ = "0.1.0"

__all__ = [
    "Bounds",
    "Copyright",
    "Document",
    "Email",
    "Extension",
    "Fix",
    "GPXDecodeError",
    "GPXEncodeError",
    "GPXError",
    "Link",
    "Metadata",
    "Person",
    "Point",
    "PointSegment",
    "Route",
    "Track",
    "TrackPointExtension",
    "TrackSegment",
    "WayPoint",
    "encode",
    "parse",
    "parse_file",
    "parse_string",
    "write_file",
]
