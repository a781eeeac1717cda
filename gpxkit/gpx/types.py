"""
Semantic scalar types used by the GPX 1.1 schema model

Nominal ranges are documented on each type but never enforced: a GPX file
with an out-of-range latitude still loads, carrying the value as written.
"""

from enum import Enum
from typing import Annotated

from pydantic import Field

GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"
TRACKPOINT_EXTENSION_NAMESPACE = (
    "http://www.garmin.com/xmlschemas/TrackPointExtension/v1"
)

Latitude = Annotated[
    float, Field(description="Decimal degrees, WGS84 datum, -90.0 to 90.0")
]
Longitude = Annotated[
    float, Field(description="Decimal degrees, WGS84 datum, -180.0 to 180.0")
]
Degrees = Annotated[
    float,
    Field(description="Bearing in decimal degrees, true (not magnetic), 0.0 to 360.0"),
]
DGPSStation = Annotated[
    int, Field(description="Differential GPS station identifier, 0 to 1023")
]


class Fix(str, Enum):
    """Type of GPS fix"""

    NONE = "none"
    TWO_DIMENSIONAL = "2d"
    THREE_DIMENSIONAL = "3d"
    DGPS = "dgps"
    # Military signal used
    PPS = "pps"
