"""
GPX 1.1 schema model

Field comments follow http://www.topografix.com/GPX/1/1/. Optional fields
default to their zero value, so a value missing from the file and an explicit
zero read back the same way.
"""

from __future__ import annotations

from typing import List, Optional

from .binding import GPXModel, attribute, element
from .types import (
    TRACKPOINT_EXTENSION_NAMESPACE,
    Degrees,
    DGPSStation,
    Fix,
    Latitude,
    Longitude,
)


class TrackPointExtension(GPXModel):
    """Garmin TrackPointExtension sensor readings"""

    xml_tag = "TrackPointExtension"
    xml_namespace = TRACKPOINT_EXTENSION_NAMESPACE

    temperature: int = element("atemp", 0, description="Air temperature, Celsius")
    heart_rate: int = element("hr", 0, description="Heart rate, beats per minute")
    cadence: int = element("cad", 0, description="Cadence, revolutions per minute")


class Extension(GPXModel):
    """Vendor extensions; only the Garmin TrackPointExtension is understood"""

    xml_tag = "extensions"

    track_point_extension: TrackPointExtension = element(
        "TrackPointExtension", default_factory=TrackPointExtension
    )


class Link(GPXModel):
    """A link to an external resource with additional information"""

    xml_tag = "link"

    url: str = attribute("href", "", omit_empty=True)
    text: str = element("text", "")
    type: str = element("type", "", description="MIME type of the content")


class Email(GPXModel):
    """Email address broken into two parts (id and domain)"""

    xml_tag = "email"

    id: str = attribute("id", "", omit_empty=True)
    domain: str = attribute("domain", "", omit_empty=True)


class Person(GPXModel):
    """A person or an organisation"""

    xml_tag = "author"

    name: str = element("name", "")
    email: Email = element("email", default_factory=Email)
    link: Link = element("link", default_factory=Link)


class Copyright(GPXModel):
    """Copyright holder and the license under which the file is released"""

    xml_tag = "copyright"

    author: str = attribute("author", "")
    year: str = element("year", "")
    license: str = element("license", "")


class Bounds(GPXModel):
    """Two latitude/longitude pairs defining the extent of an element"""

    xml_tag = "bounds"

    min_lat: Latitude = attribute("minlat", 0.0)
    max_lat: Latitude = attribute("maxlat", 0.0)
    min_lon: Longitude = attribute("minlon", 0.0)
    max_lon: Longitude = attribute("maxlon", 0.0)


class Metadata(GPXModel):
    """Information about the GPX file, author and copyright restrictions"""

    xml_tag = "metadata"

    name: str = element("name", "")
    description: str = element("desc", "")
    author: Person = element("author", default_factory=Person)
    copyright: Copyright = element("copyright", default_factory=Copyright)
    links: List[Link] = element("link", default_factory=list)
    timestamp: str = element("time", "")
    keywords: str = element("keywords", "")
    bounds: Bounds = element("bounds", default_factory=Bounds)
    extensions: Extension = element("extensions", default_factory=Extension)


class WayPoint(GPXModel):
    """A point of interest, or named feature on a map

    The same record is used for <wpt>, <rtept> and <trkpt>.
    """

    xml_tag = "wpt"

    latitude: Latitude = attribute("lat", 0.0)
    longitude: Longitude = attribute("lon", 0.0)
    elevation: float = element("ele", 0.0, description="Meters")
    timestamp: str = element("time", "", description="UTC, ISO 8601")
    magnetic_variation: Degrees = element("magvar", 0.0)
    geoid_height: str = element("geoidheight", "")
    name: str = element("name", "")
    comment: str = element("cmt", "")
    description: str = element("desc", "")
    source: str = element("src", "")
    links: List[Link] = element("link", default_factory=list)
    symbol: str = element("sym", "")
    type: str = element("type", "")
    fix: Optional[Fix] = element("fix", None)
    satellites: int = element("sat", 0)
    horizontal_dop: float = element("hdop", 0.0)
    vertical_dop: float = element("vdop", 0.0)
    position_dop: float = element("pdop", 0.0)
    age_of_gps_data: float = element("ageofgpsdata", 0.0)
    dgps_id: DGPSStation = element("dgpsid", 0)
    extensions: Extension = element("extensions", default_factory=Extension)


class Route(GPXModel):
    """An ordered list of waypoints leading to a destination"""

    xml_tag = "rte"

    name: str = element("name", "")
    comment: str = element("cmt", "")
    description: str = element("desc", "")
    source: str = element("src", "")
    links: List[Link] = element("link", default_factory=list)
    number: int = element("number", 0)
    type: str = element("type", "")
    extensions: Extension = element("extensions", default_factory=Extension)
    points: List[WayPoint] = element("rtept", default_factory=list)


class TrackSegment(GPXModel):
    """A continuous span of track points

    A new segment starts when the receiver lost its fix or was paused.
    """

    xml_tag = "trkseg"

    points: List[WayPoint] = element("trkpt", default_factory=list)
    extensions: Extension = element("extensions", default_factory=Extension)


class Track(GPXModel):
    """An ordered list of points describing a path"""

    xml_tag = "trk"

    name: str = element("name", "")
    comment: str = element("cmt", "")
    description: str = element("desc", "")
    source: str = element("src", "")
    links: List[Link] = element("link", default_factory=list)
    number: int = element("number", 0)
    type: str = element("type", "")
    extensions: Extension = element("extensions", default_factory=Extension)
    segments: List[TrackSegment] = element("trkseg", default_factory=list)


class Point(GPXModel):
    """A geographic point with optional elevation and time"""

    xml_tag = "pt"

    latitude: Latitude = attribute("lat", 0.0)
    longitude: Longitude = attribute("lon", 0.0)
    elevation: float = element("ele", 0.0)
    timestamp: str = element("time", "")


class PointSegment(GPXModel):
    """A sequence of points, e.g. a polygon or polyline"""

    xml_tag = "ptseg"

    points: List[Point] = element("pt", default_factory=list)


class Document(GPXModel):
    """The root <gpx> element"""

    xml_tag = "gpx"

    version: str = attribute("version", "")
    creator: str = attribute("creator", "")
    metadata: Metadata = element("metadata", default_factory=Metadata)
    waypoints: List[WayPoint] = element("wpt", default_factory=list)
    routes: List[Route] = element("rte", default_factory=list)
    tracks: List[Track] = element("trk", default_factory=list)

    @property
    def track(self) -> Track:
        """The first track of the file, or an empty Track when there is none"""
        return self.tracks[0] if self.tracks else Track()
