"""
Structural summary of a decoded GPX document
"""

from datetime import datetime
from typing import Optional

from loguru import logger
from pydantic import BaseModel, Field

from ..common.utils import parse_timestamp
from .models import Document


class DocumentSummary(BaseModel):
    """Element counts and time span of a GPX document"""

    version: str = ""
    creator: str = ""
    name: str = ""
    waypoints: int = Field(default=0, ge=0)
    routes: int = Field(default=0, ge=0)
    route_points: int = Field(default=0, ge=0)
    tracks: int = Field(default=0, ge=0)
    segments: int = Field(default=0, ge=0)
    track_points: int = Field(default=0, ge=0)
    start_time: Optional[datetime] = Field(
        default=None, description="First track point time that could be parsed"
    )
    end_time: Optional[datetime] = Field(
        default=None, description="Last track point time that could be parsed"
    )

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.start_time is None or self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()


def summarize(document: Document) -> DocumentSummary:
    """Count the elements of a document and find its recorded time span"""
    summary = DocumentSummary(
        version=document.version,
        creator=document.creator,
        name=document.metadata.name,
        waypoints=len(document.waypoints),
        routes=len(document.routes),
        route_points=sum(len(route.points) for route in document.routes),
        tracks=len(document.tracks),
    )

    for track in document.tracks:
        summary.segments += len(track.segments)
        invalid = []
        for segment in track.segments:
            summary.track_points += len(segment.points)
            for point in segment.points:
                when = parse_timestamp(point.timestamp, warn=False)
                if when is None:
                    if point.timestamp.strip():
                        invalid.append(point.timestamp)
                    continue
                if summary.start_time is None:
                    summary.start_time = when.datetime
                summary.end_time = when.datetime

        if invalid:
            logger.warning(
                f"Skipped {len(invalid)} unparseable point time(s) in "
                f"{track.name or 'track'}, first was '{invalid[0]}'"
            )

    return summary
