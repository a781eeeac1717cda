"""
Test fixtures and data factories
"""

from .test_data import (
    FULL_GPX,
    MALFORMED_GPX,
    MINIMAL_GPX,
    MULTI_TRACK_GPX,
    SINGLE_POINT_GPX,
    GPXTestDataFactory,
)

__all__ = [
    "FULL_GPX",
    "MALFORMED_GPX",
    "MINIMAL_GPX",
    "MULTI_TRACK_GPX",
    "SINGLE_POINT_GPX",
    "GPXTestDataFactory",
]
