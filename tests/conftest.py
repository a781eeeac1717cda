"""
Shared test configuration and fixtures for gpxkit
"""

import pytest
import tempfile
from pathlib import Path

# Disable loguru during tests to reduce noise
import loguru

from fixtures import (
    FULL_GPX,
    MINIMAL_GPX,
    GPXTestDataFactory,
)

loguru.logger.disable("gpxkit")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def full_gpx_bytes():
    """A realistic GPX 1.1 file using every element gpxkit models"""
    return FULL_GPX


@pytest.fixture
def minimal_gpx_bytes():
    """A GPX file with only the mandatory root attributes"""
    return MINIMAL_GPX


@pytest.fixture
def gpx_file(temp_dir, full_gpx_bytes):
    """The realistic GPX file written to disk"""
    path = temp_dir / "ride.gpx"
    path.write_bytes(full_gpx_bytes)
    return path


@pytest.fixture
def simple_document():
    """A Document with one track of three points"""
    return GPXTestDataFactory.create_simple_document()


@pytest.fixture
def full_document():
    """A Document that populates every modelled element"""
    return GPXTestDataFactory.create_full_document()
