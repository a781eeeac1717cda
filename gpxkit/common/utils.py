"""
Common utility functions
"""

from typing import Optional

import arrow
from loguru import logger


def parse_timestamp(
    text: str, context: str = "GPX", warn: bool = True
) -> Optional[arrow.Arrow]:
    """Parse a GPX <time> value, returning None when it is empty or invalid

    Set `warn` to False when the caller reports failures itself.
    """
    if not text or not isinstance(text, str) or not text.strip():
        return None

    try:
        return arrow.get(text.strip())
    except (arrow.ParserError, TypeError, ValueError) as e:
        if warn:
            logger.warning(f"Failed to parse timestamp '{text}' in {context}: {e}")
        return None
