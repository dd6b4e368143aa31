"""
Configuration settings for hull computation.
"""

import os
from typing import Optional


def _optional_number(raw: Optional[str]):
    if raw is None or raw.strip() == "":
        return None
    raw = raw.strip()
    try:
        return int(raw)
    except ValueError:
        return float(raw)


class Config:
    """Configuration settings loaded from environment variables."""

    def __getitem__(self, item):
        return getattr(self, item)

    # Logging settings
    LOG_LEVEL: str = os.getenv("HULL_LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv(
        "HULL_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Largest accepted |coordinate|; None means unbounded (Python ints are exact)
    MAX_COORDINATE = _optional_number(os.getenv("HULL_MAX_COORDINATE"))

    # Output format for the command line: "text" or "json"
    OUTPUT_FORMAT: str = os.getenv("HULL_OUTPUT_FORMAT", "text")


config = Config()
