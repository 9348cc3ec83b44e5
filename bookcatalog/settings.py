"""
Configuration settings for the book catalog.

Values are read from the environment once, at import time.
"""

import logging
import os
from pathlib import Path
from typing import Optional

# Package paths
PACKAGE_ROOT = Path(__file__).parent
DATA_ROOT = PACKAGE_ROOT / "data"
DEFAULT_SEED_PATH = DATA_ROOT / "seed.json"

# Catalog data source
SEED_PATH = Path(os.getenv("BOOKCATALOG_SEED_PATH", str(DEFAULT_SEED_PATH)))

# Rating scale (conventional range, not enforced)
RATING_MIN = 0.0
RATING_MAX = 5.0

# Logging
LOG_LEVEL = os.getenv("BOOKCATALOG_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None):
    """Configure logging for applications embedding the catalog.

    An unknown level name falls back to INFO.
    """
    numeric_level = logging.getLevelName((level or LOG_LEVEL).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
    )
