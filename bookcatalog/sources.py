"""
Seed file data source.

Reads the JSON array of book records a catalog is built from.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .exceptions import CatalogUnavailable
from .settings import DEFAULT_SEED_PATH

logger = logging.getLogger(__name__)


def load_seed(path: Union[str, Path] = DEFAULT_SEED_PATH) -> List[Dict[str, Any]]:
    """
    Load raw book records from a JSON seed file.

    Args:
        path: Location of a UTF-8 JSON file holding an array of
            ``{"title", "author", "rating"}`` objects

    Returns:
        The parsed records, in file order

    Raises:
        CatalogUnavailable: The file is missing, unreadable, not valid
            JSON, or does not hold a JSON array
    """
    path = Path(path)

    try:
        with path.open('r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load seed file {path}: {e}")
        raise CatalogUnavailable(f"Cannot read catalog seed {path}: {e}") from e

    if not isinstance(data, list):
        logger.error(f"Seed file {path} holds {type(data).__name__}, expected a list")
        raise CatalogUnavailable(f"Catalog seed {path} must contain a JSON array")

    logger.info(f"Loaded {len(data)} records from {path}")
    return data
