"""Dataset Loader - Imperative Shell.

This module reads the property dataset from disk. Decoding records
into Property objects is handled by the core module.
"""

import json
import logging
from pathlib import Path

from prop_filter.core.property import Property, PropertyParseError, parse_properties


logger = logging.getLogger(__name__)


class DatasetLoadError(Exception):
    """Raised when the property dataset cannot be opened or decoded.

    Attributes:
        path: Dataset path that failed to load
    """

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


def load_properties(path: str | Path) -> list[Property]:
    """Load and decode the property dataset.

    This method performs file I/O.

    Args:
        path: Path to a JSON file containing an array of property records

    Returns:
        Properties in file order

    Raises:
        DatasetLoadError: If the file is missing, unreadable, or malformed
    """
    path = Path(path)

    logger.info("Loading properties from %s", path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DatasetLoadError(f"Error opening {path.name}: {e}", path) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetLoadError(f"Error decoding {path.name}: {e}", path) from e

    try:
        properties = parse_properties(data)
    except PropertyParseError as e:
        raise DatasetLoadError(f"Error decoding {path.name}: {e}", path) from e

    logger.info("Loaded %d properties", len(properties))

    return properties
