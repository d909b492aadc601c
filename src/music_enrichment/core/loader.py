# ============================================================================
# src/music_enrichment/core/loader.py
# ============================================================================
"""
Input batch loading.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from .models import RawRecord
from ..utils.exceptions import BatchLoadError
from ..utils.file_utils import read_json


logger = logging.getLogger(__name__)


def load_records(path: Union[str, Path]) -> List[RawRecord]:
    """
    Read the whole input file and validate every record.

    Args:
        path: JSON file holding an array of raw works

    Returns:
        Records in file order

    Raises:
        BatchLoadError: file missing/unreadable, invalid JSON, not an array,
            or any record failing validation
    """
    path = Path(path)

    try:
        data = read_json(path)
    except OSError as e:
        raise BatchLoadError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise BatchLoadError(f"Cannot decode {path} as UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise BatchLoadError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise BatchLoadError(
            f"Expected a JSON array in {path}, got {type(data).__name__}"
        )

    records = []
    for position, item in enumerate(data):
        try:
            records.append(RawRecord.model_validate(item))
        except ValidationError as e:
            raise BatchLoadError(f"Invalid record at position {position} in {path}: {e}") from e

    logger.info(f"Loaded {len(records)} works from {path}")
    return records
