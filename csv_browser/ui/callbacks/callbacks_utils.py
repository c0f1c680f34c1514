from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from csv_browser.core.dataset import Dataset

logger = logging.getLogger(__name__)


def dataset_from_store(data: Optional[Mapping[str, Any]]) -> Dataset:
    """Dataset held in the dataset store; an empty Dataset for missing or malformed data."""
    if not isinstance(data, Mapping) or not data:
        return Dataset.empty()
    try:
        return Dataset.from_dict(data)
    except Exception:
        logger.exception("Invalid dataset store payload")
        return Dataset.empty()
