"""Soft input checks: normalize caller data and report anomalies.

Nothing here raises for malformed data. Problems are logged and the
caller gets a best-effort value back.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Hashable, Iterable

logger = logging.getLogger(__name__)


def normalize_keys(keys: Iterable[Hashable] | None) -> list:
    """Return ``keys`` as a fresh list; ``None`` means no keys."""
    if keys is None:
        return []
    return list(keys)


def find_duplicates(keys: Iterable[Hashable]) -> list:
    """Keys that occur more than once, in first-seen order."""
    counts = Counter(keys)
    return [key for key, n in counts.items() if n > 1]


def _preview(values: list) -> str:
    text = f"{values[:5]}"
    if len(values) > 5:
        text += f" (and {len(values) - 5} more)"
    return text


def check_dataset_keys(keys: list) -> list:
    """Log duplicate dataset keys; return them."""
    dupes = find_duplicates(keys)
    if dupes:
        logger.warning(
            "Dataset has duplicate keys %s; the first occurrence wins "
            "the target position.", _preview(dupes),
        )
    return dupes


def check_target_keys(target_keys: list, known_keys: Any) -> list:
    """Log duplicate or stale target keys; return the stale ones.

    ``known_keys`` is any container supporting ``in`` (dict, set).
    """
    dupes = find_duplicates(target_keys)
    if dupes:
        logger.warning(
            "Target keys contain duplicates %s; the first occurrence "
            "defines the order.", _preview(dupes),
        )
    stale = [key for key in target_keys if key not in known_keys]
    if stale:
        logger.warning(
            "Target keys reference items missing from the dataset: %s",
            _preview(stale),
        )
    return stale
