"""
Scheduling - Engine + Repository Orchestration

Ties the pure engines to an ItemRepository.

Main workflow:
1. User answers an item
2. Apply the review or practice engine
3. Persist what changed
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional, Tuple

from deckcore.sm2 import practice_engine, review_engine
from deckcore.sm2.database import ItemRepository
from deckcore.sm2.item_state import LearnableItem, ReviewLogEntry


def review_item(
    repository: ItemRepository,
    item: LearnableItem,
    quality: int,
    now: Optional[datetime] = None
) -> Tuple[LearnableItem, ReviewLogEntry]:
    """
    Run a real review and persist the result.

    The item and its log entry are written in one transaction.

    Args:
        repository: Persistence collaborator
        item: Item being reviewed (modified in place)
        quality: Recall grade 0-3
        now: Review timestamp (defaults to now)

    Returns:
        Tuple of (updated_item, review_log_entry)

    Raises:
        ValueError: If quality is outside 0-3
        PersistenceError: If the repository could not write the review;
            nothing was stored and the in-memory item must be treated as
            provisional
    """
    if now is None:
        now = datetime.now(timezone.utc)

    item, entry = review_engine.process_outcome(item, quality, now)
    repository.save_review(item, entry)
    return item, entry


def practice_item(
    repository: ItemRepository,
    item: LearnableItem,
    quality: int
) -> LearnableItem:
    """
    Record a practice attempt, saving only when the shadow counter changed.
    """
    fails_before = item.practice_fail_count
    item = practice_engine.process_practice_outcome(item, quality)
    if item.practice_fail_count != fails_before:
        repository.save(item)
    return item
