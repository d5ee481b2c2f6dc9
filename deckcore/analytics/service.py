"""
Deck-level summaries built from item state.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from deckcore.analytics.metrics import count_due, overall_accuracy
from deckcore.analytics.types import DeckSummary
from deckcore.sm2.item_state import LearnableItem


def deck_summary(items: Iterable[LearnableItem], now: datetime) -> DeckSummary:
    """
    Snapshot counts for one deck at `now`.
    """
    items = list(items)
    learning = sum(1 for item in items if item.is_learning)

    return DeckSummary(
        total=len(items),
        learning=learning,
        graduated=len(items) - learning,
        due_now=count_due(items, now),
        struggling=sum(1 for item in items if item.is_struggling),
        accuracy=overall_accuracy(items)
    )
