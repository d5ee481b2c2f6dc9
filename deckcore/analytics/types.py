"""
Types for study statistics.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeckSummary:
    """
    Point-in-time counts for one deck.
    """
    total: int
    learning: int
    graduated: int
    due_now: int
    struggling: int
    accuracy: float
