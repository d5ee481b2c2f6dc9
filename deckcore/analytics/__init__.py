"""
Analytics package exports.
"""

from deckcore.analytics.metrics import daily_review_counts, logs_to_frame, overall_accuracy
from deckcore.analytics.service import deck_summary
from deckcore.analytics.types import DeckSummary

__all__ = [
    "daily_review_counts",
    "logs_to_frame",
    "overall_accuracy",
    "deck_summary",
    "DeckSummary",
]
