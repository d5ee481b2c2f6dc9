"""
Metric computations for study statistics.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

import pandas as pd

from deckcore.sm2.item_state import LearnableItem, ReviewLogEntry


LOG_COLUMNS = ["reviewed_at", "day_utc", "is_correct", "item_id"]


def logs_to_frame(logs: Iterable[ReviewLogEntry]) -> pd.DataFrame:
    """
    Review logs as a DataFrame with a UTC day column.
    """
    rows = [
        {"reviewed_at": log.reviewed_at, "is_correct": bool(log.is_correct), "item_id": log.item_id}
        for log in logs
    ]
    if not rows:
        return pd.DataFrame(columns=LOG_COLUMNS)

    df = pd.DataFrame(rows)
    df["reviewed_at"] = pd.to_datetime(df["reviewed_at"], utc=True)
    df["day_utc"] = df["reviewed_at"].dt.floor("D")
    return df[LOG_COLUMNS]


def build_day_index(logs_df: pd.DataFrame) -> pd.DatetimeIndex:
    """
    Build a dense UTC day index spanning the log range.
    """
    if logs_df.empty:
        return pd.DatetimeIndex([], tz="UTC")
    start = logs_df["day_utc"].min()
    end = logs_df["day_utc"].max()
    return pd.date_range(start=start, end=end, freq="D")


def daily_review_counts(logs: Iterable[ReviewLogEntry]) -> pd.DataFrame:
    """
    Correct and incorrect review counts per UTC day.

    Days without reviews inside the range appear with zero counts.
    """
    logs_df = logs_to_frame(logs)
    day_index = build_day_index(logs_df)
    if len(day_index) == 0:
        return pd.DataFrame(columns=["correct", "incorrect"], dtype="int64")

    correct = logs_df[logs_df["is_correct"]].groupby("day_utc").size()
    incorrect = logs_df[~logs_df["is_correct"]].groupby("day_utc").size()

    return pd.DataFrame({
        "correct": correct.reindex(day_index, fill_value=0).astype("int64"),
        "incorrect": incorrect.reindex(day_index, fill_value=0).astype("int64"),
    }, index=day_index)


def overall_accuracy(items: Iterable[LearnableItem]) -> float:
    """
    Total correct over total real reviews; 0.0 with no reviews.
    """
    items = list(items)
    total_reviews = sum(item.review_count for item in items)
    if total_reviews == 0:
        return 0.0
    total_correct = sum(item.correct_count for item in items)
    return total_correct / total_reviews


def count_due(items: Iterable[LearnableItem], now: datetime) -> int:
    return sum(1 for item in items if item.next_due_at <= now)
