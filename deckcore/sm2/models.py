"""
SQLAlchemy ORM Models for the Deck Database

Defines Deck, Flashcard and ReviewLog models.
"""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class Deck(Base):
    """
    A named collection of flashcards.
    """
    __tablename__ = 'decks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    flashcards = relationship("Flashcard", back_populates="deck", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Deck(id={self.id}, name={self.name!r})>"


class Flashcard(Base):
    """
    Persistent scheduling state for a single learnable item.
    """
    __tablename__ = 'flashcards'

    id = Column(String(36), primary_key=True)
    deck_id = Column(Integer, ForeignKey('decks.id', ondelete='CASCADE'), nullable=True, index=True)

    # Content
    word = Column(String(255), nullable=False, default="")
    translation = Column(Text, nullable=False, default="")
    sentence_context = Column(Text, nullable=False, default="")
    notes = Column(Text, nullable=False, default="")
    source_title = Column(String(255), nullable=True)

    # SM-2 parameters
    ease_factor = Column(Float, nullable=False, default=2.5)
    interval_days = Column(Integer, nullable=False, default=0)
    is_learning = Column(Boolean, nullable=False, default=True)
    next_due_at = Column(DateTime(timezone=True), nullable=False, index=True)

    # Review tracking (real reviews only)
    review_count = Column(Integer, nullable=False, default=0)
    correct_count = Column(Integer, nullable=False, default=0)
    incorrect_count = Column(Integer, nullable=False, default=0)
    last_reviewed_at = Column(DateTime(timezone=True), nullable=True)
    is_struggling = Column(Boolean, nullable=False, default=False)

    # Shadow practice tracking
    practice_fail_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False)

    deck = relationship("Deck", back_populates="flashcards")
    review_logs = relationship("ReviewLog", back_populates="flashcard", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Flashcard({self.id}, {self.word!r})>"


class ReviewLog(Base):
    """
    Append-only log entry for a single real review.
    """
    __tablename__ = 'review_logs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    flashcard_id = Column(String(36), ForeignKey('flashcards.id', ondelete='CASCADE'), nullable=False, index=True)
    reviewed_at = Column(DateTime(timezone=True), nullable=False)
    is_correct = Column(Boolean, nullable=False)

    flashcard = relationship("Flashcard", back_populates="review_logs")

    def __repr__(self):
        return f"<ReviewLog(id={self.id}, {self.flashcard_id}, correct={self.is_correct})>"
