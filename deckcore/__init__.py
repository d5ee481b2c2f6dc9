"""Spaced-repetition scheduling core for flashcard decks."""
