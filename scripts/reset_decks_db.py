"""
Reset the deck database.

DANGEROUS: This deletes all decks, flashcards and review history!
Only use when you want to start fresh for testing.

Usage:
    python -m scripts.reset_decks_db
"""

from dotenv import load_dotenv

from deckcore import sm2


def main(repository=None):
    load_dotenv()

    if repository is None:
        repository = sm2.SqlItemRepository()
        repository.init_db()

    counts = repository.table_counts()

    print("=" * 60)
    print("WARNING: Reset Deck Database")
    print("=" * 60)
    print()
    print("This will DELETE:")
    print(f"  - {counts['decks']} decks")
    print(f"  - {counts['flashcards']} flashcards and their scheduling state")
    print(f"  - {counts['review_logs']} review logs")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() == "yes":
        print("\nResetting database...")
        sm2.reset_db(repository.engine)
        print("Database reset complete!")
        print("\nThe database now has empty tables ready for new decks.")
        return True

    print("\nCancelled. No changes made.")
    return False


if __name__ == "__main__":
    main()
