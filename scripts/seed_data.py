#!/usr/bin/env python3
"""
Database Seed Script

Creates the tables and inserts the baseline authors, genres and books.

USAGE:
    # From the project root
    python scripts/seed_data.py

    # Wipe all data first, then seed
    python scripts/seed_data.py --clear

Seeding only happens when the store is empty, so running the script twice
is harmless. The API does the same on startup unless SEED_DATABASE=false.
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookstore.context import SEED_AUTHORS, SEED_BOOKS, SEED_GENRES, BookStoreContext
from bookstore.database import SessionLocal, create_tables
from bookstore.models import Author, Book, BookReview, Genre


def clear_data(db: Session) -> None:
    """Clear all existing data from the database, children first."""
    print("Clearing existing data...")
    for model in (BookReview, Book, Author, Genre):
        db.execute(delete(model))
    db.commit()
    print("Data cleared.")


def seed_database(clear_existing: bool = False) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        if BookStoreContext(db).seed():
            print("Database seeding completed successfully!")
            print(f"\nSummary:")
            print(f"  - Authors: {len(SEED_AUTHORS)}")
            print(f"  - Genres: {len(SEED_GENRES)}")
            print(f"  - Books: {len(SEED_BOOKS)}")
        else:
            print("Database already contains data, nothing seeded.")
            print("Use --clear to start from an empty store.")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the BookStore database.")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="delete all authors, genres, books and reviews before seeding",
    )
    args = parser.parse_args()
    seed_database(clear_existing=args.clear)
