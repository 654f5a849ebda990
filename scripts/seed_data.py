#!/usr/bin/env python3
"""
Database Seed Script

Populates the catalog with sample books for development.

USAGE:
    # From the project root with the venv activated
    python scripts/seed_data.py

    # Keep existing rows and only add missing ISBNs
    python scripts/seed_data.py --keep

The copy counts below are inserted as-is (some copies already lent out),
bypassing the create path that would reset available_copies.
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.database import SessionLocal, create_tables
from app.models import Book

BOOKS_DATA = [
    {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "isbn": "9780743273565",
        "published_date": date(1925, 4, 10),
        "genre": "Classic Literature",
        "description": "A classic American novel set in the Jazz Age",
        "total_copies": 5,
        "available_copies": 3,
    },
    {
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "isbn": "9780061120084",
        "published_date": date(1960, 7, 11),
        "genre": "Classic Literature",
        "description": "A gripping tale of racial injustice and childhood innocence",
        "total_copies": 3,
        "available_copies": 2,
    },
    {
        "title": "1984",
        "author": "George Orwell",
        "isbn": "9780451524935",
        "published_date": date(1949, 6, 8),
        "genre": "Dystopian Fiction",
        "description": "A dystopian social science fiction novel",
        "total_copies": 4,
        "available_copies": 1,
    },
]


def clear_data(db: Session) -> None:
    """Delete every book."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.commit()
    print("Data cleared.")


def create_books(db: Session) -> list[Book]:
    """Insert the sample books whose ISBN is not in the catalog yet."""
    print("Creating books...")

    existing = set(db.execute(select(Book.isbn)).scalars().all())

    books = []
    for data in BOOKS_DATA:
        if data["isbn"] in existing:
            print(f"  Skipping {data['title']} (ISBN {data['isbn']} exists)")
            continue
        book = Book(**data, is_available=data["available_copies"] > 0)
        db.add(book)
        books.append(book)

    db.commit()
    for book in books:
        db.refresh(book)

    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    # Create tables if they don't exist
    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        books = create_books(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"  - Books: {len(books)}")
        print("\nYou can now access the API at http://localhost:8001")
        print("API documentation at http://localhost:8001/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the library catalog.")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing books instead of clearing the table first",
    )
    args = parser.parse_args()
    seed_database(clear_existing=not args.keep)
