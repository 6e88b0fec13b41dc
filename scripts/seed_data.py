#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample authors and books for local development.

USAGE:
    # From the project root with the virtualenv active
    python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Clears existing data (optional)
3. Creates sample authors and books and links them
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bibliotheca.database import SessionLocal, create_tables
from bibliotheca.models import Author, Book, book_authors

AUTHOR_NAMES = [
    "Frank Herbert",
    "Jane Austen",
    "Isaac Asimov",
    "Agatha Christie",
    "Terry Pratchett",
    "Neil Gaiman",
]

# name, genre, author names
BOOKS_DATA = [
    ("Dune", "SciFi", ["Frank Herbert"]),
    ("Children of Dune", "SciFi", ["Frank Herbert"]),
    ("Foundation", "SciFi", ["Isaac Asimov"]),
    ("I, Robot", "SciFi", ["Isaac Asimov"]),
    ("Emma", "Romance", ["Jane Austen"]),
    ("Pride and Prejudice", "Romance", ["Jane Austen"]),
    ("Murder on the Orient Express", "Mystery", ["Agatha Christie"]),
    ("Good Omens", "Fantasy", ["Terry Pratchett", "Neil Gaiman"]),
    ("Collected Essays", "", []),
]


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(book_authors))
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.commit()
    # Bulk deletes bypass the identity map
    db.expunge_all()
    print("Data cleared.")


def create_authors(db: Session) -> dict[str, Author]:
    """Create sample authors."""
    print("Creating authors...")
    authors = {name: Author(name=name) for name in AUTHOR_NAMES}
    db.add_all(authors.values())
    db.commit()

    print(f"Created {len(authors)} authors.")
    return authors


def create_books(db: Session, authors: dict[str, Author]) -> list[Book]:
    """Create sample books with author relationships."""
    print("Creating books...")

    books = []
    for name, genre, author_names in BOOKS_DATA:
        book = Book(
            name=name,
            genre=genre,
            authors=[authors[author_name] for author_name in author_names],
        )
        db.add(book)
        books.append(book)

    db.commit()

    print(f"Created {len(books)} books.")
    return books


def seed(db: Session, clear_existing: bool = True) -> tuple[int, int]:
    """
    Seed an open session with the sample catalogue.

    Args:
        db: Database session
        clear_existing: If True, clears existing data before seeding.

    Returns:
        (number of authors, number of books) created
    """
    if clear_existing:
        clear_data(db)

    authors = create_authors(db)
    books = create_books(db, authors)
    return len(authors), len(books)


def seed_database(clear_existing: bool = True) -> None:
    """
    Create tables and seed the configured database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        author_count, book_count = seed(db, clear_existing=clear_existing)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {author_count}")
        print(f"  - Books: {book_count}")
        print("\nYou can now access the API at http://localhost:8001/api/v1/books/")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
