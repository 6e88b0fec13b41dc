"""
SQLAlchemy Models Package

Model Relationships:
- Author <-> Book: Many-to-Many through book_authors

Importing from here guarantees every model is registered with
Base.metadata, which Alembic relies on.
"""

from bibliotheca.models.author import Author
from bibliotheca.models.book import Book, book_authors

__all__ = [
    "Author",
    "Book",
    "book_authors",
]
