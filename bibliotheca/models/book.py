"""
Book Model

The catalogue entry, plus the book_authors association table.

Genre is a plain string column on the book rather than a separate table:
each book belongs to exactly one genre, and the set of genres is whatever
values currently appear in the books table.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bibliotheca.database import Base

if TYPE_CHECKING:
    from bibliotheca.models.author import Author


# =============================================================================
# Association Tables
# =============================================================================
book_authors = Table(
    "book_authors",
    Base.metadata,
    Column(
        "book_id",
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "author_id",
        Integer,
        ForeignKey("authors.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    comment="Association table linking books to their authors",
)


class Book(Base):
    """
    Book model.

    Table: books

    Fields:
    - name: Book name (required)
    - genre: Genre label (required, may be the empty string)

    Relationships:
    - authors: Many-to-Many through book_authors

    Indexes:
    - name: Used for ordering and substring search
    - genre: Used for genre filtering and distinct-genre enumeration

    Example:
        book = Book(name="Dune", genre="SciFi", authors=[frank_herbert])
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book name"
    )

    # NOT NULL with an empty-string default so "match every genre"
    # never has to decide what to do with NULL.
    genre: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        default="",
        server_default="",
        comment="Genre label, empty string when unclassified"
    )

    authors: Mapped[list["Author"]] = relationship(
        "Author",
        secondary=book_authors,
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, name='{self.name}', genre='{self.genre}')"
