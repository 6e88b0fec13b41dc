"""
Author Model

Represents a contributor to one or more books.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bibliotheca.database import Base

# TYPE_CHECKING avoids a circular import at runtime
if TYPE_CHECKING:
    from bibliotheca.models.book import Book


class Author(Base):
    """
    Author model.

    Table: authors

    Relationships:
    - books: Many-to-Many relationship through book_authors table

    Example:
        author = Author(name="Frank Herbert")
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author's full name"
    )

    books: Mapped[list["Book"]] = relationship(
        "Book",
        secondary="book_authors",
        back_populates="authors",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.name}')"
