"""
Book Query Service

Read-only queries over the books collection.

The listing contract:
- search: case-insensitive substring match on Book.name
- genre: exact match on Book.genre; without one, the distinct genres
  currently in the table are enumerated first and matched as a set
- authors are eager-loaded in one batched query
- results are ordered by name, then id

The session is always passed in by the caller. Nothing here commits.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from bibliotheca.exceptions import DataAccessError
from bibliotheca.models import Book

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookQuery:
    """
    Filters for a book listing.

    Empty strings are treated the same as None.
    """

    search: str | None = None
    genre: str | None = None

    @property
    def has_search(self) -> bool:
        return bool(self.search)

    @property
    def has_genre_filter(self) -> bool:
        return bool(self.genre)

    @property
    def matches_nothing(self) -> bool:
        """
        True when a filter contains a NUL character.

        Stored text never contains NUL, and psycopg2 refuses to send it as
        a parameter, so such a filter is answered without a query.
        """
        return "\x00" in (self.search or "") or "\x00" in (self.genre or "")


@dataclass(frozen=True)
class BookIndex:
    """Books plus the genre list shown when no genre filter is active."""

    books: list[Book]
    genres: list[str] | None = None

    @property
    def genres_size(self) -> int | None:
        return len(self.genres) if self.genres is not None else None


def build_book_statement(query: BookQuery, genres: list[str]) -> Select:
    """
    Translate a BookQuery into a SELECT over books.

    Args:
        query: Search and genre filters
        genres: Genre values a book must have one of

    Returns:
        SQLAlchemy select statement with filters, eager loading and ordering
    """
    stmt = select(Book).where(Book.genre.in_(genres))

    if query.has_search:
        # autoescape makes % and _ in the search term match literally
        stmt = stmt.where(Book.name.icontains(query.search, autoescape=True))

    return stmt.options(selectinload(Book.authors)).order_by(Book.name, Book.id)


def list_genres(db: Session) -> list[str]:
    """
    List the distinct genres present in the books table.

    Args:
        db: Database session

    Returns:
        Sorted list of genre labels

    Raises:
        DataAccessError: If the database query fails
    """
    stmt = select(Book.genre).distinct().order_by(Book.genre)
    try:
        return list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as exc:
        logger.error(f"Failed to list genres: {exc}")
        raise DataAccessError("Could not list genres") from exc


def list_books(
    db: Session,
    query: BookQuery | None = None,
    genres: list[str] | None = None,
) -> list[Book]:
    """
    List books matching the query, with authors attached.

    When the query has no genre filter and the caller did not pass
    genres, the distinct genres are enumerated first. A caller that has
    already enumerated them (the index view) passes them in to avoid a
    second round trip.

    Args:
        db: Database session
        query: Search and genre filters (defaults to no filters)
        genres: Precomputed genre set, used only without a genre filter

    Returns:
        Books ordered by name, each with authors loaded

    Raises:
        DataAccessError: If any database query fails
    """
    query = query or BookQuery()

    if query.matches_nothing:
        logger.debug("Filter contains NUL, returning empty book list")
        return []

    if query.has_genre_filter:
        genres = [query.genre]
    elif genres is None:
        genres = list_genres(db)

    if not genres:
        # No genres means no books
        logger.debug("No genres to match, returning empty book list")
        return []

    stmt = build_book_statement(query, genres)
    try:
        books = list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as exc:
        logger.error(f"Failed to list books (search={query.search!r}, genre={query.genre!r}): {exc}")
        raise DataAccessError("Could not list books") from exc

    logger.debug(
        f"Listed {len(books)} books (search={query.search!r}, genre={query.genre!r})"
    )
    return books


def get_book_index(db: Session, query: BookQuery | None = None) -> BookIndex:
    """
    Build the books index view-model.

    Without a genre filter the enumerated genre list is returned alongside
    the books; with one, genres is None.

    Args:
        db: Database session
        query: Search and genre filters

    Returns:
        BookIndex with books and, when unfiltered by genre, the genres

    Raises:
        DataAccessError: If any database query fails
    """
    query = query or BookQuery()

    if query.has_genre_filter:
        return BookIndex(books=list_books(db, query))

    genres = list_genres(db)
    return BookIndex(books=list_books(db, query, genres=genres), genres=genres)
