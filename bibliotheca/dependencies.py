"""
FastAPI Dependencies Module

Reusable components injected into route handlers with Depends().

- DbSession: per-request SQLAlchemy session
- BookFilters: the search/genre query string parameters as a BookQuery
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from bibliotheca.database import get_db
from bibliotheca.services.books import BookQuery

# Instead of writing:
#   def get_books(db: Session = Depends(get_db)):
# routes write:
#   def get_books(db: DbSession):
DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Book Filters
# =============================================================================
def get_book_query(
    search: str | None = Query(
        default=None,
        description="Case-insensitive substring of the book name",
        examples=["du", "emma"],
    ),
    genre: str | None = Query(
        default=None,
        description="Exact genre to filter by",
        examples=["SciFi", "Romance"],
    ),
) -> BookQuery:
    """
    Collect book listing filters from the query string.

    Any string is accepted, including the empty string, which means
    "no filter". No length limits apply.

    Usage:
        GET /api/v1/books/?search=du
        GET /api/v1/books/?genre=Romance
    """
    return BookQuery(search=search or None, genre=genre or None)


BookFilters = Annotated[BookQuery, Depends(get_book_query)]
