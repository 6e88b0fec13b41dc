"""
Books Router

Read-only listing endpoints for the books collection.

Both endpoints accept the same optional filters:
- search: case-insensitive substring of the book name
- genre: exact genre

Data access failures are not handled here. DataAccessError propagates to
the handler registered in main.py.
"""

from fastapi import APIRouter

from bibliotheca.dependencies import BookFilters, DbSession
from bibliotheca.schemas import BookIndexResponse, BookResponse
from bibliotheca.services.books import get_book_index, list_books

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        503: {"description": "Data store unavailable"},
    },
)


@router.get(
    "/",
    response_model=list[BookResponse],
    summary="List books",
    description="List books ordered by name, optionally filtered by search term and genre.",
)
def get_books(db: DbSession, filters: BookFilters) -> list[BookResponse]:
    """
    List books with their authors.

    Examples:
        GET /api/v1/books/
        GET /api/v1/books/?search=du
        GET /api/v1/books/?genre=Romance
        GET /api/v1/books/?search=e&genre=Romance

    Returns:
        JSON array of books, each with nested authors
    """
    books = list_books(db, filters)
    return [BookResponse.model_validate(book) for book in books]


@router.get(
    "/index",
    response_model=BookIndexResponse,
    summary="Books index view",
    description=(
        "Books for the index view. Without a genre filter, "
        "also returns the distinct genre list and its size."
    ),
)
def get_books_index(db: DbSession, filters: BookFilters) -> BookIndexResponse:
    """Books index view-model."""
    index = get_book_index(db, filters)
    return BookIndexResponse(
        books=[BookResponse.model_validate(book) for book in index.books],
        genres=index.genres,
        genres_size=index.genres_size,
    )
