"""
Pydantic Schemas Package

Response models for the API. Kept separate from the SQLAlchemy models so
the JSON shape is controlled independently of the table layout.
"""

from bibliotheca.schemas.author import AuthorResponse
from bibliotheca.schemas.book import BookIndexResponse, BookResponse

__all__ = [
    "AuthorResponse",
    "BookResponse",
    "BookIndexResponse",
]
