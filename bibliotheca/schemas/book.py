"""
Book Pydantic Schemas

- BookResponse: one book with its authors nested
- BookIndexResponse: the view-model for the books index page
"""

from pydantic import BaseModel, ConfigDict, Field

from bibliotheca.schemas.author import AuthorResponse


class BookResponse(BaseModel):
    """
    Book as returned by the listing endpoints.

    Authors are always included; the query layer eager-loads them so
    serialization never triggers a lazy load.
    """

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    name: str = Field(
        ...,
        description="Book name",
        examples=["Dune", "Emma"],
    )

    genre: str = Field(
        ...,
        description="Genre label, empty string when unclassified",
        examples=["SciFi", "Romance"],
    )

    authors: list[AuthorResponse] = Field(
        default_factory=list,
        description="Authors of this book",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Dune",
                "genre": "SciFi",
                "authors": [{"id": 1, "name": "Frank Herbert"}],
            }
        },
    )


class BookIndexResponse(BaseModel):
    """
    View-model for the books index.

    genres and genres_size are only filled in when the request carried no
    genre filter; with a filter they are null.

    Example response:
    {
        "books": [...],
        "genres": ["Romance", "SciFi"],
        "genres_size": 2
    }
    """

    books: list[BookResponse] = Field(
        ...,
        description="Matching books ordered by name",
    )

    genres: list[str] | None = Field(
        default=None,
        description="Distinct genres present in the catalogue",
    )

    genres_size: int | None = Field(
        default=None,
        ge=0,
        description="Number of distinct genres",
    )
