"""
Author Pydantic Schemas

Authors only appear nested inside book responses, so a single response
schema is enough.
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthorResponse(BaseModel):
    """
    Author as returned inside a book.

    from_attributes=True lets the schema read straight from an Author
    ORM instance.
    """

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    name: str = Field(
        ...,
        description="Author's full name",
        examples=["Frank Herbert", "Jane Austen"],
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Frank Herbert",
            }
        },
    )
