"""
Book Pydantic Schemas

Request and response shapes for the catalog:
- BookCreate: full record, copy counts derived server-side
- BookUpdate: sparse payload, every field optional
- BookResponse: record as stored, including derived inventory fields
"""

import re
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def clean_isbn(value: str) -> str:
    """
    Normalize and validate an ISBN.

    Accepts:
    - ISBN-10: 10 characters, 9 digits followed by a digit or X
    - ISBN-13: 13 digits

    Hyphens and spaces are stripped, so "978-0-7432-7356-5" is stored as
    "9780743273565".

    Raises:
        ValueError: If the cleaned value is not a valid ISBN-10/13
    """
    cleaned = re.sub(r"[-\s]", "", value)

    if len(cleaned) == 10:
        if not re.match(r"^\d{9}[\dX]$", cleaned):
            raise ValueError(
                "Invalid ISBN-10 format. Must be 10 characters: "
                "9 digits followed by a digit or 'X'"
            )
    elif len(cleaned) == 13:
        if not cleaned.isdigit():
            raise ValueError("Invalid ISBN-13 format. Must be exactly 13 digits")
    else:
        raise ValueError(
            "ISBN must be either 10 or 13 characters (excluding hyphens)"
        )

    return cleaned


class BookBase(BaseModel):
    """
    Base schema with the caller-supplied book fields.

    Contains validation for:
    - Title and author (not blank, stripped)
    - ISBN format (ISBN-10 or ISBN-13)
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Book title",
        examples=["1984", "The Great Gatsby"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Author name",
        examples=["George Orwell"],
    )

    isbn: str = Field(
        ...,
        max_length=20,
        description="ISBN-10 or ISBN-13, hyphens allowed",
        examples=["978-0451524935", "0-06-112008-1"],
    )

    published_date: date = Field(
        ...,
        description="Date of publication",
        examples=["1949-06-08"],
    )

    genre: str | None = Field(
        default=None,
        max_length=50,
        description="Genre label",
        examples=["Dystopian Fiction"],
    )

    description: str | None = Field(
        default=None,
        max_length=1000,
        description="Book description or summary",
        examples=["A dystopian social science fiction novel"],
    )

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str) -> str:
        return clean_isbn(v)

    @field_validator("title", "author")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Validate and normalize required text fields."""
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    available_copies and is_available are not accepted here: the service
    derives them from total_copies.

    Example request body:
    {
        "title": "1984",
        "author": "George Orwell",
        "isbn": "978-0451524935",
        "published_date": "1949-06-08",
        "total_copies": 4
    }
    """

    total_copies: int = Field(
        default=1,
        ge=1,
        description="Number of copies owned by the library",
        examples=[1, 5],
    )


class BookUpdate(BaseModel):
    """
    Schema for partially updating an existing book.

    Every field is optional. A field that is absent or null leaves the
    stored value alone; for text fields an empty string does too.
    """

    title: str | None = Field(default=None, max_length=200, description="Book title")

    author: str | None = Field(default=None, max_length=100, description="Author name")

    isbn: str | None = Field(
        default=None,
        max_length=20,
        description="ISBN-10 or ISBN-13",
    )

    published_date: date | None = Field(default=None, description="Date of publication")

    genre: str | None = Field(default=None, max_length=50, description="Genre label")

    description: str | None = Field(
        default=None,
        max_length=1000,
        description="Book description",
    )

    total_copies: int | None = Field(
        default=None,
        ge=1,
        description="Number of copies owned by the library",
    )

    is_available: bool | None = Field(
        default=None,
        description="Availability flag, stored as given",
    )

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str | None) -> str | None:
        """Validate ISBN if provided; blank means no change."""
        if not v or not v.strip():
            return None
        return clean_isbn(v)

    @field_validator("title", "author")
    @classmethod
    def must_not_be_blank(cls, v: str | None) -> str | None:
        # "" is a no-op, but "   " is a mistake worth reporting
        if v and not v.strip():
            raise ValueError("Value cannot be whitespace")
        return v.strip() if v else v


class BookResponse(BaseModel):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")
    title: str
    author: str
    isbn: str
    published_date: date
    genre: str | None = None
    description: str | None = None
    total_copies: int
    available_copies: int
    is_available: bool
    created_at: datetime | None = Field(default=None, description="When the book was created")
    updated_at: datetime | None = Field(default=None, description="When the book was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 3,
                "title": "1984",
                "author": "George Orwell",
                "isbn": "9780451524935",
                "published_date": "1949-06-08",
                "genre": "Dystopian Fiction",
                "description": "A dystopian social science fiction novel",
                "total_copies": 4,
                "available_copies": 1,
                "is_available": True,
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            }
        },
    )
