"""
FastAPI Dependencies Module

Reusable components injected into route handlers with Depends().

Instead of writing:
    def get_book(db: Session = Depends(get_db)):

routes write:
    def get_book(db: DbSession):
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db

DbSession = Annotated[Session, Depends(get_db)]


def get_search_term(
    search_term: str | None = Query(
        default=None,
        max_length=200,
        alias="searchTerm",
        description="Text to look for in title, author or genre",
        examples=["gatsby", "Orwell"],
    ),
) -> str | None:
    """
    Single search term from the query string.

    Accepted as ?searchTerm=... Blank values are passed through so the
    search service can reject them with a 400.
    """
    return search_term


SearchTerm = Annotated[str | None, Depends(get_search_term)]
