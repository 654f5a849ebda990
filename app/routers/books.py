"""
Books Router

CRUD and search endpoints for catalog records.

Handlers stay thin: they call app.services.catalog / app.services.search
and convert ORM objects to BookResponse. Domain errors raised by the
services (InvalidInput, NotFound, Conflict) are turned into 400/404/409
responses by the exception handler registered in app.main.

Route order matters: the fixed paths (/search, /available, /genre/...,
/isbn/...) are declared before /{book_id}.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Request, status

from app.config import get_settings
from app.dependencies import DbSession, SearchTerm
from app.schemas import BookCreate, BookResponse, BookUpdate
from app.services import catalog
from app.services.rate_limiter import limiter
from app.services.search import search_books, search_books_by_terms

settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


def _to_response(books) -> list[BookResponse]:
    return [BookResponse.model_validate(book) for book in books]


# =============================================================================
# Listing and Search
# =============================================================================

@router.get(
    "/",
    response_model=list[BookResponse],
    summary="List all books",
)
@limiter.limit(settings.rate_limit_default)
def list_books(request: Request, db: DbSession) -> list[BookResponse]:
    """Get every book in the catalog, ordered by id."""
    return _to_response(catalog.list_books(db))


@router.get(
    "/search",
    response_model=list[BookResponse],
    summary="Search books by one term",
    description="Find books whose title, author or genre contains the term.",
    responses={400: {"description": "Search term is empty"}},
)
@limiter.limit(settings.rate_limit_search)
def search_by_term(
    request: Request,
    db: DbSession,
    search_term: SearchTerm,
) -> list[BookResponse]:
    """
    Search books by a single term.

    Example:
        GET /api/v1/books/search?searchTerm=Gatsby
    """
    return _to_response(search_books(db, search_term))


@router.post(
    "/search",
    response_model=list[BookResponse],
    summary="Search books by several terms",
    description=(
        "Find books whose title, author, genre or description contains "
        "any of the given terms. Blank terms are ignored."
    ),
    responses={400: {"description": "No usable search term"}},
)
@limiter.limit(settings.rate_limit_search)
def search_by_terms(
    request: Request,
    db: DbSession,
    search_terms: Annotated[list[str | None] | None, Body()] = None,
) -> list[BookResponse]:
    """
    Search books by a JSON array of terms.

    Example:
        POST /api/v1/books/search
        ["gatsby", "", "orwell"]
    """
    return _to_response(search_books_by_terms(db, search_terms))


@router.get(
    "/available",
    response_model=list[BookResponse],
    summary="List available books",
)
@limiter.limit(settings.rate_limit_default)
def list_available_books(request: Request, db: DbSession) -> list[BookResponse]:
    """Books flagged available that still have at least one copy."""
    return _to_response(catalog.list_available_books(db))


@router.get(
    "/genre/{genre}",
    response_model=list[BookResponse],
    summary="List books by genre",
)
@limiter.limit(settings.rate_limit_default)
def list_books_by_genre(
    request: Request,
    genre: str,
    db: DbSession,
) -> list[BookResponse]:
    """Books whose genre matches exactly, ignoring case."""
    return _to_response(catalog.list_books_by_genre(db, genre))


@router.get(
    "/isbn/{isbn}",
    response_model=BookResponse,
    summary="Get a book by ISBN",
)
@limiter.limit(settings.rate_limit_default)
def get_book_by_isbn(
    request: Request,
    isbn: str,
    db: DbSession,
) -> BookResponse:
    return BookResponse.model_validate(catalog.get_book_by_isbn(db, isbn))


# =============================================================================
# CRUD Endpoints
# =============================================================================

@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
@limiter.limit(settings.rate_limit_default)
def get_book(
    request: Request,
    book_id: int,
    db: DbSession,
) -> BookResponse:
    return BookResponse.model_validate(catalog.get_book(db, book_id))


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a book. Available copies start at total copies.",
    responses={409: {"description": "ISBN already exists"}},
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookCreate,
    db: DbSession,
) -> BookResponse:
    """
    Create a new book.

    Returns 201 with the stored record, including the derived
    available_copies and is_available.
    """
    book = catalog.create_book(db, book_data)
    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Partially update a book. Only the fields provided are changed.",
    responses={409: {"description": "ISBN already exists"}},
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: int,
    book_data: BookUpdate,
    db: DbSession,
) -> BookResponse:
    """
    Update an existing book.

    Uses PUT with optional fields (PATCH-like behavior). Missing, null and
    empty-string values leave the stored field unchanged.
    """
    book = catalog.update_book(db, book_id, book_data)
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(
    request: Request,
    book_id: int,
    db: DbSession,
) -> None:
    """Permanently delete a book. Returns 204 No Content."""
    catalog.delete_book(db, book_id)
