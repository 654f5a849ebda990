"""
Catalog Service

Create, read, update and delete operations for book records.

Business rules live here rather than in the router so they can be used
and tested without HTTP:
- ISBNs are unique: creating or updating to a taken ISBN raises Conflict
- On creation, available_copies starts at total_copies and is_available
  is derived from it
- Updates are partial: only fields present in the payload change, and
  is_available is stored as given rather than re-derived
"""

import logging
import re

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.exceptions import Conflict, NotFound
from app.models import Book
from app.schemas import BookCreate, BookUpdate

logger = logging.getLogger(__name__)

# An empty string in the payload means "leave unchanged" for these
STRING_FIELDS = ("title", "author", "isbn", "genre", "description")
VALUE_FIELDS = ("published_date", "total_copies", "is_available")


# =============================================================================
# Lookups
# =============================================================================
def get_book(db: Session, book_id: int) -> Book:
    """
    Get a book by ID.

    Raises:
        NotFound: If no book has this ID
    """
    book = db.get(Book, book_id)
    if book is None:
        raise NotFound(f"Book with ID {book_id} not found.")
    return book


def find_book_by_isbn(db: Session, isbn: str) -> Book | None:
    """Return the book holding this ISBN, or None."""
    stmt = select(Book).where(Book.isbn == isbn)
    return db.execute(stmt).scalar_one_or_none()


def get_book_by_isbn(db: Session, isbn: str) -> Book:
    """
    Get a book by ISBN.

    Hyphens and spaces are ignored, matching how ISBNs are stored.

    Raises:
        NotFound: If no book has this ISBN
    """
    book = find_book_by_isbn(db, re.sub(r"[-\s]", "", isbn))
    if book is None:
        raise NotFound(f"Book with ISBN {isbn} not found.")
    return book


def list_books(db: Session) -> list[Book]:
    """Return every book, ordered by id."""
    return list(db.execute(select(Book).order_by(Book.id)).scalars().all())


def list_books_by_genre(db: Session, genre: str) -> list[Book]:
    """Return books whose genre equals `genre`, ignoring case."""
    stmt = (
        select(Book)
        .where(func.lower(Book.genre) == genre.lower())
        .order_by(Book.id)
    )
    return list(db.execute(stmt).scalars().all())


def list_available_books(db: Session) -> list[Book]:
    """Return books flagged available that still have a copy on the shelf."""
    stmt = (
        select(Book)
        .where(Book.is_available.is_(True), Book.available_copies > 0)
        .order_by(Book.id)
    )
    return list(db.execute(stmt).scalars().all())


# =============================================================================
# Writes
# =============================================================================
def _ensure_isbn_free(db: Session, isbn: str) -> None:
    if find_book_by_isbn(db, isbn) is not None:
        logger.info(f"Rejected duplicate ISBN {isbn}")
        raise Conflict(f"A book with ISBN {isbn} already exists.")


def _commit(db: Session, isbn: str) -> None:
    """Commit, reporting a unique-index race on ISBN as Conflict."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(f"Integrity error while saving ISBN {isbn}: {exc.orig}")
        raise Conflict(f"A book with ISBN {isbn} already exists.") from exc


def create_book(db: Session, book_data: BookCreate) -> Book:
    """
    Create a new book.

    available_copies is set to total_copies and is_available to
    available_copies > 0.

    Raises:
        Conflict: If the ISBN is already in the catalog
    """
    _ensure_isbn_free(db, book_data.isbn)

    book = Book(**book_data.model_dump())
    book.available_copies = book.total_copies
    book.is_available = book.available_copies > 0

    db.add(book)
    _commit(db, book.isbn)
    db.refresh(book)

    logger.info(f"Created book {book.id} ({book.isbn})")
    return book


def merge_book_update(book: Book, book_data: BookUpdate) -> Book:
    """
    Apply a partial update payload to a book in place.

    - Text fields are overwritten only when given and non-empty
    - Other fields are overwritten only when given and not null
    - available_copies is left alone and is_available is not re-derived

    No database access happens here; ISBN uniqueness is the caller's job.

    Returns:
        The same book instance, modified
    """
    update_data = book_data.model_dump(exclude_unset=True)

    for field in STRING_FIELDS:
        value = update_data.get(field)
        if value:
            setattr(book, field, value)

    for field in VALUE_FIELDS:
        value = update_data.get(field)
        if value is not None:
            setattr(book, field, value)

    return book


def update_book(db: Session, book_id: int, book_data: BookUpdate) -> Book:
    """
    Partially update a book.

    The ISBN check runs before any field is touched, so a rejected update
    leaves the record exactly as it was.

    Raises:
        NotFound: If no book has this ID
        Conflict: If the new ISBN belongs to another book
    """
    book = get_book(db, book_id)

    if book_data.isbn and book_data.isbn != book.isbn:
        _ensure_isbn_free(db, book_data.isbn)

    merge_book_update(book, book_data)
    _commit(db, book.isbn)
    db.refresh(book)

    logger.info(f"Updated book {book.id}")
    return book


def delete_book(db: Session, book_id: int) -> None:
    """
    Permanently delete a book.

    Raises:
        NotFound: If no book has this ID
    """
    book = get_book(db, book_id)
    db.delete(book)
    db.commit()

    logger.info(f"Deleted book {book_id}")
