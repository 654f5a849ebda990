"""
Search Service

Substring search over the books table.

Two entry points:
- search_books(): one raw term, matched against title, author and genre
- search_books_by_terms(): a list of raw terms; blanks are dropped, the
  rest trimmed, and a book matches if ANY term appears in its title,
  author, genre or description

Case handling follows settings.search_case_sensitive. The database
pre-filters with a lowercase LIKE (portable across PostgreSQL and SQLite,
whose LIKE case rules differ); when case-sensitive matching is configured
the candidates are narrowed to exact-case matches in Python.
"""

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from app.config import get_settings
from app.exceptions import InvalidInput
from app.models import Book

logger = logging.getLogger(__name__)

# Fields searched by each entry point
SINGLE_TERM_FIELDS = ("title", "author", "genre")
MULTI_TERM_FIELDS = ("title", "author", "genre", "description")


def normalize_search_terms(terms: Sequence[str | None] | None) -> list[str]:
    """
    Drop blank search terms and trim the rest.

    Args:
        terms: Raw terms as received; elements may be None, "" or "   "

    Returns:
        Trimmed, non-empty terms in their original order

    Raises:
        InvalidInput: If terms is None/empty, or nothing survives filtering

    Example:
        >>> normalize_search_terms(["gatsby", "", "  ", "orwell", None])
        ['gatsby', 'orwell']
    """
    if not terms:
        raise InvalidInput("Search terms array cannot be null or empty.")

    valid_terms = [term.strip() for term in terms if term and term.strip()]
    if not valid_terms:
        raise InvalidInput("At least one valid search term is required.")

    return valid_terms


def _field_conditions(term: str, fields: Iterable[str]) -> list[ColumnElement[bool]]:
    """Build one case-insensitive LIKE condition per field for a term."""
    lowered = term.lower()
    return [
        func.lower(getattr(Book, field)).contains(lowered, autoescape=True)
        for field in fields
    ]


def _matches(book: Book, terms: Sequence[str], fields: Iterable[str]) -> bool:
    """Exact-case substring test used when case-sensitive search is on."""
    values = [getattr(book, field) or "" for field in fields]
    return any(term in value for term in terms for value in values)


def _run_search(
    db: Session,
    terms: Sequence[str],
    fields: tuple[str, ...],
    case_sensitive: bool | None,
) -> list[Book]:
    if case_sensitive is None:
        case_sensitive = get_settings().search_case_sensitive

    conditions = []
    for term in terms:
        conditions.extend(_field_conditions(term, fields))

    # A book matching several terms or fields is still one row
    stmt = select(Book).where(or_(*conditions)).distinct().order_by(Book.id)
    books = list(db.execute(stmt).scalars().all())

    if case_sensitive:
        books = [book for book in books if _matches(book, terms, fields)]

    logger.debug(
        f"Search for {list(terms)} over {fields} matched {len(books)} book(s) "
        f"(case_sensitive={case_sensitive})"
    )
    return books


def search_books(
    db: Session,
    term: str | None,
    case_sensitive: bool | None = None,
) -> list[Book]:
    """
    Search books by a single term in title, author or genre.

    The term is used as given (no trimming); only a blank term is rejected.

    Raises:
        InvalidInput: If the term is None, empty or whitespace-only
    """
    if term is None or not term.strip():
        raise InvalidInput("Search term cannot be empty.")

    return _run_search(db, [term], SINGLE_TERM_FIELDS, case_sensitive)


def search_books_by_terms(
    db: Session,
    terms: Sequence[str | None] | None,
    case_sensitive: bool | None = None,
) -> list[Book]:
    """
    Search books matching ANY of several terms.

    A book matches when at least one normalized term is a substring of its
    title, author, genre or description. Results are deduplicated and
    ordered by id.

    Args:
        db: Database session
        terms: Raw search terms (see normalize_search_terms)
        case_sensitive: Override settings.search_case_sensitive

    Raises:
        InvalidInput: If no usable term remains after normalization
    """
    valid_terms = normalize_search_terms(terms)
    return _run_search(db, valid_terms, MULTI_TERM_FIELDS, case_sensitive)
