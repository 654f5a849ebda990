"""
pytest Fixtures for Library Catalog API Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("DATABASE_URL", "sqlite://")

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Book

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.
# Note that SQLite's LIKE ignores ASCII case, unlike PostgreSQL's.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the connection alive for the entire session.
    Without it, SQLite in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
# Books are inserted directly so copy counts can differ from total_copies,
# the way a catalog looks after some lending.


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a single book for testing."""
    book = Book(
        title="1984",
        author="George Orwell",
        isbn="9780451524935",
        published_date=date(1949, 6, 8),
        genre="Dystopian Fiction",
        description="A dystopian social science fiction novel",
        total_copies=4,
        available_copies=1,
        is_available=True,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def catalog_books(db_session: Session) -> list[Book]:
    """Create a small catalog with varied genres and availability."""
    books = [
        Book(
            title="The Great Gatsby",
            author="F. Scott Fitzgerald",
            isbn="9780743273565",
            published_date=date(1925, 4, 10),
            genre="Classic Literature",
            description="A classic American novel set in the Jazz Age",
            total_copies=5,
            available_copies=3,
            is_available=True,
        ),
        Book(
            title="To Kill a Mockingbird",
            author="Harper Lee",
            isbn="9780061120084",
            published_date=date(1960, 7, 11),
            genre="Classic Literature",
            description="A gripping tale of racial injustice and childhood innocence",
            total_copies=3,
            available_copies=2,
            is_available=True,
        ),
        Book(
            title="1984",
            author="George Orwell",
            isbn="9780451524935",
            published_date=date(1949, 6, 8),
            genre="Dystopian Fiction",
            description="A dystopian social science fiction novel",
            total_copies=4,
            available_copies=1,
            is_available=True,
        ),
        Book(
            title="Brave New World",
            author="Aldous Huxley",
            isbn="9780060850524",
            published_date=date(1932, 1, 1),
            genre="Dystopian Fiction",
            description=None,
            total_copies=2,
            available_copies=0,
            is_available=False,
        ),
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books


@pytest.fixture
def new_book_data() -> dict:
    """Valid JSON body for POST /api/v1/books/."""
    return {
        "title": "Animal Farm",
        "author": "George Orwell",
        "isbn": "978-0-451-52634-2",
        "published_date": "1945-08-17",
        "genre": "Political Satire",
        "description": "An allegorical novella",
        "total_copies": 5,
    }
