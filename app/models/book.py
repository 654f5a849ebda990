"""
Book Model

The only persisted entity of the catalog: one row per title, with the
number of copies the library owns and how many are on the shelf.

Copy counts:
- total_copies: how many copies the library owns (caller-supplied)
- available_copies: how many can be lent right now (set on creation)
- is_available: availability flag, derived from available_copies on creation
"""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Integer, String, func, true
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Book(Base):
    """
    Book model representing a catalog record.

    Table: books

    Indexes:
    - Primary key on id (automatic)
    - isbn: Unique index (no two records share an ISBN)
    - title, author: Indexes for searching

    Example:
        book = Book(
            title="1984",
            author="George Orwell",
            isbn="9780451524935",
            published_date=date(1949, 6, 8),
            genre="Dystopian Fiction",
            total_copies=4,
        )
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(200),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Author name"
    )

    # Stored without hyphens, ISBN-10 or ISBN-13
    isbn: Mapped[str] = mapped_column(
        String(13),
        unique=True,
        index=True,
        nullable=False,
        comment="International Standard Book Number"
    )

    published_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Date of publication"
    )

    genre: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        comment="Genre label, e.g. 'Classic Literature'"
    )

    description: Mapped[str | None] = mapped_column(
        String(1000),
        nullable=True,
        comment="Book description or summary"
    )

    # -------------------------------------------------------------------------
    # Inventory
    # -------------------------------------------------------------------------
    total_copies: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        server_default="1",
        comment="Number of copies owned by the library"
    )

    available_copies: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        server_default="1",
        comment="Number of copies currently on the shelf"
    )

    is_available: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
        comment="Whether the book can currently be lent"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
