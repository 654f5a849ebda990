"""
SQLAlchemy Models Package

The catalog has a single table, books.

Import models here to:
1. Make them available as: from app.models import Book
2. Ensure Alembic discovers them for migrations
"""

from app.models.book import Book

__all__ = [
    "Book",
]
