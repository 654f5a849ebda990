"""
Test Suite for the Library Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: HTTP tests for /api/v1/books endpoints
- test_catalog.py: Catalog service (create, partial update, delete)
- test_search.py: Search normalization and matching
- test_rate_limiter.py: Rate limiting helpers

Running Tests:
    pytest
    pytest tests/test_search.py -v
"""
