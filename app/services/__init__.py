"""
Services Package

Business logic kept separate from HTTP handling (routers), so it can be
reused and tested in isolation.

Current services:
- catalog.py: Book CRUD, ISBN uniqueness and partial-update merging
- search.py: Single- and multi-term substring search
- rate_limiter.py: Rate limiting with slowapi
"""
