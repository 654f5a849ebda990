"""
Tests for Search

Covers:
- Term normalization (blank terms dropped, survivors trimmed)
- Multi-term OR search across title, author, genre and description
- Single-term search across title, author and genre
- Case handling
- HTTP mapping of invalid input to 400
"""

import pytest
from fastapi import status

from app.exceptions import InvalidInput
from app.services.search import (
    normalize_search_terms,
    search_books,
    search_books_by_terms,
)


class TestNormalizeSearchTerms:
    """Tests for normalize_search_terms()."""

    @pytest.mark.parametrize("terms", [None, []])
    def test_missing_terms_rejected(self, terms):
        with pytest.raises(InvalidInput, match="cannot be null or empty"):
            normalize_search_terms(terms)

    @pytest.mark.parametrize(
        "terms",
        [
            [None],
            [""],
            ["", "   ", None],
            ["\t", "\n "],
        ],
    )
    def test_only_blank_terms_rejected(self, terms):
        with pytest.raises(InvalidInput, match="At least one valid search term"):
            normalize_search_terms(terms)

    def test_blank_terms_dropped_and_rest_trimmed(self):
        terms = ["gatsby", "", "  ", " orwell ", None]

        assert normalize_search_terms(terms) == ["gatsby", "orwell"]


class TestSearchBooksByTerms:
    """Tests for search_books_by_terms()."""

    def test_any_term_matches(self, db_session, catalog_books):
        books = search_books_by_terms(db_session, ["gatsby", "orwell"])

        assert [book.title for book in books] == ["The Great Gatsby", "1984"]

    def test_blank_terms_behave_as_if_absent(self, db_session, catalog_books):
        with_blanks = search_books_by_terms(
            db_session, ["gatsby", "", "  ", "orwell", None]
        )
        without = search_books_by_terms(db_session, ["gatsby", "orwell"])

        assert [book.id for book in with_blanks] == [book.id for book in without]

    def test_book_matching_several_terms_and_fields_appears_once(
        self, db_session, catalog_books
    ):
        # "Gatsby" is in the title, "Fitzgerald" in the author, "Jazz" in the description
        books = search_books_by_terms(db_session, ["Gatsby", "Fitzgerald", "Jazz", "a"])

        ids = [book.id for book in books]
        assert len(ids) == len(set(ids))
        assert ids.count(catalog_books[0].id) == 1

    def test_matches_description(self, db_session, catalog_books):
        books = search_books_by_terms(db_session, ["racial injustice"])

        assert [book.title for book in books] == ["To Kill a Mockingbird"]

    def test_matches_genre(self, db_session, catalog_books):
        books = search_books_by_terms(db_session, ["Dystopian"])

        assert {book.title for book in books} == {"1984", "Brave New World"}

    def test_terms_are_trimmed_before_matching(self, db_session, catalog_books):
        books = search_books_by_terms(db_session, ["  Huxley  "])

        assert [book.title for book in books] == ["Brave New World"]

    def test_no_match(self, db_session, catalog_books):
        assert search_books_by_terms(db_session, ["tolkien"]) == []

    def test_like_wildcards_are_literal(self, db_session, catalog_books):
        assert search_books_by_terms(db_session, ["%"]) == []
        assert search_books_by_terms(db_session, ["_"]) == []

    def test_case_insensitive_by_default(self, db_session, catalog_books):
        books = search_books_by_terms(db_session, ["gatsby"])

        assert [book.title for book in books] == ["The Great Gatsby"]

    def test_case_sensitive(self, db_session, catalog_books):
        assert search_books_by_terms(db_session, ["gatsby"], case_sensitive=True) == []

        books = search_books_by_terms(db_session, ["Gatsby"], case_sensitive=True)
        assert [book.title for book in books] == ["The Great Gatsby"]

    def test_invalid_terms_rejected(self, db_session):
        with pytest.raises(InvalidInput):
            search_books_by_terms(db_session, ["", None])


class TestSearchBooks:
    """Tests for the single-term search_books()."""

    def test_matches_title(self, db_session, catalog_books):
        books = search_books(db_session, "Mockingbird")

        assert [book.title for book in books] == ["To Kill a Mockingbird"]

    def test_matches_author_and_genre(self, db_session, catalog_books):
        assert [b.title for b in search_books(db_session, "Harper")] == [
            "To Kill a Mockingbird"
        ]
        assert len(search_books(db_session, "Classic")) == 2

    def test_description_not_searched(self, db_session, catalog_books):
        assert search_books(db_session, "Jazz Age") == []

    def test_term_is_not_trimmed(self, db_session, catalog_books):
        """Surrounding spaces are part of the term."""
        assert search_books(db_session, " 1984 ") == []

    @pytest.mark.parametrize("term", [None, "", "   "])
    def test_blank_term_rejected(self, db_session, term):
        with pytest.raises(InvalidInput, match="Search term cannot be empty"):
            search_books(db_session, term)

    def test_case_sensitive(self, db_session, catalog_books):
        assert search_books(db_session, "orwell", case_sensitive=True) == []
        assert len(search_books(db_session, "Orwell", case_sensitive=True)) == 1


class TestSearchEndpoints:
    """Tests for GET and POST /api/v1/books/search."""

    def test_search_terms_success(self, client, catalog_books):
        response = client.post("/api/v1/books/search", json=["gatsby", "orwell"])

        assert response.status_code == status.HTTP_200_OK
        titles = [book["title"] for book in response.json()]
        assert titles == ["The Great Gatsby", "1984"]

    def test_search_terms_mixed_valid_and_blank(self, client, catalog_books):
        response = client.post(
            "/api/v1/books/search",
            json=["gatsby", "", "   ", "orwell", None],
        )

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 2

    def test_search_terms_empty_array(self, client):
        response = client.post("/api/v1/books/search", json=[])

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["detail"] == "Search terms array cannot be null or empty."
        assert body["error_code"] == "INVALID_INPUT"

    def test_search_terms_missing_body(self, client):
        response = client.post("/api/v1/books/search")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Search terms array cannot be null or empty."

    def test_search_terms_all_blank(self, client):
        response = client.post("/api/v1/books/search", json=["", "   ", None])

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "At least one valid search term is required."

    def test_search_single_term(self, client, catalog_books):
        response = client.get("/api/v1/books/search", params={"searchTerm": "Lee"})

        assert response.status_code == status.HTTP_200_OK
        assert [book["title"] for book in response.json()] == ["To Kill a Mockingbird"]

    @pytest.mark.parametrize("params", [{}, {"searchTerm": ""}, {"searchTerm": "  "}])
    def test_search_single_term_blank(self, client, params):
        response = client.get("/api/v1/books/search", params=params)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Search term cannot be empty."
