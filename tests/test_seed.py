"""
Tests for the development seed script.
"""

import pytest

from scripts.seed_data import AUTHOR_NAMES, BOOKS_DATA, seed

from bibliotheca.services.books import BookQuery, list_books, list_genres


class TestSeed:
    """Seeding produces a catalogue the query service can read."""

    def test_seed_counts(self, db_session):
        author_count, book_count = seed(db_session)

        assert author_count == len(AUTHOR_NAMES)
        assert book_count == len(BOOKS_DATA)

    def test_seeded_catalogue_is_queryable(self, db_session):
        seed(db_session)

        books = list_books(db_session, BookQuery(search="dune"))

        assert [book.name for book in books] == ["Children of Dune", "Dune"]
        assert books[1].authors[0].name == "Frank Herbert"
        assert "" in list_genres(db_session)

    @pytest.mark.filterwarnings("error::sqlalchemy.exc.SAWarning")
    def test_reseed_replaces_existing_data(self, db_session, two_books):
        seed(db_session)
        seed(db_session)

        assert len(list_books(db_session)) == len(BOOKS_DATA)
