"""
pytest Fixtures for Bibliotheca Tests

Shared fixtures used across all test files.

For database tests we use:
- session scope for the engine (expensive to create)
- function scope for sessions, each wrapped in a rolled-back transaction
"""

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bibliotheca.database import Base, get_db
from bibliotheca.main import app
from bibliotheca.models import Author, Book

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps the suite fast and self-contained. Its default
# BINARY collation orders names byte-wise, the same as the "C" collation
# in PostgreSQL.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session;
    without it the in-memory database would vanish between connections.
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

    The session runs inside a transaction that is rolled back afterwards,
    so tests don't affect each other.
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
    Create a test client that uses the test database session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def broken_session() -> MagicMock:
    """A session whose every query fails as if the server were down."""
    session = MagicMock(spec=Session)
    session.execute.side_effect = OperationalError(
        "SELECT books.id FROM books",
        {},
        Exception("could not connect to server: Connection refused"),
    )
    return session


@pytest.fixture(scope="function")
def broken_client(broken_session: MagicMock) -> Generator[TestClient, None, None]:
    """Test client whose database session cannot reach the store."""

    def override_get_db():
        yield broken_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


class QueryCounter:
    """Counts statements sent to the database."""

    def __init__(self) -> None:
        self.statements: list[str] = []

    def __call__(self, conn, cursor, statement, parameters, context, executemany):
        self.statements.append(statement)

    @property
    def count(self) -> int:
        return len(self.statements)


@pytest.fixture
def query_counter(engine) -> Generator[QueryCounter, None, None]:
    """Record every statement executed on the test engine."""
    counter = QueryCounter()
    event.listen(engine, "before_cursor_execute", counter)
    yield counter
    event.remove(engine, "before_cursor_execute", counter)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def frank_herbert(db_session: Session) -> Author:
    author = Author(name="Frank Herbert")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def jane_austen(db_session: Session) -> Author:
    author = Author(name="Jane Austen")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def two_books(
    db_session: Session,
    frank_herbert: Author,
    jane_austen: Author,
) -> list[Book]:
    """Dune (SciFi) and Emma (Romance), one author each."""
    books = [
        Book(name="Emma", genre="Romance", authors=[jane_austen]),
        Book(name="Dune", genre="SciFi", authors=[frank_herbert]),
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books


@pytest.fixture
def catalogue(
    db_session: Session,
    frank_herbert: Author,
    jane_austen: Author,
) -> list[Book]:
    """
    A mixed catalogue for filtering and ordering tests.

    Covers a co-authored book, a book with no authors, an unclassified
    (empty genre) book and names containing LIKE wildcards.
    """
    terry_pratchett = Author(name="Terry Pratchett")
    neil_gaiman = Author(name="Neil Gaiman")

    books = [
        Book(name="Dune", genre="SciFi", authors=[frank_herbert]),
        Book(name="Children of Dune", genre="SciFi", authors=[frank_herbert]),
        Book(name="Emma", genre="Romance", authors=[jane_austen]),
        Book(name="Pride and Prejudice", genre="Romance", authors=[jane_austen]),
        Book(name="Good Omens", genre="Fantasy", authors=[terry_pratchett, neil_gaiman]),
        Book(name="100% Pure", genre="", authors=[]),
        Book(name="snake_case Handbook", genre="Reference", authors=[]),
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books
