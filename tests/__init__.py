"""
Test Suite for Bibliotheca

Test Organization:
- conftest.py: Shared fixtures (test database, clients, sample data)
- test_book_query.py: Book query service, called directly
- test_books.py: /api/v1/books endpoints
- test_app.py: Root, health check and settings
- test_seed.py: Development seed script

Running Tests:
    pip install -e ".[test]"
    pytest
    pytest tests/test_books.py -v
"""
