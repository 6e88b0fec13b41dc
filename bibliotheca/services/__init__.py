"""
Services Package

Query logic kept apart from HTTP handling so it can be called and tested
with nothing but a database session.

Current services:
- books.py: Book listing with search, genre filtering and eager-loaded authors
"""
