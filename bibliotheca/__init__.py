"""
Bibliotheca Application Package

Backend for a small book catalogue. Exposes the "books" collection with
free-text search and genre filtering, always returning each book together
with its authors.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- exceptions.py: Application error hierarchy
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic response schemas
- routers/: API route handlers
- services/: Query logic, independent of HTTP
"""

__version__ = "0.1.0"
