"""
BookStore API Package

Inventory management for a bookstore: authors, genres, books and reviews.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and Base
- context.py: BookStoreContext, the unit of work with the delete rules
- exceptions.py: Domain errors
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- repositories/: Read queries with eager loading
- routers/: API route handlers
"""

__version__ = "0.1.0"
