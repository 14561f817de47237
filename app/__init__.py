"""
Library API Application Package

REST service for a library's books and the loans of those books.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and get_db dependency
- exceptions.py: Domain errors raised by the services
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- repositories/: Persistence operations used by the services
- services/: Business logic (books, loans) and rate limiting
- routers/: API route handlers
"""

__version__ = "0.1.0"
