"""
Test Suite for Library API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: Tests for /api/books endpoints
- test_loans.py: Tests for /api/loans endpoints
- test_services.py: BookService and LoanService without HTTP
- test_main.py: Root/health endpoints and page metadata

Running Tests:
    pytest
    pytest tests/test_loans.py -v
"""
