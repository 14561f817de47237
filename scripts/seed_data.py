#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample books and loans for development.

USAGE:
    # From the project root with the virtualenv active
    python scripts/seed_data.py
    python scripts/seed_data.py --keep   # don't clear existing rows

Books and loans are created through BookService and LoanService, so the
same ISBN and availability rules apply as through the API.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.database import SessionLocal, create_tables
from app.exceptions import LibraryError
from app.models import Book, Loan
from app.repositories import BookRepository, LoanRepository
from app.schemas import BookCreate, LoanCreate
from app.services import BookService, LoanService

logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
logger = logging.getLogger("seed_data")

BOOKS = [
    {"title": "1984", "author": "George Orwell", "isbn": "9780451524935"},
    {"title": "Animal Farm", "author": "George Orwell", "isbn": "9780451526342"},
    {"title": "Pride and Prejudice", "author": "Jane Austen", "isbn": "9780141439518"},
    {"title": "The Old Man and the Sea", "author": "Ernest Hemingway", "isbn": "9780684801223"},
    {"title": "Murder on the Orient Express", "author": "Agatha Christie", "isbn": "9780062693662"},
    {"title": "Foundation", "author": "Isaac Asimov", "isbn": "9780553293357"},
    {"title": "The Hobbit", "author": "J.R.R. Tolkien", "isbn": "9780547928227"},
    {"title": "I, Robot", "author": "Isaac Asimov", "isbn": "9780553382563"},
]

LOANS = [
    {"isbn": "9780451524935", "customer": "Alice Martins"},
    {"isbn": "9780553293357", "customer": "Bruno Carvalho"},
    {"isbn": "9780547928227", "customer": "Alice Martins"},
]


def clear_data(db: Session) -> None:
    """Clear all existing loans and books."""
    logger.info("Clearing existing data...")
    db.execute(delete(Loan))
    db.execute(delete(Book))
    db.commit()


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        book_service = BookService(BookRepository(db))
        loan_service = LoanService(LoanRepository(db), BookRepository(db))

        books = 0
        for data in BOOKS:
            try:
                book_service.create(BookCreate(**data))
                books += 1
            except LibraryError as exc:
                logger.warning(f"Skipped book: {exc.message}")

        loans = 0
        for data in LOANS:
            try:
                loan_service.create(LoanCreate(**data))
                loans += 1
            except LibraryError as exc:
                logger.warning(f"Skipped loan: {exc.message}")

        logger.info(f"Seeded {books} books and {loans} loans")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the library database")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing rows instead of clearing them first",
    )
    args = parser.parse_args()
    seed_database(clear_existing=not args.keep)
