"""
Tests for Loans API Endpoints

This module tests the /api/loans endpoints: lending a book and browsing
the loan history.
"""

from datetime import date

from fastapi import status

from app.models import Book, Loan

LOAN_URI = "/api/loans"


class TestCreateLoan:
    """Tests for POST /api/loans endpoint."""

    def test_create_loan_success(self, client, sample_book):
        """Test lending an available book."""
        loan_data = {"isbn": "ISBN", "customer": "Customer"}

        response = client.post(LOAN_URI, json=loan_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] is not None
        assert data["customer"] == "Customer"
        assert data["loanDate"] == date.today().isoformat()
        assert data["isReturned"] is False
        assert data["book"] == {
            "id": sample_book.id,
            "title": "Title",
            "author": "Author",
            "isbn": "ISBN",
        }
        assert response.headers["Location"].endswith(f"/api/loans/{data['id']}")

    def test_create_loan_invalid_attributes(self, client, sample_book):
        """Test that null fields are reported and no loan is created."""
        loan_data = {"isbn": None, "customer": None}

        response = client.post(LOAN_URI, json=loan_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert len(response.json()["errors"]) == 2
        assert client.get(LOAN_URI).json()["totalElements"] == 0

    def test_create_loan_book_already_on_loan(self, client, sample_loan):
        """Test that a book with an unreturned loan cannot be lent again."""
        loan_data = {"isbn": "ISBN", "customer": "Another Customer"}

        response = client.post(LOAN_URI, json=loan_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"] == ["Book already on loan! ISBN: 'ISBN'"]
        assert client.get(LOAN_URI).json()["totalElements"] == 1

    def test_create_loan_twice(self, client, sample_book):
        """Test the second loan of the same book is rejected."""
        loan_data = {"isbn": "ISBN", "customer": "Customer"}

        first = client.post(LOAN_URI, json=loan_data)
        second = client.post(LOAN_URI, json=loan_data)

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_400_BAD_REQUEST
        assert second.json()["errors"] == ["Book already on loan! ISBN: 'ISBN'"]

    def test_create_loan_book_not_registered(self, client):
        """Test that an unknown ISBN is rejected."""
        loan_data = {"isbn": "ISBN", "customer": "Customer"}

        response = client.post(LOAN_URI, json=loan_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"] == ["Book not registered! ISBN: 'ISBN'"]

    def test_create_loan_after_return(self, client, db_session, sample_loan):
        """Test that a returned book can be lent again."""
        sample_loan.is_returned = True
        db_session.commit()

        response = client.post(LOAN_URI, json={"isbn": "ISBN", "customer": "Next"})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["customer"] == "Next"


class TestGetLoan:
    """Tests for GET /api/loans/{loan_id} endpoint."""

    def test_get_loan_success(self, client, sample_loan):
        """Test getting a loan by ID."""
        response = client.get(f"{LOAN_URI}/{sample_loan.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_loan.id
        assert data["customer"] == "Customer"
        assert data["book"]["isbn"] == "ISBN"

    def test_get_loan_not_found(self, client):
        """Test getting a non-existent loan returns 404."""
        response = client.get(f"{LOAN_URI}/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["errors"] == ["Loan 99999 not found!"]


class TestListLoans:
    """Tests for GET /api/loans endpoint."""

    def test_list_loans_page(self, client, sample_loan):
        """Test page metadata for a single match."""
        response = client.get(f"{LOAN_URI}?isbn=ISBN&customer=Customer&page=0&size=12")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["content"]) == 1
        assert data["numberOfElements"] == 1
        assert data["totalElements"] == 1
        assert data["pageable"]["pageSize"] == 12
        assert data["pageable"]["pageNumber"] == 0
        assert data["content"][0]["book"]["id"] == sample_loan.book_id

    def test_list_loans_filters(self, client, db_session):
        """Test ISBN and customer filters narrow the listing."""
        books = [
            Book(title=f"Book {i}", author="Author", isbn=f"ISBN-{i}")
            for i in range(3)
        ]
        db_session.add_all(books)
        db_session.flush()
        db_session.add_all([
            Loan(customer="Alice Martins", loan_date=date.today(), book=books[0]),
            Loan(customer="Bruno Carvalho", loan_date=date.today(), book=books[1]),
            Loan(customer="alice cooper", loan_date=date.today(), book=books[2]),
        ])
        db_session.commit()

        data = client.get(f"{LOAN_URI}?customer=ALICE").json()
        assert data["totalElements"] == 2

        data = client.get(f"{LOAN_URI}?isbn=ISBN-1").json()
        assert data["totalElements"] == 1
        assert data["content"][0]["customer"] == "Bruno Carvalho"

        data = client.get(f"{LOAN_URI}?isbn=ISBN-1&customer=alice").json()
        assert data["totalElements"] == 0
        assert data["empty"] is True

        data = client.get(LOAN_URI).json()
        assert data["totalElements"] == 3

    def test_list_loans_filter_wildcards_are_literal(self, client, db_session):
        """Test that % and _ in the ISBN filter only match themselves."""
        books = [
            Book(title="Book A", author="Author", isbn="978_1"),
            Book(title="Book B", author="Author", isbn="97801"),
        ]
        db_session.add_all(books)
        db_session.flush()
        db_session.add_all([
            Loan(customer="Customer", loan_date=date.today(), book=book)
            for book in books
        ])
        db_session.commit()

        data = client.get(LOAN_URI, params={"isbn": "_"}).json()
        assert data["totalElements"] == 1
        assert data["content"][0]["book"]["isbn"] == "978_1"

        data = client.get(LOAN_URI, params={"isbn": "%"}).json()
        assert data["totalElements"] == 0
