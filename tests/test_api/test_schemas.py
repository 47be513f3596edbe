# tests/test_api/test_schemas.py
import pytest
from sqlalchemy.exc import InvalidRequestError
from api.schemas import AuthorResponse, BookResponse, dump
from core.sa.models import Book

def test_dump_none():
    assert dump(BookResponse, None) is None

def test_dump_author(sample_author):
    assert dump(AuthorResponse, sample_author) == {
        "id": str(sample_author.id),
        "penName": "Ursula K. Le Guin",
        "birthYear": 1929,
    }

def test_author_never_lazy_loaded(book_repo, sample_book, sample_author, first_page):
    """Books listed by author come without their author, and touching it raises"""
    book = book_repo.get_by_author_id(sample_author.id, first_page).items[0]
    with pytest.raises(InvalidRequestError):
        book.author

    assert dump(BookResponse, book) == {
        "id": str(sample_book.id),
        "authorId": str(sample_author.id),
        "name": "The Dispossessed",
        "isbn": "9780061054884",
    }

def test_dump_book_with_loaded_author(book_repo, sample_book, sample_author):
    data = dump(BookResponse, book_repo.get_by_id(sample_book.id))
    assert data["author"] == {"id": str(sample_author.id), "penName": "Ursula K. Le Guin", "birthYear": 1929}

def test_dump_created_book_omits_author(book_repo, sample_author):
    book = book_repo.create(Book(author_id=sample_author.id, name="Lavinia", isbn="9780306406157"))
    assert "author" not in dump(BookResponse, book)
