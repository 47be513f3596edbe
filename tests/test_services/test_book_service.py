# tests/test_services/test_book_service.py
import uuid
import pytest
from unittest.mock import Mock
from sqlalchemy.exc import OperationalError
from core.codes import Code
from core.errors import DuplicateKeyError
from core.models import CreateAuthorRequest, CreateBookRequest, UpdateBookRequest
from core.pagination import PaginatedData, PaginationRequest
from core.sa.models import Author, Book
from core.sa.repositories import IBookRepository
from core.services import AuthorService, BookService, IAuthorService

ISBN = "9780306406157"

def db_error():
    return OperationalError("SELECT 1", {}, Exception("connection lost"))

@pytest.fixture
def repo():
    return Mock(spec=IBookRepository)

@pytest.fixture
def author_service():
    return Mock(spec=IAuthorService)

@pytest.fixture
def service(repo, author_service):
    return BookService(repo, author_service)

@pytest.fixture
def author():
    return Author(id=uuid.uuid4(), pen_name="Ted Chiang", birth_year=1967)

def test_create(service, repo, author_service, author):
    author_service.get_author_by_id.return_value = (author, Code.SUCCESS)
    repo.get_by_isbn.return_value = None
    repo.create.side_effect = lambda book: book

    book, code = service.create_book(CreateBookRequest(author_id=author.id, name="Exhalation", isbn=ISBN))

    assert code == Code.SUCCESS
    assert book.author_id == author.id
    assert book.isbn == ISBN

def test_create_unknown_author(service, repo, author_service):
    author_service.get_author_by_id.return_value = (None, Code.SUCCESS)

    book, code = service.create_book(CreateBookRequest(author_id=uuid.uuid4(), name="Exhalation", isbn=ISBN))

    assert (book, code) == (None, Code.AUTHOR_NOT_FOUND)
    repo.get_by_isbn.assert_not_called()
    repo.create.assert_not_called()

def test_create_author_lookup_failure_propagates_code(service, repo, author_service):
    author_service.get_author_by_id.return_value = (None, Code.INTERNAL_ERROR)

    book, code = service.create_book(CreateBookRequest(author_id=uuid.uuid4(), name="Exhalation", isbn=ISBN))

    assert code == Code.INTERNAL_ERROR
    repo.create.assert_not_called()

def test_create_existing_isbn(service, repo, author_service, author):
    author_service.get_author_by_id.return_value = (author, Code.SUCCESS)
    repo.get_by_isbn.return_value = Book(author_id=author.id, name="Stories", isbn=ISBN)

    book, code = service.create_book(CreateBookRequest(author_id=author.id, name="Exhalation", isbn=ISBN))

    assert (book, code) == (None, Code.BOOK_ALREADY_EXISTS)
    repo.create.assert_not_called()

def test_create_lost_race(service, repo, author_service, author):
    author_service.get_author_by_id.return_value = (author, Code.SUCCESS)
    repo.get_by_isbn.return_value = None
    repo.create.side_effect = DuplicateKeyError("book", "isbn", ISBN)

    _, code = service.create_book(CreateBookRequest(author_id=author.id, name="Exhalation", isbn=ISBN))

    assert code == Code.BOOK_ALREADY_EXISTS

def test_create_storage_failure(service, repo, author_service, author):
    author_service.get_author_by_id.return_value = (author, Code.SUCCESS)
    repo.get_by_isbn.side_effect = db_error()

    assert service.create_book(CreateBookRequest(author_id=author.id, name="Exhalation", isbn=ISBN)) == (None, Code.INTERNAL_ERROR)

def test_get_missing_is_not_found(service, repo):
    repo.get_by_id.return_value = None
    assert service.get_book_by_id(uuid.uuid4()) == (None, Code.BOOK_NOT_FOUND)

def test_get_storage_failure(service, repo):
    repo.get_by_id.side_effect = db_error()
    assert service.get_book_by_id(uuid.uuid4()) == (None, Code.INTERNAL_ERROR)

def test_get_books_by_author_does_not_check_author(service, repo, author_service):
    pagination = PaginationRequest(page=1, page_size=10)
    page = PaginatedData.build([], pagination, 0)
    repo.get_by_author_id.return_value = page

    assert service.get_books_by_author_id(uuid.uuid4(), pagination) == (page, Code.SUCCESS)
    author_service.get_author_by_id.assert_not_called()

def test_get_all_storage_failure(service, repo):
    repo.get_all.side_effect = db_error()
    assert service.get_all_books(PaginationRequest()) == (None, Code.INTERNAL_ERROR)

def test_update_missing_book_checked_first(service, repo, author_service):
    repo.get_by_id.return_value = None

    code = service.update_book(uuid.uuid4(), UpdateBookRequest(author_id=uuid.uuid4(), name="X", isbn=ISBN))

    assert code == Code.BOOK_NOT_FOUND
    author_service.get_author_by_id.assert_not_called()

def test_update_unknown_author(service, repo, author_service, author):
    repo.get_by_id.return_value = Book(author_id=author.id, name="Exhalation", isbn=ISBN)
    author_service.get_author_by_id.return_value = (None, Code.SUCCESS)

    code = service.update_book(uuid.uuid4(), UpdateBookRequest(author_id=uuid.uuid4(), name="X", isbn=ISBN))

    assert code == Code.AUTHOR_NOT_FOUND
    repo.update.assert_not_called()

def test_update(service, repo, author_service, author):
    id = uuid.uuid4()
    repo.get_by_id.return_value = Book(id=id, author_id=author.id, name="Exhalation", isbn=ISBN)
    author_service.get_author_by_id.return_value = (author, Code.SUCCESS)

    code = service.update_book(id, UpdateBookRequest(author_id=author.id, name="Stories of Your Life", isbn="0306406152"))

    assert code == Code.SUCCESS
    updated_id, values = repo.update.call_args.args
    assert updated_id == id
    assert (values.name, values.isbn) == ("Stories of Your Life", "0306406152")

def test_delete_is_unconditional(service, repo):
    assert service.delete_book(uuid.uuid4()) == Code.SUCCESS
    repo.get_by_id.assert_not_called()

def test_delete_storage_failure(service, repo):
    repo.delete.side_effect = db_error()
    assert service.delete_book(uuid.uuid4()) == Code.INTERNAL_ERROR


# Against real repositories

@pytest.fixture
def real_service(author_repo, book_repo):
    return BookService(book_repo, AuthorService(author_repo))

def test_create_then_get_round_trip(real_service, sample_author):
    created, code = real_service.create_book(CreateBookRequest(author_id=sample_author.id, name="The Word for World Is Forest", isbn=ISBN))
    assert code == Code.SUCCESS

    fetched, code = real_service.get_book_by_id(created.id)
    assert code == Code.SUCCESS
    assert (fetched.name, fetched.isbn, fetched.author_id) == ("The Word for World Is Forest", ISBN, sample_author.id)
    assert fetched.author.pen_name == sample_author.pen_name

def test_update_with_unknown_author_leaves_book_unchanged(real_service, sample_book):
    code = real_service.update_book(sample_book.id, UpdateBookRequest(author_id=uuid.uuid4(), name="Changed", isbn=ISBN))
    assert code == Code.AUTHOR_NOT_FOUND

    fetched, _ = real_service.get_book_by_id(sample_book.id)
    assert fetched.name == "The Dispossessed"
    assert fetched.isbn == "9780061054884"

def test_book_for_deleted_author_rejected(real_service, author_repo, sample_author):
    author_repo.delete(sample_author.id)
    _, code = real_service.create_book(CreateBookRequest(author_id=sample_author.id, name="Late", isbn=ISBN))
    assert code == Code.AUTHOR_NOT_FOUND

def test_delete_twice_is_success(real_service, sample_book):
    assert real_service.delete_book(sample_book.id) == Code.SUCCESS
    assert real_service.delete_book(sample_book.id) == Code.SUCCESS
    assert real_service.get_book_by_id(sample_book.id) == (None, Code.BOOK_NOT_FOUND)

def test_recreate_after_delete(real_service, sample_book, sample_author):
    real_service.delete_book(sample_book.id)
    book, code = real_service.create_book(CreateBookRequest(author_id=sample_author.id, name="Reissue", isbn=sample_book.isbn))
    assert code == Code.SUCCESS
    assert book.id != sample_book.id

def test_author_pen_name_reusable(author_repo):
    service = AuthorService(author_repo)
    author, _ = service.create_author(CreateAuthorRequest(pen_name="Cordwainer Smith", birth_year=1913))
    _, code = service.create_author(CreateAuthorRequest(pen_name="Cordwainer Smith", birth_year=1913))
    assert code == Code.AUTHOR_ALREADY_EXISTS

    service.delete_author(author.id)
    _, code = service.create_author(CreateAuthorRequest(pen_name="Cordwainer Smith", birth_year=1913))
    assert code == Code.SUCCESS
