# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from core.pagination import PaginationRequest
from core.sa.database import Database, TransactionManager
from core.sa.models import Author, Book
from core.sa.repositories import AuthorRepository, BookRepository

@pytest.fixture
def database():
    """Fresh in-memory database with the schema created"""
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.drop_db()
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def tx_manager(db_session):
    return TransactionManager(db_session)

@pytest.fixture
def author_repo(tx_manager):
    return AuthorRepository(tx_manager)

@pytest.fixture
def book_repo(tx_manager):
    return BookRepository(tx_manager)

@pytest.fixture
def first_page():
    return PaginationRequest(page=1, page_size=10)

@pytest.fixture
def sample_author(db_session):
    """Create a sample author for testing."""
    author = Author(pen_name="Ursula K. Le Guin", birth_year=1929)
    db_session.add(author)
    db_session.commit()
    return author

@pytest.fixture
def sample_book(db_session, sample_author):
    """Create a sample book written by sample_author."""
    book = Book(author_id=sample_author.id, name="The Dispossessed", isbn="9780061054884")
    db_session.add(book)
    db_session.commit()
    return book
