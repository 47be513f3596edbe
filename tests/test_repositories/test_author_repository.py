# tests/test_repositories/test_author_repository.py
import uuid
import pytest
from core.errors import DuplicateKeyError
from core.pagination import PaginationRequest
from core.sa.models import Author

def test_create_assigns_id(author_repo):
    """Test creating an author populates id and timestamps"""
    author = author_repo.create(Author(pen_name="N. K. Jemisin", birth_year=1972))
    assert author.id is not None
    assert author.created_at is not None
    assert author.deleted_at is None

def test_get_by_id(author_repo, sample_author):
    fetched = author_repo.get_by_id(sample_author.id)
    assert fetched is not None
    assert fetched.pen_name == sample_author.pen_name
    assert fetched.birth_year == 1929

def test_get_by_nonexistent_id(author_repo):
    assert author_repo.get_by_id(uuid.uuid4()) is None

def test_get_by_pen_name(author_repo, sample_author):
    assert author_repo.get_by_pen_name("Ursula K. Le Guin").id == sample_author.id
    assert author_repo.get_by_pen_name("Nobody") is None

def test_duplicate_pen_name_rejected_by_storage(author_repo, sample_author):
    """A second live author with the same pen name violates the unique index"""
    with pytest.raises(DuplicateKeyError) as exc_info:
        author_repo.create(Author(pen_name=sample_author.pen_name, birth_year=1950))
    assert exc_info.value.details["key"] == "pen_name"

    # The session is still usable after the failed insert
    assert author_repo.get_by_id(sample_author.id) is not None

def test_delete_hides_author(author_repo, sample_author, first_page):
    author_repo.delete(sample_author.id)

    assert author_repo.get_by_id(sample_author.id) is None
    assert author_repo.get_by_pen_name(sample_author.pen_name) is None
    assert author_repo.get_all(first_page).pagination.total_items == 0

def test_delete_is_soft(author_repo, sample_author, db_session):
    """The row stays in storage with deleted_at set"""
    author_repo.delete(sample_author.id)
    row = db_session.get(Author, sample_author.id, populate_existing=True)
    assert row is not None
    assert row.deleted_at is not None

def test_delete_twice_and_missing_is_noop(author_repo, sample_author):
    author_repo.delete(sample_author.id)
    author_repo.delete(sample_author.id)
    author_repo.delete(uuid.uuid4())

def test_pen_name_reusable_after_delete(author_repo, sample_author):
    author_repo.delete(sample_author.id)
    again = author_repo.create(Author(pen_name=sample_author.pen_name, birth_year=1930))
    assert again.id != sample_author.id
    assert author_repo.get_by_pen_name(sample_author.pen_name).id == again.id

def test_update(author_repo, sample_author):
    author_repo.update(sample_author.id, Author(pen_name="U. K. Le Guin", birth_year=1930))
    fetched = author_repo.get_by_id(sample_author.id)
    assert fetched.pen_name == "U. K. Le Guin"
    assert fetched.birth_year == 1930

def test_update_deleted_author_is_noop(author_repo, sample_author, db_session):
    author_repo.delete(sample_author.id)
    author_repo.update(sample_author.id, Author(pen_name="Changed", birth_year=1930))
    row = db_session.get(Author, sample_author.id, populate_existing=True)
    assert row.pen_name == "Ursula K. Le Guin"

def test_get_all_paginates(author_repo):
    created = [author_repo.create(Author(pen_name=f"Author {i}", birth_year=1900 + i)) for i in range(25)]

    page = author_repo.get_all(PaginationRequest(page=3, page_size=10))
    assert len(page.items) == 5
    assert page.pagination.total_items == 25
    assert page.pagination.total_pages == 3
    assert page.pagination.page == 3

    seen = set()
    for number in (1, 2, 3):
        seen.update(a.id for a in author_repo.get_all(PaginationRequest(page=number, page_size=10)).items)
    assert seen == {a.id for a in created}

def test_get_all_beyond_last_page(author_repo, sample_author):
    page = author_repo.get_all(PaginationRequest(page=5, page_size=10))
    assert page.items == []
    assert page.pagination.total_items == 1

def test_explicit_transaction_is_owned_by_caller(author_repo, tx_manager, db_session):
    """With tx given, nothing is committed until the caller commits"""
    with pytest.raises(RuntimeError):
        with tx_manager.transaction() as tx:
            author_repo.create(Author(pen_name="Rolled Back", birth_year=1960), tx=tx)
            raise RuntimeError("abort")

    assert author_repo.get_by_pen_name("Rolled Back") is None

    with tx_manager.transaction() as tx:
        author_repo.create(Author(pen_name="Committed", birth_year=1960), tx=tx)
    assert author_repo.get_by_pen_name("Committed") is not None
