# api/dependencies.py
"""FastAPI dependencies wiring repositories and services per request.

The database (engine + pool) is built once by ``create_app`` and kept on
``app.state``; everything below it lives for a single request.
"""
from typing import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from core.config import Settings
from core.sa.database import Database, TransactionManager, get_db
from core.sa.repositories import AuthorRepository, BookRepository, IAuthorRepository, IBookRepository
from core.services import AuthorService, BookService, IAuthorService, IBookService
from core.validator import Validator


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session(database: Database = Depends(get_database)) -> Iterator[Session]:
    yield from get_db(database)


def get_tx_manager(session: Session = Depends(get_session)) -> TransactionManager:
    return TransactionManager(session)


def get_author_repository(tx_manager: TransactionManager = Depends(get_tx_manager)) -> IAuthorRepository:
    return AuthorRepository(tx_manager)


def get_book_repository(tx_manager: TransactionManager = Depends(get_tx_manager)) -> IBookRepository:
    return BookRepository(tx_manager)


def get_author_service(repo: IAuthorRepository = Depends(get_author_repository)) -> IAuthorService:
    return AuthorService(repo)


def get_book_service(
    repo: IBookRepository = Depends(get_book_repository),
    author_service: IAuthorService = Depends(get_author_service),
) -> IBookService:
    return BookService(repo, author_service)


def get_validator() -> Validator:
    return Validator()
