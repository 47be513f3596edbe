# core/sa/models/book.py
import uuid
from sqlalchemy import String, ForeignKey, Index, Uuid, text
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin
from .author import Author

class Book(Base, UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = 'book'

    author_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey('author.id'), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(32), nullable=False)

    # Read-only link to the author. Only available when a query asks for it
    # with joinedload, and never resolves to a deleted author.
    author: Mapped[Author | None] = relationship(
        'Author',
        primaryjoin='and_(Book.author_id == Author.id, Author.deleted_at.is_(None))',
        viewonly=True,
        lazy='raise',
    )

    __table_args__ = (
        Index(
            'uq_book_isbn_active', 'isbn',
            unique=True,
            sqlite_where=text('deleted_at IS NULL'),
            postgresql_where=text('deleted_at IS NULL'),
        ),
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} isbn={self.isbn!r}>"
