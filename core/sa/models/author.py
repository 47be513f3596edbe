# core/sa/models/author.py
from sqlalchemy import Integer, String, Index, text
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin

class Author(Base, UUIDPrimaryKeyMixin, TimestampMixin, SoftDeleteMixin):
    __tablename__ = 'author'

    pen_name: Mapped[str] = mapped_column(String(255), nullable=False)
    birth_year: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        # Pen names are unique among live authors only, so a deleted
        # author's pen name can be taken again
        Index(
            'uq_author_pen_name_active', 'pen_name',
            unique=True,
            sqlite_where=text('deleted_at IS NULL'),
            postgresql_where=text('deleted_at IS NULL'),
        ),
    )

    def __repr__(self) -> str:
        return f"<Author id={self.id} pen_name={self.pen_name!r}>"
