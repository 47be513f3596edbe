"""create author and book tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('author',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('pen_name', sa.String(length=255), nullable=False),
        sa.Column('birth_year', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_author_deleted_at', 'author', ['deleted_at'])
    # Unique among live rows only
    op.create_index(
        'uq_author_pen_name_active', 'author', ['pen_name'],
        unique=True,
        sqlite_where=sa.text('deleted_at IS NULL'),
        postgresql_where=sa.text('deleted_at IS NULL'),
    )

    op.create_table('book',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('author_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('isbn', sa.String(length=32), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['author_id'], ['author.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_book_author_id', 'book', ['author_id'])
    op.create_index('ix_book_deleted_at', 'book', ['deleted_at'])
    op.create_index(
        'uq_book_isbn_active', 'book', ['isbn'],
        unique=True,
        sqlite_where=sa.text('deleted_at IS NULL'),
        postgresql_where=sa.text('deleted_at IS NULL'),
    )


def downgrade() -> None:
    op.drop_index('uq_book_isbn_active', table_name='book')
    op.drop_index('ix_book_deleted_at', table_name='book')
    op.drop_index('ix_book_author_id', table_name='book')
    op.drop_table('book')
    op.drop_index('uq_author_pen_name_active', table_name='author')
    op.drop_index('ix_author_deleted_at', table_name='author')
    op.drop_table('author')
