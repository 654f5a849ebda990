"""create_books_table

Revision ID: 3f1c9a27d4e8
Revises:
Create Date: 2025-10-15 14:22:29.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a27d4e8'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False, comment='Book title'),
        sa.Column('author', sa.String(length=100), nullable=False, comment='Author name'),
        sa.Column(
            'isbn',
            sa.String(length=13),
            nullable=False,
            comment='International Standard Book Number'
        ),
        sa.Column('published_date', sa.Date(), nullable=False, comment='Date of publication'),
        sa.Column(
            'genre',
            sa.String(length=50),
            nullable=True,
            comment="Genre label, e.g. 'Classic Literature'"
        ),
        sa.Column(
            'description',
            sa.String(length=1000),
            nullable=True,
            comment='Book description or summary'
        ),
        sa.Column(
            'total_copies',
            sa.Integer(),
            nullable=False,
            server_default='1',
            comment='Number of copies owned by the library'
        ),
        sa.Column(
            'available_copies',
            sa.Integer(),
            nullable=False,
            server_default='1',
            comment='Number of copies currently on the shelf'
        ),
        sa.Column(
            'is_available',
            sa.Boolean(),
            nullable=False,
            server_default=sa.true(),
            comment='Whether the book can currently be lent'
        ),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)
    op.create_index(op.f('ix_books_author'), 'books', ['author'], unique=False)
    op.create_index(op.f('ix_books_isbn'), 'books', ['isbn'], unique=True)


def downgrade() -> None:
    op.drop_index(op.f('ix_books_isbn'), table_name='books')
    op.drop_index(op.f('ix_books_author'), table_name='books')
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
