"""create books and loans tables

Revision ID: 3f1c2a9d8e47
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d8e47'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False, comment='Book title'),
        sa.Column('author', sa.String(length=255), nullable=False, comment='Author name'),
        sa.Column('isbn', sa.String(length=50), nullable=False, comment='International Standard Book Number'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)
    op.create_index(op.f('ix_books_author'), 'books', ['author'], unique=False)
    op.create_index(op.f('ix_books_isbn'), 'books', ['isbn'], unique=True)

    op.create_table('loans',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('customer', sa.String(length=255), nullable=False, comment='Customer name'),
        sa.Column('loan_date', sa.Date(), nullable=False, comment='Day the book was lent'),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('returned', sa.Boolean(), nullable=False, comment='Whether the book has been returned'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_loans_customer'), 'loans', ['customer'], unique=False)
    op.create_index(op.f('ix_loans_book_id'), 'loans', ['book_id'], unique=False)
    op.create_index(
        'ix_loans_active_book',
        'loans',
        ['book_id'],
        unique=True,
        postgresql_where=sa.text('NOT returned'),
        sqlite_where=sa.text('returned = 0'),
    )


def downgrade() -> None:
    op.drop_index('ix_loans_active_book', table_name='loans')
    op.drop_index(op.f('ix_loans_book_id'), table_name='loans')
    op.drop_index(op.f('ix_loans_customer'), table_name='loans')
    op.drop_table('loans')
    op.drop_index(op.f('ix_books_isbn'), table_name='books')
    op.drop_index(op.f('ix_books_author'), table_name='books')
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
