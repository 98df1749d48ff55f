"""initial_schema

Creates authors, genres, books and book_reviews with their delete rules:
books.author_id CASCADE, books.genre_id RESTRICT, book_reviews.book_id CASCADE.

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'authors',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False, comment="Author's first name"),
        sa.Column('last_name', sa.String(length=100), nullable=False, comment="Author's last name"),
        sa.Column('email', sa.String(length=200), nullable=True, comment='Contact email'),
        sa.Column('date_of_birth', sa.Date(), nullable=True, comment="Author's date of birth"),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_authors_last_name'), 'authors', ['last_name'], unique=False)

    op.create_table(
        'genres',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False, comment="Genre name (e.g., 'Science Fiction', 'Dystopia')"),
        sa.Column('description', sa.String(length=500), nullable=True, comment='Description of what this genre encompasses'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_genres_name'), 'genres', ['name'], unique=False)

    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False, comment='Book title'),
        sa.Column('isbn', sa.String(length=20), nullable=True, comment='International Standard Book Number'),
        sa.Column('published_date', sa.Date(), nullable=True, comment='Date of publication'),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False, comment='Book price'),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('genre_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['author_id'], ['authors.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['genre_id'], ['genres.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)
    op.create_index(op.f('ix_books_author_id'), 'books', ['author_id'], unique=False)
    op.create_index(op.f('ix_books_genre_id'), 'books', ['genre_id'], unique=False)

    op.create_table(
        'book_reviews',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('reviewer_name', sa.String(length=100), nullable=False, comment='Name of the reviewer'),
        sa.Column('rating', sa.Integer(), nullable=False, comment='Rating from 1-5 stars'),
        sa.Column('comment', sa.String(length=1000), nullable=True, comment='Review text'),
        sa.Column('review_date', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='ck_book_review_rating_range'),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_book_reviews_id'), 'book_reviews', ['id'], unique=False)
    op.create_index(op.f('ix_book_reviews_book_id'), 'book_reviews', ['book_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_book_reviews_book_id'), table_name='book_reviews')
    op.drop_index(op.f('ix_book_reviews_id'), table_name='book_reviews')
    op.drop_table('book_reviews')
    op.drop_index(op.f('ix_books_genre_id'), table_name='books')
    op.drop_index(op.f('ix_books_author_id'), table_name='books')
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
    op.drop_index(op.f('ix_genres_name'), table_name='genres')
    op.drop_table('genres')
    op.drop_index(op.f('ix_authors_last_name'), table_name='authors')
    op.drop_table('authors')
