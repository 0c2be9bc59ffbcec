"""Data layer tests.

Covers:
- Book and BookCategory entities (defaults, equality, soft-delete marker)
- Table/entity conversion through the repositories
- Repository reads hiding soft-deleted rows, writes addressing every row
"""

import pytest
from sqlmodel import Session, select

from src.bookstore.entities.service.book import Book, BookRepository, BookTable
from src.bookstore.entities.service.book_category import (
    BookCategory,
    BookCategoryRepository,
    BookCategoryTable,
)


class TestBookCategoryEntity:
    """Test BookCategory domain entity."""

    def test_category_creation(self):
        category = BookCategory(name="Poetry")

        assert category.name == "Poetry"
        assert category.id is not None  # Auto-generated
        assert category.created_at is not None
        assert category.deleted_at is None
        assert not category.is_deleted

    def test_category_equality_ignores_timestamps(self):
        category = BookCategory(name="Poetry")
        copy = category.model_copy(update={"updated_at": category.updated_at.replace(year=2000)})

        assert category == copy
        assert hash(category) == hash(copy)
        assert category != BookCategory(id=category.id, name="Drama")


class TestBookEntity:
    """Test Book domain entity."""

    def test_book_creation_defaults(self):
        book = Book(title="Dune", author="Frank Herbert", main_category_id="cat-1")

        assert book.image is None
        assert book.final_price is None
        assert book.sub_category_id is None
        assert book.main_category is None
        assert book.sub_category is None
        assert not book.is_deleted

    def test_book_equality_ignores_loaded_categories(self):
        book = Book(title="Dune", author="Frank Herbert", main_category_id="cat-1")
        with_category = book.model_copy(
            update={"main_category": BookCategory(id="cat-1", name="Fiction")}
        )

        assert book == with_category
        assert len({book, with_category}) == 1

    def test_book_inequality_on_business_fields(self):
        book = Book(title="Dune", author="Frank Herbert", main_category_id="cat-1")

        assert book != book.model_copy(update={"final_price": 12.5})
        assert book != book.model_copy(update={"title": "Dune Messiah"})
        assert book != "not a book"


class TestBookCategoryRepository:
    """Repository operations against in-memory SQLite."""

    def test_create_and_get(self, session: Session):
        repo = BookCategoryRepository(session)

        created = repo.create(BookCategory(name="History"))
        session.commit()

        fetched = repo.get(created.id)
        assert fetched == created

        row = session.exec(select(BookCategoryTable).where(BookCategoryTable.id == created.id)).one()
        assert row.name == "History"

    def test_get_hides_soft_deleted(self, session: Session):
        repo = BookCategoryRepository(session)
        category = repo.create(BookCategory(name="History"))
        repo.soft_delete(category.id)
        session.commit()

        assert repo.get(category.id) is None
        hidden = repo.get(category.id, include_deleted=True)
        assert hidden is not None
        assert hidden.is_deleted

    def test_exists_ignores_soft_delete(self, session: Session):
        repo = BookCategoryRepository(session)
        category = repo.create(BookCategory(name="History"))
        repo.soft_delete(category.id)
        session.commit()

        assert repo.exists(category.id)
        assert not repo.exists("missing")

    def test_list_active_sorted_by_name(self, session: Session):
        repo = BookCategoryRepository(session)
        for name in ("Travel", "Art", "Music"):
            repo.create(BookCategory(name=name))
        gone = repo.create(BookCategory(name="Biography"))
        repo.soft_delete(gone.id)
        session.commit()

        assert [c.name for c in repo.list_active()] == ["Art", "Music", "Travel"]

    def test_update_applies_changes(self, session: Session):
        repo = BookCategoryRepository(session)
        category = repo.create(BookCategory(name="Histroy"))
        session.commit()

        updated = repo.update(category.id, {"name": "History"})
        session.commit()

        assert updated.name == "History"
        assert repo.get(category.id).name == "History"

    def test_update_missing_raises(self, session: Session):
        repo = BookCategoryRepository(session)

        with pytest.raises(ValueError):
            repo.update("missing", {"name": "x"})

    def test_delete_removes_row(self, session: Session):
        repo = BookCategoryRepository(session)
        category = repo.create(BookCategory(name="History"))
        session.commit()

        deleted = repo.delete(category.id)
        session.commit()

        assert deleted.id == category.id
        assert not repo.exists(category.id)


class TestBookRepository:
    """Repository operations against in-memory SQLite."""

    def test_create_persists_row(self, session: Session, main_category: BookCategory):
        repo = BookRepository(session)

        book = repo.create(
            Book(title="Dune", author="Frank Herbert", final_price=9.99, main_category_id=main_category.id)
        )
        session.commit()

        row = session.get(BookTable, book.id)
        assert row is not None
        assert row.title == "Dune"
        assert row.final_price == 9.99
        assert row.deleted_at is None

    def test_get_loads_both_categories(
        self, session: Session, book_factory, main_category: BookCategory, sub_category: BookCategory
    ):
        book = book_factory(sub_category_id=sub_category.id)

        fetched = BookRepository(session).get(book.id)

        assert fetched == book
        assert fetched.main_category == main_category
        assert fetched.sub_category == sub_category

    def test_get_without_sub_category(self, session: Session, book_factory):
        book = book_factory()

        fetched = BookRepository(session).get(book.id)

        assert fetched.main_category is not None
        assert fetched.sub_category is None

    def test_get_hides_soft_deleted(self, session: Session, book_factory):
        repo = BookRepository(session)
        book = book_factory()
        repo.soft_delete(book.id)
        session.commit()

        assert repo.get(book.id) is None
        assert session.get(BookTable, book.id) is not None

    def test_list_page_skips_and_takes(self, session: Session, book_factory):
        for title in ("A", "B", "C", "D", "E"):
            book_factory(title=title)

        page = BookRepository(session).list_page(skip=2, take=2, order_by=BookTable.title.asc())

        assert [b.title for b in page] == ["C", "D"]
        assert all(b.main_category is not None for b in page)
        assert all(b.sub_category is None for b in page)

    def test_list_page_filters_category(
        self, session: Session, book_factory, sub_category: BookCategory
    ):
        book_factory(title="In main")
        other = book_factory(title="In other", main_category_id=sub_category.id)

        page = BookRepository(session).list_page(skip=0, take=10, category_id=sub_category.id)

        assert page == [other]

    def test_count_only_active(self, session: Session, book_factory):
        repo = BookRepository(session)
        book_factory(title="A")
        book_factory(title="B")
        gone = book_factory(title="C")
        repo.soft_delete(gone.id)
        session.commit()

        assert repo.count() == 2

    def test_soft_delete_stamps_deleted_at(self, session: Session, book_factory):
        book = book_factory()

        deleted = BookRepository(session).soft_delete(book.id)
        session.commit()

        assert deleted.is_deleted
        assert session.get(BookTable, book.id).deleted_at is not None

    def test_writes_reach_soft_deleted_rows(self, session: Session, book_factory):
        repo = BookRepository(session)
        book = book_factory()
        repo.soft_delete(book.id)
        session.commit()

        updated = repo.update(book.id, {"title": "Still here"})
        session.commit()
        assert updated.title == "Still here"

        repo.delete(book.id)
        session.commit()
        assert session.get(BookTable, book.id) is None

    def test_delete_missing_raises(self, session: Session):
        with pytest.raises(ValueError):
            BookRepository(session).delete("missing")
