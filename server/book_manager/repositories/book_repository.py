"""书籍数据访问层 —— 书籍与借阅记录的联合查询及写操作"""

import logging
from datetime import date
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from book_manager import domain
from book_manager.errors import BookConflictError, DataIntegrityError, StorageUnavailableError
from book_manager.models.book import Book
from book_manager.models.rental import Rental

logger = logging.getLogger(__name__)

_BOOK_FIELDS = ("id", "title", "author", "release_date")
_RENTAL_FIELDS = ("rental_datetime", "return_deadline")


def _required(row: Any, field: str) -> Any:
    value = getattr(row, field, None)
    if value is None:
        raise DataIntegrityError(f"查询结果缺少必填字段: {field}")
    return value


def to_model(row: Any) -> domain.BookWithRental:
    """将联合查询的一行转换为 BookWithRental；user_id 非空时才构造 Rental"""
    book = domain.Book(*(_required(row, f) for f in _BOOK_FIELDS))

    if getattr(row, "user_id", None) is None:
        return domain.BookWithRental(book=book)

    rental = domain.Rental(
        book.id,
        row.user_id,
        *(_required(row, f) for f in _RENTAL_FIELDS),
    )
    return domain.BookWithRental(book=book, rental=rental)


class BookRepository:

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    def _with_rental_stmt(self):
        return select(
            Book.id,
            Book.title,
            Book.author,
            Book.release_date,
            Rental.user_id,
            Rental.rental_datetime,
            Rental.return_deadline,
        ).outerjoin(Rental, Book.id == Rental.book_id)

    async def _execute(self, stmt):
        try:
            return await self._db.execute(stmt)
        except DBAPIError as e:
            logger.error(f"[书籍查询] 数据库访问失败: {e}")
            raise StorageUnavailableError() from e

    async def _flush(self) -> None:
        try:
            await self._db.flush()
        except IntegrityError as e:
            raise BookConflictError() from e
        except DBAPIError as e:
            logger.error(f"[书籍写入] 数据库访问失败: {e}")
            raise StorageUnavailableError() from e

    # ──────────── 查询 ────────────

    async def find_all_with_rental(self) -> list[domain.BookWithRental]:
        result = await self._execute(self._with_rental_stmt())
        return [to_model(row) for row in result.all()]

    async def find_with_rental(self, book_id: int) -> domain.BookWithRental | None:
        result = await self._execute(
            self._with_rental_stmt().where(Book.id == book_id)
        )
        row = result.one_or_none()
        return to_model(row) if row is not None else None

    async def find_book(self, book_id: int) -> Book | None:
        result = await self._execute(select(Book).where(Book.id == book_id))
        return result.scalar_one_or_none()

    async def find_rental(self, book_id: int) -> domain.Rental | None:
        result = await self._execute(select(Rental).where(Rental.book_id == book_id))
        record = result.scalar_one_or_none()
        if record is None:
            return None
        return domain.Rental(
            record.book_id, record.user_id, record.rental_datetime, record.return_deadline
        )

    # ──────────── 书籍写入 ────────────

    async def register(self, book: domain.Book) -> None:
        self._db.add(Book(
            id=book.id,
            title=book.title,
            author=book.author,
            release_date=book.release_date,
        ))
        await self._flush()

    async def update(
        self,
        book_id: int,
        title: str | None = None,
        author: str | None = None,
        release_date: date | None = None,
    ) -> domain.Book | None:
        """部分更新；书籍不存在时返回 None"""
        record = await self.find_book(book_id)
        if record is None:
            return None
        if title is not None:
            record.title = title
        if author is not None:
            record.author = author
        if release_date is not None:
            record.release_date = release_date
        await self._flush()
        return domain.Book(record.id, record.title, record.author, record.release_date)

    async def delete(self, book_id: int) -> None:
        await self._execute(delete(Book).where(Book.id == book_id))

    # ──────────── 借阅写入 ────────────

    async def start_rental(self, rental: domain.Rental) -> None:
        self._db.add(Rental(
            book_id=rental.book_id,
            user_id=rental.user_id,
            rental_datetime=rental.rental_datetime,
            return_deadline=rental.return_deadline,
        ))
        await self._flush()

    async def end_rental(self, book_id: int) -> None:
        await self._execute(delete(Rental).where(Rental.book_id == book_id))
