import logging
from datetime import date

from book_manager.domain import Book
from book_manager.errors import BookConflictError, BookNotFoundError
from book_manager.repositories.book_repository import BookRepository

logger = logging.getLogger(__name__)


class AdminBookService:
    """管理员的书籍登记、更新与删除"""

    def __init__(self, book_repository: BookRepository) -> None:
        self.book_repository = book_repository

    async def register(self, book: Book) -> Book:
        if await self.book_repository.find_book(book.id) is not None:
            raise BookConflictError(f"书籍 ID 已存在: {book.id}")
        await self.book_repository.register(book)
        logger.info(f"[书籍登记] book_id={book.id}")
        return book

    async def update(
        self,
        book_id: int,
        title: str | None = None,
        author: str | None = None,
        release_date: date | None = None,
    ) -> Book:
        book = await self.book_repository.update(book_id, title, author, release_date)
        if book is None:
            raise BookNotFoundError(f"书籍不存在: {book_id}")
        logger.info(f"[书籍更新] book_id={book_id}")
        return book

    async def delete(self, book_id: int) -> None:
        """删除书籍；借阅中的书籍不可删除"""
        if await self.book_repository.find_book(book_id) is None:
            raise BookNotFoundError(f"书籍不存在: {book_id}")
        if await self.book_repository.find_rental(book_id) is not None:
            raise BookConflictError(f"书籍借阅中，无法删除: {book_id}")
        await self.book_repository.delete(book_id)
        logger.info(f"[书籍删除] book_id={book_id}")
