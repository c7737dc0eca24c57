import logging
from datetime import datetime, timedelta

from book_manager.domain import Rental
from book_manager.errors import (
    BookConflictError,
    BookNotFoundError,
    RentalNotFoundError,
    RentalOwnershipError,
    UnauthenticatedAccessError,
)
from book_manager.repositories.book_repository import BookRepository
from book_manager.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

# 借阅期限（天）
RENTAL_TERM_DAYS = 14


class RentalService:

    def __init__(self, book_repository: BookRepository, user_repository: UserRepository) -> None:
        self.book_repository = book_repository
        self.user_repository = user_repository

    async def start_rental(self, book_id: int, user_id: int) -> Rental:
        """借出书籍，归还期限为借出时刻 + RENTAL_TERM_DAYS"""
        if await self.user_repository.find_by_id(user_id) is None:
            # 会话有效但用户已被删除
            raise UnauthenticatedAccessError(f"用户不存在: {user_id}")

        book = await self.book_repository.find_with_rental(book_id)
        if book is None:
            raise BookNotFoundError(f"书籍不存在: {book_id}")
        if book.is_rental:
            raise BookConflictError(f"书籍借阅中: {book_id}")

        now = datetime.now()
        rental = Rental(
            book_id=book_id,
            user_id=user_id,
            rental_datetime=now,
            return_deadline=now + timedelta(days=RENTAL_TERM_DAYS),
        )
        await self.book_repository.start_rental(rental)
        logger.info(f"[借出] book_id={book_id} user_id={user_id}")
        return rental

    async def end_rental(self, book_id: int, user_id: int) -> None:
        """归还书籍，只能由借阅人本人归还"""
        book = await self.book_repository.find_with_rental(book_id)
        if book is None:
            raise BookNotFoundError(f"书籍不存在: {book_id}")
        if book.rental is None:
            raise RentalNotFoundError(f"该书籍未被借出: {book_id}")
        if book.rental.user_id != user_id:
            raise RentalOwnershipError(f"该书籍由其他用户借阅中: {book_id}")

        await self.book_repository.end_rental(book_id)
        logger.info(f"[归还] book_id={book_id} user_id={user_id}")
