from book_manager.domain import BookWithRental
from book_manager.errors import BookNotFoundError
from book_manager.repositories.book_repository import BookRepository


class BookService:

    def __init__(self, book_repository: BookRepository) -> None:
        self.book_repository = book_repository

    async def get_list(self) -> list[BookWithRental]:
        """所有书籍及其当前借阅状态"""
        return await self.book_repository.find_all_with_rental()

    async def get_detail(self, book_id: int) -> BookWithRental:
        book = await self.book_repository.find_with_rental(book_id)
        if book is None:
            raise BookNotFoundError(f"书籍不存在: {book_id}")
        return book
