from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from book_manager.database import get_db
from book_manager.domain import Principal
from book_manager.errors import UnauthenticatedAccessError
from book_manager.repositories.book_repository import BookRepository
from book_manager.repositories.user_repository import UserRepository
from book_manager.services.admin_book_service import AdminBookService
from book_manager.services.book_service import BookService
from book_manager.services.rental_service import RentalService


def get_current_principal(request: Request) -> Principal:
    """由 SecurityMiddleware 写入的会话主体；缺失时走 entry point（401）"""
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise UnauthenticatedAccessError()
    return principal


def get_book_repository(db: AsyncSession = Depends(get_db)) -> BookRepository:
    return BookRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_book_service(
    book_repository: BookRepository = Depends(get_book_repository),
) -> BookService:
    return BookService(book_repository)


def get_admin_book_service(
    book_repository: BookRepository = Depends(get_book_repository),
) -> AdminBookService:
    return AdminBookService(book_repository)


def get_rental_service(
    book_repository: BookRepository = Depends(get_book_repository),
    user_repository: UserRepository = Depends(get_user_repository),
) -> RentalService:
    return RentalService(book_repository, user_repository)
