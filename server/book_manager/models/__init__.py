from book_manager.models.user import User
from book_manager.models.book import Book
from book_manager.models.rental import Rental

__all__ = [
    "User",
    "Book",
    "Rental",
]
