from datetime import date, datetime

from pydantic import Field

from book_manager.domain import Book, BookWithRental
from book_manager.schemas.base import CamelModel


# ---- 请求 ----

class RegisterBookRequest(CamelModel):
    id: int
    title: str = Field(..., min_length=1, max_length=128)
    author: str = Field(..., min_length=1, max_length=32)
    release_date: date

    def to_domain(self) -> Book:
        return Book(self.id, self.title, self.author, self.release_date)


class UpdateBookRequest(CamelModel):
    id: int
    title: str | None = Field(None, min_length=1, max_length=128)
    author: str | None = Field(None, min_length=1, max_length=32)
    release_date: date | None = None


# ---- 响应 ----

class RentalInfoResponse(CamelModel):
    user_id: int
    rental_datetime: datetime
    return_deadline: datetime


class BookResponse(CamelModel):
    id: int
    title: str
    author: str
    release_date: date


class BookWithRentalResponse(CamelModel):
    id: int
    title: str
    author: str
    release_date: date
    rental: RentalInfoResponse | None = None

    @classmethod
    def from_domain(cls, item: BookWithRental) -> "BookWithRentalResponse":
        rental = RentalInfoResponse.model_validate(item.rental) if item.rental else None
        return cls(
            id=item.book.id,
            title=item.book.title,
            author=item.book.author,
            release_date=item.book.release_date,
            rental=rental,
        )
