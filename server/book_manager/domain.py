"""领域值对象 —— 与 ORM 表结构解耦的只读模型"""

import enum
from dataclasses import dataclass
from datetime import date, datetime


class RoleType(str, enum.Enum):
    ADMIN = "ADMIN"
    USER = "USER"


@dataclass(frozen=True)
class Book:
    id: int
    title: str
    author: str
    release_date: date


@dataclass(frozen=True)
class Rental:
    book_id: int
    user_id: int
    rental_datetime: datetime
    return_deadline: datetime


@dataclass(frozen=True)
class BookWithRental:
    """书籍 + 当前借阅（未借出时 rental 为 None）"""

    book: Book
    rental: Rental | None = None

    @property
    def is_rental(self) -> bool:
        return self.rental is not None


@dataclass(frozen=True)
class Principal:
    """已认证的会话主体"""

    user_id: int
    role: RoleType
