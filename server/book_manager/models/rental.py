from datetime import datetime

from sqlalchemy import Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from book_manager.database import Base


class Rental(Base):
    """借阅中的记录，归还时删除；book_id 为主键，同一本书最多一条"""

    __tablename__ = "rentals"

    book_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("books.id"), primary_key=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True
    )
    rental_datetime: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    return_deadline: Mapped[datetime] = mapped_column(DateTime, nullable=False)
