from datetime import date

from sqlalchemy import Integer, String, Date
from sqlalchemy.orm import Mapped, mapped_column

from book_manager.database import Base


class Book(Base):
    __tablename__ = "books"

    # 书籍 ID 由管理员登记时指定
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(String(128), nullable=False)
    author: Mapped[str] = mapped_column(String(32), nullable=False)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
