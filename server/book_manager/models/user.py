from sqlalchemy import Integer, String, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from book_manager.database import Base
from book_manager.domain import RoleType


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(256), unique=True, nullable=False, index=True)
    password: Mapped[str] = mapped_column(String(128), nullable=False)
    name: Mapped[str] = mapped_column(String(32), nullable=False)
    role_type: Mapped[RoleType] = mapped_column(
        SAEnum(RoleType, name="role_type"), nullable=False, default=RoleType.USER
    )
