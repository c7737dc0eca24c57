from datetime import datetime

from book_manager.schemas.base import CamelModel


class StartRentalRequest(CamelModel):
    book_id: int


class RentalResponse(CamelModel):
    book_id: int
    user_id: int
    rental_datetime: datetime
    return_deadline: datetime
