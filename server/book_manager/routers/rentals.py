from fastapi import APIRouter, Depends

from book_manager.domain import Principal
from book_manager.schemas.rental import StartRentalRequest, RentalResponse
from book_manager.services.rental_service import RentalService
from book_manager.utils.deps import get_current_principal, get_rental_service

router = APIRouter(prefix="/rental", tags=["借阅"])


@router.post("/start", response_model=RentalResponse, status_code=201, summary="借出")
async def start_rental(
    body: StartRentalRequest,
    principal: Principal = Depends(get_current_principal),
    service: RentalService = Depends(get_rental_service),
):
    """当前用户借出书籍"""
    rental = await service.start_rental(body.book_id, principal.user_id)
    return RentalResponse.model_validate(rental)


@router.delete("/end/{book_id}", status_code=204, summary="归还")
async def end_rental(
    book_id: int,
    principal: Principal = Depends(get_current_principal),
    service: RentalService = Depends(get_rental_service),
):
    await service.end_rental(book_id, principal.user_id)
