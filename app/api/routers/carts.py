#app/api/routers/carts.py
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.cart_data import CartData
from app.domain.schemas import ErrorOut, ItemIn, ItemUpdateIn
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])

ERROR_RESPONSES = {
    404: {"model": ErrorOut},
    422: {"model": ErrorOut},
    503: {"model": ErrorOut},
}


def get_service(db: Session = Depends(get_db)) -> CartService:
    return CartService(db=db)


@router.get("", response_model=CartData, responses=ERROR_RESPONSES)
def get_cart(
    user_id: UUID = Query(...),
    svc: CartService = Depends(get_service),
):
    return svc.get_cart(user_id)


@router.post("/items", response_model=CartData, responses=ERROR_RESPONSES)
def add_item(
    payload: ItemIn,
    user_id: UUID = Query(...),
    svc: CartService = Depends(get_service),
):
    return svc.add_to_cart(
        user_id=user_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.put("/items", response_model=CartData, responses=ERROR_RESPONSES)
def update_item(
    payload: ItemUpdateIn,
    user_id: UUID = Query(...),
    svc: CartService = Depends(get_service),
):
    return svc.update_cart_item(
        user_id=user_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.delete("/items/{product_id}", response_model=CartData, responses=ERROR_RESPONSES)
def remove_item(
    product_id: UUID,
    user_id: UUID = Query(...),
    svc: CartService = Depends(get_service),
):
    return svc.remove_from_cart(user_id, product_id)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, responses=ERROR_RESPONSES)
def clear_cart(
    user_id: UUID = Query(...),
    svc: CartService = Depends(get_service),
):
    svc.clear_cart(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
