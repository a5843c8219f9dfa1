# app/api/errors.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.domain.exceptions import (
    CartError,
    CartItemNotFound,
    CartPersistenceError,
    ProductNotFound,
    StockError,
)
from app.domain.schemas import ErrorOut
from app.utils.logging import get_logger

logger = get_logger(__name__)

# kolejnosc ma znaczenie, pierwsze dopasowanie wygrywa
STATUS_BY_ERROR = (
    (StockError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ProductNotFound, status.HTTP_404_NOT_FOUND),
    (CartItemNotFound, status.HTTP_404_NOT_FOUND),
    (CartPersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_for(exc: CartError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def cart_error_handler(request: Request, exc: CartError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info(
        f"{type(exc).__name__}: {exc.message}",
        extra={"path": request.url.path, "status_code": status_code},
    )
    return JSONResponse(
        status_code=status_code,
        content=ErrorOut(message=exc.message).model_dump(),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CartError, cart_error_handler)
