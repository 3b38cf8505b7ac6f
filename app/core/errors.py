import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class CartItemNotFound(Exception):
    """
    Raised by the service when no cart item has the requested id.

    `message` is sent to the client as a plain text 404 body.
    """

    def __init__(self, item_id: str, message: str):
        super().__init__(message)
        self.item_id = item_id
        self.message = message


async def cart_item_not_found_handler(request: Request, exc: CartItemNotFound):
    return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)


async def bad_request_handler(request: Request, exc: RequestValidationError):
    """
    Malformed payloads are a client error (400), not 422.
    """
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CartItemNotFound, cart_item_not_found_handler)
    app.add_exception_handler(RequestValidationError, bad_request_handler)
