from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from returns.result import Success

from orders_api.core.domain.model.errors import (
    CustomerNotFound,
    InsufficientStock,
    NoProductsFound,
    OrderError,
    OrderNotFound,
    PersistenceError,
    ProductNotFound,
    ValidationError,
)
from orders_api.core.domain.model.order import Order
from orders_api.core.domain.service.get_order_service import to_order_view
from orders_api.core.ports.inbound.create_order import (
    CreateOrderCommand,
    CreateOrderLine,
    CreateOrderUseCase,
)
from orders_api.core.ports.inbound.get_order import (
    GetOrderQuery,
    GetOrderUseCase,
    OrderView,
)

log = logging.getLogger(__name__)

# ---- HTTP DTOs (adapter layer) ---------------------------------------------


class CreateOrderLineIn(BaseModel):
    product_id: str = Field(min_length=1, examples=["p-1"])
    quantity: int = Field(gt=0, examples=[2])


class CreateOrderRequest(BaseModel):
    customer_id: str = Field(min_length=1, examples=["c-1"])
    products: list[CreateOrderLineIn]


class OrderLineOut(BaseModel):
    product_id: str
    unit_price: str
    quantity: int
    subtotal: str


class MoneyOut(BaseModel):
    amount: str
    currency: str


class OrderDetailsResponse(BaseModel):
    order_id: str
    customer_id: str
    total: str | None
    currency: str | None
    totals: list[MoneyOut]
    created_at: str
    lines: list[OrderLineOut]


class ErrorResponse(BaseModel):
    type: str
    message: str
    details: list[dict[str, Any]] | None = None


def _map_error_to_http(err: OrderError) -> tuple[int, ErrorResponse]:
    name = type(err).__name__

    if isinstance(err, ValidationError):
        return 400, ErrorResponse(type=name, message=str(err))

    if isinstance(err, CustomerNotFound):
        return 404, ErrorResponse(
            type=name, message=str(err), details=[{"customer_id": err.customer_id}]
        )

    if isinstance(err, NoProductsFound):
        return 404, ErrorResponse(type=name, message=str(err))

    if isinstance(err, ProductNotFound):
        return 404, ErrorResponse(
            type=name, message=str(err), details=[{"product_id": err.product_id}]
        )

    if isinstance(err, InsufficientStock):
        return 409, ErrorResponse(
            type=name,
            message=str(err),
            details=[{"product_id": err.product_id, "quantity": err.quantity}],
        )

    if isinstance(err, OrderNotFound):
        return 404, ErrorResponse(
            type=name, message=str(err), details=[{"order_id": err.order_id}]
        )

    if isinstance(err, PersistenceError):
        return 500, ErrorResponse(type=name, message=str(err))

    return 500, ErrorResponse(type=name, message=str(err))


def _error_response(err: OrderError) -> JSONResponse:
    status, body = _map_error_to_http(err)
    return JSONResponse(status_code=status, content=body.model_dump(exclude_none=True))


def _to_details(view: OrderView) -> OrderDetailsResponse:
    return OrderDetailsResponse(
        order_id=str(view.order_id.value),
        customer_id=view.customer_id.value,
        total=str(view.total.amount) if view.total is not None else None,
        currency=view.total.currency if view.total is not None else None,
        totals=[MoneyOut(amount=str(m.amount), currency=m.currency) for m in view.totals],
        created_at=view.created_at.isoformat(),
        lines=[
            OrderLineOut(
                product_id=ln.product_id,
                unit_price=str(ln.unit_price.amount),
                quantity=ln.quantity,
                subtotal=str(ln.subtotal.amount),
            )
            for ln in view.lines
        ],
    )


def create_app(
    create_order_uc: CreateOrderUseCase,
    get_order_uc: GetOrderUseCase,
) -> FastAPI:
    app = FastAPI(title="orders_api")

    # --- exception handlers -------------------------------------------------

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(
            type="RequestValidationError",
            message="invalid request",
            details=[
                {"loc": list(e.get("loc", ())), "msg": e.get("msg", "")}
                for e in exc.errors()
            ],
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        log.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        body = ErrorResponse(type=type(exc).__name__, message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))

    # --- routes --------------------------------------------------------------

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(
        "/orders",
        response_model=OrderDetailsResponse,
        status_code=201,
        responses={
            400: {"model": ErrorResponse},
            404: {"model": ErrorResponse},
            409: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    def create_order(req: CreateOrderRequest, response: Response) -> Any:
        cmd = CreateOrderCommand(
            customer_id=req.customer_id,
            lines=tuple(
                CreateOrderLine(product_id=ln.product_id, quantity=ln.quantity)
                for ln in req.products
            ),
        )

        result = create_order_uc.create_order(cmd)

        if isinstance(result, Success):
            order: Order = result.unwrap()
            order_id = str(order.order_id.value)
            response.headers["Location"] = f"/orders/{order_id}"
            return _to_details(to_order_view(order))

        return _error_response(result.failure())

    @app.get(
        "/orders/{order_id}",
        response_model=OrderDetailsResponse,
        responses={
            400: {"model": ErrorResponse},
            404: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    def get_order(order_id: str) -> Any:
        result = get_order_uc.get_order(GetOrderQuery(order_id=order_id))

        if isinstance(result, Success):
            return _to_details(result.unwrap())

        return _error_response(result.failure())

    return app
