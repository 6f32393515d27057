from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from returns.result import Failure, Result

from orders_api.core.domain.model.errors import OrderError, ValidationError
from orders_api.core.domain.model.order import Order, OrderId
from orders_api.core.ports.inbound.get_order import (
    GetOrderQuery,
    GetOrderUseCase,
    OrderLineView,
    OrderView,
)
from orders_api.core.ports.outbound.orders import OrderRepository


@dataclass(frozen=True)
class GetOrderDeps:
    orders: OrderRepository


@dataclass(frozen=True)
class GetOrderService(GetOrderUseCase):
    deps: GetOrderDeps

    def get_order(self, query: GetOrderQuery) -> Result[OrderView, OrderError]:
        try:
            oid = OrderId(UUID(query.order_id))
        except ValueError:
            return Failure(ValidationError(message="order_id must be a valid UUID"))

        return self.deps.orders.get(oid).map(to_order_view)


def to_order_view(order: Order) -> OrderView:
    lines = tuple(
        OrderLineView(
            product_id=li.product_id.value,
            unit_price=li.unit_price,
            quantity=li.quantity,
            subtotal=li.subtotal(),
        )
        for li in order.lines
    )
    return OrderView(
        order_id=order.order_id,
        customer_id=order.customer.customer_id,
        total=order.total(),
        totals=order.totals(),
        created_at=order.created_at,
        lines=lines,
    )
