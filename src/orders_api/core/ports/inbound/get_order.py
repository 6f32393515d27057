from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, Sequence

from returns.result import Result

from orders_api.core.domain.model.errors import OrderError
from orders_api.core.domain.model.order import CustomerId, Money, OrderId


@dataclass(frozen=True)
class GetOrderQuery:
    order_id: str  # UUID string


@dataclass(frozen=True)
class OrderLineView:
    product_id: str
    unit_price: Money
    quantity: int
    subtotal: Money


@dataclass(frozen=True)
class OrderView:
    order_id: OrderId
    customer_id: CustomerId
    # None when the lines are priced in more than one currency
    total: Money | None
    totals: Sequence[Money]
    created_at: datetime
    lines: Sequence[OrderLineView]


class GetOrderUseCase(Protocol):
    def get_order(self, query: GetOrderQuery) -> Result[OrderView, OrderError]: ...
