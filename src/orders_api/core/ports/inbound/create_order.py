from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from returns.result import Result

from orders_api.core.domain.model.errors import OrderError
from orders_api.core.domain.model.order import Order


@dataclass(frozen=True)
class CreateOrderLine:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class CreateOrderCommand:
    customer_id: str
    lines: Sequence[CreateOrderLine]


class CreateOrderUseCase(Protocol):
    def create_order(self, command: CreateOrderCommand) -> Result[Order, OrderError]: ...
