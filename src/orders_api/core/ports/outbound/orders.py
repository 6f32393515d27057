from __future__ import annotations

from typing import Protocol

from returns.result import Result

from orders_api.core.domain.model.errors import OrderError
from orders_api.core.domain.model.order import NewOrder, Order, OrderId


class OrderRepository(Protocol):
    def create(self, new_order: NewOrder) -> Result[Order, OrderError]:
        """Persist ``new_order`` and return it with its assigned identity."""
        ...

    def get(self, order_id: OrderId) -> Result[Order, OrderError]: ...
