from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict

from returns.result import Failure, Result, Success

from orders_api.core.domain.model.errors import (
    OrderError,
    OrderNotFound,
    PersistenceError,
)
from orders_api.core.domain.model.order import NewOrder, Order, OrderId, now_utc
from orders_api.core.ports.outbound.orders import OrderRepository


@dataclass
class InMemoryOrderRepository(OrderRepository):
    fail: bool = False
    _store: Dict[str, Order] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def create(self, new_order: NewOrder) -> Result[Order, OrderError]:
        if self.fail:
            return Failure(PersistenceError(message="order store is down"))

        order = Order(
            order_id=OrderId.new(),
            customer=new_order.customer,
            lines=new_order.lines,
            created_at=now_utc(),
        )
        key = str(order.order_id.value)
        with self._lock:
            if key in self._store:
                return Failure(PersistenceError(message="order_id already exists"))
            self._store[key] = order
        return Success(order)

    def get(self, order_id: OrderId) -> Result[Order, OrderError]:
        key = str(order_id.value)
        order = self._store.get(key)
        if order is None:
            return Failure(OrderNotFound(message="order not found", order_id=key))
        return Success(order)
