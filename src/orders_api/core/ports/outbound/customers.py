from __future__ import annotations

from typing import Protocol

from returns.result import Result

from orders_api.core.domain.model.errors import OrderError
from orders_api.core.domain.model.order import Customer, CustomerId


class CustomerRepository(Protocol):
    def find_by_id(
        self, customer_id: CustomerId
    ) -> Result[Customer | None, OrderError]: ...
