from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from returns.result import Result, Success

from orders_api.core.domain.model.errors import OrderError
from orders_api.core.domain.model.order import Customer, CustomerId
from orders_api.core.ports.outbound.customers import CustomerRepository


@dataclass
class InMemoryCustomerRepository(CustomerRepository):
    _store: Dict[str, Customer] = field(default_factory=dict)

    def add(self, customer: Customer) -> None:
        self._store[customer.customer_id.value] = customer

    def find_by_id(
        self, customer_id: CustomerId
    ) -> Result[Customer | None, OrderError]:
        return Success(self._store.get(customer_id.value))
