from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import pytest
from returns.result import Failure, Result, Success

from orders_api.adapters.outbound.in_memory_orders import InMemoryOrderRepository
from orders_api.core.domain.model.errors import OrderError, PersistenceError
from orders_api.core.domain.model.order import (
    CatalogProduct,
    Customer,
    CustomerId,
    Money,
    NewOrder,
    Order,
    OrderId,
    ProductId,
    RequestedLine,
)
from orders_api.core.domain.service.create_order_service import (
    CreateOrderDeps,
    CreateOrderService,
)


@dataclass
class FakeCustomers:
    customers: dict[str, Customer] = field(default_factory=dict)
    calls: list[CustomerId] = field(default_factory=list)
    error: OrderError | None = None

    def find_by_id(self, customer_id: CustomerId) -> Result[Customer | None, OrderError]:
        self.calls.append(customer_id)
        if self.error is not None:
            return Failure(self.error)
        return Success(self.customers.get(customer_id.value))


@dataclass
class FakeProducts:
    """Returns matches in reverse catalog order to show ordering is not relied on."""

    products: dict[str, CatalogProduct] = field(default_factory=dict)
    calls: list[tuple[RequestedLine, ...]] = field(default_factory=list)
    error: OrderError | None = None

    def find_all_by_id(
        self, lines: Sequence[RequestedLine]
    ) -> Result[Sequence[CatalogProduct], OrderError]:
        self.calls.append(tuple(lines))
        if self.error is not None:
            return Failure(self.error)
        wanted = {ln.product_id.value for ln in lines}
        found = [p for key, p in self.products.items() if key in wanted]
        return Success(tuple(reversed(found)))


@dataclass
class RecordingOrders:
    inner: InMemoryOrderRepository = field(default_factory=InMemoryOrderRepository)
    calls: list[NewOrder] = field(default_factory=list)

    def create(self, new_order: NewOrder) -> Result[Order, OrderError]:
        self.calls.append(new_order)
        return self.inner.create(new_order)

    def get(self, order_id: OrderId) -> Result[Order, OrderError]:
        return self.inner.get(order_id)


def make_product(product_id: str, price: str, quantity: int) -> CatalogProduct:
    return CatalogProduct(
        product_id=ProductId(product_id),
        name=product_id.upper(),
        price=Money.of(price),
        available_quantity=quantity,
    )


@pytest.fixture
def customers() -> FakeCustomers:
    alice = Customer(CustomerId("c-1"), name="Alice", email="alice@example.com")
    return FakeCustomers(customers={"c-1": alice})


@pytest.fixture
def products() -> FakeProducts:
    catalog = [
        make_product("A", "10.00", 10),
        make_product("B", "2.50", 3),
        make_product("C", "99.99", 1),
    ]
    return FakeProducts(products={p.product_id.value: p for p in catalog})


@pytest.fixture
def orders() -> RecordingOrders:
    return RecordingOrders()


@pytest.fixture
def service(
    customers: FakeCustomers, products: FakeProducts, orders: RecordingOrders
) -> CreateOrderService:
    return CreateOrderService(
        CreateOrderDeps(customers=customers, products=products, orders=orders)
    )


@pytest.fixture
def store_down() -> PersistenceError:
    return PersistenceError(message="connection refused")
