from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from orders_api.adapters.outbound.in_memory_customers import InMemoryCustomerRepository
from orders_api.adapters.outbound.in_memory_orders import InMemoryOrderRepository
from orders_api.adapters.outbound.in_memory_products import InMemoryProductRepository
from orders_api.config import Settings
from orders_api.core.domain.model.order import (
    CatalogProduct,
    Customer,
    CustomerId,
    Money,
    ProductId,
)
from orders_api.core.domain.service.create_order_service import (
    CreateOrderDeps,
    CreateOrderService,
)
from orders_api.core.domain.service.get_order_service import (
    GetOrderDeps,
    GetOrderService,
)

log = logging.getLogger(__name__)

DEMO_SEED: dict[str, list[dict[str, Any]]] = {
    "customers": [
        {"id": "c-1", "name": "Ada Lovelace", "email": "ada@example.com"},
        {"id": "c-2", "name": "Alan Turing", "email": "alan@example.com"},
    ],
    "products": [
        {"id": "p-1", "name": "Keyboard", "price": "49.90", "quantity": 10},
        {"id": "p-2", "name": "Mouse", "price": "19.99", "quantity": 5},
        {"id": "p-3", "name": "Monitor", "price": "229.00", "quantity": 0},
    ],
}


@dataclass(frozen=True)
class UseCases:
    create_order: CreateOrderService
    get_order: GetOrderService


@dataclass(frozen=True)
class Stores:
    customers: InMemoryCustomerRepository
    products: InMemoryProductRepository
    orders: InMemoryOrderRepository


def load_seed(path: Path | None) -> dict[str, list[dict[str, Any]]]:
    if path is None:
        return DEMO_SEED
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def build_stores(settings: Settings) -> Stores:
    seed = load_seed(settings.seed_file)
    customers = InMemoryCustomerRepository()
    products = InMemoryProductRepository()

    for c in seed.get("customers", []):
        customers.add(
            Customer(
                customer_id=CustomerId(str(c["id"])),
                name=str(c.get("name", "")),
                email=str(c.get("email", "")),
            )
        )
    for p in seed.get("products", []):
        products.add(
            CatalogProduct(
                product_id=ProductId(str(p["id"])),
                name=str(p.get("name", "")),
                price=Money.of(p["price"], currency=settings.currency),
                available_quantity=int(p["quantity"]),
            )
        )

    log.info(
        f"Seeded {len(seed.get('customers', []))} customers and "
        f"{len(seed.get('products', []))} products."
    )
    return Stores(customers=customers, products=products, orders=InMemoryOrderRepository())


def build_usecases(settings: Settings) -> UseCases:
    stores = build_stores(settings)

    create_order = CreateOrderService(
        CreateOrderDeps(
            customers=stores.customers, products=stores.products, orders=stores.orders
        )
    )
    get_order = GetOrderService(GetOrderDeps(orders=stores.orders))

    return UseCases(create_order=create_order, get_order=get_order)
