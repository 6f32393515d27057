from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Mapping, Sequence, Tuple

from returns.pipeline import flow
from returns.pointfree import bind, map_
from returns.result import Failure, Result, Success

from orders_api.core.domain.model.errors import (
    CustomerNotFound,
    InsufficientStock,
    NoProductsFound,
    OrderError,
    ProductNotFound,
)
from orders_api.core.domain.model.order import (
    CatalogProduct,
    Customer,
    CustomerId,
    NewOrder,
    Order,
    PricedLine,
    ProductId,
    RequestedLine,
)
from orders_api.core.ports.inbound.create_order import (
    CreateOrderCommand,
    CreateOrderUseCase,
)
from orders_api.core.ports.outbound.customers import CustomerRepository
from orders_api.core.ports.outbound.orders import OrderRepository
from orders_api.core.ports.outbound.products import ProductRepository

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateOrderDeps:
    customers: CustomerRepository
    products: ProductRepository
    orders: OrderRepository


@dataclass(frozen=True)
class CreateOrderContext:
    customer: Customer
    requested: Tuple[RequestedLine, ...]
    # product id -> snapshot read during this invocation
    catalog: Mapping[str, CatalogProduct] = field(default_factory=dict)


@dataclass(frozen=True)
class CreateOrderService(CreateOrderUseCase):
    """
    Validates a requested order against customer and catalog state and hands
    the priced order to the order store.

    Each step short-circuits on failure, so the order store is only reached
    once every check has passed. Stock is checked against the snapshot read
    here; nothing is reserved, so two concurrent calls for the same product
    can both pass the check. Preventing oversell is the order store's job.
    """

    deps: CreateOrderDeps

    def create_order(self, command: CreateOrderCommand) -> Result[Order, OrderError]:
        log_prefix = f"[Customer: {command.customer_id}]"
        result = flow(
            command,
            self._find_customer,
            bind(self._find_products),
            bind(_check_products_exist),
            bind(_check_quantities),
            map_(_price_lines),
            bind(self._persist),
        )

        if isinstance(result, Success):
            order = result.unwrap()
            log.info(
                f"{log_prefix} Order {order.order_id.value} created ({len(order.lines)} lines)."
            )
        else:
            log.info(f"{log_prefix} Order rejected: {result.failure()}")
        return result

    # ---- collaborators -----------------------------------------------------

    def _find_customer(
        self, cmd: CreateOrderCommand
    ) -> Result[CreateOrderContext, OrderError]:
        def attach(customer: Customer | None) -> Result[CreateOrderContext, OrderError]:
            if customer is None:
                return Failure(
                    CustomerNotFound(
                        message="the customer was not found",
                        customer_id=cmd.customer_id,
                    )
                )
            return Success(
                CreateOrderContext(customer=customer, requested=_requested_lines(cmd))
            )

        return self.deps.customers.find_by_id(CustomerId(cmd.customer_id)).bind(attach)

    def _find_products(
        self, ctx: CreateOrderContext
    ) -> Result[CreateOrderContext, OrderError]:
        def attach(
            found: Sequence[CatalogProduct],
        ) -> Result[CreateOrderContext, OrderError]:
            if not found:
                return Failure(
                    NoProductsFound(
                        message="could not find any products with the given ids"
                    )
                )
            catalog = {p.product_id.value: p for p in found}
            return Success(replace(ctx, catalog=catalog))

        return self.deps.products.find_all_by_id(ctx.requested).bind(attach)

    def _persist(self, new_order: NewOrder) -> Result[Order, OrderError]:
        return self.deps.orders.create(new_order)


# ---- pure helpers ----------------------------------------------------------


def _requested_lines(cmd: CreateOrderCommand) -> Tuple[RequestedLine, ...]:
    return tuple(
        RequestedLine(product_id=ProductId(ln.product_id), quantity=ln.quantity)
        for ln in cmd.lines
    )


def _check_products_exist(
    ctx: CreateOrderContext,
) -> Result[CreateOrderContext, OrderError]:
    for ln in ctx.requested:
        if ln.product_id.value not in ctx.catalog:
            return Failure(
                ProductNotFound(
                    message="could not find product",
                    product_id=ln.product_id.value,
                )
            )
    return Success(ctx)


def _check_quantities(
    ctx: CreateOrderContext,
) -> Result[CreateOrderContext, OrderError]:
    # Lines are checked one by one; repeated ids are not summed.
    for ln in ctx.requested:
        if ctx.catalog[ln.product_id.value].available_quantity < ln.quantity:
            return Failure(
                InsufficientStock(
                    message="the requested quantity is not available",
                    product_id=ln.product_id.value,
                    quantity=ln.quantity,
                )
            )
    return Success(ctx)


def _price_lines(ctx: CreateOrderContext) -> NewOrder:
    lines = tuple(
        PricedLine(
            product_id=ln.product_id,
            quantity=ln.quantity,
            unit_price=ctx.catalog[ln.product_id.value].price,
        )
        for ln in ctx.requested
    )
    return NewOrder(customer=ctx.customer, lines=lines)
