from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError(OrderError):
    pass


# ---- order creation rejections ---------------------------------------------


@dataclass(frozen=True)
class CustomerNotFound(OrderError):
    customer_id: str

    def __str__(self) -> str:
        return f"customer_not_found: {self.customer_id} ({self.message})"


@dataclass(frozen=True)
class NoProductsFound(OrderError):
    def __str__(self) -> str:
        return f"no_products_found ({self.message})"


@dataclass(frozen=True)
class ProductNotFound(OrderError):
    product_id: str

    def __str__(self) -> str:
        return f"product_not_found: {self.product_id} ({self.message})"


@dataclass(frozen=True)
class InsufficientStock(OrderError):
    """Requested ``quantity`` of ``product_id`` is more than the catalog holds."""

    product_id: str
    quantity: int

    def __str__(self) -> str:
        return (
            f"insufficient_stock: product_id={self.product_id} "
            f"quantity={self.quantity} ({self.message})"
        )


# ---- infrastructure ---------------------------------------------------------


@dataclass(frozen=True)
class PersistenceError(OrderError):
    pass


@dataclass(frozen=True)
class OrderNotFound(PersistenceError):
    order_id: str

    def __str__(self) -> str:
        return f"order_not_found: {self.order_id} ({self.message})"
