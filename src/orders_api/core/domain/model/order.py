from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Tuple
from uuid import UUID, uuid4

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class OrderId:
    value: UUID

    @staticmethod
    def new() -> "OrderId":
        return OrderId(uuid4())


@dataclass(frozen=True)
class CustomerId:
    value: str


@dataclass(frozen=True)
class ProductId:
    value: str


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    @staticmethod
    def of(amount: Decimal | int | str, currency: str = DEFAULT_CURRENCY) -> "Money":
        dec = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return Money(dec, currency)

    def __add__(self, other: "Money") -> "Money":
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, n: int) -> "Money":
        return Money(
            (self.amount * Decimal(n)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP),
            self.currency,
        )

    def _assert_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(f"currency_mismatch: {self.currency} vs {other.currency}")


@dataclass(frozen=True)
class Customer:
    customer_id: CustomerId
    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class CatalogProduct:
    """Price and stock of a product as read at request time."""

    product_id: ProductId
    price: Money
    available_quantity: int
    name: str = ""


@dataclass(frozen=True)
class RequestedLine:
    product_id: ProductId
    quantity: int


@dataclass(frozen=True)
class PricedLine:
    product_id: ProductId
    quantity: int
    unit_price: Money

    def subtotal(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class NewOrder:
    """An order composed in memory, not yet given an identity by the store."""

    customer: Customer
    lines: Tuple[PricedLine, ...]


@dataclass(frozen=True)
class Order:
    order_id: OrderId
    customer: Customer
    lines: Tuple[PricedLine, ...]
    created_at: datetime

    def totals(self) -> Tuple[Money, ...]:
        """One total per currency, in order of first appearance."""
        by_currency: Dict[str, List[Money]] = {}
        for li in self.lines:
            by_currency.setdefault(li.unit_price.currency, []).append(li.subtotal())
        return tuple(fold_money(v, currency=c) for c, v in by_currency.items())

    def total(self) -> Money | None:
        """Single-currency total, or None when lines are priced in several currencies."""
        totals = self.totals()
        if not totals:
            return Money.of(0)
        if len(totals) > 1:
            return None
        return totals[0]


def fold_money(values: Iterable[Money], currency: str = DEFAULT_CURRENCY) -> Money:
    total = Money.of(0, currency=currency)
    for v in values:
        total = total + v
    return total


def now_utc() -> datetime:
    return datetime.now(timezone.utc)
