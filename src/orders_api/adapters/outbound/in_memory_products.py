from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence

from returns.result import Result, Success

from orders_api.core.domain.model.errors import OrderError
from orders_api.core.domain.model.order import CatalogProduct, RequestedLine
from orders_api.core.ports.outbound.products import ProductRepository


@dataclass
class InMemoryProductRepository(ProductRepository):
    _store: Dict[str, CatalogProduct] = field(default_factory=dict)

    def add(self, product: CatalogProduct) -> None:
        self._store[product.product_id.value] = product

    def find_all_by_id(
        self, lines: Sequence[RequestedLine]
    ) -> Result[Sequence[CatalogProduct], OrderError]:
        wanted = {ln.product_id.value for ln in lines}
        # catalog order, each match once
        return Success(tuple(p for key, p in self._store.items() if key in wanted))
