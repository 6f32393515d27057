from __future__ import annotations

from typing import Protocol, Sequence

from returns.result import Result

from orders_api.core.domain.model.errors import OrderError
from orders_api.core.domain.model.order import CatalogProduct, RequestedLine


class ProductRepository(Protocol):
    def find_all_by_id(
        self, lines: Sequence[RequestedLine]
    ) -> Result[Sequence[CatalogProduct], OrderError]:
        """
        Matched catalog entries only, in any order. A requested id missing from
        the result was not found. The requested quantity may be ignored.
        """
        ...
