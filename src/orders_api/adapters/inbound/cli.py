from __future__ import annotations

import json
from typing import Any

from returns.result import Success

from orders_api.core.ports.inbound.create_order import (
    CreateOrderCommand,
    CreateOrderLine,
    CreateOrderUseCase,
)


def run_cli(usecase: CreateOrderUseCase, raw: str) -> int:
    """
    raw: JSON string.
    Example:
      {"customer_id":"c-1",
       "products":[{"product_id":"p-1","quantity":2}]}
    """
    try:
        payload = json.loads(raw)
        cmd = _parse_command(payload)
    except (ValueError, KeyError, TypeError) as e:
        print(f"invalid_input: {e}")
        return 2

    result = usecase.create_order(cmd)

    if isinstance(result, Success):
        order = result.unwrap()
        total = order.total()
        print(
            "[ok]",
            {
                "order_id": str(order.order_id.value),
                "customer_id": order.customer.customer_id.value,
                "lines": len(order.lines),
                "total": str(total.amount) if total is not None else None,
                "currency": total.currency if total is not None else None,
                "totals": [f"{m.amount} {m.currency}" for m in order.totals()],
            },
        )
        return 0

    err = result.failure()
    print("[ng]", str(err))
    return 1


def _parse_command(payload: dict[str, Any]) -> CreateOrderCommand:
    if not isinstance(payload, dict):
        raise TypeError("payload must be a JSON object")

    customer_id = str(payload.get("customer_id", "")).strip()
    if not customer_id:
        raise ValueError("customer_id is required")

    lines = []
    for i, x in enumerate(payload.get("products", [])):
        quantity = x["quantity"]
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise TypeError(f"products[{i}].quantity must be an integer")
        if quantity <= 0:
            raise ValueError(f"products[{i}].quantity must be > 0")
        lines.append(CreateOrderLine(product_id=str(x["product_id"]), quantity=quantity))

    return CreateOrderCommand(customer_id=customer_id, lines=tuple(lines))
