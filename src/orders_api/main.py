from __future__ import annotations

import sys

import uvicorn

from orders_api.adapters.inbound.cli import run_cli
from orders_api.bootstrap import build_usecases
from orders_api.config import load_settings
from orders_api.logging_config import get_logger, setup_logging

USAGE = "usage: orders-api serve | orders-api '<json>'"


def serve() -> None:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)
    get_logger(__name__).info(f"Starting orders_api on {settings.host}:{settings.port}")
    uvicorn.run(
        "orders_api.asgi:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
    )


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(USAGE)
        return 2

    if argv[0] == "serve":
        serve()
        return 0

    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)
    usecases = build_usecases(settings)
    return run_cli(usecases.create_order, argv[0])


if __name__ == "__main__":
    raise SystemExit(main())
