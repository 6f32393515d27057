from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

import pytest

from orders_api.bootstrap import DEMO_SEED, build_stores
from orders_api.config import Settings, load_settings
from orders_api.core.domain.model.order import CustomerId, ProductId, RequestedLine

ENV_VARS = (
    "ORDERS_API_HOST",
    "ORDERS_API_PORT",
    "ORDERS_API_LOG_LEVEL",
    "ORDERS_API_LOG_FILE",
    "ORDERS_API_CURRENCY",
    "ORDERS_API_SEED_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(tmp_path):
    settings = load_settings(tmp_path / "missing.env")

    assert settings == Settings()


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ORDERS_API_PORT", "9100")
    monkeypatch.setenv("ORDERS_API_LOG_LEVEL", "debug")
    monkeypatch.setenv("ORDERS_API_CURRENCY", "EUR")
    monkeypatch.setenv("ORDERS_API_SEED_FILE", str(tmp_path / "seed.json"))

    settings = load_settings(tmp_path / "missing.env")

    assert settings.port == 9100
    assert settings.log_level == "DEBUG"
    assert settings.currency == "EUR"
    assert settings.seed_file == tmp_path / "seed.json"


def test_reads_dotenv_file(tmp_path, monkeypatch):
    # load_dotenv writes to os.environ; register the key so teardown removes it
    monkeypatch.setenv("ORDERS_API_HOST", "placeholder")
    monkeypatch.delenv("ORDERS_API_HOST")
    env_file = tmp_path / ".env"
    env_file.write_text("ORDERS_API_HOST=127.0.0.1\n", encoding="utf-8")

    settings = load_settings(env_file)

    assert settings.host == "127.0.0.1"


def test_bad_port(monkeypatch, tmp_path):
    monkeypatch.setenv("ORDERS_API_PORT", "eighty")

    with pytest.raises(RuntimeError, match="ORDERS_API_PORT"):
        load_settings(tmp_path / "missing.env")


def test_demo_seed():
    stores = build_stores(Settings())

    assert stores.customers.find_by_id(CustomerId("c-1")).unwrap() is not None
    found = stores.products.find_all_by_id(
        [RequestedLine(ProductId(p["id"]), 1) for p in DEMO_SEED["products"]]
    ).unwrap()
    assert len(found) == len(DEMO_SEED["products"])


def test_seed_file(tmp_path: Path):
    seed = tmp_path / "seed.json"
    seed.write_text(
        json.dumps(
            {
                "customers": [{"id": "k-1", "name": "Kim"}],
                "products": [{"id": "s-1", "name": "Screw", "price": "0.1", "quantity": 500}],
            }
        ),
        encoding="utf-8",
    )

    stores = build_stores(Settings(seed_file=seed, currency="EUR"))

    assert stores.customers.find_by_id(CustomerId("c-1")).unwrap() is None
    (screw,) = stores.products.find_all_by_id([RequestedLine(ProductId("s-1"), 1)]).unwrap()
    assert screw.price.amount == Decimal("0.10")
    assert screw.price.currency == "EUR"
    assert screw.available_quantity == 500


def test_setup_logging_writes_to_file(tmp_path):
    import logging

    from orders_api.logging_config import get_logger, setup_logging

    log_file = tmp_path / "orders.log"
    setup_logging("DEBUG", log_file)
    get_logger("orders_api.test").info("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "INFO - [PID:" in log_file.read_text(encoding="utf-8")
    assert logging.getLogger("uvicorn.access").level == logging.WARNING

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
