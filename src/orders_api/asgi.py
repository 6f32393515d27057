from __future__ import annotations

from orders_api.adapters.inbound.web.fastapi_app import create_app
from orders_api.bootstrap import build_usecases
from orders_api.config import load_settings
from orders_api.logging_config import setup_logging

settings = load_settings()
setup_logging(settings.log_level, settings.log_file)
usecases = build_usecases(settings)
app = create_app(usecases.create_order, usecases.get_order)
