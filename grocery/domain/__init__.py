"""ドメイン層モジュール."""
from .entities import Order
from .ports import (
    OrderNotFoundError,
    OrderParseError,
    OrderRepository,
    OrderRow,
    OrderRowSource,
)

__all__ = [
    # Entities
    "Order",
    # Ports
    "OrderRepository",
    "OrderRow",
    "OrderRowSource",
    # Errors
    "OrderNotFoundError",
    "OrderParseError",
]
