"""ポートモジュール."""
from .order_repository import OrderNotFoundError, OrderRepository
from .order_row_source import OrderParseError, OrderRow, OrderRowSource

__all__ = [
    "OrderNotFoundError",
    "OrderParseError",
    "OrderRepository",
    "OrderRow",
    "OrderRowSource",
]
