"""エンティティモジュール."""
from .order import TAX_RATE, Order

__all__ = [
    "Order",
    "TAX_RATE",
]
