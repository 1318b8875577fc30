"""ユースケースモジュール."""
from .get_order import GetOrderResult, GetOrderUseCase
from .list_orders import ListOrdersResult, ListOrdersUseCase

__all__ = [
    "GetOrderResult",
    "GetOrderUseCase",
    "ListOrdersResult",
    "ListOrdersUseCase",
]
