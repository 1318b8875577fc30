"""リポジトリ実装モジュール."""
from .csv_order_repository import CsvOrderRepository
from .in_memory_order_repository import InMemoryOrderRepository
from .order_repository_factory import create_order_repository

__all__ = [
    "CsvOrderRepository",
    "InMemoryOrderRepository",
    "create_order_repository",
]
