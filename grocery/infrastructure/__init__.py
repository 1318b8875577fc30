"""インフラストラクチャ層モジュール."""
from .providers import LocalCsvOrderRowSource, create_order_row_source
from .repositories import (
    CsvOrderRepository,
    InMemoryOrderRepository,
    create_order_repository,
)

__all__ = [
    # Providers
    "LocalCsvOrderRowSource",
    "create_order_row_source",
    # Repositories
    "CsvOrderRepository",
    "InMemoryOrderRepository",
    "create_order_repository",
]
