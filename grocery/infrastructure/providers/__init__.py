"""注文データ読み込み元の実装モジュール."""
from .local_csv_order_row_source import LocalCsvOrderRowSource
from .order_row_source_factory import create_order_row_source

# S3CsvOrderRowSource は boto3 に依存するため、
# 必要な場所で明示的にインポートする

__all__ = [
    "LocalCsvOrderRowSource",
    "create_order_row_source",
]
