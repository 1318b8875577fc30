"""OrderRowSource ファクトリ."""
import logging
import os
from pathlib import Path

from grocery.domain.ports import OrderRowSource

logger = logging.getLogger(__name__)

DEFAULT_ORDERS_CSV_PATH = Path(__file__).resolve().parents[2] / "data" / "orders.csv"
DEFAULT_ORDERS_S3_KEY = "orders.csv"


def create_order_row_source() -> OrderRowSource:
    """環境変数に基づいてOrderRowSourceを生成する.

    ORDER_SOURCE:
        "local" → LocalCsvOrderRowSource（ORDERS_CSV_PATH、未設定ならパッケージ同梱のCSV）
        "s3"    → S3CsvOrderRowSource（ORDERS_S3_BUCKET / ORDERS_S3_KEY）
        未設定   → LocalCsvOrderRowSource（デフォルト）
    """
    source_type = os.environ.get("ORDER_SOURCE")
    if source_type == "s3":
        bucket = os.environ.get("ORDERS_S3_BUCKET")
        if not bucket:
            raise ValueError("ORDERS_S3_BUCKET is required when ORDER_SOURCE=s3")

        from grocery.infrastructure.providers.s3_csv_order_row_source import (
            S3CsvOrderRowSource,
        )

        return S3CsvOrderRowSource(
            bucket=bucket,
            key=os.environ.get("ORDERS_S3_KEY", DEFAULT_ORDERS_S3_KEY),
        )

    if source_type and source_type != "local":
        logger.warning("Unknown ORDER_SOURCE=%s, falling back to local CSV", source_type)

    from grocery.infrastructure.providers.local_csv_order_row_source import (
        LocalCsvOrderRowSource,
    )

    return LocalCsvOrderRowSource(
        os.environ.get("ORDERS_CSV_PATH") or DEFAULT_ORDERS_CSV_PATH
    )
