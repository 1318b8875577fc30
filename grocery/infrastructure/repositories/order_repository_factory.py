"""OrderRepository ファクトリ."""
from grocery.domain.ports import OrderRepository
from grocery.infrastructure.providers import create_order_row_source

from .csv_order_repository import CsvOrderRepository


def create_order_repository() -> OrderRepository:
    """環境変数で選ばれた読み込み元を使う CsvOrderRepository を生成する."""
    return CsvOrderRepository(create_order_row_source())
