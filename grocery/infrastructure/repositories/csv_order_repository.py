"""CSVデータを読み込む注文リポジトリ実装."""
import logging

from grocery.domain.entities import Order
from grocery.domain.ports import OrderNotFoundError, OrderRepository, OrderRowSource

logger = logging.getLogger(__name__)


class CsvOrderRepository(OrderRepository):
    """CSV形式の注文データ行から注文を組み立てるリポジトリ.

    読み込み元は変更されない前提で、all / find のたびに読み直す。
    """

    def __init__(self, source: OrderRowSource) -> None:
        """初期化.

        Args:
            source: 注文データ行の読み込み元
        """
        self._source = source

    def all(self) -> list[Order]:
        """全注文を取得する.

        同じ注文IDの行を1つの注文にまとめ、IDが最初に現れた順に並べる。
        """
        grouped: dict[int, dict[str, float]] = {}
        for row in self._source.read_rows():
            products = grouped.setdefault(row.order_id, {})
            if row.product_name in products:
                logger.warning(
                    f"Duplicate product {row.product_name!r} in order {row.order_id}, "
                    f"overwriting price {products[row.product_name]} with {row.unit_price}"
                )
            products[row.product_name] = row.unit_price

        orders = [Order(id=order_id, products=products) for order_id, products in grouped.items()]
        logger.info(f"Loaded {len(orders)} orders")
        return orders

    def find(self, order_id: int) -> Order:
        """注文IDで検索する."""
        for order in self.all():
            if order.id == order_id:
                return order
        raise OrderNotFoundError(order_id)
