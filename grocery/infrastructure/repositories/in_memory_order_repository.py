"""注文リポジトリのインメモリ実装."""
from collections.abc import Iterable

from grocery.domain.entities import Order
from grocery.domain.ports import OrderNotFoundError, OrderRepository


class InMemoryOrderRepository(OrderRepository):
    """注文リポジトリのインメモリ実装."""

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        """初期化."""
        self._orders: dict[int, Order] = {}
        for order in orders:
            if order.id in self._orders:
                raise ValueError(f"Duplicate order id: {order.id}")
            self._orders[order.id] = order

    def all(self) -> list[Order]:
        """全注文を取得する."""
        return list(self._orders.values())

    def find(self, order_id: int) -> Order:
        """注文IDで検索する."""
        order = self._orders.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order
