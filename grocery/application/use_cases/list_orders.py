"""注文一覧取得ユースケース."""
from dataclasses import dataclass

from grocery.domain.entities import Order
from grocery.domain.ports import OrderRepository


@dataclass(frozen=True)
class ListOrdersResult:
    """注文一覧取得結果."""

    orders: list[Order]
    count: int


class ListOrdersUseCase:
    """注文一覧取得ユースケース."""

    def __init__(self, order_repository: OrderRepository) -> None:
        """初期化."""
        self._order_repository = order_repository

    def execute(self) -> ListOrdersResult:
        """全注文を取得する."""
        orders = self._order_repository.all()
        return ListOrdersResult(orders=orders, count=len(orders))
