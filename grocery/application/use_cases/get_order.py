"""注文取得ユースケース."""
from dataclasses import dataclass

from grocery.domain.entities import Order
from grocery.domain.ports import OrderRepository


@dataclass(frozen=True)
class GetOrderResult:
    """注文取得結果."""

    order: Order
    subtotal: float
    tax: float
    total: float


class GetOrderUseCase:
    """注文IDで注文と金額内訳を取得するユースケース."""

    def __init__(self, order_repository: OrderRepository) -> None:
        """初期化.

        Args:
            order_repository: 注文リポジトリ
        """
        self._order_repository = order_repository

    def execute(self, order_id: int) -> GetOrderResult:
        """注文を取得する.

        Args:
            order_id: 注文ID

        Returns:
            注文と金額内訳

        Raises:
            OrderNotFoundError: 注文が見つからない場合
        """
        order = self._order_repository.find(order_id)
        return GetOrderResult(
            order=order,
            subtotal=order.subtotal(),
            tax=order.tax(),
            total=order.total(),
        )
