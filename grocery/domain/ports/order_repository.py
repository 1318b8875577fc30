"""注文リポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Order


class OrderNotFoundError(Exception):
    """注文が見つからないエラー."""

    def __init__(self, order_id: int) -> None:
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")


class OrderRepository(ABC):
    """注文リポジトリのインターフェース."""

    @abstractmethod
    def all(self) -> list[Order]:
        """全注文を取得する（ID の初出順）."""
        pass

    @abstractmethod
    def find(self, order_id: int) -> Order:
        """注文IDで検索する.

        Raises:
            OrderNotFoundError: 該当する注文がない場合
        """
        pass
