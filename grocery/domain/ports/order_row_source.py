"""注文データ行の読み込み元インターフェース."""
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass


class OrderParseError(Exception):
    """注文データの解析エラー."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class OrderRow:
    """注文データの1行（注文ID・商品名・単価）."""

    order_id: int
    product_name: str
    unit_price: float


class OrderRowSource(ABC):
    """注文データ行の読み込み元."""

    @abstractmethod
    def read_rows(self) -> Iterator[OrderRow]:
        """全行を先頭から順に返す.

        Raises:
            OrderParseError: 行の形式が不正な場合
        """
        pass
