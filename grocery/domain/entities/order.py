"""注文エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field

# 売上税率（7.5%）
TAX_RATE = 0.075


@dataclass
class Order:
    """商品名と単価の対応を保持する食料品注文."""

    id: int
    products: dict[str, float] = field(default_factory=dict)

    def subtotal(self) -> float:
        """税抜きの小計を計算する."""
        return sum(self.products.values())

    def tax(self) -> float:
        """小計にかかる税額を小数点以下2桁に丸めて返す."""
        return round(self.subtotal() * TAX_RATE, 2)

    def total(self) -> float:
        """税込みの合計金額を計算する.

        丸めるのは税額のみで、小計は丸めずにそのまま加算する。
        商品がない場合は 0 を返す。
        """
        if not self.products:
            return 0
        return self.subtotal() + self.tax()

    def add_product(self, name: str, price: float) -> bool:
        """商品を追加する.

        Returns:
            追加した場合 True、同名の商品が既にある場合 False
        """
        if name in self.products:
            return False
        self.products[name] = price
        return True

    def remove_product(self, name: str) -> bool:
        """商品を削除する.

        Returns:
            削除した場合 True、該当する商品がない場合 False
        """
        if name not in self.products:
            return False
        del self.products[name]
        return True

    def has_product(self, name: str) -> bool:
        """指定した商品が含まれるか判定する."""
        return name in self.products

    def product_count(self) -> int:
        """商品数を取得する."""
        return len(self.products)
