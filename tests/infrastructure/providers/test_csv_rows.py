"""注文CSVの行パーサーのテスト."""
import pytest

from grocery.domain.ports import OrderParseError, OrderRow
from grocery.infrastructure.providers._csv_rows import parse_rows


class TestParseRows:
    """parse_rowsのテスト."""

    def test_3フィールドの行をOrderRowに変換する(self) -> None:
        rows = list(parse_rows(["1,Slivered Almonds,22.88\n", "1,Grape Seed Oil,74.9\n"]))
        assert rows == [
            OrderRow(order_id=1, product_name="Slivered Almonds", unit_price=22.88),
            OrderRow(order_id=1, product_name="Grape Seed Oil", unit_price=74.9),
        ]

    def test_前後の空白を取り除く(self) -> None:
        rows = list(parse_rows([" 7 , Bran , 14.72 "]))
        assert rows == [OrderRow(order_id=7, product_name="Bran", unit_price=14.72)]

    def test_空行は読み飛ばす(self) -> None:
        rows = list(parse_rows(["1,Bran,1.00", "", "2,Allspice,2.00"]))
        assert [row.order_id for row in rows] == [1, 2]

    def test_引用符付きの商品名はカンマを含められる(self) -> None:
        rows = list(parse_rows(['3,"Nuts, mixed",5.50']))
        assert rows[0].product_name == "Nuts, mixed"

    def test_フィールド数が足りない行はエラー(self) -> None:
        with pytest.raises(OrderParseError) as exc_info:
            list(parse_rows(["1,Bran,1.00", "2,Allspice"]))
        assert exc_info.value.line_number == 2
        assert "expected 3 fields" in str(exc_info.value)

    def test_フィールド数が多すぎる行はエラー(self) -> None:
        with pytest.raises(OrderParseError):
            list(parse_rows(["1,Bran,1.00,extra"]))

    def test_数値でない単価はエラー(self) -> None:
        with pytest.raises(OrderParseError) as exc_info:
            list(parse_rows(["1,Bran,cheap"]))
        assert "invalid unit price" in str(exc_info.value)
        assert str(exc_info.value).startswith("line 1: ")

    @pytest.mark.parametrize("price", ["nan", "inf", "-inf", ""])
    def test_有限でない単価や空の単価はエラー(self, price: str) -> None:
        with pytest.raises(OrderParseError):
            list(parse_rows([f"1,Bran,{price}"]))

    @pytest.mark.parametrize("order_id", ["abc", "1.5", "0", "-3"])
    def test_正の整数でない注文IDはエラー(self, order_id: str) -> None:
        with pytest.raises(OrderParseError):
            list(parse_rows([f"{order_id},Bran,1.00"]))

    def test_空の商品名はエラー(self) -> None:
        with pytest.raises(OrderParseError) as exc_info:
            list(parse_rows(["1, ,1.00"]))
        assert "product name is empty" in str(exc_info.value)
