"""注文CSVの行パーサー.

1レコード = 注文ID,商品名,単価 の3フィールド。ヘッダー行はない。
空行は読み飛ばし、それ以外の不正な行はすべて OrderParseError にする。
"""
import csv
import math
from collections.abc import Iterable, Iterator

from grocery.domain.ports import OrderParseError, OrderRow

_FIELD_COUNT = 3


def parse_rows(lines: Iterable[str]) -> Iterator[OrderRow]:
    """CSVの各行を OrderRow に変換する."""
    reader = csv.reader(lines)
    for record in reader:
        if not record or all(not value.strip() for value in record):
            continue
        yield _parse_record(record, reader.line_num)


def _parse_record(record: list[str], line_number: int) -> OrderRow:
    if len(record) != _FIELD_COUNT:
        raise OrderParseError(
            f"expected {_FIELD_COUNT} fields, got {len(record)}", line_number
        )

    raw_id, raw_name, raw_price = (value.strip() for value in record)
    return OrderRow(
        order_id=_parse_order_id(raw_id, line_number),
        product_name=_parse_product_name(raw_name, line_number),
        unit_price=_parse_unit_price(raw_price, line_number),
    )


def _parse_order_id(value: str, line_number: int) -> int:
    try:
        order_id = int(value)
    except ValueError:
        raise OrderParseError(f"invalid order id: {value!r}", line_number) from None
    if order_id <= 0:
        raise OrderParseError(f"order id must be positive: {order_id}", line_number)
    return order_id


def _parse_product_name(value: str, line_number: int) -> str:
    if not value:
        raise OrderParseError("product name is empty", line_number)
    return value


def _parse_unit_price(value: str, line_number: int) -> float:
    try:
        price = float(value)
    except ValueError:
        raise OrderParseError(f"invalid unit price: {value!r}", line_number) from None
    # float() は "nan" や "inf" も受け付けるため
    if not math.isfinite(price):
        raise OrderParseError(f"invalid unit price: {value!r}", line_number)
    return price
