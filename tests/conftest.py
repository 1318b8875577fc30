"""テスト共通のフィクスチャ."""
from collections.abc import Callable
from pathlib import Path

import pytest

from grocery.infrastructure.providers.order_row_source_factory import DEFAULT_ORDERS_CSV_PATH


@pytest.fixture
def orders_csv_path() -> Path:
    """パッケージ同梱の100件の注文CSV."""
    return DEFAULT_ORDERS_CSV_PATH


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str], Path]:
    """任意の内容のCSVファイルを一時ディレクトリに書き出す."""

    def _write(content: str) -> Path:
        path = tmp_path / "orders.csv"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
