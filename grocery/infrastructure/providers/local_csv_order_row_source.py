"""ローカルCSVファイルの注文データ読み込み元."""
import logging
from collections.abc import Iterator
from pathlib import Path

from grocery.domain.ports import OrderRow, OrderRowSource

from ._csv_rows import parse_rows

logger = logging.getLogger(__name__)


class LocalCsvOrderRowSource(OrderRowSource):
    """ディスク上のCSVファイルから注文データ行を読み込む."""

    def __init__(self, path: str | Path) -> None:
        """初期化.

        Args:
            path: CSVファイルのパス
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_rows(self) -> Iterator[OrderRow]:
        """CSVファイルを読み込み、全行を返す."""
        try:
            with self._path.open(encoding="utf-8", newline="") as f:
                rows = list(parse_rows(f))
        except FileNotFoundError:
            logger.error(f"Order CSV not found: {self._path}")
            raise
        logger.debug(f"Read {len(rows)} order rows from {self._path}")
        return iter(rows)
