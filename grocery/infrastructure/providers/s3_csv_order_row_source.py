"""S3上のCSVオブジェクトの注文データ読み込み元."""
import logging
from collections.abc import Iterator
from typing import Any

import boto3
from botocore.exceptions import ClientError

from grocery.domain.ports import OrderRow, OrderRowSource

from ._csv_rows import parse_rows

logger = logging.getLogger(__name__)


class S3CsvOrderRowSource(OrderRowSource):
    """S3 に置かれたCSVから注文データ行を読み込む."""

    def __init__(self, bucket: str, key: str, s3_client: Any | None = None) -> None:
        """初期化.

        Args:
            bucket: バケット名
            key: オブジェクトキー
            s3_client: boto3 の S3 クライアント（省略時は生成する）
        """
        self._bucket = bucket
        self._key = key
        self._client = s3_client or boto3.client("s3")

    def read_rows(self) -> Iterator[OrderRow]:
        """S3オブジェクトをダウンロードし、全行を返す."""
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=self._key)
        except ClientError as e:
            logger.error(f"Failed to get order CSV s3://{self._bucket}/{self._key}: {e}")
            raise

        body = response["Body"].read().decode("utf-8")
        rows = list(parse_rows(body.splitlines()))
        logger.debug(f"Read {len(rows)} order rows from s3://{self._bucket}/{self._key}")
        return iter(rows)
