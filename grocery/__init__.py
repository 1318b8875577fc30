"""食料品注文のドメインモデルパッケージ."""
from . import domain

__all__ = ["domain"]
