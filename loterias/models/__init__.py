"""ORM models."""

from loterias.models.lottery_result import LotteryResult

__all__ = ["LotteryResult"]
