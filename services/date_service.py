"""
日期轉換：epoch milliseconds <-> date

wire 與過濾條件都用 epoch milliseconds（UTC），資料庫存 Date
"""
from datetime import date, datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def millis_to_date(millis: int) -> date:
    """
    epoch milliseconds 轉成 UTC 日期

    異常：
        ValueError: 超出 datetime 可表示的範圍
    """
    try:
        return (EPOCH + timedelta(milliseconds=millis)).date()
    except OverflowError as e:
        raise ValueError(f"Timestamp {millis} is out of range") from e


def date_to_millis(value: date) -> int:
    """UTC 當日 00:00 的 epoch milliseconds"""
    if isinstance(value, datetime):
        value = value.date()
    midnight = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return (midnight - EPOCH) // timedelta(milliseconds=1)
