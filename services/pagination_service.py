"""
分頁服務：把已排序的序列切成一頁
"""
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page_number: int, page_size: int) -> List[T]:
    """
    取出第 page_number 頁（從 0 開始）

    規則：
    - start = page_number * page_size
    - end = min(start + page_size, len(items))
    - start 超過長度時返回空 list（不是錯誤）

    異常：
        ValueError: page_number < 0 或 page_size <= 0
                    （API 層應該先擋下，這裡只是最後防線）

    範例：
        paginate([1, 2, 3, 4, 5], 0, 3) -> [1, 2, 3]
        paginate([1, 2, 3, 4, 5], 1, 3) -> [4, 5]
        paginate([1, 2, 3, 4, 5], 2, 3) -> []
    """
    if page_number < 0:
        raise ValueError(f"page_number must be >= 0, got {page_number}")
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")

    start = page_number * page_size
    end = min(start + page_size, len(items))
    if start >= end:
        return []
    return list(items[start:end])
