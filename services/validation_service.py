"""
驗證服務：Player 欄位檢查

純判斷函式，不拋異常、不碰資料庫；拋 InvalidRequest 是 PlayerManager 的責任
"""
from datetime import date
from typing import Optional

MAX_NAME_LENGTH = 12
MAX_TITLE_LENGTH = 30
MIN_EXPERIENCE = 0
MAX_EXPERIENCE = 10_000_000
MIN_BIRTH_YEAR = 2000
MAX_BIRTH_YEAR = 3000

REQUIRED_FIELDS = ("name", "title", "race", "profession", "birthday", "experience")


def is_valid_name(name: Optional[str]) -> bool:
    return name is not None and 0 < len(name) <= MAX_NAME_LENGTH


def is_valid_title(title: Optional[str]) -> bool:
    return title is not None and 0 < len(title) <= MAX_TITLE_LENGTH


def is_valid_experience(experience: Optional[int]) -> bool:
    """經驗值範圍 0..10,000,000（含）"""
    return experience is not None and MIN_EXPERIENCE <= experience <= MAX_EXPERIENCE


def is_valid_birth_year(birthday: Optional[date]) -> bool:
    """
    檢查生日年份

    規則：
    - birthday 不可為 None
    - 年份必須在 2000..3000（含）
    """
    if birthday is None:
        return False
    return MIN_BIRTH_YEAR <= birthday.year <= MAX_BIRTH_YEAR


def has_required_fields(candidate) -> bool:
    """
    檢查建立玩家時是否有提供必要欄位

    注意：
        只要 REQUIRED_FIELDS 其中「任一個」不是 None 就算通過（OR，不是 AND）。
        沿用既有行為；實際上 name / title / experience / birthday 的個別檢查
        會擋下它們缺席的情況，只有 race / profession 可以真的缺席

    參數：
        candidate: 任何具有 REQUIRED_FIELDS 屬性的物件（PlayerCreate、Player）

    返回：
        True 如果至少一個必要欄位有值
    """
    return any(getattr(candidate, field, None) is not None for field in REQUIRED_FIELDS)
