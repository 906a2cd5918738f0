"""
過濾服務：依 PlayerCriteria 篩選玩家

純計算邏輯：
- 每個條件都是選填，None 表示不限制
- 有值的條件全部要滿足（AND）
- 第一個不符合的條件就停止檢查
- 保留原集合順序，不排序
"""
from typing import Iterable, List

from models import Player
from schemas import PlayerCriteria
from services.date_service import date_to_millis


def matches(player: Player, criteria: PlayerCriteria) -> bool:
    """
    判斷單一玩家是否符合所有有值的條件

    規則：
    - name / title: 子字串比對（區分大小寫）
    - race / profession / banned: 完全相等
    - after: 生日早於 after 的排除
    - before: 生日晚於 before 的排除
    - min/max experience、min/max level: 含邊界
    """
    if criteria.name is not None and criteria.name not in (player.name or ""):
        return False
    if criteria.title is not None and criteria.title not in (player.title or ""):
        return False
    if criteria.race is not None and player.race != criteria.race:
        return False
    if criteria.profession is not None and player.profession != criteria.profession:
        return False

    if criteria.after is not None or criteria.before is not None:
        birthday = date_to_millis(player.birthday)
        if criteria.after is not None and birthday < criteria.after:
            return False
        if criteria.before is not None and birthday > criteria.before:
            return False

    if criteria.banned is not None and bool(player.banned) != criteria.banned:
        return False
    if criteria.min_experience is not None and player.experience < criteria.min_experience:
        return False
    if criteria.max_experience is not None and player.experience > criteria.max_experience:
        return False
    if criteria.min_level is not None and player.level < criteria.min_level:
        return False
    if criteria.max_level is not None and player.level > criteria.max_level:
        return False

    return True


def filter_players(players: Iterable[Player], criteria: PlayerCriteria) -> List[Player]:
    return [player for player in players if matches(player, criteria)]
