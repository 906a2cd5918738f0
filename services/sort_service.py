"""
排序服務：依 PlayerOrder 排序玩家列表
"""
from operator import attrgetter
from typing import Iterable, List

from models import Player, PlayerOrder


def sort_players(players: Iterable[Player], order: PlayerOrder = PlayerOrder.ID) -> List[Player]:
    """
    依指定欄位升冪排序（stable，相同值保留原順序）

    參數：
        players: 玩家序列（不會被修改）
        order: 排序欄位，預設 ID

    返回：
        新的已排序 list

    範例：
        sort_players(players, PlayerOrder.NAME)        # 字典序
        sort_players(players, PlayerOrder.BIRTHDAY)    # 時間先後
    """
    return sorted(players, key=attrgetter(order.field_name))
