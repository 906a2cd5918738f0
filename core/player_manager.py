"""
Player Manager：管理 Player 的完整生命週期

職責：
1. 列表與計數（過濾 -> 排序 -> 分頁）
2. 建立 Player（驗證 + 計算等級）
3. 查詢、部分更新、刪除 Player

原則：
- 資料存取只透過注入的 PlayerStore，不直接碰 Session
- 先驗證，全部通過才寫入（all-or-nothing）
- 每個操作都拿一份暫時的 Player，改完交回 store 保存
"""
from typing import List
import logging

from models import Player, PlayerOrder
from schemas import PlayerCreate, PlayerCriteria, PlayerUpdate
from core.player_store import PlayerStore
from core.exceptions import InvalidRequest, PlayerNotFound
from services.date_service import millis_to_date
from services.filter_service import filter_players
from services.level_service import apply_level_stats
from services.pagination_service import paginate
from services.sort_service import sort_players
from services.validation_service import (
    has_required_fields,
    is_valid_name,
    is_valid_title,
    is_valid_experience,
    is_valid_birth_year,
)

logger = logging.getLogger(__name__)

# 不需驗證、有值就直接覆寫的欄位
PLAIN_UPDATE_FIELDS = ("name", "title", "race", "profession", "banned")


def _parse_birthday(millis):
    if millis is None:
        return None
    try:
        return millis_to_date(millis)
    except ValueError as e:
        raise InvalidRequest(str(e)) from e


class PlayerManager:
    """Player 生命週期管理器"""

    def __init__(self, store: PlayerStore):
        self.store = store

    def list_players(
        self,
        criteria: PlayerCriteria,
        order: PlayerOrder = PlayerOrder.ID,
        page_number: int = 0,
        page_size: int = 3,
    ) -> List[Player]:
        """
        取得一頁符合條件的玩家

        流程：
        1. 從 store 載入全部玩家
        2. 過濾
        3. 排序
        4. 分頁

        異常：
            InvalidRequest: page_number < 0 或 page_size <= 0
        """
        if page_number < 0 or page_size <= 0:
            raise InvalidRequest(
                f"Invalid page (pageNumber={page_number}, pageSize={page_size})"
            )

        players = filter_players(self.store.load_all(), criteria)
        return paginate(sort_players(players, order), page_number, page_size)

    def count_players(self, criteria: PlayerCriteria) -> int:
        return len(filter_players(self.store.load_all(), criteria))

    def create_player(self, data: PlayerCreate) -> Player:
        """
        建立新玩家

        前置條件（任一不符合就是 InvalidRequest）：
        1. 至少提供一個必要欄位
        2. name 非空且 <= 12 字
        3. title 非空且 <= 30 字
        4. experience 在 0..10,000,000
        5. birthday 年份在 2000..3000

        流程：
        1. 驗證
        2. 計算 level / untilNextLevel
        3. 交給 store 保存（指派 id）

        返回：
            已保存的 Player
        """
        birthday = _parse_birthday(data.birthday)

        if not has_required_fields(data):
            raise InvalidRequest("No player fields provided")
        if not is_valid_name(data.name):
            raise InvalidRequest(f"Invalid name: {data.name!r}")
        if not is_valid_title(data.title):
            raise InvalidRequest(f"Invalid title: {data.title!r}")
        if not is_valid_experience(data.experience):
            raise InvalidRequest(f"Experience out of range: {data.experience}")
        if not is_valid_birth_year(birthday):
            raise InvalidRequest(f"Birthday out of range: {birthday}")

        player = Player(
            name=data.name,
            title=data.title,
            race=data.race,
            profession=data.profession,
            birthday=birthday,
            banned=bool(data.banned),
            experience=data.experience,
        )
        apply_level_stats(player)

        player = self.store.save(player)
        logger.info(f"Created player {player.id} ({player.name}) at level {player.level}")
        return player

    def get_player(self, player_id: int) -> Player:
        """
        透過 id 取得 Player

        異常：
            InvalidRequest: player_id <= 0
            PlayerNotFound: Player 不存在
        """
        self._check_id(player_id)
        if not self.store.exists(player_id):
            raise PlayerNotFound(player_id)
        return self.store.get(player_id)

    def update_player(self, player_id: int, data: PlayerUpdate) -> Player:
        """
        部分更新玩家

        規則：
        - name / title / race / profession / banned：有值就覆寫，不另外驗證
        - birthday：有值就必須通過年份檢查
        - experience：有值就必須在範圍內
        - level / untilNextLevel 一律重新計算

        異常：
            InvalidRequest: player_id <= 0 或 birthday / experience 不合法
            PlayerNotFound: Player 不存在
        """
        player = self.get_player(player_id)
        fields = data.provided_fields()

        if "birthday" in fields:
            fields["birthday"] = _parse_birthday(fields["birthday"])
            if not is_valid_birth_year(fields["birthday"]):
                raise InvalidRequest(f"Birthday out of range: {fields['birthday']}")
        if "experience" in fields and not is_valid_experience(fields["experience"]):
            raise InvalidRequest(f"Experience out of range: {fields['experience']}")

        for field in PLAIN_UPDATE_FIELDS + ("birthday", "experience"):
            if field in fields:
                setattr(player, field, fields[field])

        apply_level_stats(player)

        player = self.store.save(player)
        logger.info(f"Updated player {player_id} (fields={sorted(fields)})")
        return player

    def delete_player(self, player_id: int) -> None:
        """
        刪除玩家

        異常：
            InvalidRequest: player_id <= 0
            PlayerNotFound: Player 不存在
        """
        self._check_id(player_id)
        if not self.store.exists(player_id):
            raise PlayerNotFound(player_id)

        self.store.delete(player_id)
        logger.info(f"Deleted player {player_id}")

    @staticmethod
    def _check_id(player_id: int) -> None:
        if player_id <= 0:
            raise InvalidRequest(f"Invalid player id: {player_id}")
