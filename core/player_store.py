"""
Player Store：PlayerManager 唯一的儲存介面

PlayerManager 只透過這五個操作碰資料：
- load_all: 取得當下全部玩家的快照
- exists / get: 依 id 查詢
- save: 新增（指派 id）或覆寫
- delete: 依 id 刪除
"""
from typing import List, Optional, Protocol

from sqlalchemy.orm import Session
import logging

from models import Player
from database import transactional

logger = logging.getLogger(__name__)


class PlayerStore(Protocol):
    def load_all(self) -> List[Player]: ...

    def exists(self, player_id: int) -> bool: ...

    def get(self, player_id: int) -> Optional[Player]: ...

    def save(self, player: Player) -> Player: ...

    def delete(self, player_id: int) -> None: ...


class SqlPlayerStore:
    """以 SQLAlchemy Session 實作的 PlayerStore"""

    def __init__(self, db: Session):
        self.db = db

    def load_all(self) -> List[Player]:
        return self.db.query(Player).order_by(Player.id).all()

    def exists(self, player_id: int) -> bool:
        return self.db.query(
            self.db.query(Player).filter(Player.id == player_id).exists()
        ).scalar()

    def get(self, player_id: int) -> Optional[Player]:
        return self.db.get(Player, player_id)

    @transactional
    def save(self, player: Player) -> Player:
        """
        新增或覆寫玩家

        注意：
            - 使用 @transactional，自動處理 commit/rollback
            - flush 之後 player.id 就會被指派
        """
        self.db.add(player)
        self.db.flush()
        return player

    @transactional
    def delete(self, player_id: int) -> None:
        self.db.query(Player).filter(Player.id == player_id).delete()
