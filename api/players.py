"""
Player API Endpoints

職責：
1. 玩家列表（過濾、排序、分頁）與計數
2. 建立、查詢、更新、刪除玩家

所有業務邏輯集中在 PlayerManager；這裡只負責參數解析與錯誤碼對應：
- InvalidRequest -> 400
- PlayerNotFound -> 404
- 其他未預期錯誤 -> 500
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session
import logging

from database import get_db, get_settings
from models import Race, Profession, PlayerOrder
from schemas import PlayerCreate, PlayerCriteria, PlayerResponse, PlayerUpdate
from core.player_manager import PlayerManager
from core.player_store import SqlPlayerStore
from core.exceptions import InvalidRequest, PlayerNotFound

router = APIRouter(prefix="/rest", tags=["players"])
logger = logging.getLogger(__name__)

# BIGINT 上限，超過的 id 在解析階段就回 400
MAX_PLAYER_ID = 2**63 - 1


def get_player_manager(db: Session = Depends(get_db)) -> PlayerManager:
    """FastAPI dependency：每個 request 一個綁定當前 Session 的 PlayerManager"""
    return PlayerManager(SqlPlayerStore(db))


def get_player_criteria(
    name: Optional[str] = Query(None),
    title: Optional[str] = Query(None),
    race: Optional[Race] = Query(None),
    profession: Optional[Profession] = Query(None),
    after: Optional[int] = Query(None),
    before: Optional[int] = Query(None),
    banned: Optional[bool] = Query(None),
    min_experience: Optional[int] = Query(None, alias="minExperience"),
    max_experience: Optional[int] = Query(None, alias="maxExperience"),
    min_level: Optional[int] = Query(None, alias="minLevel"),
    max_level: Optional[int] = Query(None, alias="maxLevel"),
) -> PlayerCriteria:
    """列表與計數共用的 query parameters"""
    return PlayerCriteria(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


@router.get("/players", response_model=List[PlayerResponse])
def list_players(
    criteria: PlayerCriteria = Depends(get_player_criteria),
    order: PlayerOrder = Query(PlayerOrder.ID),
    page_number: int = Query(0, alias="pageNumber", ge=0),
    page_size: Optional[int] = Query(None, alias="pageSize", gt=0),
    manager: PlayerManager = Depends(get_player_manager),
):
    """
    取得符合條件的玩家（單頁）

    參數：
        criteria: 過濾條件（全部選填）
        order: 排序欄位（預設 ID）
        pageNumber: 頁碼，從 0 開始（預設 0）
        pageSize: 每頁筆數（預設取設定值 default_page_size）
    """
    if page_size is None:
        page_size = get_settings().default_page_size

    try:
        return manager.list_players(criteria, order, page_number, page_size)
    except InvalidRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to list players: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/players/count", response_model=int)
def count_players(
    criteria: PlayerCriteria = Depends(get_player_criteria),
    manager: PlayerManager = Depends(get_player_manager),
):
    """取得符合條件的玩家數量（不排序、不分頁）"""
    try:
        return manager.count_players(criteria)
    except Exception as e:
        logger.error(f"Failed to count players: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/players", response_model=PlayerResponse)
def create_player(
    player_data: PlayerCreate,
    manager: PlayerManager = Depends(get_player_manager),
):
    """
    建立新玩家

    返回：
        建立後的玩家（含 id、level、untilNextLevel）
    """
    try:
        return manager.create_player(player_data)

    except InvalidRequest as e:
        logger.warning(f"Rejected player creation: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to create player: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/players/{player_id}", response_model=PlayerResponse)
def get_player(
    player_id: int = Path(..., le=MAX_PLAYER_ID),
    manager: PlayerManager = Depends(get_player_manager),
):
    try:
        return manager.get_player(player_id)

    except InvalidRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFound:
        raise HTTPException(status_code=404, detail="Player not found")
    except Exception as e:
        logger.error(f"Failed to get player {player_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/players/{player_id}", response_model=PlayerResponse)
def update_player(
    player_data: PlayerUpdate,
    player_id: int = Path(..., le=MAX_PLAYER_ID),
    manager: PlayerManager = Depends(get_player_manager),
):
    """
    部分更新玩家

    只更新有送出且不是 null 的欄位；level / untilNextLevel 一律重新計算
    """
    try:
        return manager.update_player(player_id, player_data)

    except InvalidRequest as e:
        logger.warning(f"Rejected update of player {player_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFound:
        raise HTTPException(status_code=404, detail="Player not found")
    except Exception as e:
        logger.error(f"Failed to update player {player_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.delete("/players/{player_id}")
def delete_player(
    player_id: int = Path(..., le=MAX_PLAYER_ID),
    manager: PlayerManager = Depends(get_player_manager),
):
    try:
        manager.delete_player(player_id)

    except InvalidRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFound:
        raise HTTPException(status_code=404, detail="Player not found")
    except Exception as e:
        logger.error(f"Failed to delete player {player_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
