"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一處理：
- InvalidRequest -> 400
- PlayerNotFound -> 404
"""


class PlayerRegistryException(Exception):
    """所有業務異常的基類"""
    pass


class InvalidRequest(PlayerRegistryException):
    """輸入不合法（id <= 0、欄位驗證失敗、分頁參數錯誤）"""
    pass


class PlayerNotFound(PlayerRegistryException):
    """玩家不存在"""
    def __init__(self, player_id):
        self.player_id = player_id
        super().__init__(f"Player {player_id} not found")
