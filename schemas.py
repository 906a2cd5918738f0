"""
Request / Response schemas

欄位名稱在 wire 上使用 camelCase（untilNextLevel、minExperience...），
birthday 以 epoch milliseconds（UTC）傳輸
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from models import Race, Profession
from services.date_service import date_to_millis


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlayerFields(CamelModel):
    """建立與更新共用的可寫欄位，全部選填"""
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[int] = None
    banned: Optional[bool] = None
    experience: Optional[int] = None


class PlayerCreate(PlayerFields):
    """
    建立玩家的請求內容

    所有欄位在 schema 層都是選填，是否齊全由 validation_service 判斷，
    讓缺欄位與格式錯誤走同一條 400 路徑
    """


class PlayerUpdate(PlayerFields):
    """
    部分更新的請求內容

    只有出現在 model_fields_set 且值不是 None 的欄位才會被套用；
    明確送出 null 一樣視為「不修改」，沒有任何欄位可以被清空
    """

    def provided_fields(self) -> dict:
        return {
            field: getattr(self, field)
            for field in self.model_fields_set
            if getattr(self, field) is not None
        }


class PlayerCriteria(CamelModel):
    """列表與計數共用的過濾條件，每個欄位都是獨立選填"""
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[int] = None
    before: Optional[int] = None
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None


class PlayerResponse(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[int] = None
    banned: bool = False
    experience: Optional[int] = None
    level: Optional[int] = None
    until_next_level: Optional[int] = None

    @field_validator("birthday", mode="before")
    @classmethod
    def _birthday_to_millis(cls, value):
        if value is None or isinstance(value, int):
            return value
        return date_to_millis(value)

    @field_validator("banned", mode="before")
    @classmethod
    def _banned_default(cls, value):
        return bool(value)
