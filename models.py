"""
資料模型

Player 是唯一的 entity，Race / Profession / PlayerOrder 是封閉的 enum
"""
import enum

from sqlalchemy import Boolean, Column, Date, Enum, Integer, String

from database import Base


class Race(str, enum.Enum):
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, enum.Enum):
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class PlayerOrder(str, enum.Enum):
    """列表排序欄位，值對應 Player 的屬性名稱"""
    ID = "ID"
    NAME = "NAME"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"

    @property
    def field_name(self) -> str:
        return self.value.lower()


class Player(Base):
    __tablename__ = "player"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(12))
    title = Column(String(30))
    race = Column(Enum(Race, native_enum=False, length=20))
    profession = Column(Enum(Profession, native_enum=False, length=20))
    experience = Column(Integer)
    level = Column(Integer)
    until_next_level = Column("untilNextLevel", Integer)
    birthday = Column(Date)
    banned = Column(Boolean, default=False)

    def __repr__(self):
        return f"<Player id={self.id} name={self.name!r} level={self.level}>"
