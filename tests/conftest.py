"""
Pytest configuration and fixtures for Player Registry tests
"""
import os
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from database import Base, get_db  # noqa: E402
from models import Player, Race, Profession  # noqa: E402
from core.player_manager import PlayerManager  # noqa: E402
from core.player_store import SqlPlayerStore  # noqa: E402
from services.date_service import date_to_millis  # noqa: E402
from services.level_service import apply_level_stats  # noqa: E402


@pytest.fixture(scope="function")
def engine():
    """每個測試一個全新的 in-memory SQLite"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def manager(db_session):
    return PlayerManager(SqlPlayerStore(db_session))


@pytest.fixture(scope="function")
def client(engine):
    """TestClient，get_db 改成測試用 engine"""
    from fastapi.testclient import TestClient
    from main import app

    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def kamirage_payload():
    return {
        "name": "Kamirage",
        "title": "Hero",
        "race": "ELF",
        "profession": "WARRIOR",
        "experience": 0,
        "birthday": date_to_millis(date(2020, 1, 1)),
    }


def make_player(
    id,
    name="Player",
    title="Adventurer",
    race=Race.HUMAN,
    profession=Profession.WARRIOR,
    experience=0,
    birthday=date(2010, 1, 1),
    banned=False,
):
    """建立一個未保存的 Player，level / untilNextLevel 已計算好"""
    player = Player(
        id=id,
        name=name,
        title=title,
        race=race,
        profession=profession,
        experience=experience,
        birthday=birthday,
        banned=banned,
    )
    apply_level_stats(player)
    return player


@pytest.fixture(scope="function")
def sample_players():
    return [
        make_player(1, name="Kamirage", title="Hero", race=Race.ELF,
                    experience=0, birthday=date(2020, 1, 1)),
        make_player(2, name="Ignis", title="Fire Mage", race=Race.HUMAN,
                    profession=Profession.SORCERER, experience=1000,
                    birthday=date(2005, 6, 15), banned=True),
        make_player(3, name="Dorin", title="Stone Shield", race=Race.DWARF,
                    profession=Profession.PALADIN, experience=62_500,
                    birthday=date(2012, 3, 30)),
        make_player(4, name="Arwen", title="Evenstar", race=Race.ELF,
                    profession=Profession.CLERIC, experience=5_000_000,
                    birthday=date(2001, 11, 2)),
        make_player(5, name="Gorbag", title="Hero of Mordor", race=Race.ORC,
                    profession=Profession.ROGUE, experience=300,
                    birthday=date(2012, 3, 30), banned=True),
    ]


@pytest.fixture(scope="function")
def player_factory():
    return make_player
