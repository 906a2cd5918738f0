"""
PlayerManager Tests - 建立、查詢、更新、刪除、列表

使用 in-memory SQLite 的 SqlPlayerStore
"""
from datetime import date

import pytest

from core.exceptions import InvalidRequest, PlayerNotFound
from models import PlayerOrder, Race, Profession
from schemas import PlayerCreate, PlayerCriteria, PlayerUpdate
from services.date_service import date_to_millis


def candidate(**overrides):
    data = {
        "name": "Kamirage",
        "title": "Hero",
        "race": Race.ELF,
        "profession": Profession.WARRIOR,
        "experience": 0,
        "birthday": date_to_millis(date(2020, 1, 1)),
    }
    data.update(overrides)
    return PlayerCreate(**data)


@pytest.fixture
def five_players(manager):
    names = ["Kamirage", "Ignis", "Dorin", "Arwen", "Gorbag"]
    return [
        manager.create_player(candidate(name=name, experience=index * 1000))
        for index, name in enumerate(names)
    ]


class TestCreatePlayer:
    def test_kamirage(self, manager):
        player = manager.create_player(candidate())

        assert player.id > 0
        assert player.level == 0
        assert player.until_next_level == 100
        assert player.banned is False
        assert player.birthday == date(2020, 1, 1)

    def test_round_trip(self, manager):
        created = manager.create_player(candidate(experience=1000, banned=True))
        fetched = manager.get_player(created.id)

        assert fetched.name == "Kamirage"
        assert fetched.title == "Hero"
        assert fetched.race == Race.ELF
        assert fetched.profession == Profession.WARRIOR
        assert fetched.experience == 1000
        assert fetched.birthday == date(2020, 1, 1)
        assert fetched.banned is True
        assert (fetched.level, fetched.until_next_level) == (4, 500)

    @pytest.mark.parametrize("overrides", [
        {"name": ""},
        {"name": "a" * 13},
        {"name": None},
        {"title": ""},
        {"title": "t" * 31},
        {"experience": -1},
        {"experience": 10_000_001},
        {"experience": None},
        {"birthday": date_to_millis(date(1999, 12, 31))},
        {"birthday": date_to_millis(date(3001, 1, 1))},
        {"birthday": -1},
        {"birthday": None},
    ])
    def test_invalid_candidate(self, manager, overrides):
        with pytest.raises(InvalidRequest):
            manager.create_player(candidate(**overrides))
        assert manager.count_players(PlayerCriteria()) == 0

    def test_empty_candidate(self, manager):
        with pytest.raises(InvalidRequest):
            manager.create_player(PlayerCreate())

    def test_race_and_profession_may_be_omitted(self, manager):
        """必要欄位檢查是 OR：race / profession 缺席仍可建立"""
        player = manager.create_player(candidate(race=None, profession=None))
        assert player.race is None
        assert player.profession is None


class TestGetPlayer:
    @pytest.mark.parametrize("player_id", [0, -1])
    def test_invalid_id(self, manager, player_id):
        with pytest.raises(InvalidRequest):
            manager.get_player(player_id)

    def test_not_found(self, manager):
        with pytest.raises(PlayerNotFound) as exc_info:
            manager.get_player(99999)
        assert exc_info.value.player_id == 99999


class TestUpdatePlayer:
    def test_experience_out_of_range(self, manager, five_players):
        with pytest.raises(InvalidRequest):
            manager.update_player(5, PlayerUpdate(experience=10_000_001))
        assert manager.get_player(5).experience == 4000

    def test_birthday_out_of_range(self, manager, five_players):
        update = PlayerUpdate(name="Changed", birthday=date_to_millis(date(1999, 1, 1)))
        with pytest.raises(InvalidRequest):
            manager.update_player(1, update)
        assert manager.get_player(1).name == "Kamirage"

    def test_partial_update_keeps_other_fields(self, manager, five_players):
        player = manager.update_player(2, PlayerUpdate(title="Fire Mage"))

        assert player.title == "Fire Mage"
        assert player.name == "Ignis"
        assert player.experience == 1000
        assert player.race == Race.ELF

    def test_name_and_title_are_not_validated(self, manager, five_players):
        player = manager.update_player(2, PlayerUpdate(name="n" * 12 + "!"))
        assert player.name == "n" * 12 + "!"

    def test_explicit_null_leaves_field_unchanged(self, manager, five_players):
        update = PlayerUpdate(name=None, banned=True)
        assert "name" in update.model_fields_set

        player = manager.update_player(1, update)

        assert player.name == "Kamirage"
        assert player.banned is True

    def test_experience_recomputes_level(self, manager, five_players):
        player = manager.update_player(1, PlayerUpdate(experience=1000))
        assert (player.level, player.until_next_level) == (4, 500)

    def test_level_recomputed_without_experience(self, manager, five_players):
        player = manager.update_player(3, PlayerUpdate())
        assert (player.level, player.until_next_level) == (5, 100)

    def test_race_and_profession(self, manager, five_players):
        player = manager.update_player(
            3, PlayerUpdate(race=Race.TROLL, profession=Profession.DRUID)
        )

        assert player.race == Race.TROLL
        assert player.profession == Profession.DRUID
        assert player.name == "Dorin"
        assert player.title == "Hero"
        assert player.experience == 2000
        assert player.birthday == date(2020, 1, 1)
        assert manager.get_player(3).race == Race.TROLL

    def test_birthday_update(self, manager, five_players):
        millis = date_to_millis(date(2999, 12, 31))
        player = manager.update_player(4, PlayerUpdate(birthday=millis))
        assert player.birthday == date(2999, 12, 31)

    def test_invalid_id(self, manager):
        with pytest.raises(InvalidRequest):
            manager.update_player(0, PlayerUpdate(name="x"))

    def test_not_found(self, manager):
        with pytest.raises(PlayerNotFound):
            manager.update_player(42, PlayerUpdate(name="x"))


class TestDeletePlayer:
    def test_delete(self, manager, five_players):
        manager.delete_player(3)

        with pytest.raises(PlayerNotFound):
            manager.get_player(3)
        assert manager.count_players(PlayerCriteria()) == 4

    def test_invalid_id(self, manager):
        with pytest.raises(InvalidRequest):
            manager.delete_player(-5)

    def test_not_found(self, manager):
        with pytest.raises(PlayerNotFound):
            manager.delete_player(99999)


class TestListPlayers:
    def test_default_page(self, manager, five_players):
        page = manager.list_players(PlayerCriteria())
        assert [p.id for p in page] == [1, 2, 3]

    def test_second_page_by_name(self, manager, five_players):
        # Arwen(4), Dorin(3), Gorbag(5), Ignis(2), Kamirage(1)
        page = manager.list_players(PlayerCriteria(), PlayerOrder.NAME, 1, 3)
        assert [p.name for p in page] == ["Ignis", "Kamirage"]

    def test_filter_then_page(self, manager, five_players):
        criteria = PlayerCriteria(min_experience=1000)
        page = manager.list_players(criteria, PlayerOrder.EXPERIENCE, 0, 2)

        assert [p.experience for p in page] == [1000, 2000]
        assert manager.count_players(criteria) == 4

    def test_name_substring(self, manager, five_players):
        page = manager.list_players(PlayerCriteria(name="ir"))
        assert [p.name for p in page] == ["Kamirage"]

    def test_page_past_the_end(self, manager, five_players):
        assert manager.list_players(PlayerCriteria(), page_number=5) == []

    @pytest.mark.parametrize("page_number, page_size", [(-1, 3), (0, 0)])
    def test_invalid_page(self, manager, page_number, page_size):
        with pytest.raises(InvalidRequest):
            manager.list_players(PlayerCriteria(), PlayerOrder.ID, page_number, page_size)
