from concurrent.futures import ThreadPoolExecutor
from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from game_repository import GameRepository
from errors import GameNotFound, GameValidationError

DOOM = {'name': 'Doom', 'genre': 'Action', 'price': 29.99, 'releaseDate': '1993-12-10'}


@pytest.fixture
def repository():
    return GameRepository.seeded()


def test_seeded_games(repository):
    games = repository.find_games()

    assert len(games) == 3
    assert [game.name for game in games] == ['Street Fighter II', 'Final Fantasy XIV', 'FIFA 23']
    assert games[0].price == Decimal('19.99')
    assert games[2].release_date == date(2022, 9, 27)
    assert len({game.id for game in games}) == 3


def test_find_games_returns_copy(repository):
    games = repository.find_games()
    games.clear()

    assert len(repository) == 3


def test_find_missing_game(repository):
    assert repository.find_game(uuid4()) is None


def test_add_game(repository):
    game = repository.add_game(DOOM)

    assert game.name == 'Doom'
    assert game.release_date == date(1993, 12, 10)
    assert repository.find_game(game.id) == game
    assert repository.find_games()[-1] == game


def test_add_invalid_game(repository):
    with pytest.raises(GameValidationError) as invalid:
        repository.add_game({**DOOM, 'genre': 'A'})

    assert 'Genre' in invalid.value.errors
    assert len(repository) == 3


def test_update_game(repository):
    game = repository.find_games()[0]

    updated = repository.update_game(game.id, DOOM)

    assert updated.id == game.id
    assert repository.find_game(game.id).name == 'Doom'
    assert len(repository) == 3


def test_update_missing_game(repository):
    before = repository.find_games()

    with pytest.raises(GameNotFound):
        repository.update_game(uuid4(), DOOM)

    assert repository.find_games() == before


def test_update_missing_game_checks_existence_first(repository):
    with pytest.raises(GameNotFound):
        repository.update_game(uuid4(), {})


def test_update_invalid_game(repository):
    game = repository.find_games()[0]

    with pytest.raises(GameValidationError):
        repository.update_game(game.id, {**DOOM, 'price': 0})

    assert repository.find_game(game.id) == game


def test_delete_game(repository):
    game = repository.find_games()[1]

    repository.delete_game(game.id)

    assert repository.find_game(game.id) is None
    assert len(repository) == 2


def test_delete_missing_game(repository):
    with pytest.raises(GameNotFound):
        repository.delete_game(uuid4())


def test_concurrent_adds(repository):
    with ThreadPoolExecutor(max_workers=8) as pool:
        games = list(pool.map(lambda _: repository.add_game(DOOM), range(200)))

    assert len(repository) == 203
    assert len({game.id for game in games}) == 200
