from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from threading import Lock
from typing import Any
from uuid import UUID, uuid4

import structlog

from errors import GameNotFound, GameValidationError
from schemas import Game
from validation import validate_game

log = structlog.stdlib.get_logger()

SEED_GAMES = (
    {'name': 'Street Fighter II', 'genre': 'Fighting', 'price': Decimal('19.99'), 'release_date': date(1992, 7, 15)},
    {'name': 'Final Fantasy XIV', 'genre': 'Roleplaying', 'price': Decimal('59.99'), 'release_date': date(2010, 9, 30)},
    {'name': 'FIFA 23', 'genre': 'Sports', 'price': Decimal('69.99'), 'release_date': date(2022, 9, 27)},
)


class GameRepository:
    """In-process game store.

    Sync endpoints run on a worker thread pool, so every read and write
    goes through the same lock.
    """

    def __init__(self, games: Iterable[Game] = ()):
        self._lock = Lock()
        self._games: list[Game] = list(games)

    @classmethod
    def seeded(cls) -> 'GameRepository':
        return cls(Game(id=uuid4(), **game) for game in SEED_GAMES)

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def _index_of(self, game_id: UUID) -> int | None:
        for index, game in enumerate(self._games):
            if game.id == game_id:
                return index
        return None

    def find_games(self) -> list[Game]:
        with self._lock:
            return list(self._games)

    def find_game(self, game_id: UUID) -> Game | None:
        with self._lock:
            index = self._index_of(game_id)
            return self._games[index] if index is not None else None

    def add_game(self, candidate: Any) -> Game:
        result = validate_game(candidate)
        if not result.is_valid:
            raise GameValidationError(result.errors)

        with self._lock:
            game_id = uuid4()
            while self._index_of(game_id) is not None:
                game_id = uuid4()

            game = Game(id=game_id, **result.game.model_dump())
            self._games.append(game)
            count = len(self._games)

        log.info('Game added', game_id=str(game.id), count=count)
        return game

    def update_game(self, game_id: UUID, candidate: Any) -> Game:
        with self._lock:
            index = self._index_of(game_id)
            if index is None:
                raise GameNotFound(game_id)

            result = validate_game(candidate)
            if not result.is_valid:
                raise GameValidationError(result.errors)

            game = Game(id=game_id, **result.game.model_dump())
            self._games[index] = game

        log.info('Game updated', game_id=str(game_id))
        return game

    def delete_game(self, game_id: UUID):
        with self._lock:
            index = self._index_of(game_id)
            if index is None:
                raise GameNotFound(game_id)

            del self._games[index]
            count = len(self._games)

        log.info('Game deleted', game_id=str(game_id), count=count)
