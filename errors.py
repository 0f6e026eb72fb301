from uuid import UUID


class GameStoreError(Exception):
    pass


class GameNotFound(GameStoreError):

    def __init__(self, game_id: UUID):
        super().__init__(f"A game with id {game_id} doesn't exist")
        self.game_id = game_id


class GameValidationError(GameStoreError):

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__(f"Invalid game: {', '.join(errors)}")
        self.errors = errors
