from datetime import datetime, timezone
from typing import Annotated, Any
from uuid import UUID, uuid4

from fastapi import FastAPI, status, Body, Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog
import uvicorn

from schemas import Game, ValidationProblem, Welcome
from game_repository import GameRepository
from errors import GameNotFound, GameValidationError
from logging_config import setup_logging
from middleware import RequestLogger
from settings import settings
from validation import BODY_KEY

setup_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
log = structlog.stdlib.get_logger()

app = FastAPI(title='Games API')
repository = GameRepository.seeded()


def get_repository() -> GameRepository:
    return repository


Repository = Annotated[GameRepository, Depends(get_repository)]


def validation_problem(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationProblem(errors=errors).model_dump()
    )


@app.exception_handler(RequestValidationError)
def unreadable_body(request: Request, exc: RequestValidationError):
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        errors.setdefault(BODY_KEY, []).append(error['msg'])

    log.info('Unreadable request body', path=request.url.path)
    return validation_problem(errors)


@app.get('/', response_model=Welcome)
def welcome():
    return Welcome(
        message='Welcome to the Games API',
        request_id=uuid4(),
        date_time=datetime.now(timezone.utc)
    )


@app.get('/games', response_model=list[Game])
def get_games(repository: Repository):
    return repository.find_games()


@app.get('/games/{game_id:uuid}', response_model=Game, responses={404: {}})
def get_game(game_id: UUID, repository: Repository):
    game = repository.find_game(game_id)
    if game is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return game


@app.post('/games',
          response_model=Game,
          status_code=status.HTTP_201_CREATED,
          responses={400: {'model': ValidationProblem}})
def add_game(candidate: Annotated[Any, Body()], response: Response, repository: Repository):
    try:
        game = repository.add_game(candidate)
    except GameValidationError as invalid:
        return validation_problem(invalid.errors)

    response.headers['Location'] = str(app.url_path_for('get_game', game_id=game.id))
    return game


@app.put('/games/{game_id:uuid}',
         status_code=status.HTTP_204_NO_CONTENT,
         responses={400: {'model': ValidationProblem}, 404: {}})
def update_game(game_id: UUID, candidate: Annotated[Any, Body()], repository: Repository):
    try:
        repository.update_game(game_id, candidate)
    except GameNotFound:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    except GameValidationError as invalid:
        return validation_problem(invalid.errors)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.delete('/games/{game_id:uuid}', status_code=status.HTTP_204_NO_CONTENT, responses={404: {}})
def delete_game(game_id: UUID, repository: Repository):
    try:
        repository.delete_game(game_id)
    except GameNotFound:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


app.add_middleware(RequestLogger)


if __name__ == '__main__':
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
