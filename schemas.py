import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_serializer
from pydantic.alias_generators import to_camel

NAME_LENGTH = (3, 50)
GENRE_LENGTH = (3, 20)
PRICE_RANGE = (Decimal('1.00'), Decimal('100.00'))

ISO_DATE = re.compile(r'\d{4}-\d{2}-\d{2}')


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GameIn(CamelModel):
    model_config = ConfigDict(extra='ignore')

    name: str = Field(min_length=NAME_LENGTH[0], max_length=NAME_LENGTH[1])
    genre: str = Field(min_length=GENRE_LENGTH[0], max_length=GENRE_LENGTH[1])
    price: Decimal = Field(ge=PRICE_RANGE[0], le=PRICE_RANGE[1])
    release_date: date

    @field_validator('price', mode='before')
    @classmethod
    def price_is_number(cls, price: Any) -> Any:
        if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
            raise ValueError('price must be a JSON number')
        return price

    @field_validator('release_date', mode='before')
    @classmethod
    def release_date_is_calendar_date(cls, release_date: Any) -> Any:
        if isinstance(release_date, datetime):
            raise ValueError('releaseDate must be a date in YYYY-MM-DD format')
        if isinstance(release_date, date):
            return release_date
        if not isinstance(release_date, str) or not ISO_DATE.fullmatch(release_date):
            raise ValueError('releaseDate must be a date in YYYY-MM-DD format')
        return release_date


class Game(GameIn):
    id: UUID

    @field_serializer('price')
    def price_as_number(self, price: Decimal) -> float:
        return float(price)

    @model_serializer(mode='wrap')
    def id_first(self, handler) -> dict[str, Any]:
        data = handler(self)
        return {'id': data.pop('id'), **data}


class Genre(CamelModel):
    id: UUID
    name: str


class Welcome(CamelModel):
    message: str
    request_id: UUID
    date_time: datetime


class ValidationProblem(BaseModel):
    title: str = 'One or more validation errors occurred.'
    status: int = 400
    errors: dict[str, list[str]]
