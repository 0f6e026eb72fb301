from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog
from pydantic import ValidationError

from schemas import GameIn, NAME_LENGTH, GENRE_LENGTH, PRICE_RANGE

log = structlog.stdlib.get_logger()

BODY_KEY = '$'

LENGTHS = {
    'Name': NAME_LENGTH,
    'Genre': GENRE_LENGTH,
}


@dataclass
class ValidationResult:
    game: GameIn | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.game is not None and not self.errors


def _field_name(loc: tuple) -> str:
    if not loc:
        return BODY_KEY
    name = str(loc[0])
    return name[:1].upper() + name[1:]


def _message(field_name: str, error: dict[str, Any]) -> str:
    error_type = error['type']

    if error_type == 'missing':
        return f'The {field_name} field is required.'

    if error_type in ('string_too_short', 'string_too_long') and field_name in LENGTHS:
        min_length, max_length = LENGTHS[field_name]
        return (f'The field {field_name} must be a string with a minimum length of {min_length} '
                f'and a maximum length of {max_length}.')

    if error_type in ('greater_than_equal', 'less_than_equal') and field_name == 'Price':
        low, high = PRICE_RANGE
        return f'The field {field_name} must be between {low} and {high}.'

    return error['msg']


def validate_game(candidate: Any) -> ValidationResult:
    if not isinstance(candidate, Mapping):
        return ValidationResult(errors={BODY_KEY: ['The request body must be a JSON object.']})

    try:
        game = GameIn.model_validate(candidate)
    except ValidationError as invalid:
        errors: dict[str, list[str]] = {}
        for error in invalid.errors():
            field_name = _field_name(error['loc'])
            message = _message(field_name, error)
            if message not in errors.setdefault(field_name, []):
                errors[field_name].append(message)

        log.info('Game rejected', fields=sorted(errors))
        return ValidationResult(errors=errors)

    return ValidationResult(game=game)
