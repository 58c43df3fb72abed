"""JSON decoding into typed models."""

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from weathergov.core.errors import DecodingError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def decode(data: bytes, model: type[T]) -> T:
    """Validate a JSON body against ``model``.

    Timestamps are parsed from ISO-8601 text, fractional seconds included.
    Malformed JSON and schema mismatches both raise ``DecodingError``.
    """
    try:
        return _adapter(model).validate_json(data)
    except ValidationError as e:
        raise DecodingError(e) from e
