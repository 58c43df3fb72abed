"""Common types and schemas shared across resource models."""

from dataclasses import dataclass
from typing import Annotated

from pydantic import AwareDatetime, BaseModel, Strict
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair. Ranges are not validated."""

    latitude: float
    longitude: float

    @property
    def path_string(self) -> str:
        return f"{self.latitude},{self.longitude}"

    def __str__(self) -> str:
        return self.path_string

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        """Parse ``"lat,lon"`` as produced by ``path_string``."""
        lat, sep, lon = text.partition(",")
        if not sep:
            raise ValueError(f"Expected 'lat,lon', got {text!r}")
        return cls(float(lat), float(lon))


# ISO-8601 with an explicit offset. Epoch numbers, date-only and naive
# strings fail validation.
Timestamp = Annotated[AwareDatetime, Strict()]


class ApiModel(BaseModel):
    """Base for API resources: immutable, camelCase on the wire.

    Validation is strict, so a payload whose types differ from the schema
    (a quoted number, say) fails instead of being coerced.
    """

    model_config = {
        "strict": True,
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class QuantitativeValue(ApiModel):
    value: float | None = None
    unit_code: str | None = None
    quality_control: str | None = None


class Pagination(ApiModel):
    next: str | None = None
