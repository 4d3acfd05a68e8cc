from decimal import Decimal
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator


def _decimal(value: float) -> str:
    """Render a float positionally, never in exponent form (1e-05 -> 0.00001)."""
    return format(Decimal(repr(value)), "f")


class QueryBase(BaseModel):
    page: int = 0
    per_page: int = 10

    def paging(self) -> dict[str, int]:
        return {"side": self.page, "antPerSide": self.per_page}


class TextQuery(QueryBase):
    kind: Literal["text"] = "text"
    text: str

    @field_validator("text")
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Requires something to search for.")
        return value

    @property
    def endpoint(self) -> str:
        return "sok"

    def params(self) -> dict[str, Any]:
        return {"sokestreng": self.text, **self.paging()}


class RadiusQuery(QueryBase):
    kind: Literal["radius"] = "radius"
    north: FiniteFloat
    east: FiniteFloat
    radius: FiniteFloat = 1.0

    @property
    def endpoint(self) -> str:
        return "radius"

    def params(self) -> dict[str, Any]:
        return {
            "nord": _decimal(self.north),
            "aust": _decimal(self.east),
            "radius": _decimal(self.radius),
            **self.paging(),
        }


class BoundingBoxQuery(QueryBase):
    kind: Literal["box"] = "box"
    north_lower: FiniteFloat
    east_lower: FiniteFloat
    north_upper: FiniteFloat
    east_upper: FiniteFloat

    @property
    def endpoint(self) -> str:
        # Box searches share the radius route, only the keys differ
        return "radius"

    def params(self) -> dict[str, Any]:
        return {
            "nordLL": _decimal(self.north_lower),
            "austLL": _decimal(self.east_lower),
            "nordUR": _decimal(self.north_upper),
            "austUR": _decimal(self.east_upper),
            **self.paging(),
        }


Query = Annotated[
    Union[TextQuery, RadiusQuery, BoundingBoxQuery], Field(discriminator="kind")
]


class SearchStatus(BaseModel):
    ok: bool
    message: Optional[str] = Field(default=None, alias="melding")


class ResponseEnvelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: SearchStatus = Field(alias="sokStatus")
    total_hits: Optional[int] = Field(default=None, alias="totaltAntallTreff")
    # Only sent by the service when there is at least one hit
    addresses: Optional[list[Any]] = Field(default=None, alias="adresser")


class SearchResponse(BaseModel):
    count: int
    addresses: list[Any]
