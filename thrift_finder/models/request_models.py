# thrift_finder/models/request_models.py
from pydantic import BaseModel, field_validator
from typing import Literal, Optional

from thrift_finder.core.config import settings


def clamp_radius(radius_m) -> int:
    """Clamp a search radius into the range the places provider accepts."""
    return int(max(settings.MIN_RADIUS_METERS, min(settings.MAX_RADIUS_METERS, radius_m)))


class SearchQuery(BaseModel):
    text: str
    radius_meters: int = settings.DEFAULT_RADIUS_METERS

    # List controls mirrored from the client's filter/sort menus
    category: Optional[str] = None
    sort: Literal["relevance", "rating", "distance"] = "relevance"

    @field_validator("text")
    @classmethod
    def _strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Missing q")
        return v

    @field_validator("radius_meters", mode="before")
    @classmethod
    def _clamp(cls, v):
        if v is None or v == "":
            return settings.DEFAULT_RADIUS_METERS
        return clamp_radius(float(v))


class SummaryRequest(BaseModel):
    name: str
    address: Optional[str] = None
    category: Optional[str] = None
    rating: Optional[float] = None
    website: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _require_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Missing store name")
        return v
