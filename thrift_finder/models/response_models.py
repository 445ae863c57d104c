from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class GeoCenter(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class PlaceResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    address: str
    lat: float
    lng: float
    types: List[str] = []
    rating: Optional[float] = None
    rating_count: Optional[int] = Field(None, alias="ratingCount")
    maps_url: Optional[str] = Field(None, alias="mapsUrl")
    website: Optional[str] = None
    phone: Optional[str] = None
    category: str
    distance_meters: Optional[float] = Field(None, alias="distanceMeters")


class SearchResponse(BaseModel):
    center: GeoCenter
    places: List[PlaceResult]


class SummaryResponse(BaseModel):
    name: str
    summary: str
