# thrift_finder/services/data_normalizer.py

import structlog

from thrift_finder.models.response_models import GeoCenter, PlaceResult
from thrift_finder.services.geocoding_service import distance_meters

logger = structlog.get_logger(__name__)


def is_number(value) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def has_valid_coordinates(raw: dict) -> bool:
    location = raw.get("location")
    if not isinstance(location, dict):
        return False
    return is_number(location.get("latitude")) and is_number(location.get("longitude"))


def normalize_place(raw: dict, category: str, center: GeoCenter = None):
    """
    Convert a raw Places API (New) record to PlaceResult.

    Returns None when the record has no usable coordinates, or when its
    fields don't fit PlaceResult; such places are dropped from the response.
    """
    if not has_valid_coordinates(raw):
        return None

    location = raw["location"]
    lat = location["latitude"]
    lng = location["longitude"]

    display_name = raw.get("displayName")
    if not isinstance(display_name, dict):
        display_name = {}

    try:
        return PlaceResult(
            id=raw["id"],
            name=display_name.get("text") or "Unknown",
            address=raw.get("formattedAddress") or "",
            lat=lat,
            lng=lng,
            types=list(raw.get("types") or []),
            rating=raw.get("rating"),
            rating_count=raw.get("userRatingCount"),
            maps_url=raw.get("googleMapsUri") or None,
            website=raw.get("websiteUri") or None,
            phone=raw.get("nationalPhoneNumber") or None,
            category=category,
            distance_meters=distance_meters(center, lat, lng) if center else None,
        )
    except (ValueError, TypeError) as e:
        # pydantic's ValidationError is a ValueError; so is geopy's out-of-range latitude
        logger.warning("place_record_skipped", place_id=raw.get("id"), error=str(e))
        return None
