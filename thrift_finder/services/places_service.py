# thrift_finder/services/places_service.py
"""
Google Places API (New) text search.

Only the request is built here; turning provider records into PlaceResult
lives in ``data_normalizer``.
"""

import requests
import structlog

from thrift_finder.core.config import settings
from thrift_finder.core.errors import UpstreamError
from thrift_finder.models.response_models import GeoCenter

logger = structlog.get_logger(__name__)

_session = requests.Session()

# Keeps the payload down to the attributes PlaceResult needs
FIELD_MASK = ",".join(
    [
        "places.id",
        "places.displayName",
        "places.formattedAddress",
        "places.location",
        "places.types",
        "places.googleMapsUri",
        "places.websiteUri",
        "places.nationalPhoneNumber",
        "places.rating",
        "places.userRatingCount",
    ]
)


def build_text_search_body(text_query: str, center: GeoCenter, radius_m: int) -> dict:
    return {
        "textQuery": text_query,
        "maxResultCount": settings.MAX_RESULTS_PER_CATEGORY,
        "languageCode": settings.PLACES_LANGUAGE_CODE,
        "locationBias": {
            "circle": {
                "center": {"latitude": center.lat, "longitude": center.lng},
                "radius": radius_m,
            }
        },
    }


def search_text(text_query: str, center: GeoCenter, radius_m: int, api_key: str) -> list:
    """
    Run one searchText request biased to ``center`` and return the raw
    ``places`` records (possibly empty).
    """
    url = f"{settings.PLACES_BASE_URL.rstrip('/')}/places:searchText"
    headers = {
        "Content-Type": "application/json",
        "X-Goog-Api-Key": api_key,
        "X-Goog-FieldMask": FIELD_MASK,
    }

    try:
        resp = _session.post(
            url,
            headers=headers,
            json=build_text_search_body(text_query, center, radius_m),
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        raise UpstreamError("Places text search failed", detail=str(e)) from e

    if not isinstance(data, dict):
        raise UpstreamError("Places text search failed", detail=f"unexpected body: {data!r}")

    places = data.get("places") or []
    if not isinstance(places, list):
        raise UpstreamError("Places text search failed", detail="places is not a list")
    logger.debug("places_text_search", text_query=text_query, count=len(places))
    return places
