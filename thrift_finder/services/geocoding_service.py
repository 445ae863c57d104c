import requests
import structlog
from geopy.distance import geodesic

from thrift_finder.core.config import settings
from thrift_finder.core.errors import ConfigurationError, NotFoundError, UpstreamError
from thrift_finder.models.response_models import GeoCenter

logger = structlog.get_logger(__name__)

_session = requests.Session()


def require_maps_key() -> str:
    key = settings.GOOGLE_MAPS_API_KEY
    if not key:
        raise ConfigurationError("Missing GOOGLE_MAPS_API_KEY in server environment")
    return key


def geocode_text_location(text: str) -> GeoCenter:
    """
    Convert typed location text -> GeoCenter using the Google Geocoding API.

    Raises NotFoundError with the provider's status and error_message when
    the lookup does not come back "OK" with at least one result.
    """
    key = require_maps_key()

    try:
        resp = _session.get(
            settings.GEOCODE_URL,
            params={"address": text, "key": key},
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.error("geocode_request_failed", query=text, error=str(e))
        raise UpstreamError("Geocoding request failed", detail=str(e)) from e

    results = data.get("results") or []
    status = data.get("status")
    if status != "OK" or not results:
        logger.info("geocode_no_match", query=text, status=status)
        raise NotFoundError(status=status, provider_message=data.get("error_message"))

    location = results[0]["geometry"]["location"]
    return GeoCenter(lat=location["lat"], lng=location["lng"])


def distance_meters(center: GeoCenter, lat, lng):
    """Geodesic distance in meters between the search center and a point."""
    if lat is None or lng is None:
        return None
    return geodesic((center.lat, center.lng), (lat, lng)).meters
