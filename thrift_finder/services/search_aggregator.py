# thrift_finder/services/search_aggregator.py
"""
Search aggregation: geocode -> per-category text searches -> merge -> filter.

Category searches run on a small thread pool. Each task returns its own list
of raw records and the merge walks those lists in CATEGORY_SPECS order, so
the first-seen-wins dedup (and therefore the category a shared place ends up
with) does not depend on which request finishes first.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence, Tuple

import structlog

from thrift_finder.core.categories import ALL_CATEGORIES, CATEGORY_SPECS, CategorySpec
from thrift_finder.core.config import settings
from thrift_finder.core.errors import UpstreamError
from thrift_finder.models.request_models import SearchQuery
from thrift_finder.models.response_models import GeoCenter, PlaceResult, SearchResponse
from thrift_finder.services.data_normalizer import normalize_place
from thrift_finder.services.geocoding_service import geocode_text_location, require_maps_key
from thrift_finder.services.places_service import search_text

logger = structlog.get_logger(__name__)


def _search_category(
    spec: CategorySpec, location_text: str, center: GeoCenter, radius_m: int, api_key: str
) -> list:
    text_query = f"{spec.query_text} near {location_text}"
    try:
        return search_text(text_query, center, radius_m, api_key)
    except UpstreamError as e:
        # one failing category only costs its own results
        logger.warning(
            "category_search_failed",
            category=spec.category_label,
            text_query=text_query,
            error=e.detail or e.message,
        )
        return []


def _run_category_searches(
    specs: Sequence[CategorySpec], location_text: str, center: GeoCenter, radius_m: int, api_key: str
) -> List[Tuple[CategorySpec, list]]:
    workers = max(1, min(settings.SEARCH_WORKERS, len(specs)))

    if workers == 1:
        return [
            (spec, _search_category(spec, location_text, center, radius_m, api_key))
            for spec in specs
        ]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_search_category, spec, location_text, center, radius_m, api_key)
            for spec in specs
        ]
        return [(spec, future.result()) for spec, future in zip(specs, futures)]


def merge_results(
    batches: Sequence[Tuple[CategorySpec, list]], center: GeoCenter = None
) -> List[PlaceResult]:
    """Dedup by provider id (first occurrence wins) and shape each record."""
    seen = set()
    out = []

    for spec, records in batches:
        for raw in records:
            if not isinstance(raw, dict):
                continue
            place_id = raw.get("id")
            if not isinstance(place_id, str) or not place_id or place_id in seen:
                continue
            seen.add(place_id)

            place = normalize_place(raw, spec.category_label, center)
            if place is not None:
                out.append(place)

    return out


def apply_list_controls(places: List[PlaceResult], category=None, sort="relevance") -> List[PlaceResult]:
    if category and category != ALL_CATEGORIES:
        places = [p for p in places if category in p.category]

    if sort == "rating":
        places = sorted(places, key=lambda p: p.rating or 0, reverse=True)
    elif sort == "distance":
        places = sorted(
            places,
            key=lambda p: (p.distance_meters is None, p.distance_meters or 0),
        )
    return list(places)


def aggregate_search(query: SearchQuery, specs: Sequence[CategorySpec] = CATEGORY_SPECS) -> SearchResponse:
    api_key = require_maps_key()

    center = geocode_text_location(query.text)
    logger.info(
        "search_geocoded",
        query=query.text,
        lat=center.lat,
        lng=center.lng,
        radius_m=query.radius_meters,
    )

    batches = _run_category_searches(specs, query.text, center, query.radius_meters, api_key)
    places = merge_results(batches, center)
    places = apply_list_controls(places, query.category, query.sort)

    logger.info("search_completed", query=query.text, count=len(places))
    return SearchResponse(center=center, places=places)
