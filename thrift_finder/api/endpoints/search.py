# thrift_finder/api/endpoints/search.py

from flask import Blueprint, request, jsonify
from pydantic import ValidationError as PydanticValidationError

from thrift_finder.core.errors import ValidationError
from thrift_finder.models.request_models import SearchQuery
from thrift_finder.services.search_aggregator import aggregate_search

bp = Blueprint("search", __name__)


# GET /api/search?q=94103&radius=7000[&category=Thrift Store][&sort=rating]
@bp.route("/search", methods=["GET"])
def search():
    q = (request.args.get("q") or "").strip()
    if not q:
        raise ValidationError("Missing q")

    try:
        query = SearchQuery(
            text=q,
            radius_meters=request.args.get("radius"),
            category=request.args.get("category") or None,
            sort=request.args.get("sort") or "relevance",
        )
    except PydanticValidationError as e:
        raise ValidationError("Invalid request", detail=str(e)) from e

    result = aggregate_search(query)
    return jsonify(result.model_dump(by_alias=True)), 200
