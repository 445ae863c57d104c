from flask import Blueprint, request, jsonify
from pydantic import ValidationError as PydanticValidationError

from thrift_finder.core.errors import ConfigurationError, ValidationError
from thrift_finder.llm import gemini_client
from thrift_finder.models.request_models import SummaryRequest
from thrift_finder.services.summary_service import summarize_place

summarize_bp = Blueprint("summarize", __name__)


# Body: { name, address, category, rating, website, phone }
@summarize_bp.route("/summarize", methods=["POST"])
def summarize():
    if not gemini_client.is_configured():
        raise ConfigurationError("GEMINI_API_KEY not configured")

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    if not data.get("name"):
        raise ValidationError("Missing store name")

    try:
        req = SummaryRequest(**data)
    except PydanticValidationError as e:
        raise ValidationError("Invalid request", detail=str(e)) from e

    return jsonify(summarize_place(req).model_dump()), 200
