from flask import Blueprint, jsonify

from thrift_finder.core.config import settings

config_bp = Blueprint("client_config", __name__)


@config_bp.route("/config", methods=["GET"])
def client_config():
    """Values the browser client needs to talk to us and draw the map."""
    return jsonify({
        "apiBase": settings.API_BASE_URL,
        "mapsBrowserKey": settings.MAPS_BROWSER_KEY,
    }), 200
