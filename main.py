import structlog
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from thrift_finder.core.config import settings
from thrift_finder.core.errors import AppError
from thrift_finder.core.logging import configure_logging
from thrift_finder.api.routes import register_api

logger = structlog.get_logger(__name__)


def create_app():
    configure_logging()

    app = Flask(__name__)
    app.config['SECRET_KEY'] = settings.SECRET_KEY

    CORS(
        app,
        resources={r"/api/*": {"origins": "*"}},
        supports_credentials=False,
    )

    register_api(app)

    @app.route("/api/health")
    def health():
        return jsonify({"ok": True, "message": "Backend running"}), 200

    @app.errorhandler(AppError)
    def handle_app_error(err):
        if err.status_code >= 500:
            logger.error("request_failed", error=err.message, detail=err.detail)
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(404)
    def handle_not_found(err):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(err):
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        return jsonify({"error": err.name}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        logger.exception("unhandled_error")
        return jsonify({"error": "Server error", "detail": str(err)}), 500

    return app


if __name__ == "__main__":
    app = create_app()
    logger.info("server_listening", url=f"http://localhost:{settings.PORT}")
    app.run(host="0.0.0.0", port=settings.PORT, debug=settings.ENV.lower() == "development")
