# thrift_finder/api/routes.py

from thrift_finder.api.endpoints.search import bp as search_bp
from thrift_finder.api.endpoints.summarize import summarize_bp
from thrift_finder.api.endpoints.client_config import config_bp
from thrift_finder.api.test_llm import test_llm_bp

def register_api(app):
    # Register all API blueprints under /api
    app.register_blueprint(search_bp, url_prefix="/api")
    app.register_blueprint(summarize_bp, url_prefix="/api")
    app.register_blueprint(config_bp, url_prefix="/api")
    app.register_blueprint(test_llm_bp, url_prefix="/api")
