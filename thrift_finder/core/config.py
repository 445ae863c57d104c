import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    ENV = os.getenv("ENV", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    SECRET_KEY = os.getenv("SECRET_KEY", "secret")
    PORT = int(os.getenv("PORT", 4000))

    # Server-side secrets
    GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY")
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

    # Handed to the browser client
    API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:4000")
    MAPS_BROWSER_KEY = os.getenv("MAPS_BROWSER_KEY")

    GEOCODE_URL = os.getenv("GEOCODE_URL", "https://maps.googleapis.com/maps/api/geocode/json")
    PLACES_BASE_URL = os.getenv("PLACES_BASE_URL", "https://places.googleapis.com/v1")
    PLACES_LANGUAGE_CODE = os.getenv("PLACES_LANGUAGE_CODE", "en")

    DEFAULT_RADIUS_METERS = int(os.getenv("DEFAULT_RADIUS_METERS", 7000))
    MIN_RADIUS_METERS = 1000
    MAX_RADIUS_METERS = 50000
    MAX_RESULTS_PER_CATEGORY = int(os.getenv("MAX_RESULTS_PER_CATEGORY", 20))

    HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", 15))
    SEARCH_WORKERS = int(os.getenv("SEARCH_WORKERS", 4))

settings = Settings()
