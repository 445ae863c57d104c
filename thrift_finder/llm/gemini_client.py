import google.generativeai as genai
from thrift_finder.core.config import settings
from thrift_finder.core.errors import ConfigurationError, UpstreamError

# Key the SDK was last configured with; None until the first call succeeds
_configured_key = None

SUMMARY_PROMPT = """Provide a concise, engaging summary (2-3 sentences) about this thrift store:

Name: {name}
Address: {address}
Category: {category}
Rating: {rating}
Website: {website}
Phone: {phone}

Focus on what makes this store unique, its vibe, and why someone should visit. Be friendly and encouraging about thrifting."""


def is_configured() -> bool:
    return bool(settings.GEMINI_API_KEY)


def get_model():
    """
    Return a GenerativeModel, configuring the SDK on first use.

    The key is checked on every call so a process started without it reports
    ConfigurationError instead of failing inside the SDK.
    """
    global _configured_key

    key = settings.GEMINI_API_KEY
    if not key:
        raise ConfigurationError("GEMINI_API_KEY not configured")

    if _configured_key != key:
        genai.configure(api_key=key)
        _configured_key = key

    return genai.GenerativeModel(settings.GEMINI_MODEL)


def build_summary_prompt(name, address=None, category=None, rating=None, website=None, phone=None) -> str:
    return SUMMARY_PROMPT.format(
        name=name,
        address=address or "Not provided",
        category=category or "Thrift Store",
        rating=f"{rating:g}/5" if rating else "No rating",
        website=website or "Not available",
        phone=phone or "Not available",
    )


def generate_text(prompt: str) -> str:
    model = get_model()
    try:
        response = model.generate_content(prompt)
        return response.text
    except Exception as e:
        raise UpstreamError("Gemini request failed", detail=str(e)) from e
