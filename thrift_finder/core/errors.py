from typing import Any, Dict, Optional


class AppError(Exception):
    """Base for errors that are turned into a JSON body at the request boundary."""

    status_code = 500
    error = "Server error"

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        super().__init__(message or self.error)
        self.message = message or self.error
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class ValidationError(AppError):
    """Missing or malformed client input."""

    status_code = 400
    error = "Invalid request"


class ConfigurationError(AppError):
    """A required server credential is not configured."""

    status_code = 500
    error = "Server misconfigured"


class NotFoundError(AppError):
    """The upstream provider reported no match.

    ``status`` and ``provider_message`` are forwarded exactly as the provider
    sent them.
    """

    status_code = 404
    error = "Location not found"

    def __init__(self, status: Optional[str] = None, provider_message: Optional[str] = None):
        super().__init__(self.error)
        self.status = status
        self.provider_message = provider_message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "status": self.status,
            "message": self.provider_message,
        }


class UpstreamError(AppError):
    """Generic failure talking to one of the providers."""

    status_code = 500
    error = "Upstream provider error"
