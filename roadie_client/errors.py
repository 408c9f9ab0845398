"""Contains shared errors types that can be raised from the client and its services"""

from __future__ import annotations

from .models.error_response import ErrorResponse


class RoadieError(Exception):
    """Base class for every error raised by this package"""


class ConfigurationError(RoadieError):
    """Raised by a client option that rejects its input, aborting construction"""


class APIError(RoadieError):
    """Raised when the Roadie API answers with a non-2xx status.

    Attributes:
        status_code (int): HTTP status returned by the API
        error_response (ErrorResponse): decoded error payload, empty when the body was not JSON
        content (bytes): raw response body
    """

    def __init__(self, status_code: int, error_response: ErrorResponse, content: bytes = b""):
        self.status_code = status_code
        self.error_response = error_response
        self.content = content

        messages = error_response.messages()
        if messages:
            detail = "; ".join(messages)
        else:
            detail = content.decode(errors="ignore") or "no error details"
        super().__init__(f"Roadie API error ({status_code}): {detail}")


__all__ = ["APIError", "ConfigurationError", "RoadieError"]
