"""
Errors raised by searchkeys.

Two kinds of failure reach the caller:

- HttpError: the request never produced a usable response (connection
  failure, timeout, malformed or unexpected body).
- ApiError: the search service answered with an error status.
"""

from typing import Any, Dict, Optional


class SearchKeysError(Exception):
    """Base class for all searchkeys errors."""


class HttpError(SearchKeysError):
    """Transport or decoding failure. The original exception is chained as __cause__."""


class ApiError(SearchKeysError):
    """
    Error reported by the search service.

    Attributes:
        status_code: HTTP status of the response
        message: Human readable message from the service
        code: Machine readable error code (e.g. "api_key_not_found")
        error_type: Error category (e.g. "invalid_request", "auth")
        link: Documentation link for the error, if provided
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        error_type: Optional[str] = None,
        link: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code
        self.error_type = error_type
        self.link = link

    @classmethod
    def from_response_body(cls, status_code: int, body: Any, text: str = "") -> "ApiError":
        """
        Build an ApiError from a decoded error body.

        Args:
            status_code: HTTP status of the response
            body: Decoded JSON body, or None if the body was not JSON
            text: Raw response text, used when the body is not structured
        """
        if isinstance(body, dict) and "message" in body:
            return cls(
                status_code=status_code,
                message=str(body["message"]),
                code=body.get("code"),
                error_type=body.get("type"),
                link=body.get("link"),
            )
        return cls(status_code=status_code, message=text or f"HTTP {status_code}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status_code": self.status_code,
            "message": self.message,
            "code": self.code,
            "type": self.error_type,
            "link": self.link,
        }

    def __str__(self) -> str:
        if self.code:
            return f"[{self.status_code}] {self.code}: {self.message}"
        return f"[{self.status_code}] {self.message}"
