"""Error types raised by services and rendered by the API layer.

Every error maps to an HTTP status code and is rendered as a JSON envelope
``{"error": message}`` by the exception handler registered in ``create_app``.
"""

from typing import Any


class RestaurantAPIError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response_body(self) -> dict[str, Any]:
        """Build the JSON error envelope for this error."""
        return {"error": self.message}


class ValidationFailed(RestaurantAPIError):
    """Payload failed rule or schema validation.

    Rule validation reports only the first violation message. Schema validation
    also carries the full list of issues in ``details``.
    """

    status_code = 400

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.details = details

    def to_response_body(self) -> dict[str, Any]:
        body = super().to_response_body()
        if self.details is not None:
            body["details"] = self.details
        return body


class MalformedJSON(RestaurantAPIError):
    status_code = 400

    def __init__(self, message: str = "Invalid JSON") -> None:
        super().__init__(message)


class PayloadTooLarge(RestaurantAPIError):
    status_code = 413

    def __init__(self, message: str = "Payload too large") -> None:
        super().__init__(message)


class NotFound(RestaurantAPIError):
    status_code = 404

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class Unauthorized(RestaurantAPIError):
    status_code = 401


class Forbidden(RestaurantAPIError):
    status_code = 403

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class Conflict(RestaurantAPIError):
    """Request conflicts with the current state of a record."""

    status_code = 409
