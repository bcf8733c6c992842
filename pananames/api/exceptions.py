"""
Custom exceptions for Pananames API operations
"""

from typing import List, Optional, Type
from urllib.parse import unquote, urlsplit


class PananamesError(Exception):
    """Base exception for all client errors"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self):
        return self.message


class ValidationError(PananamesError):
    """Raised when caller input is rejected before any request is sent"""
    pass


class APIError(PananamesError):
    """
    Raised when the API answers with a status outside the success set.

    errors holds the decoded error envelope entries. When the body could not
    be decoded as an error envelope, errors is empty, parsed is False and the
    raw body is kept in body.
    """

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        errors: Optional[List] = None,
        body: str = "",
        parsed: bool = True
    ):
        self.method = method
        self.url = url
        self.errors = list(errors or [])
        self.body = body
        self.parsed = parsed
        super().__init__(self._render(status_code), status_code=status_code)

    def _render(self, status_code: int) -> str:
        if not self.parsed:
            if not self.body:
                return f"status: {status_code}, empty response"
            return f"status: {status_code}, can't parse error, unknown format, raw data: {self.body}"

        parts = urlsplit(self.url)
        location = f"{parts.scheme}://{parts.netloc}{unquote(parts.path)}"
        lines = [
            f"Error code: {e.code}, Message: '{e.message}', Description: '{e.description}'"
            for e in self.errors
        ]
        return f"{self.method} {location}: {status_code}:\n" + "\n".join(lines)


class BadRequestError(APIError):
    """Raised when the API rejects request parameters (400, 422)"""
    pass


class AuthenticationError(APIError):
    """Raised when the API signature is missing or rejected (401, 403)"""
    pass


class InsufficientFundsError(APIError):
    """Raised when account balance can't cover the operation (402)"""
    pass


class NotFoundError(APIError):
    """Raised when a domain or resource is not found (404)"""
    pass


class RateLimitError(APIError):
    """Raised when API rate limit is exceeded (429)"""
    pass


class ServerError(APIError):
    """Raised when the server returns 5xx errors"""
    pass


class ResponseDecodeError(PananamesError):
    """Base exception for successful responses that can't be decoded"""
    pass


class EnvelopeDecodeError(ResponseDecodeError):
    """Raised when the body is not a JSON {data, meta} envelope"""
    pass


class MissingDataError(ResponseDecodeError):
    """Raised when the envelope has no data field but a payload was expected"""
    pass


class PayloadDecodeError(ResponseDecodeError):
    """Raised when the data field doesn't match the expected result shape"""
    pass


_STATUS_ERRORS = {
    400: BadRequestError,
    401: AuthenticationError,
    402: InsufficientFundsError,
    403: AuthenticationError,
    404: NotFoundError,
    422: BadRequestError,
    429: RateLimitError,
}


def api_error_for_status(status_code: int) -> Type[APIError]:
    """Pick the APIError subclass matching an HTTP status code"""
    if status_code in _STATUS_ERRORS:
        return _STATUS_ERRORS[status_code]
    if 500 <= status_code < 600:
        return ServerError
    return APIError
