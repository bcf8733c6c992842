"""
API Layer - request/response core for the Pananames merchant API
"""

# Client
from pananames.api.client import (
    API_PATH,
    SUCCESS_STATUSES,
    ApiRequest,
    ApiResponse,
    PananamesClient,
    RequestOption,
    check_response,
    with_headers,
    with_timeout,
)

# Client Factory
from pananames.api.factory import get_client

# Exceptions
from pananames.api.exceptions import (
    PananamesError,
    APIError,
    BadRequestError,
    AuthenticationError,
    InsufficientFundsError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ResponseDecodeError,
    EnvelopeDecodeError,
    MissingDataError,
    PayloadDecodeError,
    ValidationError,
)

__all__ = [
    # Client
    "API_PATH",
    "SUCCESS_STATUSES",
    "ApiRequest",
    "ApiResponse",
    "PananamesClient",
    "RequestOption",
    "check_response",
    "with_headers",
    "with_timeout",

    # Factory
    "get_client",

    # Exceptions
    "PananamesError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "InsufficientFundsError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ResponseDecodeError",
    "EnvelopeDecodeError",
    "MissingDataError",
    "PayloadDecodeError",
    "ValidationError",
]
