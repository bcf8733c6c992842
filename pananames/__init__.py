"""
Pananames - typed Python client for the Pananames domain registrar merchant API
"""

from pananames.api import (
    APIError,
    ApiRequest,
    ApiResponse,
    AuthenticationError,
    BadRequestError,
    EnvelopeDecodeError,
    InsufficientFundsError,
    MissingDataError,
    NotFoundError,
    PananamesClient,
    PananamesError,
    PayloadDecodeError,
    RateLimitError,
    ResponseDecodeError,
    ServerError,
    ValidationError,
    get_client,
    with_headers,
    with_timeout,
)
from pananames.schemas import NO_PAGE, Pagination
from pananames.services import (
    AccountService,
    DomainService,
    NameServerService,
    RedirectService,
    TLDService,
    TransferService,
    WhoisService,
    iter_pages,
)

__version__ = "2.0.0"

__all__ = [
    # Client
    "PananamesClient",
    "ApiRequest",
    "ApiResponse",
    "get_client",
    "with_headers",
    "with_timeout",

    # Services
    "AccountService",
    "DomainService",
    "NameServerService",
    "RedirectService",
    "TLDService",
    "TransferService",
    "WhoisService",

    # Paging
    "NO_PAGE",
    "Pagination",
    "iter_pages",

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
