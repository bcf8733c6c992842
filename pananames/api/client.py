"""
Pananames Merchant API Client
Builds requests, sends them and unwraps the {data, meta} response envelope
"""

import json
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Iterable, Mapping, Optional

import requests
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from pananames.api.exceptions import (
    APIError,
    EnvelopeDecodeError,
    MissingDataError,
    PayloadDecodeError,
    ValidationError,
    api_error_for_status,
)
from pananames.schemas.common import ApiModel, Envelope, ErrorEnvelope, Meta, Pagination, QueryOptions
from pananames.utils.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, check_base_url
from pananames.utils.logger import get_logger


logger = get_logger(__name__)

API_PATH = "/merchant/v2/"

SUCCESS_STATUSES = frozenset({200, 201, 202, 204, 304})

# Verbs whose options travel as a JSON body; everything else uses the query string
BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


@dataclass
class ApiRequest:
    """A fully built request plus the per-call transport settings"""

    prepared: requests.PreparedRequest
    timeout: Optional[float] = None

    @property
    def method(self) -> str:
        return self.prepared.method

    @property
    def url(self) -> str:
        return self.prepared.url

    @property
    def headers(self):
        return self.prepared.headers


# Request decorator, applied after the client has set its own headers
RequestOption = Callable[[ApiRequest], None]


def with_timeout(seconds: float) -> RequestOption:
    """Give up on the call after the given number of seconds"""
    if seconds <= 0:
        raise ValueError("timeout must be greater than zero")

    def apply(request: ApiRequest) -> None:
        request.timeout = seconds

    return apply


def with_headers(headers: Mapping[str, str]) -> RequestOption:
    """Add or replace request headers, including the ones the client sets"""
    extra = dict(headers)

    def apply(request: ApiRequest) -> None:
        request.prepared.headers.update(extra)

    return apply


@dataclass
class ApiResponse:
    """Decoded result of a call: the data payload and the envelope meta"""

    status_code: int
    data: Any = None
    meta: Meta = field(default_factory=Meta)

    @property
    def pagination(self) -> Pagination:
        return self.meta.pagination

    @property
    def notice(self) -> str:
        return self.meta.notice


@lru_cache(maxsize=None)
def _type_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def encode_body(options: Any) -> Any:
    """Turn request options into a JSON-ready structure"""
    if isinstance(options, ApiModel):
        return options.to_body()
    if isinstance(options, BaseModel):
        return options.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(options, (list, tuple)):
        return [encode_body(item) for item in options]
    return options


def encode_query(options: Any) -> list:
    """Turn request options into query string pairs"""
    if isinstance(options, QueryOptions):
        return options.to_params()
    if isinstance(options, Mapping):
        return sorted((str(k), str(v)) for k, v in options.items() if v is not None)
    raise ValidationError(
        f"{type(options).__name__} can't be encoded as query parameters, expected QueryOptions or a mapping"
    )


def check_response(response: requests.Response) -> None:
    """
    Raise an APIError unless the response status is in the success set.

    Raises:
        APIError subclass matching the status code
    """
    if response.status_code in SUCCESS_STATUSES:
        return
    raise error_from_response(response)


def error_from_response(response: requests.Response) -> APIError:
    """Build the APIError for a non-success response"""
    request = response.request
    method = request.method if request is not None else ""
    url = request.url if request is not None else response.url
    error_class = api_error_for_status(response.status_code)

    body = response.text or ""
    if not response.content:
        return error_class(method, url, response.status_code, body="", parsed=False)

    try:
        envelope = ErrorEnvelope.model_validate_json(response.content)
    except PydanticValidationError:
        return error_class(method, url, response.status_code, body=body, parsed=False)

    return error_class(method, url, response.status_code, errors=envelope.errors, body=body)


class PananamesClient:
    """
    Pananames Merchant API client.

    Authenticates with the merchant signature and talks to the versioned
    /merchant/v2/ API. Base URL, HTTP session (transport), user agent and
    default timeout are fixed at construction.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """
        Initialize Pananames API client.

        Args:
            token: Merchant API signature
            base_url: API host; the /merchant/v2/ prefix replaces any path on it
            session: Optional requests.Session used as the transport
            user_agent: User-Agent header value
            timeout: Default per-request timeout in seconds

        Raises:
            ValueError: If the token is empty, the base URL is malformed or the timeout isn't positive
        """
        if not token:
            raise ValueError("Pananames API token can't be empty")
        if timeout is None or timeout <= 0:
            raise ValueError("timeout must be greater than zero")

        self._token = token
        self._base_url = check_base_url(base_url) + API_PATH
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._user_agent = user_agent or DEFAULT_USER_AGENT
        self._timeout = timeout

        logger.info(f"Pananames client initialized - Base URL: {self._base_url}")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def session(self) -> requests.Session:
        return self._session

    def __repr__(self):
        return f"{self.__class__.__name__}(base_url={self._base_url!r})"

    def close(self) -> None:
        """Close the HTTP session if the client created it"""
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def new_request(
        self,
        method: str,
        path: str,
        options: Any = None,
        request_options: Iterable[Optional[RequestOption]] = ()
    ) -> ApiRequest:
        """
        Build a request for an API path.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Path relative to /merchant/v2/ (e.g., 'domains/example.com')
            options: Options model; JSON body for mutating verbs, query string otherwise
            request_options: Decorators applied after the client headers are set

        Returns:
            ApiRequest ready for do()

        Raises:
            ValidationError: If the options can't be encoded
        """
        method = method.upper()
        url = self._base_url + path.lstrip("/")

        headers = {
            "Accept": "application/json",
            "SIGNATURE": self._token,
            "User-Agent": self._user_agent,
        }

        params = None
        body = None
        if method in BODY_METHODS:
            headers["Content-Type"] = "application/json"
            if options is not None:
                try:
                    body = json.dumps(encode_body(options)).encode("utf-8")
                except (TypeError, ValueError) as e:
                    raise ValidationError(f"Unable to encode {type(options).__name__} as JSON: {e}") from e
        elif options is not None:
            params = encode_query(options)

        prepared = self._session.prepare_request(
            requests.Request(method=method, url=url, headers=headers, params=params, data=body)
        )
        request = ApiRequest(prepared=prepared)

        for option in request_options:
            if option is None:
                continue
            option(request)

        return request

    def do(self, request: ApiRequest, target: Any = None) -> ApiResponse:
        """
        Send a request and decode the response envelope.

        Args:
            request: Request built by new_request()
            target: Expected shape of the data field (model class, List[Model], ...);
                    None when the call returns no payload

        Returns:
            ApiResponse with the decoded data and meta

        Raises:
            requests.RequestException: On transport failure, unchanged
            APIError: If the status is outside the success set
            EnvelopeDecodeError, MissingDataError, PayloadDecodeError: If a payload can't be decoded
        """
        prepared = request.prepared
        logger.debug(f"{prepared.method} {prepared.url}")

        try:
            response = self._session.send(
                prepared,
                timeout=request.timeout if request.timeout is not None else self._timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"{prepared.method} {prepared.url} failed: {e}")
            raise

        try:
            try:
                check_response(response)
            except APIError as e:
                logger.warning(f"{prepared.method} {prepared.url} returned HTTP {e.status_code}")
                raise

            if target is None:
                return ApiResponse(status_code=response.status_code)

            return self._decode(response, target)
        finally:
            response.close()

    def request(
        self,
        method: str,
        path: str,
        options: Any = None,
        target: Any = None,
        request_options: Iterable[Optional[RequestOption]] = ()
    ) -> ApiResponse:
        """Build, send and decode a request in one step"""
        request = self.new_request(method, path, options, request_options)
        return self.do(request, target)

    def _decode(self, response: requests.Response, target: Any) -> ApiResponse:
        status = response.status_code

        try:
            raw = response.json()
        except ValueError as e:
            raise EnvelopeDecodeError(
                f"status: {status}, unable to decode response, unknown format: {e}",
                status_code=status
            ) from e

        if not isinstance(raw, dict):
            raise EnvelopeDecodeError(
                f"status: {status}, unable to decode response, unknown format: "
                f"expected a JSON object, got {type(raw).__name__}",
                status_code=status
            )

        try:
            envelope = Envelope.model_validate(raw)
        except PydanticValidationError as e:
            raise EnvelopeDecodeError(
                f"status: {status}, unable to decode response, unknown format: {e}",
                status_code=status
            ) from e

        if "data" not in raw or raw["data"] is None:
            raise MissingDataError(f"status: {status}, missing data from response", status_code=status)

        try:
            data = _type_adapter(target).validate_python(envelope.data)
        except PydanticValidationError as e:
            raise PayloadDecodeError(
                f"status: {status}, unable to parse response data: {e}",
                status_code=status
            ) from e

        return ApiResponse(status_code=status, data=data, meta=envelope.meta)
