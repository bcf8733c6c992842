"""
Tests for the request builder and response unwrapper of PananamesClient.
All HTTP traffic goes through the FakeAdapter from conftest.py.

Run:
    python -m pytest tests/test_client.py -v
"""

from typing import List
from unittest.mock import patch
from urllib.parse import parse_qsl, urlsplit

import pytest
import requests

from pananames.api.client import PananamesClient, with_headers, with_timeout
from pananames.api.exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    EnvelopeDecodeError,
    InsufficientFundsError,
    MissingDataError,
    NotFoundError,
    PayloadDecodeError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from pananames.schemas import Balance, GetDomainsOptions, RegisterDomainOptions
from pananames.schemas.domains import Domain

from tests.conftest import API_ROOT, TOKEN


NOT_FOUND_BODY = {"errors": [{"code": 1, "message": "not found", "description": "no such domain"}]}


# ===========================================================================
# 1. Client construction
# ===========================================================================

class TestClientConstruction:

    def test_rejects_empty_token(self, session):
        """An empty signature can't authenticate anything."""
        with pytest.raises(ValueError):
            PananamesClient("", session=session)

    def test_rejects_malformed_base_url(self, session):
        """The base URL must be an absolute http(s) URL."""
        with pytest.raises(ValueError):
            PananamesClient(TOKEN, base_url="api.pananames.com", session=session)

    def test_rejects_non_positive_timeout(self, session):
        with pytest.raises(ValueError):
            PananamesClient(TOKEN, session=session, timeout=0)

    def test_default_base_url(self, session):
        """Without an override the client talks to the production host."""
        client = PananamesClient(TOKEN, session=session)
        assert client.base_url == "https://api.pananames.com/merchant/v2/"

    def test_base_url_path_is_replaced_by_api_prefix(self, session):
        client = PananamesClient(TOKEN, base_url="http://localhost:8080/ignored/", session=session)
        assert client.base_url == "http://localhost:8080/merchant/v2/"

    def test_overrides_are_read_only(self, client):
        """Overrides are applied at construction only."""
        with pytest.raises(AttributeError):
            client.base_url = "https://elsewhere.test"
        with pytest.raises(AttributeError):
            client.session = requests.Session()

    def test_context_manager_keeps_injected_session(self, session):
        """Closing the client must not close a session it doesn't own."""
        with patch.object(session, "close") as mock_close:
            with PananamesClient(TOKEN, session=session) as client:
                assert client.session is session
            mock_close.assert_not_called()


# ===========================================================================
# 2. Request builder
# ===========================================================================

class TestNewRequest:

    def test_get_headers(self, client):
        """Every request carries Accept, SIGNATURE and User-Agent; GET has no Content-Type."""
        request = client.new_request("GET", "account/balance")

        assert request.method == "GET"
        assert request.url == API_ROOT + "account/balance"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["SIGNATURE"] == TOKEN
        assert request.headers["User-Agent"] == "pananames-python"
        assert "Content-Type" not in request.headers
        assert request.prepared.body is None

    def test_custom_user_agent(self, session):
        client = PananamesClient(TOKEN, base_url="https://api.test", session=session, user_agent="my-app/1.0")
        assert client.new_request("GET", "tlds").headers["User-Agent"] == "my-app/1.0"

    def test_get_options_become_sorted_query(self, client):
        """Query keys are sorted and empty fields are left out."""
        options = GetDomainsOptions(limit=10, page=1, status="suspended")
        request = client.new_request("GET", "domains", options)

        assert urlsplit(request.url).query == "current_page=1&per_page=10&status=suspended"

    def test_get_without_options_has_no_query(self, client):
        request = client.new_request("GET", "domains", GetDomainsOptions())
        assert urlsplit(request.url).query == ""

    def test_get_rejects_body_options(self, client):
        """A JSON-body options model can't be flattened into a query string."""
        with pytest.raises(ValidationError):
            client.new_request("GET", "domains", RegisterDomainOptions(domain="example.com"))

    def test_get_accepts_plain_mapping(self, client):
        request = client.new_request("GET", "domains", {"status": "active", "domain_like": "exa"})
        assert parse_qsl(urlsplit(request.url).query) == [("domain_like", "exa"), ("status", "active")]

    def test_post_options_become_json_body(self, client):
        """Mutating verbs send options as JSON with Content-Type set; unset fields are omitted."""
        options = RegisterDomainOptions(domain="example.com", period=2)
        request = client.new_request("POST", "domains", options)

        assert request.headers["Content-Type"] == "application/json"
        assert request.prepared.body == b'{"domain": "example.com", "period": 2, "whois_privacy": false}'

    def test_delete_can_carry_body(self, client):
        request = client.new_request("DELETE", "transfers_in", {"domain": "example.com"})

        assert request.headers["Content-Type"] == "application/json"
        assert request.prepared.body == b'{"domain": "example.com"}'

    def test_delete_without_options_has_no_body(self, client):
        request = client.new_request("DELETE", "domains/example.com")

        assert request.headers["Content-Type"] == "application/json"
        assert not request.prepared.body

    def test_unencodable_body_raises_validation_error(self, client):
        with pytest.raises(ValidationError):
            client.new_request("POST", "domains", {"domain": object()})

    def test_decorators_run_after_core_headers(self, client):
        """A decorator can override a header the client set itself."""
        request = client.new_request(
            "GET", "tlds",
            request_options=[with_headers({"User-Agent": "override", "X-Trace": "abc"}), None]
        )

        assert request.headers["User-Agent"] == "override"
        assert request.headers["X-Trace"] == "abc"
        assert request.headers["SIGNATURE"] == TOKEN

    def test_with_timeout_rejects_non_positive(self):
        with pytest.raises(ValueError):
            with_timeout(0)


# ===========================================================================
# 3. Response unwrapper - success path
# ===========================================================================

class TestDoSuccess:

    def test_decodes_data_and_pagination(self, client, adapter):
        """Status 200 with an envelope returns the data and meta values exactly."""
        adapter.queue(200, {
            "data": [{"domain": "example.com", "status": "ok"}, {"domain": "example.org", "status": "ok"}],
            "meta": {"total_entries": 25, "per_page": 2, "current_page": 3, "total_pages": 13},
        })

        response = client.request("GET", "domains", target=List[Domain])

        assert response.status_code == 200
        assert [d.domain for d in response.data] == ["example.com", "example.org"]
        page = response.pagination
        assert (page.total, page.limit, page.page, page.pages) == (25, 2, 3, 13)
        assert response.notice == ""

    def test_notice_is_exposed(self, client, adapter):
        adapter.queue(200, {"data": {"balance": 1.5}, "meta": {"notice": "check your email"}})
        response = client.request("GET", "account/balance", target=Balance)
        assert response.notice == "check your email"

    def test_null_meta_is_tolerated(self, client, adapter):
        adapter.queue(200, {"data": {"balance": 10.25}, "meta": None})
        response = client.request("GET", "account/balance", target=Balance)
        assert response.data.balance == 10.25
        assert response.pagination.page == 0

    def test_no_target_skips_body(self, client, adapter):
        """Calls without a payload don't read the body at all."""
        adapter.queue(204, raw="this is not json")
        response = client.request("DELETE", "domains/example.com")
        assert response.status_code == 204
        assert response.data is None

    @pytest.mark.parametrize("status", [200, 201, 202, 204, 304])
    def test_success_statuses(self, client, adapter, status):
        adapter.queue(status)
        assert client.request("PUT", "domains/example.com/resend").status_code == status

    def test_default_timeout_is_passed_to_transport(self, client, adapter):
        adapter.queue(200, {"data": {"balance": 1}})
        client.request("GET", "account/balance", target=Balance)
        assert adapter.send_kwargs[-1]["timeout"] == 30.0

    def test_with_timeout_overrides_default(self, client, adapter):
        adapter.queue(200, {"data": {"balance": 1}})
        client.request("GET", "account/balance", target=Balance, request_options=[with_timeout(2.5)])
        assert adapter.send_kwargs[-1]["timeout"] == 2.5


# ===========================================================================
# 4. Response unwrapper - decode failures
# ===========================================================================

class TestDoDecodeErrors:

    def test_missing_data_key(self, client, adapter):
        """A success status without data is an error, not an empty result."""
        adapter.queue(200, {"meta": {"total_entries": 0}})

        with pytest.raises(MissingDataError) as exc_info:
            client.request("GET", "account/balance", target=Balance)

        assert str(exc_info.value) == "status: 200, missing data from response"
        assert exc_info.value.status_code == 200

    def test_null_data(self, client, adapter):
        adapter.queue(200, {"data": None, "meta": {}})
        with pytest.raises(MissingDataError):
            client.request("GET", "account/balance", target=Balance)

    def test_body_not_json(self, client, adapter):
        adapter.queue(200, raw="<html>gateway</html>")

        with pytest.raises(EnvelopeDecodeError) as exc_info:
            client.request("GET", "account/balance", target=Balance)

        assert str(exc_info.value).startswith("status: 200, unable to decode response, unknown format")

    def test_body_not_an_object(self, client, adapter):
        adapter.queue(200, [1, 2, 3])
        with pytest.raises(EnvelopeDecodeError):
            client.request("GET", "account/balance", target=Balance)

    def test_malformed_meta(self, client, adapter):
        adapter.queue(200, {"data": {"balance": 1}, "meta": {"total_entries": "many"}})
        with pytest.raises(EnvelopeDecodeError):
            client.request("GET", "account/balance", target=Balance)

    def test_payload_shape_mismatch(self, client, adapter):
        adapter.queue(200, {"data": {"balance": "lots"}})

        with pytest.raises(PayloadDecodeError) as exc_info:
            client.request("GET", "account/balance", target=Balance)

        assert str(exc_info.value).startswith("status: 200, unable to parse response data")

    def test_list_expected_object_received(self, client, adapter):
        adapter.queue(200, {"data": {"domain": "example.com"}})
        with pytest.raises(PayloadDecodeError):
            client.request("GET", "domains", target=List[Domain])


# ===========================================================================
# 5. Response unwrapper - API errors
# ===========================================================================

class TestDoApiErrors:

    def test_not_found_renders_method_url_and_errors(self, client, adapter):
        """404 with an error envelope renders method, URL, status and each error."""
        adapter.queue(404, NOT_FOUND_BODY)

        with pytest.raises(NotFoundError) as exc_info:
            client.request("GET", "domains/example.com", target=Domain)

        err = exc_info.value
        assert err.status_code == 404
        assert err.method == "GET"
        assert err.parsed is True
        assert len(err.errors) == 1
        assert err.errors[0].code == 1
        assert str(err) == (
            "GET https://api.test/merchant/v2/domains/example.com: 404:\n"
            "Error code: 1, Message: 'not found', Description: 'no such domain'"
        )

    def test_multiple_errors_joined_by_newline(self, client, adapter):
        adapter.queue(422, {"errors": [
            {"code": 10, "message": "bad period", "description": "1..10"},
            {"code": 11, "message": "bad contact", "description": "email required"},
        ]})

        with pytest.raises(BadRequestError) as exc_info:
            client.request("POST", "domains", {"domain": "example.com"}, target=Domain)

        lines = str(exc_info.value).split("\n")
        assert lines[0] == "POST https://api.test/merchant/v2/domains: 422:"
        assert lines[1] == "Error code: 10, Message: 'bad period', Description: '1..10'"
        assert lines[2] == "Error code: 11, Message: 'bad contact', Description: 'email required'"

    def test_query_string_not_rendered(self, client, adapter):
        adapter.queue(400, {"errors": [{"code": 2, "message": "bad", "description": "x"}]})

        with pytest.raises(BadRequestError) as exc_info:
            client.request("GET", "domains", GetDomainsOptions(status="active"), target=List[Domain])

        assert str(exc_info.value).startswith("GET https://api.test/merchant/v2/domains: 400:")

    @pytest.mark.parametrize("status,error_class", [
        (400, BadRequestError),
        (401, AuthenticationError),
        (402, InsufficientFundsError),
        (403, AuthenticationError),
        (404, NotFoundError),
        (422, BadRequestError),
        (429, RateLimitError),
        (500, ServerError),
        (503, ServerError),
    ])
    def test_status_maps_to_error_class(self, client, adapter, status, error_class):
        adapter.queue(status, NOT_FOUND_BODY)
        with pytest.raises(error_class) as exc_info:
            client.request("GET", "account/balance", target=Balance)
        assert isinstance(exc_info.value, APIError)
        assert exc_info.value.status_code == status

    def test_unmapped_status_is_plain_api_error(self, client, adapter):
        adapter.queue(418, NOT_FOUND_BODY)
        with pytest.raises(APIError) as exc_info:
            client.request("GET", "account/balance", target=Balance)
        assert type(exc_info.value) is APIError

    def test_unparseable_error_body(self, client, adapter):
        """A body that isn't an error envelope yields the generic status + raw body error."""
        adapter.queue(500, raw="Internal Server Error")

        with pytest.raises(ServerError) as exc_info:
            client.request("GET", "account/balance", target=Balance)

        err = exc_info.value
        assert err.parsed is False
        assert err.errors == []
        assert err.body == "Internal Server Error"
        assert str(err) == "status: 500, can't parse error, unknown format, raw data: Internal Server Error"

    def test_empty_error_body(self, client, adapter):
        adapter.queue(502)
        with pytest.raises(ServerError) as exc_info:
            client.request("GET", "account/balance", target=Balance)
        assert str(exc_info.value) == "status: 502, empty response"

    def test_error_raised_even_without_target(self, client, adapter):
        adapter.queue(404, NOT_FOUND_BODY)
        with pytest.raises(NotFoundError):
            client.request("DELETE", "domains/example.com")


# ===========================================================================
# 6. Transport errors
# ===========================================================================

class TestTransportErrors:

    @pytest.mark.parametrize("exc", [
        requests.exceptions.ConnectionError("connection refused"),
        requests.exceptions.ReadTimeout("read timed out"),
    ])
    def test_transport_errors_propagate_unchanged(self, client, adapter, exc):
        """Network failures are not wrapped or classified."""
        adapter.queue_error(exc)

        with pytest.raises(type(exc)) as exc_info:
            client.request("GET", "account/balance", target=Balance)

        assert exc_info.value is exc
        assert len(adapter.requests) == 1
