"""
Base Service
Shared plumbing for the resource services built on PananamesClient
"""

from typing import Any, Optional, Tuple
from urllib.parse import quote

from pananames.api.client import ApiResponse, PananamesClient, RequestOption
from pananames.schemas.common import Pagination
from pananames.utils.validators import validate_domain


class BaseService:
    """
    Base class for resource services.
    Each public method maps to exactly one API endpoint.
    """

    def __init__(self, client: PananamesClient):
        """
        Args:
            client: Configured API client shared by all services
        """
        self.client = client

    @staticmethod
    def _escape(segment: str) -> str:
        return quote(segment, safe="")

    def _domain_path(self, domain: str, *parts: str) -> str:
        """Path under domains/{domain}; the domain is validated and percent-escaped"""
        path = f"domains/{self._escape(validate_domain(domain))}"
        if parts:
            path += "/" + "/".join(parts)
        return path

    def _call(
        self,
        method: str,
        path: str,
        options: Any = None,
        target: Any = None,
        request_options: Tuple[Optional[RequestOption], ...] = ()
    ) -> ApiResponse:
        return self.client.request(method, path, options=options, target=target, request_options=request_options)

    def _list(
        self,
        path: str,
        options: Any,
        target: Any,
        request_options: Tuple[Optional[RequestOption], ...] = ()
    ) -> Tuple[Any, Pagination]:
        response = self._call("GET", path, options, target, request_options)
        return response.data, response.pagination
