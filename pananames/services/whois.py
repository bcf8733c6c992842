"""
WHOIS Service
"""

from typing import Optional, Tuple

from pananames.api.client import RequestOption
from pananames.schemas.whois import GetWhoisInfoOptions, UpdateWhoisInfoOptions, WhoisInfo, WhoisPrivacy
from pananames.services.base_service import BaseService
from pananames.utils.logger import get_logger
from pananames.utils.validators import require_options

logger = get_logger(__name__)


class WhoisService(BaseService):
    """WHOIS contacts and privacy of domains in the account"""

    def get_whois_info(
        self,
        domain: str,
        options: Optional[GetWhoisInfoOptions] = None,
        *request_options: RequestOption
    ) -> WhoisInfo:
        """Get WHOIS information of one of your domains"""
        return self._call("GET", self._domain_path(domain, "whois"), options, WhoisInfo, request_options).data

    def update_whois_info(
        self,
        domain: str,
        options: UpdateWhoisInfoOptions,
        *request_options: RequestOption
    ) -> Tuple[WhoisInfo, str]:
        """
        Update WHOIS contacts of a domain.

        Returns:
            Tuple of (whois info, notice); the notice is non-empty when the
            change must be confirmed by the registrant
        """
        require_options(options, "UpdateWhoisInfoOptions")
        path = self._domain_path(domain, "whois")
        logger.info(f"Updating WHOIS info for {domain}")
        response = self._call("PUT", path, options, WhoisInfo, request_options)
        if response.notice:
            logger.info(f"WHOIS update for {domain}: {response.notice}")
        return response.data, response.notice

    def get_whois_privacy(self, domain: str, *request_options: RequestOption) -> WhoisPrivacy:
        return self._call(
            "GET", self._domain_path(domain, "whois_privacy"), target=WhoisPrivacy, request_options=request_options
        ).data

    def enable_whois_privacy(self, domain: str, *request_options: RequestOption) -> WhoisPrivacy:
        return self._call(
            "PUT", self._domain_path(domain, "whois_privacy"), target=WhoisPrivacy, request_options=request_options
        ).data

    def disable_whois_privacy(self, domain: str, *request_options: RequestOption) -> WhoisPrivacy:
        return self._call(
            "DELETE", self._domain_path(domain, "whois_privacy"), target=WhoisPrivacy, request_options=request_options
        ).data
