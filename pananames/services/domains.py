"""
Domain Service
Registration, availability checks, renewals and other domain lifecycle calls
"""

from typing import List, Optional, Tuple

from pananames.api.client import RequestOption
from pananames.schemas.common import Pagination
from pananames.schemas.domains import (
    AutoRenew,
    BulkCheckQuery,
    CheckDomainsBulkOptions,
    Claim,
    Domain,
    DomainCheck,
    GetDomainsOptions,
    Redeem,
    RegisterDomainOptions,
    Renew,
    RenewDomainOptions,
)
from pananames.services.base_service import BaseService
from pananames.utils.logger import get_logger
from pananames.utils.validators import require_options, validate_domain, validate_domain_list

logger = get_logger(__name__)


class DomainService(BaseService):
    """
    Domain lifecycle operations.

    Example:
        client = get_client()
        domains = DomainService(client)
        check = domains.check_domain("example.com")
        if check.available:
            domains.register_domain(RegisterDomainOptions(domain="example.com", period=1))
    """

    def get_domains(
        self,
        options: Optional[GetDomainsOptions] = None,
        *request_options: RequestOption
    ) -> Tuple[List[Domain], Pagination]:
        """
        Get a page of domains in the account.

        Args:
            options: Filters (domain_like, status, lock_status) and paging

        Returns:
            Tuple of (domains, pagination)
        """
        return self._list("domains", options, List[Domain], request_options)

    def register_domain(self, options: RegisterDomainOptions, *request_options: RequestOption) -> Domain:
        """
        Register a domain name.
        The premium price, when needed, comes from check_domain().

        Raises:
            ValidationError: If options are missing or the domain name is invalid
            InsufficientFundsError: If the account balance can't cover the registration
        """
        require_options(options, "RegisterDomainOptions")
        options = options.model_copy(update={"domain": validate_domain(options.domain)})

        logger.info(f"Registering domain: {options.domain}")
        domain = self._call("POST", "domains", options, Domain, request_options).data
        logger.info(f"Domain {domain.domain} registered, status: {domain.status}")
        return domain

    def get_domain(self, domain: str, *request_options: RequestOption) -> Domain:
        """Get information about a domain"""
        return self._call("GET", self._domain_path(domain), target=Domain, request_options=request_options).data

    def delete_domain(self, domain: str, *request_options: RequestOption) -> None:
        """Delete a domain"""
        path = self._domain_path(domain)
        logger.info(f"Deleting domain: {domain}")
        self._call("DELETE", path, request_options=request_options)

    def check_domain(self, domain: str, *request_options: RequestOption) -> DomainCheck:
        """
        Check domain availability and pricing.
        Includes registration, renewal, transfer and redemption prices.
        """
        return self._call(
            "GET", self._domain_path(domain, "check"), target=DomainCheck, request_options=request_options
        ).data

    def check_domains_bulk(
        self,
        options: CheckDomainsBulkOptions,
        *request_options: RequestOption
    ) -> List[DomainCheck]:
        """
        Check availability, prices and claims of several domains at once.

        Raises:
            ValidationError: If no domains are given; nothing is sent in that case
        """
        domains = validate_domain_list(
            options.domains if options is not None else None, "CheckDomainsBulkOptions.domains"
        )
        query = BulkCheckQuery(domains=",".join(domains))
        return self._call("GET", "domains/bulk_check", query, List[DomainCheck], request_options).data

    def get_domain_claim(self, domain: str, *request_options: RequestOption) -> List[Claim]:
        """Get trademark claim information for a domain"""
        return self._call(
            "GET", self._domain_path(domain, "claim"), target=List[Claim], request_options=request_options
        ).data

    def get_domain_status_codes(self, domain: str, *request_options: RequestOption) -> List[str]:
        """
        Get the EPP status codes set on a domain.
        Descriptions: https://www.icann.org/resources/pages/epp-status-codes-2014-06-16-en
        """
        return self._call(
            "GET", self._domain_path(domain, "status_codes"), target=List[str], request_options=request_options
        ).data

    def enable_auto_renew(self, domain: str, *request_options: RequestOption) -> AutoRenew:
        """Enable auto renew of a domain"""
        return self._call(
            "PUT", self._domain_path(domain, "auto_renew"), target=AutoRenew, request_options=request_options
        ).data

    def disable_auto_renew(self, domain: str, *request_options: RequestOption) -> AutoRenew:
        """Disable auto renew of a domain"""
        return self._call(
            "DELETE", self._domain_path(domain, "auto_renew"), target=AutoRenew, request_options=request_options
        ).data

    def renew_domain(
        self,
        domain: str,
        options: Optional[RenewDomainOptions] = None,
        *request_options: RequestOption
    ) -> Renew:
        """
        Renew a domain for 1 to 10 years.
        Minimum and maximum periods per TLD are available from TLDService.get_tlds().
        """
        path = self._domain_path(domain, "renew")
        logger.info(f"Renewing domain: {domain}")
        return self._call("PUT", path, options, Renew, request_options).data

    def redeem_domain(self, domain: str, *request_options: RequestOption) -> Redeem:
        """Restore a domain during its redemption grace period"""
        path = self._domain_path(domain, "redeem")
        logger.info(f"Redeeming domain: {domain}")
        return self._call("PUT", path, target=Redeem, request_options=request_options).data

    def resend_email(self, domain: str, *request_options: RequestOption) -> None:
        """Resend the registrant verification email"""
        self._call("PUT", self._domain_path(domain, "resend"), request_options=request_options)
