"""
Redirect Service
"""

from pananames.api.client import RequestOption
from pananames.schemas.redirects import EnableBulkDomainRedirectOptions, Redirect, RedirectBulk
from pananames.services.base_service import BaseService
from pananames.utils.logger import get_logger
from pananames.utils.validators import require_options, validate_domain_list

logger = get_logger(__name__)


class RedirectService(BaseService):
    """URL redirects of domains"""

    def get_domain_redirect(self, domain: str, *request_options: RequestOption) -> Redirect:
        """Get the redirect URL and masking mode of a domain"""
        return self._call(
            "GET", self._domain_path(domain, "redirect"), target=Redirect, request_options=request_options
        ).data

    def enable_domain_redirect(self, domain: str, options: Redirect, *request_options: RequestOption) -> Redirect:
        """Enable or update the redirect of a domain"""
        require_options(options, "Redirect")
        path = self._domain_path(domain, "redirect")
        logger.info(f"Redirecting {domain} to {options.url}")
        return self._call("PUT", path, options, Redirect, request_options).data

    def disable_domain_redirect(self, domain: str, *request_options: RequestOption) -> None:
        path = self._domain_path(domain, "redirect")
        logger.info(f"Disabling redirect of {domain}")
        self._call("DELETE", path, request_options=request_options)

    def enable_bulk_domain_redirect(
        self,
        options: EnableBulkDomainRedirectOptions,
        *request_options: RequestOption
    ) -> RedirectBulk:
        """
        Queue a redirect for a list of domains.
        The report of the operation is sent by email.

        Raises:
            ValidationError: If domain_list is empty
        """
        require_options(options, "EnableBulkDomainRedirectOptions")
        domains = validate_domain_list(options.domain_list, "EnableBulkDomainRedirectOptions.domain_list")
        options = options.model_copy(update={"domain_list": domains})
        logger.info(f"Queueing redirect of {len(domains)} domains to {options.url}")
        return self._call("PUT", "domains/bulk_redirect", options, RedirectBulk, request_options).data
