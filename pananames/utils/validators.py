"""
Input validation utilities for domains and other caller input
"""

import re
from typing import List, Optional, Sequence

from pananames.api.exceptions import ValidationError


class DomainValidator:
    """Validator for domain names"""

    # IDN names are accepted as-is, only characters that would break a URL path are rejected
    FORBIDDEN_REGEX = re.compile(r'[\s/?#]')

    MAX_LENGTH = 253  # RFC 1035

    @classmethod
    def validate(cls, domain: str) -> str:
        """
        Validate a domain name.

        Args:
            domain: Domain name to validate

        Returns:
            Cleaned domain name (lowercase, stripped)

        Raises:
            ValidationError: If domain is invalid
        """
        if not domain or not domain.strip():
            raise ValidationError("Domain name cannot be empty")

        # Clean the domain
        domain = domain.strip().lower()

        # Remove http(s):// if present
        domain = re.sub(r'^https?://', '', domain)

        # Remove trailing slash
        domain = domain.rstrip('/')

        if not domain:
            raise ValidationError("Domain name cannot be empty")

        if len(domain) > cls.MAX_LENGTH:
            raise ValidationError(f"Domain name too long (max {cls.MAX_LENGTH} characters)")

        if cls.FORBIDDEN_REGEX.search(domain):
            raise ValidationError(
                f"Invalid domain format: {domain!r}. "
                "Domain must not contain whitespace, '/', '?' or '#'."
            )

        return domain


def validate_domain(domain: str) -> str:
    """Convenience function for domain validation"""
    return DomainValidator.validate(domain)


def validate_domain_list(domains: Optional[Sequence[str]], what: str = "domain list") -> List[str]:
    """
    Validate a non-empty list of domain names.

    Raises:
        ValidationError: If the list is missing, empty or holds an invalid domain
    """
    if not domains:
        raise ValidationError(f"{what} can't be empty")
    if isinstance(domains, str):
        raise ValidationError(f"{what} must be a list of domain names, not a string")
    return [DomainValidator.validate(d) for d in domains]


def validate_tld(tld: str) -> str:
    """Validate a TLD name, accepting an optional leading dot"""
    if not tld or not tld.strip().lstrip('.'):
        raise ValidationError("TLD cannot be empty")
    tld = tld.strip().lstrip('.').lower()
    if DomainValidator.FORBIDDEN_REGEX.search(tld):
        raise ValidationError(f"Invalid TLD format: {tld!r}")
    return tld


def require_options(options, what: str):
    """Reject a missing options object for endpoints that need one"""
    if options is None:
        raise ValidationError(f"{what} can't be None")
    return options
