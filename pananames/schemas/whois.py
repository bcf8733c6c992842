"""WHOIS contacts and privacy"""

from typing import Optional

from pananames.schemas.common import ApiModel, QueryOptions
from pananames.schemas.domains import Contact


class WhoisInfo(ApiModel):
    whois_privacy: bool = False
    preview: bool = False
    registrant_contact: Optional[Contact] = None
    admin_contact: Optional[Contact] = None
    tech_contact: Optional[Contact] = None
    billing_contact: Optional[Contact] = None


class WhoisPrivacy(ApiModel):
    domain: str = ""
    enabled: bool = False


class GetWhoisInfoOptions(QueryOptions):
    preview: bool = False


class UpdateWhoisInfoOptions(ApiModel):
    registrant_contact: Optional[Contact] = None
    admin_contact: Optional[Contact] = None
    tech_contact: Optional[Contact] = None
    billing_contact: Optional[Contact] = None
