"""
Domain lifecycle models: registration, availability checks, claims and renewals
"""

from typing import Dict, List, Optional

from pydantic import Field

from pananames.schemas.common import ApiModel, ListOptions, PnDate, PnTime, QueryOptions
from pananames.schemas.name_servers import ChildNameServer


class Prices(ApiModel):
    currency: str = ""
    # "register" collides with BaseModel.register from ABCMeta
    register_price: float = Field(default=0.0, alias="register")
    renew: float = 0.0
    transfer: float = 0.0
    redeem: float = 0.0


class Contact(ApiModel):
    """Registrant/admin/tech/billing contact, used in requests and responses"""

    org: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    extras: Optional[List[str]] = None


class Domain(ApiModel):
    domain: str = ""
    domain_idn: str = ""
    premium: bool = False
    auto_renew: bool = False
    whois_privacy: bool = False
    lock_status: str = ""
    registration_date: PnTime = None
    expiration_date: PnTime = None
    deletion_date: PnDate = None
    status: str = ""
    name_servers: Optional[List[str]] = None
    child_name_servers: Optional[List[ChildNameServer]] = None


class DomainCheck(ApiModel):
    domain: str = ""
    domain_idn: str = ""
    available: bool = False
    premium: bool = False
    prices: Optional[Prices] = None
    promo_prices: Optional[Prices] = None
    promo_two_years_prices: Optional[Prices] = None
    promo_multi_years_prices: Optional[Dict[str, Prices]] = None
    claim: bool = False
    add_req: bool = False


class ClaimContact(ApiModel):
    name: Optional[str] = None
    email: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    organization: Optional[str] = None
    street: Optional[str] = None
    country_code: Optional[str] = None


class Claim(ApiModel):
    """Trademark claim notice attached to a domain"""

    trade_mark: str = ""
    jurisdiction: str = ""
    jurisdiction_country_code: str = ""
    goods: str = ""
    registrant_contact: Optional[ClaimContact] = None
    agent_contact: Optional[ClaimContact] = None
    description: List[str] = Field(default_factory=list)


class AutoRenew(ApiModel):
    domain: str = ""
    auto_renew: bool = False


class Renew(ApiModel):
    domain: str = ""
    new_expiration_date: PnTime = None


class Redeem(Renew):
    pass


class GetDomainsOptions(ListOptions):
    domain_like: Optional[str] = None
    status: Optional[str] = None
    lock_status: Optional[str] = None


class CheckDomainsBulkOptions(ApiModel):
    """Domains to check; sent as one comma-separated query value"""

    domains: List[str] = Field(default_factory=list)


class BulkCheckQuery(QueryOptions):
    domains: str = ""


class RegisterDomainOptions(ApiModel):
    domain: str
    period: Optional[int] = None
    whois_privacy: bool = False
    premium_price: Optional[float] = None
    claims_accepted: Optional[bool] = None
    add_req_accepted: Optional[bool] = None
    registrant_contact: Optional[Contact] = None
    admin_contact: Optional[Contact] = None
    tech_contact: Optional[Contact] = None
    billing_contact: Optional[Contact] = None


class RenewDomainOptions(ApiModel):
    period: Optional[str] = None
    premium_price: Optional[float] = None
