"""TLD catalogue, registration notices and account emails"""

from typing import Dict, List, Optional

from pydantic import Field

from pananames.schemas.common import ApiModel, ListOptions, PnTime
from pananames.schemas.domains import Prices


class PromoMultiYears(ApiModel):
    promo_multi_years_prices: Optional[Prices] = None
    promo_multi_years_until: PnTime = Field(default=None, alias="promo_multi_years_untill")


class TLD(ApiModel):
    tld: str = ""
    idn: bool = False
    dnssec: bool = False
    prices: Optional[Prices] = None
    promo_prices: Optional[Prices] = None
    promo_until: PnTime = Field(default=None, alias="promo_untill")
    promo_two_years_until: PnTime = Field(default=None, alias="promo_two_years_untill")
    promo_two_years_prices: Optional[Prices] = None
    promo_multi_years_prices: Optional[Dict[str, PromoMultiYears]] = None


class TLDNotice(ApiModel):
    tld: str = ""
    notices: List[str] = Field(default_factory=list)


class DomainStatus(ApiModel):
    domain: str = ""
    status: str = ""


class Email(ApiModel):
    email: str = ""
    first_email_date: PnTime = None
    verify_date: PnTime = None
    suspend_date: PnTime = None
    status: str = ""
    domains: List[DomainStatus] = Field(default_factory=list)


class GetEmailsOptions(ListOptions):
    email_like: Optional[str] = None
    status: Optional[str] = None
    email_status: Optional[str] = None
