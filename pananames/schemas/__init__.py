"""
Typed request options and response models for the Pananames merchant API
"""

from pananames.schemas.common import (
    NO_PAGE,
    ApiModel,
    Envelope,
    ErrorDetail,
    ErrorEnvelope,
    ListOptions,
    Meta,
    Pagination,
    PnDate,
    PnTime,
    QueryOptions,
)
from pananames.schemas.account import Balance, GetAccountPaymentsOptions, Payment
from pananames.schemas.name_servers import (
    ChildNameServer,
    DNSSec,
    DeleteChildNameServerOptions,
    DeleteNameServerRecordOptions,
    EnableDNSSecOptions,
    NameServerRecord,
    SetNameServersOptions,
)
from pananames.schemas.domains import (
    AutoRenew,
    CheckDomainsBulkOptions,
    Claim,
    ClaimContact,
    Contact,
    Domain,
    DomainCheck,
    GetDomainsOptions,
    Prices,
    Redeem,
    RegisterDomainOptions,
    Renew,
    RenewDomainOptions,
)
from pananames.schemas.whois import GetWhoisInfoOptions, UpdateWhoisInfoOptions, WhoisInfo, WhoisPrivacy
from pananames.schemas.transfers import (
    CancelTransferInOptions,
    GetTransfersInOptions,
    InitTransferInOptions,
    TransferIn,
)
from pananames.schemas.redirects import DomainRedirect, EnableBulkDomainRedirectOptions, Redirect, RedirectBulk
from pananames.schemas.tlds import TLD, DomainStatus, Email, GetEmailsOptions, PromoMultiYears, TLDNotice

__all__ = [
    # Envelope & shared
    "NO_PAGE",
    "ApiModel",
    "Envelope",
    "ErrorDetail",
    "ErrorEnvelope",
    "ListOptions",
    "Meta",
    "Pagination",
    "PnDate",
    "PnTime",
    "QueryOptions",

    # Account
    "Balance",
    "GetAccountPaymentsOptions",
    "Payment",

    # Domains
    "AutoRenew",
    "CheckDomainsBulkOptions",
    "Claim",
    "ClaimContact",
    "Contact",
    "Domain",
    "DomainCheck",
    "GetDomainsOptions",
    "Prices",
    "Redeem",
    "RegisterDomainOptions",
    "Renew",
    "RenewDomainOptions",

    # Name servers
    "ChildNameServer",
    "DNSSec",
    "DeleteChildNameServerOptions",
    "DeleteNameServerRecordOptions",
    "EnableDNSSecOptions",
    "NameServerRecord",
    "SetNameServersOptions",

    # WHOIS
    "GetWhoisInfoOptions",
    "UpdateWhoisInfoOptions",
    "WhoisInfo",
    "WhoisPrivacy",

    # Transfers
    "CancelTransferInOptions",
    "GetTransfersInOptions",
    "InitTransferInOptions",
    "TransferIn",

    # Redirects
    "DomainRedirect",
    "EnableBulkDomainRedirectOptions",
    "Redirect",
    "RedirectBulk",

    # TLDs & emails
    "TLD",
    "DomainStatus",
    "Email",
    "GetEmailsOptions",
    "PromoMultiYears",
    "TLDNotice",
]
