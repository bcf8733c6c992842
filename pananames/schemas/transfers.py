"""Transfers in and out of the registrar"""

from typing import List, Optional

from pydantic import Field

from pananames.schemas.common import ApiModel, ListOptions, PnTime
from pananames.schemas.domains import Contact
from pananames.schemas.name_servers import NameServerRecord


class TransferIn(ApiModel):
    domain: str = ""
    transfer_status: str = ""
    init_date: PnTime = None
    premium_price: float = 0.0
    whois_privacy: bool = False
    registrant_contact: Optional[Contact] = None
    admin_contact: Optional[Contact] = None
    tech_contact: Optional[Contact] = None
    billing_contact: Optional[Contact] = None
    name_servers: Optional[List[str]] = None
    name_server_records: Optional[List[NameServerRecord]] = None


class InitTransferInOptions(ApiModel):
    domain: str
    auth_code: Optional[str] = None
    premium_price: Optional[float] = None
    whois_privacy: Optional[bool] = None
    registrant_contact: Optional[Contact] = None
    admin_contact: Optional[Contact] = None
    tech_contact: Optional[Contact] = None
    billing_contact: Optional[Contact] = None
    name_servers: Optional[List[str]] = None
    # request key is "name_servers_records", the response key "name_server_records"
    name_server_records: Optional[List[NameServerRecord]] = Field(default=None, alias="name_servers_records")


class GetTransfersInOptions(ListOptions):
    domain_like: Optional[str] = None
    status: Optional[str] = None


class CancelTransferInOptions(ApiModel):
    domain: str
