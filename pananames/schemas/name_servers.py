"""Name servers, child name servers, DNS records and DNSSEC"""

from typing import List, Optional

from pydantic import Field

from pananames.schemas.common import ApiModel


class NameServerRecord(ApiModel):
    """DNS record hosted on the registrar's name servers"""

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    value: Optional[str] = None
    priority: Optional[int] = None
    ttl: Optional[int] = None


class ChildNameServer(ApiModel):
    hostname: str = ""
    ipv4: Optional[str] = None
    ipv6: Optional[str] = None


class DNSSec(ApiModel):
    domain: str = ""
    ds_data: str = ""
    enabled: bool = False


class SetNameServersOptions(ApiModel):
    name_servers: List[str] = Field(default_factory=list)


class DeleteChildNameServerOptions(ApiModel):
    hostname: Optional[str] = None


class DeleteNameServerRecordOptions(ApiModel):
    id: Optional[str] = None


class EnableDNSSecOptions(ApiModel):
    ds: Optional[str] = None
