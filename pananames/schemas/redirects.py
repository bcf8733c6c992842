"""URL redirects for parked domains"""

from typing import List, Optional

from pydantic import Field

from pananames.schemas.common import ApiModel


class Redirect(ApiModel):
    """Redirect target and masking settings; also the options of enable_domain_redirect()"""

    url: Optional[str] = None
    masking_enabled: Optional[bool] = None
    masking_title: Optional[str] = None
    masking_desc: Optional[str] = None
    masking_kwd: Optional[str] = None


class DomainRedirect(ApiModel):
    domain: str = ""
    domain_queued: bool = False
    error: str = ""


class RedirectBulk(Redirect):
    domain_list: List[DomainRedirect] = Field(default_factory=list)


class EnableBulkDomainRedirectOptions(Redirect):
    domain_list: List[str] = Field(default_factory=list)
