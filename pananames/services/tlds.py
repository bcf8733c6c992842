"""
TLD Service
TLD catalogue, registration notices and account emails
"""

from typing import List, Optional, Tuple

from pananames.api.client import RequestOption
from pananames.schemas.common import Pagination
from pananames.schemas.tlds import TLD, Email, GetEmailsOptions, TLDNotice
from pananames.services.base_service import BaseService
from pananames.utils.validators import validate_tld


class TLDService(BaseService):
    """TLD metadata and account-related emails"""

    def get_tlds(self, *request_options: RequestOption) -> List[TLD]:
        """Get the full list of available TLDs with prices and promos"""
        return self._call("GET", "tlds", target=List[TLD], request_options=request_options).data

    def get_tld_add_req_list(self, *request_options: RequestOption) -> List[TLDNotice]:
        """Get registration notices for all TLDs"""
        return self._call("GET", "add_req_list", target=List[TLDNotice], request_options=request_options).data

    def get_tld_add_req(self, tld: str, *request_options: RequestOption) -> TLDNotice:
        """Get registration notices for one TLD"""
        path = f"tlds/{self._escape(validate_tld(tld))}/add_req"
        return self._call("GET", path, target=TLDNotice, request_options=request_options).data

    def get_emails(
        self,
        options: Optional[GetEmailsOptions] = None,
        *request_options: RequestOption
    ) -> Tuple[List[Email], Pagination]:
        """Get a page of registrant emails and their verification state"""
        return self._list("emails", options, List[Email], request_options)
