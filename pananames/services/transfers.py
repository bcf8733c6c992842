"""
Transfer Service
Transfers of domains into and out of the account
"""

from typing import List, Optional, Tuple

from pananames.api.client import RequestOption
from pananames.schemas.common import Pagination
from pananames.schemas.transfers import (
    CancelTransferInOptions,
    GetTransfersInOptions,
    InitTransferInOptions,
    TransferIn,
)
from pananames.services.base_service import BaseService
from pananames.utils.logger import get_logger
from pananames.utils.validators import require_options, validate_domain

logger = get_logger(__name__)


class TransferService(BaseService):
    """Incoming and outgoing domain transfers"""

    def get_transfers_in(
        self,
        options: Optional[GetTransfersInOptions] = None,
        *request_options: RequestOption
    ) -> Tuple[List[TransferIn], Pagination]:
        """Get a page of active incoming transfers"""
        return self._list("transfers_in", options, List[TransferIn], request_options)

    def init_transfer_in(self, options: InitTransferInOptions, *request_options: RequestOption) -> TransferIn:
        """
        Start transferring a domain into the account.
        Correct WHOIS contacts must be provided.
        """
        require_options(options, "InitTransferInOptions")
        options = options.model_copy(update={"domain": validate_domain(options.domain)})
        logger.info(f"Starting transfer in: {options.domain}")
        return self._call("POST", "transfers_in", options, TransferIn, request_options).data

    def cancel_transfer_in(self, options: CancelTransferInOptions, *request_options: RequestOption) -> None:
        """Cancel an incoming transfer"""
        require_options(options, "CancelTransferInOptions")
        options = options.model_copy(update={"domain": validate_domain(options.domain)})
        logger.info(f"Cancelling transfer in: {options.domain}")
        self._call("DELETE", "transfers_in", options, request_options=request_options)

    def init_transfer_out(self, domain: str, *request_options: RequestOption) -> None:
        """
        Prepare a domain for transferring out.
        Unlocks the domain and emails the authorization code to the registrant.
        """
        path = self._domain_path(domain, "transfer_out")
        logger.info(f"Preparing transfer out: {domain}")
        self._call("PUT", path, request_options=request_options)

    def cancel_transfer_out(self, domain: str, *request_options: RequestOption) -> None:
        """Cancel an outgoing transfer; the domain is locked again"""
        path = self._domain_path(domain, "transfer_out")
        logger.info(f"Cancelling transfer out: {domain}")
        self._call("DELETE", path, request_options=request_options)
