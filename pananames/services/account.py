"""
Account Service
Balance and payment history of the merchant account
"""

from typing import List, Optional, Tuple

from pananames.api.client import RequestOption
from pananames.schemas.account import Balance, GetAccountPaymentsOptions, Payment
from pananames.schemas.common import Pagination
from pananames.services.base_service import BaseService


class AccountService(BaseService):
    """Merchant account operations"""

    def get_balance(self, *request_options: RequestOption) -> Balance:
        """Get current account balance"""
        return self._call("GET", "account/balance", target=Balance, request_options=request_options).data

    def get_payments(
        self,
        options: Optional[GetAccountPaymentsOptions] = None,
        *request_options: RequestOption
    ) -> Tuple[List[Payment], Pagination]:
        """
        Get a page of payments made from the account.

        Args:
            options: Filters and paging; defaults to the first page with blank filters

        Returns:
            Tuple of (payments, pagination)
        """
        if options is None:
            options = GetAccountPaymentsOptions()
        return self._list("account/payments", options, List[Payment], request_options)
