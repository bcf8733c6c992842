"""Account balance and payment history"""

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from pananames.schemas.common import ApiModel, ListOptions, PnTime


class Balance(ApiModel):
    balance: float = 0.0


class Payment(ApiModel):
    txid: str = ""
    txdate: PnTime = None
    txtype: str = ""
    domain: str = ""
    period: str = ""
    description: str = ""
    total: float = 0.0


class GetAccountPaymentsOptions(ListOptions):
    # The payments endpoint expects these filters even when blank
    always_sent: ClassVar[FrozenSet[str]] = frozenset({"id", "pay_type", "date_from", "date_end"})

    id: int = 0
    domain_like: Optional[str] = None
    pay_type: str = ""
    date_from: str = Field(default="", description="YYYY-MM-DD")
    date_end: str = Field(default="", description="YYYY-MM-DD")
