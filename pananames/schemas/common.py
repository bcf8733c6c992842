"""
Shared wire types: response envelope, pagination, timestamps and option bases
"""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, FrozenSet, List, Optional, Tuple

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, field_validator


# Returned by Pagination.next_page()/previous_page() when there is no such page
NO_PAGE = 0

DATE_ONLY_FORMAT = "%Y-%m-%d"


def _blank_to_none(value: Any) -> Any:
    # The API sends "" for timestamps that were never set
    if isinstance(value, str) and not value.strip():
        return None
    if value is not None and not isinstance(value, (str, datetime)):
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
    return value


def _parse_date_only(value: Any) -> Any:
    value = _blank_to_none(value)
    if isinstance(value, str):
        return datetime.strptime(value.strip(), DATE_ONLY_FORMAT).replace(tzinfo=timezone.utc)
    return value


def is_zero_time(value: datetime) -> bool:
    """True for the zero instant 0001-01-01T00:00:00 UTC (naive values are read as UTC)"""
    naive = value.replace(tzinfo=None)
    offset = value.utcoffset()
    if offset:
        try:
            naive -= offset
        except OverflowError:
            # Falls before year 1 in UTC, so it can't be the zero instant
            return False
    return naive == datetime.min


def _zero_to_none(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and is_zero_time(value):
        return None
    return value


# Date-time field; "" and the zero instant both decode to None
PnTime = Annotated[Optional[datetime], BeforeValidator(_blank_to_none), AfterValidator(_zero_to_none)]

# Date-only field (YYYY-MM-DD), decoded to midnight UTC; "" and 0001-01-01 decode to None
PnDate = Annotated[Optional[datetime], BeforeValidator(_parse_date_only), AfterValidator(_zero_to_none)]


class ApiModel(BaseModel):
    """Base for every resource and option model"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_body(self) -> dict:
        """JSON-ready dict keyed by wire names, unset (None) fields left out"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def _format_param(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class QueryOptions(ApiModel):
    """
    Base for options of read (GET) endpoints, encoded into the query string.

    Empty values are left out unless the field is named in always_sent.
    """

    always_sent: ClassVar[FrozenSet[str]] = frozenset()

    def to_params(self) -> List[Tuple[str, str]]:
        """Query parameters as (key, value) pairs sorted by key"""
        params = []
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if _is_empty(value) and name not in self.always_sent:
                continue
            key = field.alias or name
            if isinstance(value, (list, tuple)):
                params.extend((key, _format_param(item)) for item in value)
            else:
                params.append((key, _format_param(value)))
        return sorted(params, key=lambda p: p[0])


class ListOptions(QueryOptions):
    """Paging options shared by listing endpoints"""

    limit: int = Field(default=0, alias="per_page")
    page: int = Field(default=0, alias="current_page")


class Pagination(ApiModel):
    """Position of a page in a paged listing; page is 1-based"""

    total: int = Field(default=0, alias="total_entries")
    limit: int = Field(default=0, alias="per_page")
    page: int = Field(default=0, alias="current_page")
    pages: int = Field(default=0, alias="total_pages")

    def next_page(self) -> int:
        """Advance to the next page and return it, or NO_PAGE on the last page"""
        if self.pages - self.page > 0:
            self.page += 1
            return self.page
        return NO_PAGE

    def previous_page(self) -> int:
        """Step back to the previous page and return it, or NO_PAGE on the first page"""
        if self.page > 1:
            self.page -= 1
            return self.page
        return NO_PAGE


class Meta(Pagination):
    """The meta object of a response: flat pagination keys plus an optional notice"""

    notice: str = ""

    @field_validator("notice", mode="before")
    @classmethod
    def _null_notice(cls, v):
        return "" if v is None else v

    @property
    def pagination(self) -> Pagination:
        return Pagination(total=self.total, limit=self.limit, page=self.page, pages=self.pages)


class Envelope(ApiModel):
    """Outer {data, meta} wrapper used by every API response"""

    data: Any = None
    meta: Meta = Field(default_factory=Meta)

    @field_validator("meta", mode="before")
    @classmethod
    def _null_meta(cls, v):
        return {} if v is None else v


class ErrorDetail(ApiModel):
    code: int = 0
    message: str = ""
    description: str = ""


class ErrorEnvelope(ApiModel):
    """Body of a non-success response"""

    errors: List[ErrorDetail] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def _null_errors(cls, v):
        return [] if v is None else v
