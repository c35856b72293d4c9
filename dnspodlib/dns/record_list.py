from dataclasses import dataclass
from typing import Self

from pydantic import Field, StrictBool, StrictStr, model_validator

from dnspodlib.decode import U32, U64, Body, ProviderModel, ProviderResult, Response, decode_response
from dnspodlib.endpoint import Endpoint, param


class RecordListItem(ProviderModel):
    """One DNS record of a DescribeRecordList response."""

    record_id: U64
    value: StrictStr
    # ENABLE or DISABLE
    status: StrictStr
    updated_on: StrictStr
    name: StrictStr
    line: StrictStr
    line_id: StrictStr
    record_type: StrictStr = Field(alias="Type")
    # Seconds
    ttl: U32 = Field(alias="TTL")
    default_ns: StrictBool = Field(alias="DefaultNS")
    # Load balancing weight
    weight: U32 | None = None
    # OK, WARN, DOWN, or empty when monitoring is not set up
    monitor_status: StrictStr | None = None
    remark: StrictStr | None = None
    mx: U32 | None = Field(default=None, alias="MX")


class RecordCountInfo(ProviderModel):
    subdomain_count: U32 = Field(alias="SubdomainCount")
    # Records returned in this page
    list_count: U32
    # Records matching the filters
    total_count: U32

    @model_validator(mode="after")
    def check_counts(self) -> Self:
        if self.list_count > self.total_count:
            raise ValueError(f"ListCount ({self.list_count}) greater than TotalCount ({self.total_count})")
        return self


class DomainRecordListResult(ProviderResult):
    record_count_info: RecordCountInfo
    record_list: tuple[RecordListItem, ...]


@dataclass
class DomainRecordList(Endpoint):
    """
    List the records of a domain (DescribeRecordList).

    Every filter is optional. `domain_id` takes precedence over `domain` and
    `record_line_id` over `record_line` on the provider side.
    `sort_field` is one of name, line, type, value, weight, mx, ttl, updated_on,
    `sort_type` ASC or DESC. The provider defaults to Offset=0 and Limit=100
    (max 3000).
    """

    ACTION = "DescribeRecordList"

    domain: str = param("Domain", required=True)
    domain_id: int | None = param("DomainId")
    subdomain: str | None = param("Subdomain")
    record_type: str | None = param("RecordType")
    record_line: str | None = param("RecordLine")
    record_line_id: str | None = param("RecordLineId")
    group_id: int | None = param("GroupId")
    keyword: str | None = param("Keyword")
    sort_field: str | None = param("SortField")
    sort_type: str | None = param("SortType")
    offset: int | None = param("Offset")
    limit: int | None = param("Limit")

    def with_domain_id(self, domain_id: int) -> Self:
        return self._with(domain_id=domain_id)

    def with_subdomain(self, subdomain: str) -> Self:
        return self._with(subdomain=subdomain)

    def with_record_type(self, record_type: str) -> Self:
        return self._with(record_type=record_type)

    def with_record_line(self, record_line: str) -> Self:
        return self._with(record_line=record_line)

    def with_record_line_id(self, record_line_id: str) -> Self:
        return self._with(record_line_id=record_line_id)

    def with_group_id(self, group_id: int) -> Self:
        return self._with(group_id=group_id)

    def with_keyword(self, keyword: str) -> Self:
        """Search in host names and record values."""
        return self._with(keyword=keyword)

    def with_sort_field(self, sort_field: str) -> Self:
        return self._with(sort_field=sort_field)

    def with_sort_type(self, sort_type: str) -> Self:
        return self._with(sort_type=sort_type)

    def with_offset(self, offset: int) -> Self:
        return self._with(offset=offset)

    def with_limit(self, limit: int) -> Self:
        return self._with(limit=limit)

    @classmethod
    def decode(cls, body: Body) -> Response[DomainRecordListResult]:
        return decode_response(body, DomainRecordListResult, cls.ACTION)
