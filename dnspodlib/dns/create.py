from dataclasses import dataclass
from typing import Self

from dnspodlib.decode import U64, Body, ProviderResult, Response, decode_response
from dnspodlib.endpoint import Endpoint, param


class CreateTXTRecordResult(ProviderResult):
    record_id: U64


@dataclass
class CreateTXTRecord(Endpoint):
    """
    Create a TXT record.

    `record_line_id` takes precedence over `record_line`, the default line
    being "默认". The host defaults to `@` when `sub_domain` is not set.
    """

    ACTION = "CreateTXTRecord"

    domain: str = param("Domain", required=True)
    value: str = param("Value", required=True)
    record_line: str | None = param("RecordLine")
    record_line_id: str | None = param("RecordLineId")
    ttl: int | None = param("TTL")
    status: str | None = param("Status")
    sub_domain: str | None = param("SubDomain")
    mx: int | None = param("MX")

    def with_record_line(self, record_line: str) -> Self:
        return self._with(record_line=record_line)

    def with_record_line_id(self, record_line_id: str) -> Self:
        return self._with(record_line_id=record_line_id)

    def with_ttl(self, ttl: int) -> Self:
        return self._with(ttl=ttl)

    def with_status(self, status: str) -> Self:
        """ENABLE or DISABLE"""
        return self._with(status=status)

    def with_sub_domain(self, sub_domain: str) -> Self:
        return self._with(sub_domain=sub_domain)

    def with_mx(self, mx: int) -> Self:
        return self._with(mx=mx)

    @classmethod
    def decode(cls, body: Body) -> Response[CreateTXTRecordResult]:
        return decode_response(body, CreateTXTRecordResult, cls.ACTION)
