from dataclasses import dataclass
from typing import Self

from dnspodlib.decode import U64, Body, ProviderResult, Response, decode_response
from dnspodlib.endpoint import Endpoint, param


class ModifyTXTRecordResult(ProviderResult):
    record_id: U64


@dataclass
class ModifyTXTRecord(Endpoint):
    """
    Update the value of an existing TXT record.

    Only the fields that are set are sent; the others keep their current value
    on the provider side.
    """

    ACTION = "ModifyTXTRecord"

    domain: str = param("Domain", required=True)
    record_id: int = param("RecordId", required=True)
    value: str = param("Value", required=True)
    record_line: str | None = param("RecordLine")
    ttl: int | None = param("TTL")
    status: str | None = param("Status")
    sub_domain: str | None = param("SubDomain")

    def with_record_line(self, record_line: str) -> Self:
        return self._with(record_line=record_line)

    def with_ttl(self, ttl: int) -> Self:
        return self._with(ttl=ttl)

    def with_status(self, status: str) -> Self:
        return self._with(status=status)

    def with_sub_domain(self, sub_domain: str) -> Self:
        return self._with(sub_domain=sub_domain)

    @classmethod
    def decode(cls, body: Body) -> Response[ModifyTXTRecordResult]:
        return decode_response(body, ModifyTXTRecordResult, cls.ACTION)
