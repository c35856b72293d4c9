from dataclasses import dataclass
from typing import Self

from dnspodlib.decode import Body, ProviderResult, Response, decode_response
from dnspodlib.endpoint import Endpoint, param


class DeleteRecordResult(ProviderResult):
    pass


@dataclass
class DeleteRecord(Endpoint):
    """Delete a record by id. `domain_id` takes precedence over `domain` when set."""

    ACTION = "DeleteRecord"

    domain: str = param("Domain", required=True)
    record_id: int = param("RecordId", required=True)
    domain_id: int | None = param("DomainId")

    def with_domain_id(self, domain_id: int) -> Self:
        return self._with(domain_id=domain_id)

    @classmethod
    def decode(cls, body: Body) -> Response[DeleteRecordResult]:
        return decode_response(body, DeleteRecordResult, cls.ACTION)
