from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Self, TypeAlias, TypedDict

from dnspodlib.decode import Body, Response

SERVICE = "dnspod"
VERSION = "2021-03-23"

PayloadValue: TypeAlias = str | int | bool
Payload: TypeAlias = dict[str, PayloadValue]


class RequestInfo(TypedDict):
    """What the transport needs to send one request."""

    service: str
    action: str
    version: str
    region: str | None
    payload: Payload


def param(key: str, *, required: bool = False) -> Any:
    """
    Declare an endpoint field sent under the provider key `key`.

    Optional fields default to None, which means "not sent".
    """
    metadata = {"key": key, "required": required}
    if required:
        return dataclasses.field(metadata=metadata)
    return dataclasses.field(default=None, metadata=metadata)


@dataclass
class Endpoint:
    """
    Base class of the DNSPod endpoint descriptors.

    Subclasses are dataclasses whose fields are declared with `param`.
    Required fields are given at construction time, optional ones are attached
    with the `with_*` setters which return an updated copy:

        >>> req = DomainRecordList("example.com").with_record_type("TXT").with_limit(10)
        >>> req.payload()
        {'Domain': 'example.com', 'RecordType': 'TXT', 'Limit': 10}
    """

    ACTION: ClassVar[str]

    def service(self) -> str:
        return SERVICE

    def action(self) -> str:
        return self.ACTION

    def version(self) -> str:
        return VERSION

    def region(self) -> str | None:
        # DNSPod is not a regional service
        return None

    def payload(self) -> Payload:
        payload: Payload = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.metadata["required"] or value is not None:
                payload[f.metadata["key"]] = value
        return payload

    def request_info(self) -> RequestInfo:
        return {
            "service": self.service(),
            "action": self.action(),
            "version": self.version(),
            "region": self.region(),
            "payload": self.payload(),
        }

    def payload_json(self) -> str:
        """Payload serialized as the request body."""
        return json.dumps(self.payload(), ensure_ascii=False)

    def _with(self, **kwargs: PayloadValue) -> Self:
        return dataclasses.replace(self, **kwargs)

    @classmethod
    def from_payload(cls, payload: Mapping[str, PayloadValue]) -> Self:
        """Rebuild an endpoint from the payload it produced."""
        names = {f.metadata["key"]: f for f in dataclasses.fields(cls)}
        unknown = set(payload) - set(names)
        if unknown:
            raise ValueError(f"Unknown keys for {cls.__name__}: {sorted(unknown)!r}")
        missing = [k for k, f in names.items() if f.metadata["required"] and k not in payload]
        if missing:
            raise ValueError(f"Missing required keys for {cls.__name__}: {missing!r}")
        return cls(**{names[k].name: v for k, v in payload.items()})

    @classmethod
    def decode(cls, body: Body) -> Response[Any]:
        raise NotImplementedError(f"{cls.__name__} has no response decoder")
