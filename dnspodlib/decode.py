"""Read the provider's `{"Response": {...}}` envelope into pydantic models."""

import json
import logging
from collections.abc import Mapping
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictStr, ValidationError
from pydantic.alias_generators import to_pascal

logger = logging.getLogger("dnspodlib")

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

U32 = Annotated[int, Strict(), Field(ge=0, le=U32_MAX)]
U64 = Annotated[int, Strict(), Field(ge=0, le=U64_MAX)]

Body = bytes | str | Mapping[str, Any]


class DecodeError(ValueError):
    """Error raised when a response body does not match the expected shape."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        *,
        code: str | None = None,
        request_id: str | None = None,
    ):
        self.path = path
        self.code = code
        self.request_id = request_id
        super().__init__(f"{path}: {message}" if path else message)


class ProviderModel(BaseModel):
    """Decoded provider object, keys in PascalCase. Unknown keys are ignored."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, frozen=True)


class ProviderResult(ProviderModel):
    """Action result, always carrying the request tracing id."""

    request_id: StrictStr


T = TypeVar("T", bound=ProviderResult)


class Response(ProviderModel, Generic[T]):
    """The `{"Response": {...}}` envelope."""

    response: T


def load_body(body: Body) -> Mapping[str, Any]:
    """Parse a raw body, passing already-parsed mappings through."""
    if isinstance(body, Mapping):
        return body
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise DecodeError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _check_provider_error(data: Mapping[str, Any]):
    response = data.get("Response")
    if not isinstance(response, Mapping) or not isinstance(response.get("Error"), Mapping):
        return
    code = response["Error"].get("Code")
    message = response["Error"].get("Message")
    request_id = response.get("RequestId")
    logger.warning(
        f"Provider error {code!r} for request {request_id!r}: {message}",
        extra={"request_id": request_id, "error_code": code},
    )
    raise DecodeError(
        f"Provider error {code}: {message}",
        "Response.Error",
        code=code if isinstance(code, str) else None,
        request_id=request_id if isinstance(request_id, str) else None,
    )


def error_path(loc: tuple[int | str, ...]) -> str:
    """("Response", "RecordList", 1, "TTL") -> "Response.RecordList[1].TTL" """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path


def decode_response(body: Body, result_type: type[T], action: str) -> Response[T]:
    """
    Decode a raw body into `Response[result_type]`.

    Any shape error, including a provider error envelope, raises DecodeError.
    """
    data = load_body(body)
    _check_provider_error(data)
    try:
        resp = Response[result_type].model_validate(data)
    except ValidationError as e:
        err = e.errors()[0]
        message = err["msg"] if e.error_count() == 1 else f"{err['msg']} (and {e.error_count() - 1} more errors)"
        raise DecodeError(message, error_path(err["loc"]) or None) from e

    request_id = resp.response.request_id
    logger.debug(f"Decoded {action} response {request_id!r}", extra={"action": action, "request_id": request_id})
    return resp
