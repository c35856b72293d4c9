import pytest

from dnspodlib import DecodeError
from dnspodlib.dns import DeleteRecord, DeleteRecordResult
from dnspodlib.tests import assert_payload


def test_payload():
    request = DeleteRecord("example.com", 162)
    assert_payload(request, {"Domain": "example.com", "RecordId": 162})

    with_id = request.with_domain_id(62)
    assert_payload(with_id, {"Domain": "example.com", "RecordId": 162, "DomainId": 62})
    assert request.domain_id is None


def test_metadata():
    request = DeleteRecord("example.com", 1).with_domain_id(2)

    assert request.request_info() == {
        "service": "dnspod",
        "action": "DeleteRecord",
        "version": "2021-03-23",
        "region": None,
        "payload": {"Domain": "example.com", "RecordId": 1, "DomainId": 2},
    }


def test_decode():
    resp = DeleteRecord.decode('{"Response": {"RequestId": "6ef60bec-0242-43af-bb20-270359fb54a7"}}')
    assert resp.response == DeleteRecordResult(request_id="6ef60bec-0242-43af-bb20-270359fb54a7")


@pytest.mark.parametrize(
    "body",
    [
        pytest.param('{"Response": {}}', id="missing_request_id"),
        pytest.param('{"Response": {"RequestId": 123}}', id="int_request_id"),
        pytest.param('{"Response": {"RequestId": null}}', id="null_request_id"),
    ],
)
def test_decode_errors(body):
    with pytest.raises(DecodeError) as exc:
        DeleteRecord.decode(body)
    assert exc.value.path == "Response.RequestId"
