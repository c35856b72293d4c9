import json

import pytest


@pytest.fixture()
def record_list_response() -> dict:
    return {
        "Response": {
            "RecordCountInfo": {"SubdomainCount": 2, "ListCount": 2, "TotalCount": 10},
            "RecordList": [
                {
                    "RecordId": 1,
                    "Value": "1.1.1.1",
                    "Status": "ENABLE",
                    "UpdatedOn": "2021-03-28 11:27:09",
                    "Name": "m",
                    "Line": "默认",
                    "LineId": "0",
                    "Type": "A",
                    "Weight": 20,
                    "MonitorStatus": "OK",
                    "Remark": "用于api",
                    "TTL": 600,
                    "MX": 10,
                    "DefaultNS": True,
                },
                {
                    "RecordId": 2,
                    "Value": "2.2.2.2",
                    "Status": "ENABLE",
                    "UpdatedOn": "2021-03-28 11:27:10",
                    "Name": "www",
                    "Line": "默认",
                    "LineId": "0",
                    "Type": "A",
                    "TTL": 600,
                    "DefaultNS": False,
                },
            ],
            "RequestId": "req-123456",
        }
    }


@pytest.fixture()
def record_list_body(record_list_response) -> bytes:
    return json.dumps(record_list_response, ensure_ascii=False).encode("utf-8")


@pytest.fixture()
def error_response() -> dict:
    return {
        "Response": {
            "Error": {"Code": "InvalidParameter.DomainInvalid", "Message": "域名不正确，请输入主域名"},
            "RequestId": "req-error",
        }
    }
