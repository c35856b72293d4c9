import pprint
from collections.abc import Mapping
from typing import Any, Iterable

try:
    import deepdiff
except ImportError:
    raise ImportError('Please install deepdiff or dnspodlib with "tests" to use this module')

from dnspodlib.endpoint import Endpoint


def assert_equals(d1: Mapping | Iterable, d2: Mapping | Iterable, *, ignore_order: bool = False):
    """Assert equality, printing a DeepDiff of both sides on failure."""
    assert d1 == d2 or (ignore_order and not deepdiff.DeepDiff(d1, d2, ignore_order=True)), pprint.pprint(
        deepdiff.DeepDiff(d1, d2, ignore_order=ignore_order)
    )


def assert_payload(endpoint: Endpoint, expected: Mapping[str, Any]):
    """Assert the exact payload of an endpoint, key order ignored."""
    assert_equals(endpoint.payload(), dict(expected))
