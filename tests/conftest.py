from unittest.mock import Mock

import pytest

from explorer_api import Explorer

API_KEY = "test-key"
DEAD = "0x000000000000000000000000000000000000dEaD"
VITALIK = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
USDT = "0xdAC17F958D2ee523a2206206994597C13D831ec7"


def make_response(payload=None, status_code=200, reason="OK", json_error=None):
    """Build a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def ok(result):
    return make_response({"status": "1", "message": "OK", "result": result})


@pytest.fixture
def session():
    session = Mock()
    session.get.return_value = ok([])
    session.post.return_value = ok("")
    return session


@pytest.fixture
def etherscan(session):
    return Explorer.for_chain("etherscan", API_KEY, session=session)


def sent_params(session, method="get"):
    """Query params of the single request sent through the mocked session."""
    call = getattr(session, method)
    assert call.call_count == 1
    return call.call_args.kwargs["params"]
