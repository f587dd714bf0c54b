from unittest.mock import Mock, patch

import pytest

from explorer_api import ValidationError, VerifySourceCodeRequest, mcp_server

from conftest import DEAD, USDT, VITALIK


@pytest.fixture
def explorer():
    mock = Mock()
    with patch("explorer_api.mcp_server._get_explorer", return_value=mock) as getter:
        mock.getter = getter
        yield mock


@pytest.fixture
def fresh_state(monkeypatch):
    monkeypatch.setattr(mcp_server, "_config", None)
    monkeypatch.setattr(mcp_server, "_explorers", {})
    monkeypatch.setenv("ETHERSCAN_API_KEY", "abc")
    monkeypatch.delenv("EXPLORER", raising=False)
    monkeypatch.delenv("EXPLORER_BASE_URL", raising=False)
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)


def test_get_balance_tool(explorer):
    explorer.account.get_balance.return_value = "7"

    assert mcp_server.get_balance(DEAD, explorer="bsc") == "7"
    explorer.getter.assert_called_once_with("bsc")


def test_get_balances_accepts_comma_separated_string(explorer):
    explorer.account.get_balances.return_value = []

    mcp_server.get_balances(f"{DEAD}, {VITALIK}")

    explorer.account.get_balances.assert_called_once_with([DEAD, VITALIK])


def test_get_balances_rejects_objects(explorer):
    with pytest.raises(ValidationError):
        mcp_server.get_balances({"address": DEAD})


def test_list_internal_transactions_routing(explorer):
    account = explorer.account

    mcp_server.list_internal_transactions(tx_hash="0xabc")
    account.get_internal_transactions_by_tx_hash.assert_called_once_with("0xabc")

    mcp_server.list_internal_transactions(address=VITALIK, page=2)
    account.get_internal_transactions.assert_called_once_with(VITALIK, None, None, 2, None, None)

    mcp_server.list_internal_transactions(start_block=1, end_block=2)
    account.get_internal_transactions_by_block_range.assert_called_once_with(1, 2, None, None, None)

    with pytest.raises(ValidationError):
        mcp_server.list_internal_transactions(address=VITALIK, tx_hash="0xabc")


def test_list_token_transfers_tool(explorer):
    mcp_server.list_token_transfers(contract_address=USDT, token_type="erc1155")

    explorer.account.get_token_transfer_events.assert_called_once_with(
        "erc1155", None, USDT, None, None, None, None, None
    )


def test_contract_tools(explorer):
    explorer.contract.get_contract_abi.return_value = "[]"

    assert mcp_server.get_contract_abi(USDT) == "[]"
    mcp_server.get_contract_creation([USDT])
    explorer.contract.get_contract_creator_and_creation_tx_hash.assert_called_once_with([USDT])


def test_get_explorer_builds_once_per_name(fresh_state):
    first = mcp_server._get_explorer()
    again = mcp_server._get_explorer("ethereum")
    other = mcp_server._get_explorer("arbitrum")

    assert first is again
    assert first.name == "etherscan"
    assert other.name == "arbiscan"
    assert other is not first


def test_base_url_override_applies_to_default_explorer_only(fresh_state, monkeypatch):
    monkeypatch.setenv("EXPLORER", "bsc")
    monkeypatch.setenv("EXPLORER_BASE_URL", "https://bsc.example/api")

    assert mcp_server._get_explorer().base_url == "https://bsc.example/api"
    assert mcp_server._get_explorer("etherscan").base_url == "https://api.etherscan.io/api"


def test_list_explorers_tool():
    names = [entry["name"] for entry in mcp_server.list_explorers()]
    assert "lineascan" in names


def test_verify_source_code_tool(explorer):
    explorer.contract.verify_source_code.return_value = "guid-1"

    guid = mcp_server.verify_source_code(
        contract_address=USDT,
        source_code="pragma solidity ^0.8.24; contract Verified {}",
        contract_name="Verified",
        compiler_version="v0.8.24+commit.e11b9ed9",
    )

    assert guid == "guid-1"
    request = explorer.contract.verify_source_code.call_args.args[0]
    assert isinstance(request, VerifySourceCodeRequest)
    assert request.chain_id == "1"
    assert request.code_format == "solidity-single-file"
    assert request.constructor_arguments is None


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], {"transport": "stdio"}),
        (["--transport", "streamable-http"], {"transport": "streamable-http"}),
        (["--transport", "sse", "--mount-path", "/mcp"], {"transport": "sse", "mount_path": "/mcp"}),
    ],
)
def test_main_runs_selected_transport(argv, expected):
    with patch.object(mcp_server.server, "run") as run, \
            patch("explorer_api.mcp_server.configure_logging") as configure:
        mcp_server.main(argv + ["--port", "9100", "--log-level", "INFO"])

    run.assert_called_once_with(**expected)
    configure.assert_called_once_with("INFO")
    assert mcp_server.server.settings.port == 9100
