"""
MCP server exposing the explorer account and contract endpoints as tools.
"""

import argparse
from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from .chains import list_explorers as _list_explorers
from .chains import resolve_explorer
from .config import Config, configure_logging, load_config
from .contract import VerifySourceCodeRequest
from .errors import ValidationError
from .explorer import Explorer

server = FastMCP(
    name="explorer-api",
    instructions="Query balances, transactions, token transfers and verified contracts "
    "on Etherscan-compatible block explorers.",
)

_config: Optional[Config] = None
_explorers: Dict[str, Explorer] = {}


def _get_explorer(explorer: Optional[str] = None) -> Explorer:
    global _config
    if _config is None:
        _config = load_config()

    spec = resolve_explorer(explorer or _config.explorer)
    if spec.name not in _explorers:
        # EXPLORER_BASE_URL only applies to the configured default explorer.
        base_url = _config.base_url if spec.name == resolve_explorer(_config.explorer).name else None
        _explorers[spec.name] = Explorer.for_chain(
            spec.name,
            _config.api_key,
            base_url=base_url,
            timeout=_config.request_timeout,
        )
    return _explorers[spec.name]


def _normalize_addresses(value: Any, name: str) -> List[str]:
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ValidationError(f"{name} must be an array of addresses or a comma-separated string.")


@server.tool(
    name="list_explorers",
    title="List Explorers",
    description="List supported explorers with their base URLs and extra account capabilities.",
)
def list_explorers() -> list:
    return _list_explorers()


@server.tool(
    name="get_balance",
    title="Get Balance",
    description="Native balance of an address in Wei (decimal string).",
)
def get_balance(address: str, explorer: Optional[str] = None) -> str:
    return _get_explorer(explorer).account.get_balance(address)


@server.tool(
    name="get_balances",
    title="Get Balances",
    description="Native balances (Wei) of up to 20 addresses, in input order. `addresses` must be an array.",
)
def get_balances(addresses: Any, explorer: Optional[str] = None) -> list:
    return _get_explorer(explorer).account.get_balances(_normalize_addresses(addresses, "addresses"))


@server.tool(
    name="list_transactions",
    title="List Transactions",
    description="List normal transactions for an address with optional block range and pagination.",
)
def list_transactions(
    address: str,
    explorer: Optional[str] = None,
    start_block: Optional[int] = None,
    end_block: Optional[int] = None,
    page: Optional[int] = None,
    offset: Optional[int] = None,
    sort: Optional[str] = None,
) -> list:
    return _get_explorer(explorer).account.get_transactions(
        address, start_block, end_block, page, offset, sort
    )


@server.tool(
    name="list_internal_transactions",
    title="List Internal Transactions",
    description="List internal transactions by address, by tx hash, or (with neither) by block range.",
)
def list_internal_transactions(
    address: Optional[str] = None,
    tx_hash: Optional[str] = None,
    explorer: Optional[str] = None,
    start_block: Optional[int] = None,
    end_block: Optional[int] = None,
    page: Optional[int] = None,
    offset: Optional[int] = None,
    sort: Optional[str] = None,
) -> list:
    account = _get_explorer(explorer).account
    if address and tx_hash:
        raise ValidationError("Provide either address or tx_hash, not both.")
    if tx_hash:
        return account.get_internal_transactions_by_tx_hash(tx_hash)
    if address:
        return account.get_internal_transactions(address, start_block, end_block, page, offset, sort)
    return account.get_internal_transactions_by_block_range(start_block, end_block, page, offset, sort)


@server.tool(
    name="list_token_transfers",
    title="List Token Transfers",
    description="List token transfer events (erc20/erc721/erc1155). Needs address, contract_address, or both.",
)
def list_token_transfers(
    address: Optional[str] = None,
    contract_address: Optional[str] = None,
    token_type: str = "erc20",
    explorer: Optional[str] = None,
    start_block: Optional[int] = None,
    end_block: Optional[int] = None,
    page: Optional[int] = None,
    offset: Optional[int] = None,
    sort: Optional[str] = None,
) -> list:
    return _get_explorer(explorer).account.get_token_transfer_events(
        token_type, address, contract_address, start_block, end_block, page, offset, sort
    )


@server.tool(
    name="list_mined_blocks",
    title="List Validated Blocks",
    description="Blocks (or uncles) validated by an address. Only on explorers with the mined_blocks capability.",
)
def list_mined_blocks(
    address: str,
    block_type: str = "blocks",
    explorer: Optional[str] = None,
    page: Optional[int] = None,
    offset: Optional[int] = None,
) -> list:
    return _get_explorer(explorer).account.get_blocks_validated_by_address(
        address, block_type, page, offset
    )


@server.tool(
    name="list_beacon_withdrawals",
    title="List Beacon Withdrawals",
    description="Beacon chain withdrawals to an address (page size defaults to 100). Ethereum only.",
)
def list_beacon_withdrawals(
    address: str,
    explorer: Optional[str] = None,
    start_block: Optional[int] = None,
    end_block: Optional[int] = None,
    page: Optional[int] = None,
    offset: Optional[int] = None,
    sort: Optional[str] = None,
) -> list:
    return _get_explorer(explorer).account.get_beacon_chain_withdrawals(
        address, start_block, end_block, page, offset, sort
    )


@server.tool(
    name="get_historical_balance",
    title="Get Historical Balance",
    description="Balance of an address at a block number, in Wei. Requires an API Pro key.",
)
def get_historical_balance(address: str, block_number: int, explorer: Optional[str] = None) -> str:
    return _get_explorer(explorer).account.get_historical_balance(address, block_number)


@server.tool(
    name="get_contract_abi",
    title="Get Contract ABI",
    description="ABI of a verified contract, as the raw JSON string returned by the explorer.",
)
def get_contract_abi(address: str, explorer: Optional[str] = None) -> str:
    return _get_explorer(explorer).contract.get_contract_abi(address)


@server.tool(
    name="get_contract_source",
    title="Get Contract Source",
    description="Source code, ABI, compiler settings and proxy info of a verified contract.",
)
def get_contract_source(address: str, explorer: Optional[str] = None) -> list:
    return _get_explorer(explorer).contract.get_contract_source_code(address)


@server.tool(
    name="get_contract_creation",
    title="Get Contract Creation Info",
    description="Creator address and creation tx hash for up to 5 contracts. `addresses` must be an array.",
)
def get_contract_creation(addresses: Any, explorer: Optional[str] = None) -> list:
    return _get_explorer(explorer).contract.get_contract_creator_and_creation_tx_hash(
        _normalize_addresses(addresses, "addresses")
    )


@server.tool(
    name="verify_source_code",
    title="Verify Contract Source",
    description="Submit contract source for verification and return the receipt GUID. "
    "Not idempotent; poll the result with check_verify_status.",
)
def verify_source_code(
    contract_address: str,
    source_code: str,
    contract_name: str,
    compiler_version: str,
    code_format: str = "solidity-single-file",
    chain_id: str = "1",
    constructor_arguments: Optional[str] = None,
    explorer: Optional[str] = None,
) -> str:
    request = VerifySourceCodeRequest(
        chain_id=chain_id,
        code_format=code_format,
        source_code=source_code,
        contract_address=contract_address,
        contract_name=contract_name,
        compiler_version=compiler_version,
        constructor_arguments=constructor_arguments,
    )
    return _get_explorer(explorer).contract.verify_source_code(request)


@server.tool(
    name="check_verify_status",
    title="Check Verification Status",
    description="Status of a source code verification request by GUID.",
)
def check_verify_status(guid: str, explorer: Optional[str] = None) -> str:
    return _get_explorer(explorer).contract.check_verify_status(guid)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Serve explorer-api tools over MCP.")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default="stdio",
        help="MCP transport (default stdio).",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind address for sse and streamable-http.")
    parser.add_argument("--port", type=int, default=8000, help="Bind port for sse and streamable-http.")
    parser.add_argument("--mount-path", default="/", help="Mount path, sse only.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level. Defaults to LOG_LEVEL env or WARNING.",
    )
    args = parser.parse_args(argv)

    # Logs go to stderr; stdout carries the stdio transport.
    configure_logging(args.log_level)

    server.settings.host = args.host
    server.settings.port = args.port
    run_kwargs: Dict[str, Any] = {"transport": args.transport}
    if args.transport == "sse":
        run_kwargs["mount_path"] = args.mount_path
    server.run(**run_kwargs)


if __name__ == "__main__":
    main()
