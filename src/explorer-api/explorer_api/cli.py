import argparse
import json
import sys
from typing import Any, Optional

from .chains import list_explorers
from .config import configure_logging, load_config
from .contract import CODE_FORMATS, VerifySourceCodeRequest
from .explorer import Explorer


def _add_listing_args(parser: argparse.ArgumentParser, sort: bool = True) -> None:
    parser.add_argument("--start-block", type=int, help="First block (default 0).")
    parser.add_argument("--end-block", type=int, help="Last block (default 99999999).")
    parser.add_argument("--page", type=int, help="Page number (default 1).")
    parser.add_argument("--offset", type=int, help="Page size.")
    if sort:
        parser.add_argument("--sort", choices=["asc", "desc"], help="Sort order (default asc).")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query Etherscan-compatible block explorer APIs.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--explorer",
        required=False,
        help="Explorer name or alias. Defaults to EXPLORER env or etherscan.",
    )
    parser.add_argument(
        "--log-level",
        required=False,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level. Defaults to LOG_LEVEL env or WARNING.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    balance_parser = subparsers.add_parser("balance", help="Native balance of an address (Wei)")
    balance_parser.add_argument("--address", required=True, help="Account address (0x-prefixed).")

    balances_parser = subparsers.add_parser("balances", help="Native balances of up to 20 addresses")
    balances_parser.add_argument(
        "--address",
        required=True,
        action="append",
        dest="addresses",
        help="Account address. Repeat for each address.",
    )

    txlist_parser = subparsers.add_parser("txlist", help="Normal transactions of an address")
    txlist_parser.add_argument("--address", required=True, help="Account address (0x-prefixed).")
    _add_listing_args(txlist_parser)

    internal_parser = subparsers.add_parser(
        "txlist-internal",
        help="Internal transactions by address, tx hash or block range",
    )
    target = internal_parser.add_mutually_exclusive_group()
    target.add_argument("--address", help="Account address (0x-prefixed).")
    target.add_argument("--tx-hash", help="Transaction hash; block range and paging are ignored.")
    _add_listing_args(internal_parser)

    token_parser = subparsers.add_parser("token-transfers", help="ERC20/721/1155 transfer events")
    token_parser.add_argument(
        "--standard",
        default="erc20",
        choices=["erc20", "erc721", "erc1155"],
        help="Token standard (default erc20).",
    )
    token_parser.add_argument("--address", help="Account address.")
    token_parser.add_argument("--contract-address", help="Token contract address.")
    _add_listing_args(token_parser)

    mined_parser = subparsers.add_parser("mined-blocks", help="Blocks validated by an address")
    mined_parser.add_argument("--address", required=True, help="Validator address.")
    mined_parser.add_argument("--block-type", default="blocks", choices=["blocks", "uncles"])
    mined_parser.add_argument("--page", type=int, help="Page number (default 1).")
    mined_parser.add_argument("--offset", type=int, help="Page size (default 10).")

    beacon_parser = subparsers.add_parser("beacon-withdrawals", help="Beacon chain withdrawals to an address")
    beacon_parser.add_argument("--address", required=True, help="Withdrawal address.")
    _add_listing_args(beacon_parser)

    history_parser = subparsers.add_parser("balance-history", help="Balance at a past block (API Pro)")
    history_parser.add_argument("--address", required=True, help="Account address.")
    history_parser.add_argument("--block", required=True, type=int, help="Block number.")

    abi_parser = subparsers.add_parser("abi", help="ABI of a verified contract")
    abi_parser.add_argument("--address", required=True, help="Contract address.")

    source_parser = subparsers.add_parser("source", help="Source code and metadata of a verified contract")
    source_parser.add_argument("--address", required=True, help="Contract address.")

    creation_parser = subparsers.add_parser("creation", help="Creator and creation tx of up to 5 contracts")
    creation_parser.add_argument(
        "--address",
        required=True,
        action="append",
        dest="addresses",
        help="Contract address. Repeat for each address.",
    )

    verify_parser = subparsers.add_parser("verify", help="Submit contract source code for verification")
    verify_parser.add_argument("--contract-address", required=True, help="Deployed contract address.")
    verify_parser.add_argument(
        "--source-file",
        required=True,
        help="Solidity source, or standard-json input when --code-format is solidity-standard-json-input.",
    )
    verify_parser.add_argument(
        "--contract-name",
        required=True,
        help="Contract name, e.g. contracts/Verified.sol:Verified for standard-json input.",
    )
    verify_parser.add_argument("--compiler-version", required=True, help="e.g. v0.8.24+commit.e11b9ed9.")
    verify_parser.add_argument("--chain-id", default="1", help="Chain id of the deployment (default 1).")
    verify_parser.add_argument(
        "--code-format",
        default="solidity-single-file",
        choices=list(CODE_FORMATS),
        help="Source format (default solidity-single-file).",
    )
    verify_parser.add_argument("--constructor-arguments", help="ABI-encoded constructor arguments, hex without 0x.")

    status_parser = subparsers.add_parser("verify-status", help="Status of a source verification request")
    status_parser.add_argument("--guid", required=True, help="GUID returned by the verification submit.")

    subparsers.add_parser("list-explorers", help="Supported explorers and their capabilities")

    return parser


def _run(explorer: Explorer, args: argparse.Namespace) -> Any:
    account = explorer.account
    listing = {
        "start_block": getattr(args, "start_block", None),
        "end_block": getattr(args, "end_block", None),
        "page": getattr(args, "page", None),
        "offset": getattr(args, "offset", None),
        "sort": getattr(args, "sort", None),
    }

    if args.command == "balance":
        return account.get_balance(args.address)
    if args.command == "balances":
        return account.get_balances(args.addresses)
    if args.command == "txlist":
        return account.get_transactions(args.address, **listing)
    if args.command == "txlist-internal":
        if args.tx_hash:
            return account.get_internal_transactions_by_tx_hash(args.tx_hash)
        if args.address:
            return account.get_internal_transactions(args.address, **listing)
        return account.get_internal_transactions_by_block_range(**listing)
    if args.command == "token-transfers":
        return account.get_token_transfer_events(
            args.standard,
            address=args.address,
            contract_address=args.contract_address,
            **listing,
        )
    if args.command == "mined-blocks":
        return account.get_blocks_validated_by_address(
            args.address,
            block_type=args.block_type,
            page=args.page,
            offset=args.offset,
        )
    if args.command == "beacon-withdrawals":
        return account.get_beacon_chain_withdrawals(args.address, **listing)
    if args.command == "balance-history":
        return account.get_historical_balance(args.address, args.block)
    if args.command == "abi":
        return explorer.contract.get_contract_abi(args.address)
    if args.command == "source":
        return explorer.contract.get_contract_source_code(args.address)
    if args.command == "creation":
        return explorer.contract.get_contract_creator_and_creation_tx_hash(args.addresses)
    if args.command == "verify":
        with open(args.source_file, encoding="utf-8") as handle:
            source_code = handle.read()
        request = VerifySourceCodeRequest(
            chain_id=args.chain_id,
            code_format=args.code_format,
            source_code=source_code,
            contract_address=args.contract_address,
            contract_name=args.contract_name,
            compiler_version=args.compiler_version,
            constructor_arguments=args.constructor_arguments,
        )
        return explorer.contract.verify_source_code(request)
    if args.command == "verify-status":
        return explorer.contract.check_verify_status(args.guid)
    raise ValueError(f"Unknown command '{args.command}'.")


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "list-explorers":
            print(json.dumps(list_explorers(), indent=2))
            return

        config = load_config()
        configure_logging(args.log_level or config.log_level)
        explorer = Explorer.for_chain(
            args.explorer or config.explorer,
            config.api_key,
            base_url=config.base_url,
            timeout=config.request_timeout,
        )
        result = _run(explorer, args)
        print(json.dumps(result, indent=2))
    except Exception as exc:  # pylint: disable=broad-except
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
