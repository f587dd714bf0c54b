from typing import Any, Dict, List, Optional, Sequence

import requests

from .api_client import ApiClient
from .config import DEFAULT_QUERY, QueryDefaults
from .errors import ValidationError
from .models import (
    AccountBalance,
    ERC1155TransferEvent,
    ERC20TransferEvent,
    ERC721TransferEvent,
    InternalTransaction,
    Transaction,
)

MAX_BALANCE_ADDRESSES = 20

TOKEN_TRANSFER_ACTIONS = {
    "erc20": "tokentx",
    "erc721": "tokennfttx",
    "erc1155": "token1155tx",
}


class Account:
    """Endpoints of the ``account`` module shared by every explorer."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        defaults: QueryDefaults = DEFAULT_QUERY,
    ) -> None:
        self.client = ApiClient(api_key, base_url, "account", session=session, timeout=timeout)
        self.defaults = defaults

    def get_balance(self, address: str, tag: str = "latest") -> str:
        """
        Return the balance of ``address`` in Wei, as a decimal string.

        Example::

            >>> explorer.account.get_balance("0x000000000000000000000000000000000000dEaD")
            '1000000000000000000'
        """
        params = self.client.params("balance", address=address, tag=tag)
        return self.client.get(params)

    def get_balances(self, addresses: Sequence[str], tag: str = "latest") -> List[AccountBalance]:
        """
        Return ``{account, balance}`` records for up to 20 addresses.

        Records come back in the order the addresses were given.
        """
        if isinstance(addresses, str):
            raise ValidationError("addresses must be a list of addresses, not a single string.")
        if len(addresses) > MAX_BALANCE_ADDRESSES:
            raise ValidationError(
                f"Maximum of {MAX_BALANCE_ADDRESSES} addresses allowed, got {len(addresses)}."
            )
        params = self.client.params("balancemulti", address=",".join(addresses), tag=tag)
        return self.client.get(params)

    def get_transactions(
        self,
        address: str,
        start_block: Optional[int] = None,
        end_block: Optional[int] = None,
        page: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[Transaction]:
        params = self.client.params(
            "txlist",
            address=address,
            **self._listing(start_block, end_block, page, offset, sort),
        )
        return self.client.get(params)

    def get_internal_transactions(
        self,
        address: str,
        start_block: Optional[int] = None,
        end_block: Optional[int] = None,
        page: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[InternalTransaction]:
        params = self.client.params(
            "txlistinternal",
            address=address,
            **self._listing(start_block, end_block, page, offset, sort),
        )
        return self.client.get(params)

    def get_internal_transactions_by_tx_hash(self, tx_hash: str) -> List[InternalTransaction]:
        """Internal calls made by one transaction. Records omit ``hash`` and ``traceId``."""
        params = self.client.params("txlistinternal", txhash=tx_hash)
        return self.client.get(params)

    def get_internal_transactions_by_block_range(
        self,
        start_block: Optional[int] = None,
        end_block: Optional[int] = None,
        page: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[InternalTransaction]:
        params = self.client.params(
            "txlistinternal",
            **self._listing(start_block, end_block, page, offset, sort),
        )
        return self.client.get(params)

    def get_erc20_transfer_events(
        self,
        address: Optional[str] = None,
        contract_address: Optional[str] = None,
        start_block: Optional[int] = None,
        end_block: Optional[int] = None,
        page: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[ERC20TransferEvent]:
        return self.get_token_transfer_events(
            "erc20", address, contract_address, start_block, end_block, page, offset, sort
        )

    def get_erc721_transfer_events(
        self,
        address: Optional[str] = None,
        contract_address: Optional[str] = None,
        start_block: Optional[int] = None,
        end_block: Optional[int] = None,
        page: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[ERC721TransferEvent]:
        return self.get_token_transfer_events(
            "erc721", address, contract_address, start_block, end_block, page, offset, sort
        )

    def get_erc1155_transfer_events(
        self,
        address: Optional[str] = None,
        contract_address: Optional[str] = None,
        start_block: Optional[int] = None,
        end_block: Optional[int] = None,
        page: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[ERC1155TransferEvent]:
        return self.get_token_transfer_events(
            "erc1155", address, contract_address, start_block, end_block, page, offset, sort
        )

    def get_token_transfer_events(
        self,
        standard: str,
        address: Optional[str] = None,
        contract_address: Optional[str] = None,
        start_block: Optional[int] = None,
        end_block: Optional[int] = None,
        page: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Token transfer events for ``standard`` (erc20, erc721 or erc1155).

        At least one of ``address`` and ``contract_address`` is required; with
        both, only transfers of that token touching that address are returned.
        """
        action = TOKEN_TRANSFER_ACTIONS.get((standard or "").lower())
        if not action:
            raise ValidationError(
                f"Unsupported token standard '{standard}'. Expected erc20|erc721|erc1155."
            )
        if not address and not contract_address:
            raise ValidationError("Either address or contract_address must be provided.")

        params = self.client.params(
            action,
            contractaddress=contract_address or None,
            address=address or None,
            **self._listing(start_block, end_block, page, offset, sort),
        )
        return self.client.get(params)

    def _listing(
        self,
        start_block: Optional[int],
        end_block: Optional[int],
        page: Optional[int],
        offset: Optional[int],
        sort: Optional[str],
    ) -> Dict[str, Any]:
        return {
            **self.defaults.block_range(start_block, end_block),
            **self.defaults.paging(page, offset, sort),
        }
