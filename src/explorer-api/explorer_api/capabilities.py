"""
Chain-specific additions to the account endpoints.

Not every explorer implements every account action. Instead of subclassing
:class:`Account` per chain, each optional set of actions lives in a small
capability object that shares the account's :class:`ApiClient`, and
:class:`ChainAccount` stitches the base catalog and the capabilities together.
"""

from dataclasses import replace
from typing import Any, Iterable, List, Optional, Tuple, Type

from .account import Account
from .api_client import ApiClient
from .config import BEACON_WITHDRAWAL_DEFAULTS, QueryDefaults
from .models import BeaconChainWithdrawal, MinedBlock


class AccountCapability:
    """Base for optional account actions bound to an existing client."""

    name = ""

    def __init__(self, client: ApiClient, defaults: QueryDefaults) -> None:
        self.client = client
        self.defaults = defaults


class MinedBlocks(AccountCapability):
    """Blocks validated by an address. Proof-of-work style L1 chains only."""

    name = "mined_blocks"

    def get_blocks_validated_by_address(
        self,
        address: str,
        block_type: str = "blocks",
        page: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[MinedBlock]:
        params = self.client.params(
            "getminedblocks",
            address=address,
            blocktype=block_type,
            **self.defaults.paging(page, offset, with_sort=False),
        )
        return self.client.get(params)


class BeaconWithdrawals(AccountCapability):
    """Beacon chain withdrawals credited to an address. Ethereum only."""

    name = "beacon_withdrawals"

    def __init__(self, client: ApiClient, defaults: QueryDefaults) -> None:
        super().__init__(client, replace(defaults, offset=BEACON_WITHDRAWAL_DEFAULTS.offset))

    def get_beacon_chain_withdrawals(
        self,
        address: str,
        start_block: Optional[int] = None,
        end_block: Optional[int] = None,
        page: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
    ) -> List[BeaconChainWithdrawal]:
        params = self.client.params(
            "txsBeaconWithdrawal",
            address=address,
            **self.defaults.block_range(start_block, end_block),
            **self.defaults.paging(page, offset, sort),
        )
        return self.client.get(params)


class HistoricalBalance(AccountCapability):
    """Balance at a past block. Needs an API Pro key; throttled to 2 calls/s."""

    name = "historical_balance"

    def get_historical_balance(self, address: str, block_number: int) -> str:
        params = self.client.params("balancehistory", address=address, blockno=block_number)
        return self.client.get(params)


class ChainAccount:
    """
    An :class:`Account` plus the capabilities its explorer supports.

    Lookups go to the base account first, then to each capability in order,
    so ``chain_account.get_beacon_chain_withdrawals(...)`` works only when
    :class:`BeaconWithdrawals` is attached.
    """

    def __init__(self, account: Account, capabilities: Iterable[Type[AccountCapability]] = ()) -> None:
        self.account = account
        self.capabilities: Tuple[AccountCapability, ...] = tuple(
            capability(account.client, account.defaults) for capability in capabilities
        )

    def supports(self, method: str) -> bool:
        return self._find(method) is not None

    def _find(self, method: str) -> Optional[Any]:
        if method.startswith("_"):
            return None
        if hasattr(self.account, method):
            return self.account
        for capability in self.capabilities:
            if hasattr(capability, method):
                return capability
        return None

    def __getattr__(self, method: str) -> Any:
        # Only reached when normal lookup on ChainAccount itself fails.
        if method in ("account", "capabilities"):
            raise AttributeError(method)
        owner = self._find(method)
        if owner is None:
            names = ", ".join(c.name for c in self.capabilities) or "none"
            raise AttributeError(
                f"'{method}' is not available on this explorer (capabilities: {names})."
            )
        return getattr(owner, method)

    def __dir__(self) -> List[str]:
        names = set(super().__dir__())
        for owner in (self.account, *self.capabilities):
            names.update(n for n in dir(owner) if not n.startswith("_"))
        return sorted(names)
