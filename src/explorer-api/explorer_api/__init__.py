"""Client for Etherscan and Etherscan-compatible block explorer APIs."""

from .account import Account
from .api_client import ApiClient
from .capabilities import BeaconWithdrawals, ChainAccount, HistoricalBalance, MinedBlocks
from .chains import EXPLORERS, ExplorerSpec, list_explorers, resolve_explorer
from .config import BEACON_WITHDRAWAL_DEFAULTS, DEFAULT_QUERY, QueryDefaults
from .contract import Contract, VerifySourceCodeRequest
from .errors import DecodeError, ExplorerError, ServiceError, TransportError, ValidationError
from .explorer import Arbiscan, BscScan, Etherscan, Explorer, LineaScan, OptimisticEtherscan

__all__ = [
    "Account",
    "ApiClient",
    "Arbiscan",
    "BEACON_WITHDRAWAL_DEFAULTS",
    "BeaconWithdrawals",
    "BscScan",
    "ChainAccount",
    "Contract",
    "DEFAULT_QUERY",
    "DecodeError",
    "EXPLORERS",
    "Etherscan",
    "Explorer",
    "ExplorerError",
    "ExplorerSpec",
    "HistoricalBalance",
    "LineaScan",
    "MinedBlocks",
    "OptimisticEtherscan",
    "QueryDefaults",
    "ServiceError",
    "TransportError",
    "ValidationError",
    "VerifySourceCodeRequest",
    "list_explorers",
    "resolve_explorer",
]
