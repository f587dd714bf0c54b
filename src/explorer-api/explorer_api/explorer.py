import logging
from typing import Iterable, Optional, Type

import requests

from .account import Account
from .capabilities import AccountCapability, ChainAccount
from .chains import EXPLORERS, resolve_explorer
from .config import DEFAULT_QUERY, QueryDefaults
from .contract import Contract

logger = logging.getLogger(__name__)


class Explorer:
    """
    Account and contract clients for one explorer, sharing key, URL and session.

    Building an explorer sends no request. Without ``base_url`` it talks to
    the Etherscan mainnet endpoint.
    """

    name = "custom"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        capabilities: Iterable[Type[AccountCapability]] = (),
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        defaults: QueryDefaults = DEFAULT_QUERY,
    ) -> None:
        if not isinstance(api_key, str) or not api_key:
            raise ValueError("api_key must be a non-empty string.")
        if not base_url:
            base_url = EXPLORERS["etherscan"].base_url

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.account = ChainAccount(
            Account(api_key, self.base_url, session=self.session, timeout=timeout, defaults=defaults),
            capabilities,
        )
        self.contract = Contract(api_key, self.base_url, session=self.session, timeout=timeout)

    @staticmethod
    def for_chain(
        name: str,
        api_key: str,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        defaults: QueryDefaults = DEFAULT_QUERY,
    ) -> "Explorer":
        spec = resolve_explorer(name)
        explorer = Explorer(
            api_key,
            base_url or spec.base_url,
            capabilities=spec.capabilities,
            session=session,
            timeout=timeout,
            defaults=defaults,
        )
        explorer.name = spec.name
        logger.debug("Built %s explorer for %s", spec.name, explorer.base_url)
        return explorer

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, base_url={self.base_url!r})"


class RegisteredExplorer(Explorer):
    """An explorer from the built-in registry, selected by ``chain``."""

    chain = ""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        defaults: QueryDefaults = DEFAULT_QUERY,
    ) -> None:
        spec = resolve_explorer(self.chain)
        super().__init__(
            api_key,
            base_url or spec.base_url,
            capabilities=spec.capabilities,
            session=session,
            timeout=timeout,
            defaults=defaults,
        )
        self.name = spec.name


class Etherscan(RegisteredExplorer):
    chain = "etherscan"


class BscScan(RegisteredExplorer):
    chain = "bscscan"


class Arbiscan(RegisteredExplorer):
    chain = "arbiscan"


class OptimisticEtherscan(RegisteredExplorer):
    chain = "optimistic-etherscan"


class LineaScan(RegisteredExplorer):
    chain = "lineascan"
