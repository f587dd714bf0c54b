import logging
import os
import sys
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

DEFAULT_EXPLORER = "etherscan"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class QueryDefaults:
    """Fallbacks for the block range and paging params of list endpoints."""

    start_block: int = 0
    end_block: int = 99999999
    page: int = 1
    offset: int = 10
    sort: str = "asc"

    def block_range(
        self,
        start_block: Optional[int] = None,
        end_block: Optional[int] = None,
    ) -> Dict[str, Any]:
        return {
            "startblock": self.start_block if start_block is None else start_block,
            "endblock": self.end_block if end_block is None else end_block,
        }

    def paging(
        self,
        page: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[str] = None,
        with_sort: bool = True,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "page": self.page if page is None else page,
            "offset": self.offset if offset is None else offset,
        }
        if with_sort:
            params["sort"] = self.sort if sort is None else sort
        return params


DEFAULT_QUERY = QueryDefaults()
BEACON_WITHDRAWAL_DEFAULTS = replace(DEFAULT_QUERY, offset=100)


@dataclass
class Config:
    api_key: str
    explorer: str = DEFAULT_EXPLORER
    base_url: Optional[str] = None
    request_timeout: Optional[float] = None
    log_level: str = DEFAULT_LOG_LEVEL


def load_config() -> Config:
    """Load configuration from environment variables."""
    api_key = os.getenv("ETHERSCAN_API_KEY")
    if not api_key:
        raise ValueError("ETHERSCAN_API_KEY is required but not set.")

    explorer = os.getenv("EXPLORER", DEFAULT_EXPLORER).strip().lower() or DEFAULT_EXPLORER
    base_url_env = os.getenv("EXPLORER_BASE_URL")
    timeout_env = os.getenv("REQUEST_TIMEOUT")
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL

    base_url = base_url_env.strip().rstrip("/") if base_url_env else None
    try:
        timeout = float(timeout_env) if timeout_env else None
    except ValueError as exc:
        raise ValueError(f"REQUEST_TIMEOUT must be a number of seconds, got '{timeout_env}'.") from exc

    return Config(
        api_key=api_key,
        explorer=explorer,
        base_url=base_url or None,
        request_timeout=timeout,
        log_level=log_level,
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr unless the root logger is already set up."""
    if logging.getLogger().handlers:
        return
    name = (level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).strip().upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
