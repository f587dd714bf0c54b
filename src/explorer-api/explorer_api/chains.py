from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Type

from .capabilities import AccountCapability, BeaconWithdrawals, HistoricalBalance, MinedBlocks

_WORD_RE = re.compile(r"[a-z0-9]+")


def _norm(text: str) -> str:
    return " ".join(_WORD_RE.findall((text or "").strip().lower()))


@dataclass(frozen=True)
class ExplorerSpec:
    name: str
    base_url: str
    capabilities: Tuple[Type[AccountCapability], ...] = ()
    aliases: Tuple[str, ...] = field(default_factory=tuple)


EXPLORERS: Dict[str, ExplorerSpec] = {
    spec.name: spec
    for spec in (
        ExplorerSpec(
            name="etherscan",
            base_url="https://api.etherscan.io/api",
            capabilities=(MinedBlocks, BeaconWithdrawals, HistoricalBalance),
            aliases=("eth", "ethereum", "mainnet"),
        ),
        ExplorerSpec(
            name="bscscan",
            base_url="https://api.bscscan.com/api",
            capabilities=(MinedBlocks,),
            aliases=("bsc", "bnb", "binance"),
        ),
        ExplorerSpec(
            name="arbiscan",
            base_url="https://api.arbiscan.io/api",
            aliases=("arb", "arbitrum", "arbitrum one"),
        ),
        ExplorerSpec(
            name="optimistic-etherscan",
            base_url="https://api-optimistic.etherscan.io/api",
            aliases=("op", "optimism"),
        ),
        ExplorerSpec(
            name="lineascan",
            base_url="https://api.lineascan.build/api",
            aliases=("linea",),
        ),
    )
}

_INDEX: Dict[str, str] = {}
for _spec in EXPLORERS.values():
    for _key in (_spec.name, *_spec.aliases):
        _INDEX[_norm(_key)] = _spec.name


def resolve_explorer(name: str) -> ExplorerSpec:
    """Look up an explorer by name or alias, ignoring case and separators."""
    key = _norm(name)
    if not key:
        raise ValueError("explorer must be a non-empty string.")

    resolved = _INDEX.get(key)
    if resolved is None:
        allowed = ", ".join(sorted(EXPLORERS))
        raise ValueError(f"Unknown explorer '{name}'. Supported: {allowed}.")
    return EXPLORERS[resolved]


def list_explorers() -> List[Dict[str, object]]:
    return [
        {
            "name": spec.name,
            "base_url": spec.base_url,
            "capabilities": [capability.name for capability in spec.capabilities],
            "aliases": list(spec.aliases),
        }
        for spec in EXPLORERS.values()
    ]
