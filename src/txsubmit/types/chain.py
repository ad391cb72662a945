"""
Chain descriptors.

A chain is static metadata identifying a target network. Chain-specific
request shaping is expressed as a capability: ``formatters`` maps a request
category (``"transactionRequest"``) to a callable, and a chain either has
the capability or it does not.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from txsubmit.types.request import TransactionRequest

Formatter = Callable[["TransactionRequest"], Dict[str, Any]]


@dataclass(frozen=True)
class NativeCurrency:
    name: str
    symbol: str
    decimals: int = 18


ETHER = NativeCurrency(name="Ether", symbol="ETH", decimals=18)


@dataclass(frozen=True)
class Chain:
    """
    Static descriptor of an EVM network.

    Attributes:
        id: EIP-155 chain id
        name: Display name, echoed in error messages
        native_currency: Currency used to render ``value``
        network: Short slug (e.g. ``"optimism"``)
        rpc_urls: Default public RPC endpoints
        formatters: Request category -> transformation callable
    """

    id: int
    name: str
    native_currency: NativeCurrency = ETHER
    network: str = ""
    rpc_urls: Tuple[str, ...] = ()
    formatters: Mapping[str, Formatter] = field(
        default_factory=dict, compare=False, hash=False
    )

    def get_formatter(self, category: str) -> Optional[Formatter]:
        """Return the formatter registered for ``category``, if any."""
        return self.formatters.get(category)

    def describe(self) -> str:
        """Render as ``Name (id: N)`` for request echoes."""
        return f"{self.name} (id: {self.id})"


def define_chain(base: Optional[Chain] = None, **overrides: Any) -> Chain:
    """
    Create a chain descriptor, optionally derived from an existing one.

    Example:
        >>> forked = define_chain(LOCALHOST, id=1)
    """
    if base is None:
        return Chain(**overrides)
    return replace(base, **overrides)


__all__ = ["Formatter", "NativeCurrency", "ETHER", "Chain", "define_chain"]
