from dataclasses import dataclass
from typing import Optional

__all__ = ["NodeSnapshot"]


@dataclass
class NodeSnapshot:
    """
    Node state read while resolving a request. Queried, never owned.

    ``nonce`` is the sender's pending transaction count, present only when
    the resolver had to query it.
    """

    base_fee_per_gas: Optional[int]
    gas_limit: int
    nonce: Optional[int] = None

    @property
    def supports_eip1559(self) -> bool:
        return self.base_fee_per_gas is not None
