"""
Configuration for txsubmit.

``SubmitterConfig`` holds the tunables of the submission pipeline and can
be loaded from ``TXSUBMIT_*`` environment variables. The built-in chain
registry lives in :mod:`txsubmit.chains`.
"""

import os
from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from txsubmit.constants import (
    BASE_FEE_MULTIPLIER,
    DEFAULT_PRIORITY_FEE_GWEI,
    PROVIDER_TIMEOUT_SECONDS,
)
from txsubmit.utils.units import parse_gwei

__all__ = ["SubmitterConfig"]


class SubmitterConfig(BaseModel):
    """
    Tunables of the submission pipeline.

    Example:
        ```python
        config = SubmitterConfig(rpc_url="http://127.0.0.1:8545")
        config = SubmitterConfig.from_env()  # reads TXSUBMIT_* / .env
        ```
    """

    model_config = ConfigDict(frozen=True)

    rpc_url: Optional[str] = Field(
        default=None,
        description="JSON-RPC endpoint used by the web3 provider",
    )
    timeout: int = Field(
        default=PROVIDER_TIMEOUT_SECONDS,
        ge=1,
        description="HTTP request timeout in seconds (enforced by the provider)",
    )
    default_priority_fee: int = Field(
        default=parse_gwei(DEFAULT_PRIORITY_FEE_GWEI),
        ge=0,
        description="Tip in wei used when maxPriorityFeePerGas is not supplied",
    )
    base_fee_multiplier: Decimal = Field(
        default=Decimal(BASE_FEE_MULTIPLIER),
        ge=1,
        description="Multiplier applied to the base fee when defaulting maxFeePerGas",
    )
    assert_chain: bool = Field(
        default=True,
        description="Default for TransactionRequest.assert_chain in the client",
    )
    log_level: Optional[str] = Field(
        default=None,
        description="Configure library logging at this level when set",
    )

    @classmethod
    def from_env(
        cls, prefix: str = "TXSUBMIT_", dotenv_path: Optional[str] = None
    ) -> "SubmitterConfig":
        """
        Load configuration from environment variables.

        A ``.env`` file is read first (without overriding variables already
        set). Recognized variables: ``{prefix}RPC_URL``, ``{prefix}TIMEOUT``,
        ``{prefix}DEFAULT_PRIORITY_FEE``, ``{prefix}BASE_FEE_MULTIPLIER``,
        ``{prefix}ASSERT_CHAIN``, ``{prefix}LOG_LEVEL``.
        """
        load_dotenv(dotenv_path)
        values = {}
        for name in cls.model_fields:
            raw = os.environ.get(f"{prefix}{name.upper()}")
            if raw is not None and raw != "":
                values[name] = raw
        return cls(**values)
