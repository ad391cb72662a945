"""
Provider boundary exceptions.

A ProviderError is the verbatim failure reported by the node (JSON-RPC
error code + message). It is raised by providers and consumed by the
error classifier; while resolving defaults it propagates unclassified.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from txsubmit.errors.base import TxSubmitError


class RpcError(TxSubmitError):
    """Raised when an RPC/provider request fails."""

    code = "RPC_ERROR"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details=details)


class ProviderError(RpcError):
    """
    JSON-RPC error returned by the node.

    Attributes:
        rpc_code: JSON-RPC error code (e.g. -32000).
        rpc_message: Raw error message, kept unmodified.
        data: Optional ``data`` member of the JSON-RPC error.

    Example:
        >>> raise ProviderError(-32000, "nonce too low")
    """

    def __init__(
        self,
        code: int,
        message: str,
        *,
        data: Any = None,
        method: Optional[str] = None,
    ) -> None:
        details: Dict[str, Any] = {"rpc_code": code}
        if method:
            details["method"] = method
        if data is not None:
            details["data"] = data

        super().__init__(message, details=details)
        self.rpc_code = code
        self.rpc_message = message
        self.data = data
        self.method = method

    @classmethod
    def from_response(
        cls, error: Dict[str, Any], method: Optional[str] = None
    ) -> "ProviderError":
        """Build from the ``error`` member of a JSON-RPC response."""
        return cls(
            int(error.get("code", -32000)),
            str(error.get("message", "")),
            data=error.get("data"),
            method=method,
        )
