"""
Root of the txsubmit exception hierarchy.

Three families derive from TxSubmitError:

- ``ValidationError``: a request argument is malformed
- ``RpcError``: the node answered a JSON-RPC call with an error
- ``TransactionError``: the submission pipeline failed; one class per kind

``str(error)`` is always the message alone. The machine-readable ``code``
and the structured ``details`` travel beside it.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TxSubmitError(Exception):
    """
    Base exception for all txsubmit errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "NONCE_TOO_LOW"). Subclasses
            set a class-level default; a per-instance code overrides it.
        details: Structured context (field names, node diagnostics, wei values).

    Example:
        >>> error = TxSubmitError("node unreachable", details={"url": rpc_url})
        >>> error.to_dict()["code"]
        'TXSUBMIT_ERROR'
    """

    code: str = "TXSUBMIT_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"code={self.code!r}, "
            f"message={self.message!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a JSON-serializable dictionary."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }
