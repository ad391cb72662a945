"""Submission pipeline steps."""

from txsubmit.actions.assert_chain import assert_current_chain
from txsubmit.actions.fees import assert_fees
from txsubmit.actions.format import (
    format_celo_transaction_request,
    format_request,
    format_transaction_request,
    to_quantity,
)
from txsubmit.actions.resolve import resolve_request
from txsubmit.actions.send import invoke, send_transaction

__all__ = [
    "assert_current_chain",
    "assert_fees",
    "format_celo_transaction_request",
    "format_request",
    "format_transaction_request",
    "to_quantity",
    "resolve_request",
    "invoke",
    "send_transaction",
]
