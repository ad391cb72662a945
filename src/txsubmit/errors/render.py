"""
Message rendering for transaction errors.

Every transaction error message has the same shape::

    <short message>

    <meta messages>            (optional)
     
    Request Arguments:
      from:   0x...
      value:  1 ETH

    Details: <raw node message> (optional)
    Version: txsubmit@x.y.z

The text is part of the public contract: downstream tooling and snapshot
tests match on it byte for byte, so all wording lives in this module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Sequence, Tuple

from txsubmit.constants import REQUEST_ARG_ORDER
from txsubmit.errors.kinds import ErrorKind
from txsubmit.utils.units import format_ether, format_gwei
from txsubmit.version import get_version_tag

if TYPE_CHECKING:
    from txsubmit.types.chain import Chain
    from txsubmit.types.request import TransactionRequest

RequestArgs = Tuple[Tuple[str, str], ...]


# ----------------------------------------------------------------------------
# Request argument echo
# ----------------------------------------------------------------------------

def echo_request_args(
    request: "TransactionRequest", chain: Optional["Chain"] = None
) -> RequestArgs:
    """
    Render the caller-supplied request fields in canonical display units.

    Only fields that are set appear, in a fixed order. ``value`` is shown in
    the chain's native currency, fee fields in gwei.

    Args:
        request: Request as supplied by the caller (before resolution)
        chain: Chain to echo; defaults to ``request.chain``

    Returns:
        Ordered ``(field, rendered value)`` pairs
    """
    chain = chain or request.chain
    symbol = chain.native_currency.symbol if chain else "ETH"
    supplied = request.supplied_fields()

    rendered: Dict[str, str] = {}
    if chain is not None:
        rendered["chain"] = chain.describe()
    for name, value in supplied.items():
        if name == "value":
            rendered[name] = f"{format_ether(value)} {symbol}"
        elif name in ("gasPrice", "maxFeePerGas", "maxPriorityFeePerGas"):
            rendered[name] = f"{format_gwei(value)} gwei"
        elif name == "data":
            rendered[name] = request.data_hex or ""
        else:
            rendered[name] = str(value)

    return tuple((name, rendered[name]) for name in REQUEST_ARG_ORDER if name in rendered)


def pretty_print(args: Sequence[Tuple[str, str]]) -> str:
    """
    Render key/value pairs as an indented, column-aligned block.

    The column width is the longest key present plus its colon, followed
    by two spaces.
    """
    if not args:
        return ""
    width = max(len(key) for key, _ in args) + 1
    return "\n".join(f"  {(key + ':').ljust(width)}  {value}" for key, value in args)


def render_message(
    short_message: str,
    *,
    meta_messages: Sequence[str] = (),
    request_args: Sequence[Tuple[str, str]] = (),
    details: Optional[str] = None,
    version: Optional[str] = None,
) -> str:
    """Assemble the full multi-line message."""
    meta = list(meta_messages)
    if request_args:
        if meta:
            meta.append(" ")
        meta.extend(["Request Arguments:", pretty_print(request_args)])

    lines = [short_message or "An error occurred.", ""]
    if meta:
        lines.extend([*meta, ""])
    if details:
        lines.append(f"Details: {details}")
    lines.append(f"Version: {version or get_version_tag()}")
    return "\n".join(lines)


# ----------------------------------------------------------------------------
# Per-kind wording
# ----------------------------------------------------------------------------

def _gwei_suffix(field_name: str, wei: Optional[int]) -> str:
    if wei:
        return f"`{field_name}` = {format_gwei(wei)} gwei"
    return f"`{field_name}`"


def _chain_mismatch(
    chain: "Chain", current_chain_id: int, **_: Any
) -> Tuple[str, Tuple[str, ...]]:
    expected = f"{chain.id} – {chain.name}"
    return (
        f"The current chain (id: {current_chain_id}) does not match the chain "
        f"passed to the request (id: {expected}).",
        (
            f"Current Chain ID:  {current_chain_id}",
            f"Expected Chain ID: {expected}",
        ),
    )


def _fee_cap_too_high(
    max_fee_per_gas: Optional[int] = None, fee_field: str = "maxFeePerGas", **_: Any
) -> Tuple[str, Tuple[str, ...]]:
    return (
        f"The fee cap ({_gwei_suffix(fee_field, max_fee_per_gas)}) cannot be "
        "higher than the maximum allowed value (2^256-1).",
        (),
    )


def _fee_cap_too_low(
    max_fee_per_gas: Optional[int] = None, **_: Any
) -> Tuple[str, Tuple[str, ...]]:
    return (
        f"The fee cap ({_gwei_suffix('maxFeePerGas', max_fee_per_gas)}) cannot be "
        "lower than the block base fee.",
        (),
    )


def _tip_higher_than_fee_cap(
    max_fee_per_gas: Optional[int] = None,
    max_priority_fee_per_gas: Optional[int] = None,
    **_: Any,
) -> Tuple[str, Tuple[str, ...]]:
    return (
        f"The provided tip ({_gwei_suffix('maxPriorityFeePerGas', max_priority_fee_per_gas)}) "
        f"cannot be higher than the fee cap ({_gwei_suffix('maxFeePerGas', max_fee_per_gas)}).",
        (),
    )


def _intrinsic_gas_too_low(gas: Optional[int] = None, **_: Any) -> Tuple[str, Tuple[str, ...]]:
    amount = f"({gas}) " if gas else ""
    return f"The amount of gas {amount}provided for the transaction is too low.", ()


def _intrinsic_gas_too_high(gas: Optional[int] = None, **_: Any) -> Tuple[str, Tuple[str, ...]]:
    amount = f"({gas}) " if gas else ""
    return (
        f"The amount of gas {amount}provided for the transaction exceeds the limit "
        "allowed for the block.",
        (),
    )


def _insufficient_funds(**_: Any) -> Tuple[str, Tuple[str, ...]]:
    return (
        "The total cost (gas * gas fee + value) of executing this transaction "
        "exceeds the balance of the account.",
        (
            "This error could arise when the account does not have enough funds to:",
            " - pay for the total gas fee,",
            " - pay for the value to send.",
            " ",
            "The cost of the transaction is calculated as `gas * gas fee + value`, where:",
            " - `gas` is the amount of gas needed for transaction to execute,",
            " - `gas fee` is the gas fee,",
            " - `value` is the amount of ether to send to the recipient.",
        ),
    )


def _nonce_too_low(nonce: Optional[int] = None, **_: Any) -> Tuple[str, Tuple[str, ...]]:
    amount = f"({nonce}) " if nonce else ""
    return (
        f"Nonce provided for the transaction {amount}is lower than the current nonce "
        "of the account.\nTry increasing the nonce or find the latest nonce with "
        "`getTransactionCount`.",
        (),
    )


def _unknown(node_message: Optional[str] = None, **_: Any) -> Tuple[str, Tuple[str, ...]]:
    return f"An error occurred while executing: {node_message or 'unknown error'}", ()


_DESCRIBERS: Dict[ErrorKind, Callable[..., Tuple[str, Tuple[str, ...]]]] = {
    ErrorKind.CHAIN_MISMATCH: _chain_mismatch,
    ErrorKind.FEE_CAP_TOO_HIGH: _fee_cap_too_high,
    ErrorKind.FEE_CAP_TOO_LOW: _fee_cap_too_low,
    ErrorKind.TIP_HIGHER_THAN_FEE_CAP: _tip_higher_than_fee_cap,
    ErrorKind.INTRINSIC_GAS_TOO_LOW: _intrinsic_gas_too_low,
    ErrorKind.INTRINSIC_GAS_TOO_HIGH: _intrinsic_gas_too_high,
    ErrorKind.INSUFFICIENT_FUNDS: _insufficient_funds,
    ErrorKind.NONCE_TOO_LOW: _nonce_too_low,
    ErrorKind.UNKNOWN: _unknown,
}


def describe(kind: ErrorKind, **values: Any) -> Tuple[str, Tuple[str, ...]]:
    """
    Return ``(short message, meta messages)`` for an error kind.

    Args:
        kind: Error kind
        **values: Structured fields of the error (fees in wei, gas, nonce...)
    """
    return _DESCRIBERS[kind](**values)


__all__ = [
    "RequestArgs",
    "echo_request_args",
    "pretty_print",
    "render_message",
    "describe",
]
