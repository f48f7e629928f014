"""Payout arithmetic, option validation and token transfers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from fluxbet.errors import ArithmeticOverflowError, ErrorCode, FluxError

U64_MAX = 2**64 - 1
MIN_OPTIONS = 2
MAX_OPTIONS = 10


def _checked(value: int) -> int:
    if value < 0 or value > U64_MAX:
        raise ArithmeticOverflowError()
    return value


@dataclass
class TokenAccount:
    """A token balance held by an owner."""

    owner: str
    amount: int = 0


def calculate_winnings(
    bet_amount: int, odds: int, total_pool: int, fee_percentage: int
) -> int:
    """Return the payout for a winning stake after the platform fee.

    Odds are in hundredths (200 means 2.0x) and the fee in basis points.
    Raises FluxError with INSUFFICIENT_FUNDS when the payout exceeds the pool.
    """
    raw_winnings = _checked(bet_amount * odds) // 100
    fee_amount = _checked(raw_winnings * fee_percentage) // 10000
    final_winnings = _checked(raw_winnings - fee_amount)
    if final_winnings > total_pool:
        raise FluxError(ErrorCode.INSUFFICIENT_FUNDS)
    return final_winnings


def validate_options_and_odds(options: Sequence[str], odds: Sequence[int]) -> None:
    """Check that options and odds pair up and their count is within limits."""
    if len(options) != len(odds):
        raise FluxError(ErrorCode.OPTION_ODDS_MISMATCH)
    if len(options) < MIN_OPTIONS:
        raise FluxError(ErrorCode.TOO_FEW_OPTIONS)
    if len(options) > MAX_OPTIONS:
        raise FluxError(ErrorCode.TOO_MANY_OPTIONS)


def transfer_tokens(
    source: TokenAccount, destination: TokenAccount, amount: int
) -> None:
    """Move ``amount`` tokens from ``source`` to ``destination``."""
    if amount < 0:
        raise ValueError("transfer amount must not be negative")
    if source.amount < amount:
        raise FluxError(ErrorCode.INSUFFICIENT_FUNDS)
    new_destination = _checked(destination.amount + amount)
    source.amount -= amount
    destination.amount = new_destination