"""Standalone checks applied before each instruction runs."""

from __future__ import annotations

from typing import Sequence

from fluxbet.errors import ErrorCode, FluxError
from fluxbet.utils import MAX_OPTIONS, MIN_OPTIONS

MAX_FEE_BASIS_POINTS = 10000


def process_initialize_platform(fee_percentage: int) -> None:
    """Reject a fee above 100% (10000 basis points)."""
    if fee_percentage > MAX_FEE_BASIS_POINTS:
        raise FluxError(ErrorCode.INVALID_FEE_PERCENTAGE)


def process_create_bet(
    options: Sequence[str], odds: Sequence[int], end_time: int, current_time: int
) -> None:
    """Validate the option list and that the bet ends in the future."""
    if len(options) != len(odds):
        raise FluxError(ErrorCode.OPTION_ODDS_MISMATCH)
    if len(options) < MIN_OPTIONS:
        raise FluxError(ErrorCode.TOO_FEW_OPTIONS)
    if len(options) > MAX_OPTIONS:
        raise FluxError(ErrorCode.TOO_MANY_OPTIONS)
    if end_time <= current_time:
        raise FluxError(ErrorCode.BET_PERIOD_ENDED)


def process_place_bet(
    option_index: int,
    amount: int,
    min_bet_amount: int,
    options_len: int,
    is_resolved: bool,
    end_time: int,
    current_time: int,
) -> None:
    """Validate a wager against the state of the bet it targets."""
    if is_resolved:
        raise FluxError(ErrorCode.BET_ALREADY_RESOLVED)
    if not 0 <= option_index < options_len:
        raise FluxError(ErrorCode.INVALID_OPTION_INDEX)
    if amount < min_bet_amount:
        raise FluxError(ErrorCode.BET_AMOUNT_BELOW_MINIMUM)
    if current_time >= end_time:
        raise FluxError(ErrorCode.BET_PERIOD_ENDED)