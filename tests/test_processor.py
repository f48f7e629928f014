import pytest

from fluxbet.errors import ErrorCode, FluxError
from fluxbet.processor import (
    process_create_bet,
    process_initialize_platform,
    process_place_bet,
)


@pytest.mark.parametrize("fee", [10001, 65535])
def test_initialize_platform_rejects_high_fee(fee):
    with pytest.raises(FluxError) as info:
        process_initialize_platform(fee)
    assert info.value.code is ErrorCode.INVALID_FEE_PERCENTAGE


@pytest.mark.parametrize(
    "options, odds, end_time, now, code",
    [
        (["a", "b"], [100], 100, 0, ErrorCode.OPTION_ODDS_MISMATCH),
        (["a"], [100], 100, 0, ErrorCode.TOO_FEW_OPTIONS),
        ([str(i) for i in range(11)], [100] * 11, 100, 0, ErrorCode.TOO_MANY_OPTIONS),
        (["a", "b"], [100, 200], 100, 100, ErrorCode.BET_PERIOD_ENDED),
        (["a", "b"], [100, 200], 50, 100, ErrorCode.BET_PERIOD_ENDED),
    ],
)
def test_create_bet_errors(options, odds, end_time, now, code):
    with pytest.raises(FluxError) as info:
        process_create_bet(options, odds, end_time, now)
    assert info.value.code is code


def test_create_bet_checks_length_before_time():
    with pytest.raises(FluxError) as info:
        process_create_bet(["a"], [100, 200], 0, 100)
    assert info.value.code is ErrorCode.OPTION_ODDS_MISMATCH


@pytest.mark.parametrize(
    "kwargs, code",
    [
        (dict(is_resolved=True), ErrorCode.BET_ALREADY_RESOLVED),
        (dict(option_index=2), ErrorCode.INVALID_OPTION_INDEX),
        (dict(option_index=-1), ErrorCode.INVALID_OPTION_INDEX),
        (dict(amount=9), ErrorCode.BET_AMOUNT_BELOW_MINIMUM),
        (dict(current_time=1000), ErrorCode.BET_PERIOD_ENDED),
        (dict(current_time=2000), ErrorCode.BET_PERIOD_ENDED),
    ],
)
def test_place_bet_errors(kwargs, code):
    args = dict(
        option_index=0,
        amount=10,
        min_bet_amount=10,
        options_len=2,
        is_resolved=False,
        end_time=1000,
        current_time=500,
    )
    args.update(kwargs)
    with pytest.raises(FluxError) as info:
        process_place_bet(**args)
    assert info.value.code is code


def test_place_bet_resolution_checked_first():
    with pytest.raises(FluxError) as info:
        process_place_bet(9, 0, 10, 2, True, 0, 100)
    assert info.value.code is ErrorCode.BET_ALREADY_RESOLVED


def test_place_bet_index_checked_before_amount():
    with pytest.raises(FluxError) as info:
        process_place_bet(5, 0, 10, 2, False, 1000, 0)
    assert info.value.code is ErrorCode.INVALID_OPTION_INDEX