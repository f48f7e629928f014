import pytest

from fluxbet.errors import ArithmeticOverflowError, ErrorCode, FluxError


@pytest.mark.parametrize(
    ("code", "message"),
    [
        (ErrorCode.INSUFFICIENT_FUNDS, "Insufficient funds"),
        (ErrorCode.TOO_MANY_OPTIONS, "Maximum of 10 options allowed"),
        (
            ErrorCode.INVALID_FEE_PERCENTAGE,
            "Fee percentage must be 10000 or less (100%)",
        ),
    ],
)
def test_messages_match_source(code, message):
    error = FluxError(code)
    assert str(error) == message
    assert error.code.message == message


def test_codes_are_consecutive_from_first():
    numbers = [FluxError(code).code.number for code in ErrorCode]
    assert numbers[0] == 6000
    assert numbers == list(range(numbers[0], numbers[0] + len(numbers)))


def test_codes_are_unique():
    numbers = [FluxError(code).code.number for code in ErrorCode]
    assert len(set(numbers)) == len(numbers)


def test_flux_error_carries_code_and_message():
    error = FluxError(ErrorCode.BET_PERIOD_ENDED)
    assert error.code is ErrorCode.BET_PERIOD_ENDED
    assert str(error) == "Bet period ended"


def test_flux_error_can_be_raised_and_caught():
    error = FluxError(ErrorCode.NOT_GROUP_MEMBER)
    assert str(error) == "User is not a member of the group"
    with pytest.raises(FluxError) as info:
        raise error
    assert info.value is error
    assert info.value.code is ErrorCode.NOT_GROUP_MEMBER


def test_overflow_error_is_overflow():
    error = ArithmeticOverflowError()
    caught = None
    try:
        raise error
    except OverflowError as exc:
        caught = exc
    assert caught is error