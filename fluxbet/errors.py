"""Error codes and exceptions raised by the betting program."""

from __future__ import annotations

from enum import Enum

ERROR_CODE_OFFSET = 6000


class ErrorCode(Enum):
    """Program error codes, each with a numeric code and a message."""

    INSUFFICIENT_FUNDS = (6000, "Insufficient funds")
    INVALID_OPTION_INDEX = (6001, "Invalid option index")
    BET_ALREADY_EXISTS = (6002, "Bet already exists")
    BET_ALREADY_RESOLVED = (6003, "Bet already resolved")
    BET_NOT_RESOLVED = (6004, "Bet not resolved yet")
    BET_CLOSED = (6005, "Bet already closed")
    BET_PERIOD_ENDED = (6006, "Bet period ended")
    UNAUTHORIZED_RESOLVER = (6007, "Only bet creator can resolve bet")
    INVALID_FEE_PERCENTAGE = (6008, "Fee percentage must be 10000 or less (100%)")
    UNAUTHORIZED_BET_CREATOR = (6009, "Only group admin can create bets")
    NOT_GROUP_MEMBER = (6010, "User is not a member of the group")
    NO_WINNINGS_TO_CLAIM = (6011, "No winnings to claim")
    OPTION_ODDS_MISMATCH = (6012, "Options and odds arrays must be same length")
    TOO_FEW_OPTIONS = (6013, "Minimum of 2 options required")
    TOO_MANY_OPTIONS = (6014, "Maximum of 10 options allowed")
    BET_AMOUNT_BELOW_MINIMUM = (6015, "Bet amount below minimum")

    def __init__(self, number: int, message: str) -> None:
        self.number = number
        self.message = message


class FluxError(Exception):
    """A program error identified by an :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(code.message)
        self.code = code

    def __repr__(self) -> str:
        return f"FluxError({self.code.name})"


class ArithmeticOverflowError(OverflowError):
    """Raised when an unsigned 64-bit computation leaves its range."""

    def __init__(self, message: str = "Arithmetic overflow") -> None:
        super().__init__(message)