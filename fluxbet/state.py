"""Account records kept by the betting program and their storage sizes."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

_DISCRIMINATOR = 8
_PUBKEY = 32
_VEC_PREFIX = 4
_MAX_MEMBERS = 10
_MAX_BETS = 50


def derive_address(*args: Union[str, bytes]) -> str:
    """Derive a deterministic hexadecimal address from the given seeds."""
    digest = hashlib.sha256()
    for seed in args:
        data = seed.encode("utf-8") if isinstance(seed, str) else bytes(seed)
        digest.update(len(data).to_bytes(4, "little"))
        digest.update(data)
    return digest.hexdigest()


@dataclass
class Platform:
    admin: str
    fee_percentage: int
    treasury: str
    total_bets: int = 0
    total_users: int = 0
    total_groups: int = 0


@dataclass
class Group:
    name: str
    description: str
    admin: str
    members: list[str] = field(default_factory=list)
    active_bets: list[str] = field(default_factory=list)
    past_bets: list[str] = field(default_factory=list)
    created_at: int = 0


@dataclass
class UserProfile:
    user: Optional[str] = None
    groups: list[str] = field(default_factory=list)
    active_bets: list[str] = field(default_factory=list)
    past_bets: list[str] = field(default_factory=list)
    total_winnings: int = 0
    total_losses: int = 0


@dataclass
class Bet:
    id: str
    group: str
    creator: str
    coin: str
    description: str
    options: list[str]
    odds: list[int]
    min_bet_amount: int
    end_time: int
    created_at: int = 0
    total_pool: int = 0
    bets_per_option: list[int] = field(default_factory=list)
    resolved: bool = False
    winning_option: Optional[int] = None
    actual_price: Optional[int] = None


@dataclass
class UserBet:
    user: str
    bet: str
    amount: int
    option_index: int
    claimed: bool = False
    winnings: Optional[int] = None


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def platform_space() -> int:
    """Bytes reserved for a platform account."""
    return _DISCRIMINATOR + _PUBKEY + 2 + _PUBKEY + 8 + 8 + 8 + 1


def group_space(name: str, description: str) -> int:
    """Bytes reserved for a group account with this name and description."""
    return (
        _DISCRIMINATOR
        + _VEC_PREFIX + _byte_len(name)
        + _VEC_PREFIX + _byte_len(description)
        + _PUBKEY
        + _VEC_PREFIX + _PUBKEY * _MAX_MEMBERS
        + _VEC_PREFIX + _PUBKEY * _MAX_BETS
        + _VEC_PREFIX + _PUBKEY * _MAX_BETS
        + 8
        + 1
    )


def user_profile_space() -> int:
    """Bytes reserved for a user profile account."""
    return (
        _DISCRIMINATOR
        + _PUBKEY
        + _VEC_PREFIX + _PUBKEY * _MAX_MEMBERS
        + _VEC_PREFIX + _PUBKEY * _MAX_BETS
        + _VEC_PREFIX + _PUBKEY * _MAX_BETS
        + 8
        + 8
        + 1
    )


def bet_space(
    bet_id: str,
    coin: str,
    description: str,
    options: Sequence[str],
    odds: Sequence[int],
) -> int:
    """Bytes reserved for a bet account with these contents."""
    return (
        _DISCRIMINATOR
        + _VEC_PREFIX + _byte_len(bet_id)
        + _PUBKEY
        + _PUBKEY
        + _VEC_PREFIX + _byte_len(coin)
        + _VEC_PREFIX + _byte_len(description)
        + _VEC_PREFIX + sum(_VEC_PREFIX + _byte_len(option) for option in options)
        + _VEC_PREFIX + len(odds) * 2
        + 8
        + 8
        + _VEC_PREFIX + len(options) * 8
        + 8
        + 8
        + 1
        + 2
        + 9
        + 1
    )


def user_bet_space() -> int:
    """Bytes reserved for a user bet account."""
    return _DISCRIMINATOR + _PUBKEY + _PUBKEY + 8 + 1 + 1 + 8 + 1