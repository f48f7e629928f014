"""The betting program: platform setup, groups, bets, wagers and payouts."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Sequence

from fluxbet.errors import ArithmeticOverflowError, ErrorCode, FluxError
from fluxbet.processor import process_initialize_platform
from fluxbet.state import (
    Bet,
    Group,
    Platform,
    UserBet,
    UserProfile,
    derive_address,
)
from fluxbet.utils import (
    U64_MAX,
    TokenAccount,
    calculate_winnings,
    transfer_tokens,
    validate_options_and_odds,
)

logger = logging.getLogger(__name__)


def _add(left: int, right: int) -> int:
    total = left + right
    if total > U64_MAX:
        raise ArithmeticOverflowError()
    return total


class FluxBetting:
    """In-memory ledger of every account the betting program manages.

    Accounts are addressed by keys derived from their seeds, as the
    program's instructions derive them. ``clock`` returns the current
    unix timestamp.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.time
        self.platform_key = derive_address("platform")
        self.platform: Optional[Platform] = None
        self.groups: dict[str, Group] = {}
        self.bets: dict[str, Bet] = {}
        self.user_bets: dict[str, UserBet] = {}
        self.profiles: dict[str, UserProfile] = {}

    # -- account access -------------------------------------------------

    def _now(self) -> int:
        return int(self._clock())

    def _require_platform(self) -> Platform:
        if self.platform is None:
            raise LookupError("platform account is not initialized")
        return self.platform

    def _group(self, group_key: str) -> Group:
        try:
            return self.groups[group_key]
        except KeyError:
            raise LookupError(f"unknown group account {group_key}") from None

    def _bet(self, bet_key: str) -> Bet:
        try:
            return self.bets[bet_key]
        except KeyError:
            raise LookupError(f"unknown bet account {bet_key}") from None

    def _existing_profile(self, user: str) -> UserProfile:
        try:
            profile = self.profiles[user]
        except KeyError:
            raise LookupError(f"no user profile for {user}") from None
        if profile.user != user:
            raise PermissionError("user profile does not belong to the signer")
        return profile

    def _profile_if_needed(self, user: str) -> UserProfile:
        return self.profiles.setdefault(user, UserProfile())

    # -- instructions ---------------------------------------------------

    def initialize_platform(
        self, admin: str, treasury: str, fee_percentage: int
    ) -> str:
        """Create the platform account and return its key."""
        if self.platform is not None:
            raise ValueError("platform account already in use")
        process_initialize_platform(fee_percentage)
        self.platform = Platform(
            admin=admin, fee_percentage=fee_percentage, treasury=treasury
        )
        logger.info(
            "Platform initialized with fee percentage of %s%%",
            f"{fee_percentage / 100.0:g}",
        )
        return self.platform_key

    def create_group(self, admin: str, name: str, description: str) -> str:
        """Create a group administered by ``admin`` and return its key."""
        group_key = derive_address("group", admin, name)
        if group_key in self.groups:
            raise ValueError(f"group account {group_key} already in use")
        platform = self._require_platform()
        profile = self._profile_if_needed(admin)

        group = Group(
            name=name,
            description=description,
            admin=admin,
            members=[admin],
            created_at=self._now(),
        )

        if profile.user is None:
            profile.user = admin
            profile.groups = []
            profile.active_bets = []
            profile.past_bets = []
            profile.total_winnings = 0
            profile.total_losses = 0
            platform.total_users = _add(platform.total_users, 1)

        self.groups[group_key] = group
        profile.groups.append(group_key)
        platform.total_groups = _add(platform.total_groups, 1)

        logger.info("Group '%s' created by %s", name, admin)
        return group_key

    def join_group(self, group_key: str, user: str) -> None:
        """Add ``user`` to a group; joining twice changes nothing."""
        group = self._group(group_key)
        profile = self._profile_if_needed(user)

        if user in group.members:
            logger.info("User is already a member of this group")
            return

        group.members.append(user)

        if profile.user is None:
            profile.user = user
            profile.groups = []
            profile.active_bets = []
            profile.past_bets = []
            profile.total_winnings = 0
            profile.total_losses = 0

        profile.groups.append(group_key)
        logger.info("User %s joined group '%s'", user, group.name)

    def create_bet(
        self,
        creator: str,
        group_key: str,
        bet_id: str,
        coin: str,
        description: str,
        options: Sequence[str],
        odds: Sequence[int],
        end_time: int,
        min_bet_amount: int,
    ) -> str:
        """Open a bet in a group the creator administers and return its key."""
        bet_key = derive_address("bet", group_key, bet_id)
        if bet_key in self.bets:
            raise FluxError(ErrorCode.BET_ALREADY_EXISTS)
        group = self._group(group_key)
        if group.admin != creator:
            raise FluxError(ErrorCode.UNAUTHORIZED_BET_CREATOR)
        platform = self._require_platform()
        profile = self._existing_profile(creator)

        validate_options_and_odds(options, odds)
        current_time = self._now()
        if end_time <= current_time:
            raise FluxError(ErrorCode.BET_PERIOD_ENDED)

        self.bets[bet_key] = Bet(
            id=bet_id,
            group=group_key,
            creator=creator,
            coin=coin,
            description=description,
            options=list(options),
            odds=list(odds),
            min_bet_amount=min_bet_amount,
            end_time=end_time,
            created_at=current_time,
            total_pool=0,
            bets_per_option=[0] * len(options),
        )
        group.active_bets.append(bet_key)
        profile.active_bets.append(bet_key)
        platform.total_bets = _add(platform.total_bets, 1)

        logger.info("Bet '%s' created for coin %s by %s", bet_id, coin, creator)
        return bet_key

    def place_bet(
        self,
        user: str,
        bet_key: str,
        amount: int,
        option_index: int,
        user_token_account: TokenAccount,
        treasury_token_account: TokenAccount,
    ) -> str:
        """Stake ``amount`` on an option, paying into the treasury.

        Returns the key of the new wager record.
        """
        bet = self._bet(bet_key)
        if bet.resolved:
            raise FluxError(ErrorCode.BET_ALREADY_RESOLVED)
        if self._now() >= bet.end_time:
            raise FluxError(ErrorCode.BET_PERIOD_ENDED)
        if not 0 <= option_index < len(bet.options):
            raise FluxError(ErrorCode.INVALID_OPTION_INDEX)
        if amount < bet.min_bet_amount:
            raise FluxError(ErrorCode.BET_AMOUNT_BELOW_MINIMUM)

        group = self._group(bet.group)
        if user not in group.members:
            raise FluxError(ErrorCode.NOT_GROUP_MEMBER)

        user_bet_key = derive_address("user_bet", bet_key, user)
        if user_bet_key in self.user_bets:
            raise FluxError(ErrorCode.BET_ALREADY_EXISTS)
        profile = self._existing_profile(user)
        self._require_platform()

        if user_token_account.owner != user:
            raise PermissionError("token account is not owned by the signer")

        new_pool = _add(bet.total_pool, amount)
        new_option_total = _add(bet.bets_per_option[option_index], amount)
        transfer_tokens(user_token_account, treasury_token_account, amount)

        bet.total_pool = new_pool
        bet.bets_per_option[option_index] = new_option_total
        self.user_bets[user_bet_key] = UserBet(
            user=user, bet=bet_key, amount=amount, option_index=option_index
        )
        if bet_key not in profile.active_bets:
            profile.active_bets.append(bet_key)

        logger.info(
            "User %s placed bet of %d on option %d for bet '%s'",
            user,
            amount,
            option_index,
            bet.id,
        )
        return user_bet_key

    def resolve_bet(
        self,
        creator: str,
        bet_key: str,
        group_key: str,
        winning_option: int,
        actual_price: int,
    ) -> None:
        """Settle a bet on ``winning_option``; only its creator may do so."""
        bet = self._bet(bet_key)
        if bet.resolved:
            raise FluxError(ErrorCode.BET_ALREADY_RESOLVED)
        if not 0 <= winning_option < len(bet.options):
            raise FluxError(ErrorCode.INVALID_OPTION_INDEX)
        if bet.creator != creator:
            raise FluxError(ErrorCode.UNAUTHORIZED_RESOLVER)
        group = self._group(group_key)

        bet.resolved = True
        bet.winning_option = winning_option
        bet.actual_price = actual_price

        if bet_key in group.active_bets:
            group.active_bets.remove(bet_key)
            group.past_bets.append(bet_key)

        logger.info(
            "Bet '%s' resolved with winning option %d and actual price %d",
            bet.id,
            winning_option,
            actual_price,
        )

    def claim_winnings(
        self,
        user: str,
        bet_key: str,
        treasury_token_account: TokenAccount,
        user_token_account: TokenAccount,
    ) -> int:
        """Pay out a winning wager from the treasury and return the amount."""
        bet = self._bet(bet_key)
        if not bet.resolved:
            raise FluxError(ErrorCode.BET_NOT_RESOLVED)

        user_bet_key = derive_address("user_bet", bet_key, user)
        try:
            user_bet = self.user_bets[user_bet_key]
        except KeyError:
            raise LookupError(f"no wager by {user} on bet {bet_key}") from None
        if user_bet.user != user:
            raise PermissionError("wager does not belong to the signer")
        if user_bet.claimed:
            raise FluxError(ErrorCode.NO_WINNINGS_TO_CLAIM)
        if user_bet.option_index != bet.winning_option:
            raise FluxError(ErrorCode.NO_WINNINGS_TO_CLAIM)

        profile = self._existing_profile(user)
        platform = self._require_platform()

        if treasury_token_account.owner != self.platform_key:
            raise PermissionError("treasury token account is not owned by the platform")

        odds = bet.odds[bet.winning_option]
        winnings = calculate_winnings(
            user_bet.amount, odds, bet.total_pool, platform.fee_percentage
        )
        new_total = _add(profile.total_winnings, winnings)
        transfer_tokens(treasury_token_account, user_token_account, winnings)

        user_bet.claimed = True
        user_bet.winnings = winnings
        profile.total_winnings = new_total

        if bet_key in profile.active_bets:
            profile.active_bets.remove(bet_key)
            if bet_key not in profile.past_bets:
                profile.past_bets.append(bet_key)

        logger.info("User %s claimed %d winnings for bet '%s'", user, winnings, bet.id)
        return winnings