# fluxbet

An in-memory model of a group-based betting platform. A platform admin sets a
fee. Users create groups, and a group's admin opens bets with several options
and fixed odds. Members place stakes before the bet closes. The creator
resolves the bet, and winners claim payouts with the platform fee deducted.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Usage

`fluxbet.program.FluxBetting` holds every record and runs the instructions.
It takes an optional `clock`, a callable returning the current unix time
(defaulting to `time.time`). Users are identified by plain strings; records
are addressed by keys that the instructions return.

```python
from fluxbet.program import FluxBetting
from fluxbet.utils import TokenAccount

now = 1_700_000_000
program = FluxBetting(clock=lambda: now)

platform_key = program.initialize_platform(admin="alice", treasury="vault", fee_percentage=100)  # 1%
group_key = program.create_group("alice", "traders", "Weekly crypto calls")
program.join_group(group_key, "bob")
program.join_group(group_key, "carol")

bet_key = program.create_bet(
    "alice", group_key, "btc-friday", "BTC", "BTC above 70k on Friday?",
    options=["yes", "no"], odds=[200, 150],   # 2.0x and 1.5x
    end_time=now + 3600, min_bet_amount=10,
)

bob_wallet = TokenAccount(owner="bob", amount=1_000)
carol_wallet = TokenAccount(owner="carol", amount=1_000)
treasury = TokenAccount(owner=platform_key)

program.place_bet("bob", bet_key, 100, 0, bob_wallet, treasury)
program.place_bet("carol", bet_key, 300, 1, carol_wallet, treasury)

program.resolve_bet("alice", bet_key, group_key, winning_option=0, actual_price=71_000)
paid = program.claim_winnings("bob", bet_key, treasury, bob_wallet)  # 198
```

The payout is the stake times the odds divided by 100, minus the platform fee
in basis points. It may not exceed the bet's total pool. The records are kept
on the instance as `platform`, `groups`, `bets`, `user_bets` and `profiles`.

## Rules

- The fee is given in basis points and may be at most 10000 (100%). The
  platform can be initialized only once.
- A bet has between 2 and 10 options, with exactly one odds value for each
  option. Its end time must be in the future.
- Only a group's admin can create bets in that group. Only group members can
  place bets, and each user may place one bet per bet.
- A stake must meet the bet's minimum and must be placed before the end time.
  It is paid from a token account owned by the user into the treasury.
- Only the bet's creator can resolve it, and only once.
- Only holders of the winning option can claim, and only once. The treasury
  token account must be owned by the platform key.

Each rule violation raises a `fluxbet.errors.FluxError` whose `code` is an
`ErrorCode` (with `number` and `message`). Arithmetic leaving the unsigned
64-bit range raises `fluxbet.errors.ArithmeticOverflowError`, a subclass of
`OverflowError`. Unknown records raise `LookupError`, records or token
accounts belonging to someone else raise `PermissionError`, and reusing a
group name or initializing the platform twice raises `ValueError`.

Each instruction logs a line through the `fluxbet.program` logger.

## Helpers

- `fluxbet.utils.calculate_winnings(bet_amount, odds, total_pool, fee_percentage)`
- `fluxbet.utils.validate_options_and_odds(options, odds)`
- `fluxbet.utils.transfer_tokens(source, destination, amount)` moves tokens
  between `TokenAccount`s.
- `fluxbet.processor.process_initialize_platform`, `process_create_bet` and
  `process_place_bet` run the standalone checks, with the current time passed in.
- `fluxbet.state.bet_space(...)`, `group_space(...)`, `platform_space()`,
  `user_profile_space()` and `user_bet_space()` give the stored size of each
  record in bytes.
- `fluxbet.state.derive_address(*seeds)` gives a deterministic hexadecimal
  record address.

## What it does not do

Everything lives in memory on a `FluxBetting` instance: nothing is saved to
disk or shared over a network, and there is no command-line tool or server.
Token balances are plain numbers on `TokenAccount` objects, and signers are
trusted by name without any signature check.