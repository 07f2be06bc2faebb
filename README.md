# pokerbot

A small rule-based Texas hold'em player. It connects to a game server over
TCP and registers under a player id. It then follows the seat, card and inquire
messages the server sends, and answers every inquiry with `call` or `fold`.

## Installing

```
pip install .
```

## Running

```
pokerbot SERVER_IP SERVER_PORT MY_IP MY_PORT MY_ID
```

The same entry point can also be started with `python -m pokerbot.client`.

The client binds to `MY_IP:MY_PORT`. It retries the connection every 100 ms
until the server accepts it, so the server and the client can be started in
either order. If the arguments are missing or not numbers, it prints a usage
line and exits with status -1. If the local address cannot be bound, it
reports `bind failed!` and exits the same way.

Once connected, the client sends a registration line followed by a NUL byte:

```
reg: MY_ID slf 
```

Every message from the server is echoed to standard output as
`Recieve Data From Server(...)`. The client stops when the server closes the
connection.

## How it decides

The client handles these messages by their first letters:

- `se…` (seat): counts the players at the table and reads this player's chips.
- `h`, `f`, `t`, `r` (hold, flop, turn, river): records the cards and the stage of the hand.
- `i` (inquire): sends `call \n` or `fold \n`, each followed by a NUL byte.
- `p`: clears the state for the next hand.

The reply to an inquiry depends on the stage of the hand and the number of players:

- **Hole cards:** the range of hands it plays depends on how many players are at the table.
  - With six or more players, `GameState.hold_strategy_1` decides. It plays pairs above 7, suited cards both above 9, and an ace with a card above jack.
  - With four or five players, `GameState.hold_strategy_2` decides. Its thresholds are looser.
  - With fewer players it always calls.
- **Flop:** `GameState.strategy` decides, using the first five cards. It calls on any of these:
  - a flush draw (`is_flush_draw`)
  - three of a kind (`has_three_of_kind`)
  - a pair (`has_pair`)
  - a straight (`is_straight`)

  Otherwise it folds.
- **Turn, river, or before any cards:** it always calls.

## Using the strategy directly

`pokerbot.strategy.GameState` holds the table state for one hand. You can feed
it server messages and query its rules yourself:

```python
from pokerbot.strategy import GameState

state = GameState()
state.read_cards("hold/ \nSPADES A \nHEARTS A \n/hold \n")
print(state.hold_strategy_1())   # True
print(state.ranks(2))            # [14, 14]
```

Other helpers are available:

- `card_rank` turns a card point into a number. Digits keep their value; `10`, `J`, `Q`, `K` and `A` become 10 to 14.
- `GameState.read_seat(message, my_id)` sets `member_count` and `money`.
- `GameState.read_inquire(message)` fills `bets`, largest first, and sets `bet_max`.
- `GameState.reset()` clears the whole state; `GameState.reset_bets()` clears only the bets.
- Adding more than seven cards to one hand raises `ValueError`.

`pokerbot.client.Player` wraps a `GameState`:

- `Player.handle(message)` returns the `Action` to send, or `None`.
- `Player.decide()` applies the rules above.
- `Player.registration()` gives the registration bytes.

`pokerbot.client.connect` and `pokerbot.client.run` provide the network loop.

## What it does not do

- It never raises and never goes all in. `Action.RAISE` and `Action.ALL_IN` exist, but the client never sends them.
- The client does not read the bets of inquire messages, and the bet sizes play no part in its decisions.
- The money read from seat messages is recorded but not used.
- It keeps no record of past hands and has no configuration beyond its command-line arguments.

## Tests

```
pip install .[test]
pytest
```