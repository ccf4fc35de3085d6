# casinotable

Game logic for a four-seat casino table: animated card movement along
straight lines, a music/sound-effect volume options screen, a multiplayer
lobby with stakes selection, and the betting, showdown and side-pot rules
of a Texas hold'em table.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `casinotable.movement`: `CardMover` steps a card sprite from a start
  point to an end point one frame at a time. `start` sets the endpoints,
  `step` advances the dealing animation and returns `True` once the card
  has landed, and `dr_move` / `ur_move` do a four-step move down-right or
  up-right. An optional `sound` callback receives the deal sound number.
- `casinotable.options`: `Options(music_volume, sfx_volume)` holds the two
  volume sliders (0 to 115) and the selector position. `move_up`,
  `move_down`, `move_left` and `move_right` move the selector, `adjust`
  steps the selected slider and returns its volume, and `selector_rect`
  gives the selector's position and size.
- `casinotable.lobby`: `Lobby` lets up to four pads join (`enter`), take a
  corner seat (`pick_seat`, `leave_seat`, `confirm`), reports `all_ready`
  and fills empty seats with computer players (`assign_cpu_seats`).
  `Stakes` cycles the buy-in (100, 1000, 10000) and big blind and takes
  the buy-in out of a player's cash with `buy`. `press_start_text` drives
  the blinking "Press Start" prompt.
- `casinotable.poker_table`: `Table`, `Player` and `PlayerStatus`; the
  button, blinds (`post_blinds`, `start_hand`), turn order (`next_to_act`,
  `last_to_act`), hole-card deal order and positions (`deal_order`,
  `deal_position`), plus `chip_sound` and `player_label`.
- `casinotable.poker_betting`: `BettingRound` with `options`,
  `check_call`, `fold`, `raise_by`, `all_in`, `ai_raise` and the raise
  slider amounts from `slider_steps`.
- `casinotable.poker_showdown`: `compare_hands` plays a pot off between up
  to four hands in a semifinal/final knockout, `showdown` settles a hand
  with no all-in player; both return `Payout` records and credit the
  winners' cash.
- `casinotable.poker_pots`: `solve_side_pots` splits and awards main and
  side pots, `pay_winnings` gives an uncontested pot to the last player
  standing, and `prepare_next_hand` moves the button, removes broke
  players and returns a `GameOver` when one player is left.

## Example

```python
from casinotable.poker_table import Table
from casinotable.poker_betting import BettingRound

table = Table(buy_in=1000, big_blind=50, joypads=[0, 1, 4, 5])
table.start_hand()
round_ = BettingRound(table)
print(round_.options())
round_.check_call()
```

## What it does not do

This is rule and state logic only. It does not draw anything, play any
sound (it only reports sound-effect numbers), read controllers, or store
statistics between sessions. It has no deck or shuffling, and it does not
rank poker hands: the caller sets each `Player`'s `pocket`,
`combination` and `combination_strength`. Computer players' decisions are
not made here; `BettingRound.ai_raise` only applies a bet chosen
elsewhere. There is no command to run.