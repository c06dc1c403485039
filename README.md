# casinojack

A blackjack game played in the terminal. The table, the cards, the buttons
and the menus are drawn with ANSI escape sequences. You make every choice by
typing its number and pressing Enter. The screens are in Spanish.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
casinojack
casinojack --seed 42
```

`--seed` sets the seed for shuffling, so the same seed deals the same cards.

The game opens on a profiles screen that lists six names. Any input takes you
on to the main menu:

- `1` Jugar: play rounds
- `2` Opciones: the options menu
- `0` Salir: quit

During a round:

- `1` Pedir: take another card. If you go over 21, the round ends.
- `2` Pasar: stand. The dealer turns over the hidden card. It then draws
  while it has no more points than you and fewer than 18.
- `3` Doble: double the bet, take one card, then stand. You can only do this
  if you have more coins than the current bet.

Cards count at face value. J, Q and K count 10 and an ace always counts 11.
A hand over 21 loses. Higher points win, and equal points are a tie.

The result screen appears after each round. `1` deals a new round and any
other number goes back to the main menu.

In the options menu:

- `1` turns the menu music on or off
- `2` sets your coins back to 1000
- `3`, `4`, `5` add 1000, 10000 or 100000 coins
- `6` squares your coins
- `0` goes back

On Windows the music plays through the system beeper. On other systems each
note rings the terminal bell. End-of-file or Ctrl-C on input leaves the game.

You need a terminal that understands ANSI escape sequences and UTF-8
box-drawing characters.

## What it does not do

- Coins are not won or lost. The result screen shows your coins and the bet,
  but your balance changes only through the options menu.
- A doubled bet stays doubled for later rounds.
- The win streak is not counted and always shows 0.
- Profiles are a fixed list of names. Nothing is saved between sessions.

## Using the pieces

You can also use the modules on their own:

- `casinojack.cards`: `Card`, `standard_deck()`, `shuffle(deck, rng)` and
  `hand_points(hand)`.
- `casinojack.game`: `Round` plays one hand against the dealer from a deck,
  `determine_result(player, dealer)` returns an `Outcome`, and
  `draw_table`, `draw_bet` and `draw_round_buttons` draw the table.
- `casinojack.ui`: `Screen` draws every widget to any text stream, with an
  injectable `sleep`.
- `casinojack.menu`: the menu screens, plus `Note`, `menu_song()`,
  `start_song()` and `play_song(notes, beep, sleep)`.
- `casinojack.main`: `Session`, which runs the menus and rounds, and
  `main(argv)`.
- `casinojack.stack`: a bounded integer `Stack`. Pushing onto a full one
  raises `StackFullError`.

```python
import io
import random

from casinojack.cards import hand_points, shuffle, standard_deck
from casinojack.game import Round
from casinojack.ui import Screen

deck = shuffle(standard_deck(), random.Random(7))
game = Round(deck, Screen(io.StringIO(), sleep=lambda seconds: None))
game.start()
print(game.player_points(), game.stand())
```