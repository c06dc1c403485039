"""The interactive blackjack session and its command-line entry point."""

from __future__ import annotations

import argparse
import random
import re
import threading
from typing import Callable

from casinojack.cards import Card, shuffle, standard_deck
from casinojack.game import Outcome, Round, draw_bet, draw_table
from casinojack.menu import (
    draw_game_over,
    draw_main_menu,
    draw_options,
    draw_profiles,
    menu_song,
    play_song,
    start_song,
)
from casinojack.ui import Screen

DEFAULT_COINS = 1000
DEFAULT_BET = 1000
PROFILES = ("Carlos", "Jose", "Alan", "Tomas", "Iara", "Armando")

_INVALID = "Opción no válida.\n"
_NOT_ENOUGH = "Coins Insuficientes!!!"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _read_key() -> int | None:
    match = _LEADING_INT.match(input())
    return int(match.group(1)) if match else None


class _MenuMusic:
    """Plays the menu tune on a background thread that can be paused."""

    def __init__(self) -> None:
        self._playing = threading.Event()
        self._thread: threading.Thread | None = None

    def resume(self) -> None:
        self._playing.set()
        if self._thread is None:
            self._thread = threading.Thread(target=self._loop, daemon=True)
            self._thread.start()

    def suspend(self) -> None:
        self._playing.clear()

    def _loop(self) -> None:
        while True:
            for note in menu_song():
                self._playing.wait()
                play_song([note])


class Session:
    """A player's session: main menu, options and rounds of blackjack."""

    def __init__(
        self,
        screen: Screen,
        read_key: Callable[[], int | None] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.screen = screen
        self.read_key = read_key if read_key is not None else _read_key
        self.rng = rng if rng is not None else random.Random()
        self.deck: list[Card] = standard_deck()
        self.coins = DEFAULT_COINS
        self.bet = DEFAULT_BET
        self.streak = 0
        self.music = False
        self.first_start = False
        self.rounds_played = 0
        self.last_round: Round | None = None
        self._music = _MenuMusic()

    def _say(self, text: str) -> None:
        self.screen.stream.write(text)
        self.screen.stream.flush()

    def _play_hand(self) -> Outcome:
        shuffle(self.deck, self.rng)
        self.first_start = False
        draw_table(self.screen, self.coins, self.bet)
        game = Round(self.deck, self.screen)
        self.last_round = game
        game.start()

        finished = False
        while not finished:
            key = self.read_key()
            if key == 1:
                finished = game.hit()
            elif key == 2:
                game.stand()
                finished = True
            elif key == 3:
                if self.coins > self.bet:
                    self.bet *= 2
                    draw_bet(self.screen, self.bet)
                    game.double_down()
                    finished = True
                else:
                    self._say(_NOT_ENOUGH)
            else:
                self._say(_INVALID)
        self.rounds_played += 1
        return game.result()

    def play_round(self) -> Outcome:
        """Play rounds until the player declines another; return the last result."""
        if self.music:
            self._music.suspend()
        self.screen.plain_button(38, 17, "Jugar", 1, 31)
        if self.music:
            play_song(start_song())

        while True:
            outcome = self._play_hand()
            draw_game_over(self.screen, self.coins, self.bet, self.streak, outcome)
            if self.read_key() != 1:
                break

        if self.music:
            self._music.resume()
        return outcome

    def options(self) -> None:
        """Run the options menu until the player goes back."""
        while True:
            draw_options(self.screen, self.coins)
            key = self.read_key()
            if key == 1:
                self.music = not self.music
                if self.music:
                    self._music.resume()
                else:
                    self._music.suspend()
            elif key == 2:
                self.coins = DEFAULT_COINS
            elif key == 3:
                self.coins += 1000
            elif key == 4:
                self.coins += 10000
            elif key == 5:
                self.coins += 100000
            elif key == 6:
                self.coins *= self.coins
            elif key == 0:
                return
            else:
                self._say(_INVALID)

    def run(self) -> None:
        """Show the profiles, then the main menu until the player quits."""
        try:
            draw_profiles(self.screen, DEFAULT_COINS, PROFILES)
            self.read_key()
            while True:
                draw_main_menu(self.screen, self.first_start, self.coins)
                key = self.read_key()
                if key == 1:
                    self.play_round()
                elif key == 2:
                    self.options()
                elif key == 0:
                    return
                else:
                    self._say(_INVALID)
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play blackjack in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling")
    args = parser.parse_args(argv)
    session = Session(Screen(), _read_key, random.Random(args.seed))
    try:
        session.run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())