"""Menu screens, the end-of-round screen and the beeper tunes."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Callable, Iterable

from casinojack.game import Outcome
from casinojack.ui import MAGENTA, RESET, Screen

_SCREEN_DELAY = 2.0
_PROFILE_SLOTS = 6
_PROFILE_RULE = "─" * 18
_RESULT_RULE = "─" * 42
_MIN_AUDIBLE = 37
_MAX_AUDIBLE = 32767


@dataclass(frozen=True)
class Note:
    """A tone of the given frequency in hertz, or a rest when the frequency is 0."""

    frequency: float
    duration_ms: int

    @property
    def is_rest(self) -> bool:
        return self.frequency == 0


def _phrase(duration_ms: int, *frequencies: float) -> list[Note]:
    return [Note(frequency, duration_ms) for frequency in frequencies]


def _rest(duration_ms: int) -> list[Note]:
    return [Note(0, duration_ms)]


def draw_main_menu(screen: Screen, first_start: bool, coins: int) -> None:
    """Draw the main menu with its play, options and quit buttons."""
    screen.clear_screen()
    if first_start:
        screen.logo_animation(12, 27)
    else:
        screen.logo(12, 7)
    screen.button(38, 17, "Jugar", 1, 35)
    screen.options_button(38, 22, 2, 35)
    screen.button(38, 27, "Salir", 0, 35)
    screen.coins(8, 33, coins)
    screen.decoration()


def draw_profiles(screen: Screen, coins: int, profiles: Iterable[str]) -> None:
    """Draw the profile picker, filling free slots with a create-user prompt."""
    screen.sleep(_SCREEN_DELAY)
    screen.clear_screen()
    screen.profiles_logo(20, 4)
    screen.decoration()
    screen.back_button(27, 30, 0, 35)
    screen.continue_button(52, 30, 1, 35)

    out = screen.stream
    for slot in range(_PROFILE_SLOTS):
        row = 12 + 3 * slot
        out.write(MAGENTA)
        out.write(f"\033[{row};40H{_PROFILE_RULE}\n")
        out.write(RESET)
        out.write(f"\033[{row + 1};46HCrear Usuario")
        out.write(f"\033[{row + 2};40H{_PROFILE_RULE}\n")

    for slot, name in enumerate(profiles):
        row = 12 + 3 * slot
        out.write(f"\033[{row + 1};40H" + " " * 21)
        out.write(f"\033[{row + 1};46H{name}")
    out.flush()


def draw_options(screen: Screen, coins: int) -> None:
    """Draw the options menu with its game settings and cheats."""
    screen.clear_screen()
    screen.options_logo(17, 7)
    screen.decoration()

    screen.text(34, 15, "Juego", -1, 37)
    screen.music_button(27, 17, 1, 35)
    screen.restart_button(27, 22, 2, 35)
    screen.back_button(27, 27, 0, 35)
    screen.coins(8, 33, coins)

    screen.button(52, 17, "+1000", 3, 35)
    screen.money_button(52, 22, 4, 35)
    screen.more_money_button(52, 27, 5, 35)
    screen.text(58, 15, "Trampas", -1, 37)


def draw_game_over(
    screen: Screen, coins: int, bet: int, streak: int, outcome: Outcome
) -> None:
    """Show the banner and the figures for a finished round."""
    screen.sleep(_SCREEN_DELAY)
    screen.clear_screen()
    if outcome == Outcome.LOSE:
        animation, bet_label = screen.lost_animation, "Fichas perdidas:"
    elif outcome == Outcome.WIN:
        animation, bet_label = screen.won_animation, "Fichas ganadas:"
    elif outcome == Outcome.TIE:
        animation, bet_label = screen.draw_animation, "Fichas ganadas:"
    else:
        return
    animation(20, 1)
    screen.decoration()
    screen.back_button(27, 27, 0, 35)
    screen.continue_button(52, 27, 1, 35)
    screen.text(38, 17, "Fichas restantes:", coins, 37)
    screen.text(38, 20, bet_label, bet, 37)
    screen.text(38, 23, "Racha de victorias:", streak, 37)
    screen.stream.write(f"\033[26;27H{_RESULT_RULE}\n")
    screen.stream.flush()


def menu_song() -> list[Note]:
    """One pass of the menu tune; the menu repeats it for as long as it plays."""
    return [
        *_phrase(200, 739.99, 783.99, 783.99, 739.99, 783.99, 783.99, 739.99),
        *_phrase(200, 83.99, 880, 830.61, 880),
        *_phrase(400, 987.77),
        *_phrase(200, 880, 783.99, 698.46, 739.99, 783.99, 783.99, 739.99),
        *_phrase(200, 783.99, 783.99, 739.99, 783.99, 880, 830.61, 880),
        *_phrase(400, 987.77),
        *_rest(200),
        *_phrase(200, 739.99, 783.99, 783.99, 739.99, 783.99, 783.99, 739.99),
        *_phrase(200, 783.99, 880, 830.61, 880),
        *_phrase(400, 987.77),
        *_phrase(200, 880, 783.99, 698.46),
        *_phrase(200, 659.25, 698.46, 784),
        *_phrase(400, 880),
        *_phrase(200, 784, 698.46, 659.25),
        *_phrase(200, 587.33, 659.25, 698.46),
        *_phrase(400, 784),
        *_phrase(200, 698.46, 659.25, 587.33),
        *_phrase(200, 523.25, 587.33, 659.25),
        *_phrase(400, 698.46),
        *_phrase(200, 659.25, 587.33, 493.88, 523.25),
        *_rest(400),
        *_phrase(400, 349.23),
        *_phrase(200, 392, 329.63, 523.25, 493.88, 466.16),
        *_phrase(200, 440, 493.88, 523.25, 880, 493.88, 880, 1760, 440),
        *_phrase(200, 392, 440, 493.88, 783.99, 440, 783.99, 1568, 392),
        *_phrase(200, 349.23, 392, 440, 698.46, 415.2, 698.46, 1396.92, 349.23),
        *_phrase(200, 329.63, 311.13, 329.63, 659.25),
        *_phrase(400, 698.46, 783.99),
        *_phrase(200, 440, 493.88, 523.25, 880, 493.88, 880, 1760, 440),
        *_phrase(200, 392, 440, 493.88, 783.99, 440, 783.99, 1568, 392),
        *_phrase(200, 349.23, 392),
        *_phrase(0, 440),
        *_phrase(200, 698.46, 659.25, 698.46, 739.99, 783.99),
        *_phrase(200, 392, 392, 392, 392, 196, 196, 196),
        *_phrase(200, 185, 196, 185, 196, 207.65, 220, 233.08, 246.94),
    ]


def start_song() -> list[Note]:
    """The short jingle played when a game starts."""
    return [
        Note(329.628, 187),
        Note(329.628, 375),
        Note(329.628, 375),
        Note(261.626, 187),
        Note(329.628, 375),
        Note(391.995, 375),
        Note(8.176, 375),
        Note(195.998, 375),
        Note(8.176, 375),
    ]


def _default_beep(frequency: float, duration_ms: int) -> None:
    seconds = duration_ms / 1000
    if not _MIN_AUDIBLE <= frequency <= _MAX_AUDIBLE or duration_ms <= 0:
        time.sleep(seconds)
        return
    try:
        import winsound
    except ImportError:
        sys.stdout.write("\a")
        sys.stdout.flush()
        time.sleep(seconds)
    else:
        winsound.Beep(int(frequency), duration_ms)


def play_song(
    notes: Iterable[Note],
    beep: Callable[[float, int], None] | None = None,
    sleep: Callable[[float], None] | None = None,
) -> None:
    """Play the notes one after another, resting where a note is silent."""
    beep = beep if beep is not None else _default_beep
    sleep = sleep if sleep is not None else time.sleep
    for note in notes:
        if note.is_rest:
            sleep(note.duration_ms / 1000)
        else:
            beep(note.frequency, note.duration_ms)