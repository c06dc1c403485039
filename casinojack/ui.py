"""Terminal drawing primitives built on ANSI escape sequences."""

from __future__ import annotations

import sys
import time
from typing import Callable, Iterable, TextIO

RESET = "\033[0m"
MAGENTA = "\033[35m"
CLEAR_SCREEN = "\033[2J\033[H"

_BUTTON_TOP = " ┌────────────────┐ "
_BUTTON_TOP_NARROW = " ┌────────────────┐"
_BUTTON_BOTTOM = " └────────────────┘ "

_CARD_TOP = "┌───────────┐\n"
_CARD_BOTTOM = "└───────────┘\n"
_CARD_EMPTY = "│           │\n"
_CARD_BACK = "│░░░░░░░░░░░│\n"

_DIVIDER = "─" * 65
_TABLE_LINE = "─" * 86
_CLEAR_ROW = " " * 113

LOGO = (
    "██████╗ ██╗      █████╗  ██████╗██╗  ██╗     ██╗ █████╗  ██████╗██╗  ██╗",
    "██╔══██╗██║     ██╔══██╗██╔════╝██║ ██╔╝     ██║██╔══██╗██╔════╝██║ ██╔╝",
    "██████╔╝██║     ███████║██║     █████╔╝      ██║███████║██║     █████╔╝ ",
    "██╔══██╗██║     ██╔══██║██║     ██╔═██╗ ██   ██║██╔══██║██║     ██╔═██╗ ",
    "██████╔╝███████╗██║  ██║╚██████╗██║  ██╗╚█████╔╝██║  ██║╚██████╗██║  ██╗",
    "╚═════╝ ╚══════╝╚═╝  ╚═╝ ╚═════╝╚═╝  ╚═╝ ╚════╝ ╚═╝  ╚═╝ ╚═════╝╚═╝  ╚═╝",
    "=" * 72,
)

PROFILES_LOGO = (
    "██████╗ ███████╗██████╗ ███████╗██╗██╗     ███████╗███████╗",
    "██╔══██╗██╔════╝██╔══██╗██╔════╝██║██║     ██╔════╝██╔════╝",
    "██████╔╝█████╗  ██████╔╝█████╗  ██║██║     █████╗  ███████╗",
    "██╔═══╝ ██╔══╝  ██╔══██╗██╔══╝  ██║██║     ██╔══╝  ╚════██║",
    "██║     ███████╗██║  ██║██║     ██║███████╗███████╗███████║",
    "╚═╝     ╚══════╝╚═╝  ╚═╝╚═╝     ╚═╝╚══════╝╚══════╝╚══════╝",
    "=" * 59,
)

OPTIONS_LOGO = (
    "██████╗ ██████╗  ██████╗██╗ ██████╗ ███╗   ██╗███████╗███████╗",
    "██╔═══██╗██╔══██╗██╔════╝██║██╔═══██╗████╗  ██║██╔════╝██╔════╝",
    "██║   ██║██████╔╝██║     ██║██║   ██║██╔██╗ ██║█████╗  ███████╗",
    "██║   ██║██╔═══╝ ██║     ██║██║   ██║██║╚██╗██║██╔══╝  ╚════██║",
    "╚██████╔╝██║     ╚██████╗██║╚██████╔╝██║ ╚████║███████╗███████║",
    " ╚═════╝ ╚═╝      ╚═════╝╚═╝ ╚═════╝ ╚═╝  ╚═══╝╚══════╝╚══════╝",
)

LOST_BANNER = (
    "██████╗ ███████╗██████╗ ██████╗ ██╗███████╗████████╗███████╗",
    "██╔══██╗██╔════╝██╔══██╗██╔══██╗██║██╔════╝╚══██╔══╝██╔════╝",
    "██████╔╝█████╗  ██████╔╝██║  ██║██║███████╗   ██║   █████╗  ",
    "██╔═══╝ ██╔══╝  ██╔══██╗██║  ██║██║╚════██║   ██║   ██╔══╝  ",
    "██║     ███████╗██║  ██║██████╔╝██║███████║   ██║   ███████╗",
    "╚═╝     ╚══════╝╚═╝  ╚═╝╚═════╝ ╚═╝╚══════╝   ╚═╝   ╚══════╝",
)

WON_BANNER = (
    " ██████╗  █████╗ ███╗   ██╗ █████╗ ███████╗████████╗███████╗",
    "██╔════╝ ██╔══██╗████╗  ██║██╔══██╗██╔════╝╚══██╔══╝██╔════╝",
    "██║  ███╗███████║██╔██╗ ██║███████║███████╗   ██║   █████╗  ",
    "██║   ██║██╔══██║██║╚██╗██║██╔══██║╚════██║   ██║   ██╔══╝  ",
    "╚██████╔╝██║  ██║██║ ╚████║██║  ██║███████║   ██║   ███████╗",
    " ╚═════╝ ╚═╝  ╚═╝╚═╝  ╚═══╝╚═╝  ╚═╝╚══════╝   ╚═╝   ╚══════╝",
)

DRAW_BANNER = (
    "███████╗███╗   ███╗██████╗  █████╗ ████████╗███████╗",
    "██╔════╝████╗ ████║██╔══██╗██╔══██╗╚══██╔══╝██╔════╝",
    "█████╗  ██╔████╔██║██████╔╝███████║   ██║   █████╗  ",
    "██╔══╝  ██║╚██╔╝██║██╔═══╝ ██╔══██║   ██║   ██╔══╝  ",
    "███████╗██║ ╚═╝ ██║██║     ██║  ██║   ██║   ███████╗",
    "╚══════╝╚═╝     ╚═╝╚═╝     ╚═╝  ╚═╝   ╚═╝   ╚══════╝",
)

CASINO_TOP = (
    " _______  _______  _______ _________ _        _______ ",
    "(  ____ \\(  ___  )(  ____ \\__   __/( (    /|(  ___  )",
    "| (    \\/| (   ) || (    \\/   ) (   |  \\  ( || (   ) |",
    "| |      | (___) || (_____    | |   |   \\ | || |   | |",
    "| |      |  ___  |(_____  )   | |   | (\\ \\) || |   | |",
)

CASINO_BOTTOM = (
    "| |      | (   ) |      ) |   | |   | | \\   || |   | |",
    "| (____/\\| )   ( |/\\____) |___) (___| )  \\  || (___) |",
    "(_______/|/     \\|\\_______)\\_______/|/    )_)(_______)",
)

DIAMOND = (
    ("  .     '     ,\n", False),
    ("    _________\n", False),
    (" _ /_|_____|_\\ _\n", True),
    ("   '. \\   / .'\n", False),
    ("     '.\\ /.'\n", False),
    ("       '.'\n", False),
)

_LOGO_COLORS = ("\033[31m", "\033[33m", "\033[32m", "\033[34m", "\033[35m")


def _at(row: int, col: int) -> str:
    return f"\033[{row};{col}H"


def _color(code: int) -> str:
    return f"\033[{code}m"


class Screen:
    """Draws the game's widgets on a terminal stream with cursor addressing."""

    def __init__(
        self,
        stream: TextIO | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.sleep = sleep if sleep is not None else time.sleep

    def _write(self, *parts: str) -> None:
        self.stream.write("".join(parts))
        self.stream.flush()

    def _lines(self, x: int, y: int, lines: Iterable[str], end: str = "") -> None:
        self._write(*(_at(y + i, x) + line + end for i, line in enumerate(lines)))

    def clear_screen(self) -> None:
        """Clear the whole terminal and home the cursor."""
        self._write(CLEAR_SCREEN)

    def message(self, text: str, seconds: int, color: int) -> None:
        """Show a message at the fixed message spot, optionally erasing it later."""
        self._write(_at(18, 30), f"\033[0;{color}m", text)
        if seconds > 1:
            self.sleep(seconds)
            self._write(_at(18, 30), " " * 49, "\n")
        if seconds == -1:
            self._write(text)

    def decoration(self) -> None:
        """Draw the four decorative diamonds."""
        self.diamond(4, 25)
        self.diamond(78, 25)
        self.diamond(12, 15)
        self.diamond(69, 15)

    def coins(self, x: int, y: int, coins: int) -> None:
        """Show the coin count, coloured by how large it is."""
        parts = [MAGENTA, _at(y + 1, x), "Coins: "]
        if coins < 500:
            parts.append("\033[31m")
        elif coins < 5000:
            parts.append(RESET)
        elif coins < 10000:
            parts.append("\033[32m")
        elif coins < 100000:
            parts.append("\033[34m")
        elif coins < 1000000:
            parts.append(MAGENTA)
        parts.append(str(coins))
        self._write(*parts)

    def text(self, x: int, y: int, text: str, value: int | None, color: int) -> None:
        """Write a label and, unless value is -1 or None, the value after it."""
        parts = [_color(color), _at(y, x), text]
        if value is not None and value != -1:
            parts += [_at(y, x + len(text) + 1), str(value)]
        self._write(*parts)

    def _boxed(
        self,
        x: int,
        y: int,
        label: str,
        color: int,
        *,
        reset: bool = True,
        top: str = _BUTTON_TOP,
    ) -> None:
        self._write(
            _color(color),
            _at(y, x),
            top,
            _at(y + 1, x),
            RESET if reset else "",
            label,
            _at(y + 2, x),
            _BUTTON_BOTTOM,
        )

    def button(self, x: int, y: int, text: str, key: int, color: int) -> None:
        """Draw a button whose label is printed in the default colour."""
        self._boxed(x, y, f" │   {text}   ({key})  │", color)

    def plain_button(self, x: int, y: int, text: str, key: int, color: int) -> None:
        """Draw a button entirely in the given colour."""
        self._boxed(x, y, f" │   {text}   ({key})  │", color, reset=False)

    def options_button(self, x: int, y: int, key: int, color: int) -> None:
        self._boxed(x, y, f" │  Opciones ({key})  │", color)

    def music_button(self, x: int, y: int, key: int, color: int) -> None:
        self._boxed(x, y, f" │  Musica   ({key})  │", color)

    def restart_button(self, x: int, y: int, key: int, color: int) -> None:
        self._boxed(x, y, f" │  Reiniciar({key})  │", color)

    def back_button(self, x: int, y: int, key: int, color: int) -> None:
        self._boxed(x, y, f" │  Volver   ({key})  │", color)

    def money_button(self, x: int, y: int, key: int, color: int) -> None:
        self._boxed(x, y, f" │  +10000   ({key})  │", color)

    def more_money_button(self, x: int, y: int, key: int, color: int) -> None:
        self._boxed(x, y, f" │  +100000  ({key})  │", color, top=_BUTTON_TOP_NARROW)

    def continue_button(self, x: int, y: int, key: int, color: int) -> None:
        self._boxed(x, y, f" │  continuar ({key}) │", color, top=_BUTTON_TOP_NARROW)

    def diamond(self, x: int, y: int) -> None:
        """Draw a small diamond ornament."""
        parts = [MAGENTA]
        for i, (line, reset) in enumerate(DIAMOND):
            parts.append(_at(y + i, x))
            if reset:
                parts.append(RESET)
            parts.append(line)
        self._write(*parts)

    def logo(self, x: int, y: int) -> None:
        self._write(MAGENTA)
        self._lines(x, y, LOGO)

    def logo_animation(self, x: int, y: int) -> None:
        """Slide the logo upwards through a cycle of colours, then settle it."""
        for color in _LOGO_COLORS:
            self._write(color)
            self._lines(x, y, LOGO)
            y -= 5
            self.sleep(0.75)
            self.clear_all(20, 20)
        self.clear_screen()
        y += 5
        self._lines(x, y, LOGO)
        self._write(RESET)

    def profiles_logo(self, x: int, y: int) -> None:
        self._write(MAGENTA)
        self._lines(x, y, PROFILES_LOGO)

    def options_logo(self, x: int, y: int) -> None:
        self._write(MAGENTA)
        self._lines(x, y, OPTIONS_LOGO)
        self._write(RESET)

    def card(self, rank: str, suit: str, x: int, y: int) -> None:
        """Draw a face-up card showing rank in two corners and suit in the middle."""
        rows = {
            0: _CARD_TOP,
            1: f"│{rank:<2}         │\n",
            4: f"│     {suit}     │\n",
            7: f"│         {rank:<2}│\n",
            8: _CARD_BOTTOM,
        }
        parts = [MAGENTA]
        for i in range(9):
            parts += [_at(y + i, x), rows.get(i, _CARD_EMPTY)]
        parts.append(RESET)
        self._write(*parts)

    def line(self, x: int, y: int) -> None:
        """Draw the table's horizontal rule; x is the row and y the column."""
        self._write(MAGENTA, _at(x, y), _TABLE_LINE, "\n")

    def frame(self, x: int, y: int) -> None:
        """Draw the table frame; x is the top row and y the left column."""
        parts = [MAGENTA, _at(x, y), "╭", _TABLE_LINE, "╮\n"]
        for i in range(1, 31):
            parts += [_at(x + i, y), "│", _at(x + i, y + 87), "│\n"]
        parts += [_at(x + 30, y), "╰", _TABLE_LINE, "╯\n"]
        self._write(*parts)

    def casino(self, x: int, y: int) -> None:
        self._write(MAGENTA)
        self._lines(x, y, CASINO_TOP, "\n")
        self._write("\033[37m")
        self._lines(x, y + len(CASINO_TOP), CASINO_BOTTOM, "\n")

    def _banner(self, x: int, y: int, banner: tuple[str, ...]) -> None:
        self._write(MAGENTA)
        self._lines(x, y, banner, "\n")

    def _banner_animation(self, x: int, y: int, banner: tuple[str, ...]) -> None:
        for i in range(10):
            self._banner(x, y * i, banner)
            self.sleep(0.02)
            self.clear_screen()
        self._banner(x, 10, banner)
        self._write(_at(x - 5, y + 17), _DIVIDER, "\n")

    def lost(self, x: int, y: int) -> None:
        self._banner(x, y, LOST_BANNER)

    def lost_animation(self, x: int, y: int) -> None:
        self._banner_animation(x, y, LOST_BANNER)

    def won(self, x: int, y: int) -> None:
        self._banner(x, y, WON_BANNER)

    def won_animation(self, x: int, y: int) -> None:
        self._banner_animation(x, y, WON_BANNER)

    def draw(self, x: int, y: int) -> None:
        self._banner(x, y, DRAW_BANNER)

    def draw_animation(self, x: int, y: int) -> None:
        self._banner_animation(x, y, DRAW_BANNER)

    def _patterned(self, x: int, y: int, top: str, middle: str, bottom: str) -> None:
        parts = [MAGENTA]
        for i in range(9):
            row = top if i == 0 else bottom if i == 8 else middle
            parts += [_at(y + i, x), row]
        parts.append(RESET)
        self._write(*parts)

    def card_back(self, x: int, y: int) -> None:
        """Draw a face-down card."""
        self._patterned(x, y, _CARD_TOP, _CARD_BACK, _CARD_BOTTOM)

    def deck(self, x: int, y: int) -> None:
        """Draw the stacked deck."""
        self._patterned(
            x, y, "┌───────────┐┐┐┐\n", "│░░░░░░░░░░░││││\n", "└───────────┘┘┘┘\n"
        )

    def shuffle_deck(self, x: int, y: int) -> None:
        """Nudge the deck sideways a few times to suggest shuffling."""
        for i in range(5):
            self.clear_deck(x, y)
            self.deck(x + i, y)
            self.sleep(0.1)

    def cpu(self, x: int, y: int) -> None:
        """Draw the lower half of a face-down card in bright red."""
        parts = ["\033[91m"]
        for i in range(4, 9):
            parts += [_at(y + i, x), _CARD_BACK if i < 8 else _CARD_BOTTOM]
        parts.append(RESET)
        self._write(*parts)

    def clear_player_card(self, x: int, y: int) -> None:
        self._write(*(_at(y + i, x) + " " * 13 + "\n" for i in range(13)))

    def clear_deck(self, x: int, y: int) -> None:
        self._write(
            *(_at(y + i, x + j) + " " for i in range(5) for j in range(9))
        )

    def clear_all(self, x: int, y: int) -> None:
        self._write(*(_at(y + i, x) + _CLEAR_ROW + "\n" for i in range(30)))