import io

import pytest

from casinojack.ui import CLEAR_SCREEN, LOGO, Screen


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def env():
    stream = io.StringIO()
    sleeps = Recorder()
    return Screen(stream, sleeps), stream, sleeps


def test_text_without_value_omits_number(env):
    screen, stream, _ = env
    screen.text(34, 15, "Juego", -1, 37)
    out = stream.getvalue()
    assert out.startswith("\033[37m\033[15;34HJuego")
    assert out.endswith("Juego")


def test_text_with_value_places_number_after_label(env):
    screen, stream, _ = env
    screen.text(10, 3, "Apuesta:", 1000, 35)
    out = stream.getvalue()
    assert out.endswith("1000")
    assert out.count("\033[3;") == 2


def test_coins_low_is_red(env):
    screen, stream, _ = env
    screen.coins(8, 33, 100)
    assert stream.getvalue().endswith("Coins: \033[31m100")


@pytest.mark.parametrize(
    "coins,color",
    [(1000, "\033[0m"), (5000, "\033[32m"), (50000, "\033[34m"), (500000, "\033[35m")],
)
def test_coins_color_bands(env, coins, color):
    screen, stream, _ = env
    screen.coins(8, 33, coins)
    assert stream.getvalue().endswith("Coins: " + color + str(coins))


def test_coins_huge_has_no_extra_color(env):
    screen, stream, _ = env
    screen.coins(8, 33, 2000000)
    assert stream.getvalue().endswith("Coins: 2000000")


def test_message_waits_and_erases(env):
    screen, stream, sleeps = env
    screen.message("Hola", 3, 31)
    assert sleeps.calls == [3]
    assert stream.getvalue().count("\033[18;30H") == 2


def test_message_minus_one_repeats_text(env):
    screen, stream, sleeps = env
    screen.message("Hola", -1, 31)
    assert stream.getvalue().count("Hola") == 2
    assert sleeps.calls == []


def test_button_shows_label_and_key(env):
    screen, stream, _ = env
    screen.button(38, 17, "Jugar", 1, 35)
    out = stream.getvalue()
    assert " │   Jugar   (1)  │" in out
    assert "\033[0m" in out


def test_plain_button_keeps_color(env):
    screen, stream, _ = env
    screen.plain_button(38, 17, "Jugar", 1, 31)
    out = stream.getvalue()
    assert "\033[0m" not in out
    assert out.startswith("\033[31m")


@pytest.mark.parametrize(
    "method,label",
    [
        ("options_button", "Opciones (2)"),
        ("music_button", "Musica   (2)"),
        ("restart_button", "Reiniciar(2)"),
        ("back_button", "Volver   (2)"),
        ("money_button", "+10000   (2)"),
        ("more_money_button", "+100000  (2)"),
        ("continue_button", "continuar (2)"),
    ],
)
def test_named_buttons(env, method, label):
    screen, stream, _ = env
    getattr(screen, method)(27, 17, 2, 35)
    assert label in stream.getvalue()


def test_card_shows_rank_and_suit(env):
    screen, stream, _ = env
    screen.card("A", "♠", 30, 19)
    out = stream.getvalue()
    assert "│A          │" in out
    assert "│         A │" in out
    assert "│     ♠     │" in out
    assert out.endswith("\033[0m")


def test_card_back_has_nine_rows(env):
    screen, stream, _ = env
    screen.card_back(30, 3)
    out = stream.getvalue()
    assert out.count("│░░░░░░░░░░░│") == 7
    assert "┌───────────┐" in out and "└───────────┘" in out


def test_frame_side_count(env):
    screen, stream, _ = env
    screen.frame(2, 5)
    out = stream.getvalue()
    assert out.count("│") == 60
    assert "╭" in out and "╯" in out


def test_logo_animation_sleeps_and_clears(env):
    screen, stream, sleeps = env
    screen.logo_animation(12, 27)
    out = stream.getvalue()
    assert sleeps.calls == [0.75] * 5
    assert out.count(CLEAR_SCREEN) == 1
    assert out.count(LOGO[0]) == 6


@pytest.mark.parametrize("method", ["lost_animation", "won_animation", "draw_animation"])
def test_banner_animations(env, method):
    screen, stream, sleeps = env
    getattr(screen, method)(20, 1)
    assert sleeps.calls == [0.02] * 10
    assert stream.getvalue().count(CLEAR_SCREEN) == 10


def test_shuffle_deck_moves_five_times(env):
    screen, stream, sleeps = env
    screen.shuffle_deck(70, 5)
    assert sleeps.calls == [0.1] * 5
    assert stream.getvalue().count("┌───────────┐┐┐┐") == 5


def test_clear_screen_writes_escape(env):
    screen, stream, _ = env
    screen.clear_screen()
    assert stream.getvalue() == CLEAR_SCREEN


def test_decoration_draws_four_diamonds(env):
    screen, stream, _ = env
    screen.decoration()
    assert stream.getvalue().count("       '.'") == 4


def test_clear_all_and_deck_write_blanks_only(env):
    screen, stream, _ = env
    screen.clear_deck(1, 1)
    screen.clear_all(20, 20)
    screen.clear_player_card(1, 1)
    cleaned = "".join(
        ch for ch in stream.getvalue() if ch not in "\033[;H0123456789\n"
    )
    assert set(cleaned) == {" "}