import io

import pytest

from casinojack.game import Outcome
from casinojack.menu import (
    Note,
    draw_game_over,
    draw_main_menu,
    draw_options,
    draw_profiles,
    menu_song,
    play_song,
    start_song,
)
from casinojack.ui import Screen


@pytest.fixture
def recorded():
    stream = io.StringIO()
    sleeps = []
    return Screen(stream, sleeps.append), stream, sleeps


def test_note_rest():
    assert Note(0, 200).is_rest
    assert not Note(440, 200).is_rest


def test_start_song_matches_jingle():
    notes = start_song()
    assert len(notes) == 9
    assert notes[0] == Note(329.628, 187)
    assert notes[-1] == Note(8.176, 375)


def test_play_song_beeps_and_rests():
    beeps, sleeps = [], []
    notes = menu_song()
    play_song(notes, lambda f, d: beeps.append((f, d)), sleeps.append)
    assert sleeps == [0.2, 0.4]
    assert len(beeps) == len(notes) - 2
    assert beeps[0] == (739.99, 200)
    assert beeps[-1] == (246.94, 200)


def test_play_song_start_song_order():
    beeps = []
    play_song(start_song(), lambda f, d: beeps.append((f, d)), lambda s: None)
    assert beeps == [(n.frequency, n.duration_ms) for n in start_song()]


def test_main_menu_buttons(recorded):
    screen, stream, _ = recorded
    draw_main_menu(screen, False, 1000)
    out = stream.getvalue()
    assert "Jugar   (1)" in out
    assert "Opciones (2)" in out
    assert "Salir   (0)" in out
    assert "Coins: " in out and "1000" in out


def test_profiles_lists_names(recorded):
    screen, stream, sleeps = recorded
    draw_profiles(screen, 1000, ["Carlos", "Jose"])
    out = stream.getvalue()
    assert out.count("Crear Usuario") == 6
    assert "\033[13;46HCarlos" in out
    assert "\033[16;46HJose" in out
    assert sleeps[0] == 2.0


def test_options_screen(recorded):
    screen, stream, _ = recorded
    draw_options(screen, 5000)
    out = stream.getvalue()
    assert "Trampas" in out
    assert "+1000" in out
    assert "Musica   (1)" in out
    assert "Reiniciar(2)" in out


def test_game_over_lost(recorded):
    screen, stream, _ = recorded
    draw_game_over(screen, 1000, 500, 0, Outcome.LOSE)
    out = stream.getvalue()
    assert "Fichas perdidas:" in out
    assert "Fichas ganadas:" not in out
    assert "Racha de victorias:" in out


@pytest.mark.parametrize("outcome", [Outcome.WIN, Outcome.TIE])
def test_game_over_won_or_tie(recorded, outcome):
    screen, stream, _ = recorded
    draw_game_over(screen, 1000, 500, 0, outcome)
    out = stream.getvalue()
    assert "Fichas ganadas:" in out
    assert "Fichas perdidas:" not in out


def test_game_over_undecided_draws_nothing(recorded):
    screen, stream, _ = recorded
    draw_game_over(screen, 1000, 500, 0, Outcome.CONTINUE)
    assert "Fichas" not in stream.getvalue()