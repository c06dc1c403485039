import random

import pytest

from casinojack.cards import Card, hand_points, shuffle, standard_deck


def test_standard_deck_has_52_distinct_cards():
    deck = standard_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52


def test_standard_deck_order_starts_with_hearts_two():
    deck = standard_deck()
    assert deck[0] == Card("2", "♥", 2)
    assert deck[12] == Card("A", "♥", 11)
    assert deck[-1] == Card("A", "♠", 11)


def test_standard_deck_values():
    deck = standard_deck()
    aces = [card for card in deck if card.rank == "A"]
    assert len(aces) == 4
    assert all(card.value == 11 for card in aces)
    faces = [card for card in deck if card.rank in ("J", "Q", "K")]
    assert all(card.value == 10 for card in faces)
    assert {card.suit for card in deck} == {"♥", "♦", "♣", "♠"}


def test_shuffle_keeps_the_same_cards():
    deck = standard_deck()
    shuffled = shuffle(list(deck), random.Random(7))
    assert sorted(shuffled, key=str) == sorted(deck, key=str)


def test_shuffle_is_in_place_and_returns_deck():
    deck = standard_deck()
    result = shuffle(deck, random.Random(3))
    assert result is deck


def test_shuffle_is_deterministic_for_a_seed():
    first = shuffle(standard_deck(), random.Random(42))
    second = shuffle(standard_deck(), random.Random(42))
    assert first == second
    assert first != standard_deck()


def test_shuffle_handles_short_decks():
    assert shuffle([], random.Random(1)) == []
    single = [Card("A", "♠", 11)]
    assert shuffle(single, random.Random(1)) == [Card("A", "♠", 11)]


@pytest.mark.parametrize("count", [0, 1, 2, 5])
def test_hand_points_matches_sum_of_values(count):
    hand = standard_deck()[:count]
    assert hand_points(hand) == sum(card.value for card in hand)


def test_hand_points_empty_hand_is_zero():
    assert hand_points([]) == 0


def test_card_str():
    assert str(Card("K", "♣", 10)) == "K♣"