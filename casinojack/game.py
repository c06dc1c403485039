"""Blackjack round logic: dealing, the dealer's play and the result."""

from __future__ import annotations

import enum
from typing import Sequence

from casinojack.cards import Card, hand_points
from casinojack.ui import Screen

_DEAL_DELAY = 0.7
_START_DELAY = 0.6
_DEALER_STANDS_ON = 18
_BLACKJACK = 21
_CARD_SPACING = 7
_HAND_COLUMN = 30
_PLAYER_ROW = 19
_DEALER_ROW = 3


class Outcome(enum.IntEnum):
    """Result of a round from the player's point of view."""

    UNDECIDED = -3
    CONTINUE = -2
    LOSE = -1
    TIE = 0
    WIN = 1


def determine_result(
    player: Sequence[Card], dealer: Sequence[Card], reveal: bool = True
) -> Outcome:
    """Compare the two hands and decide the round."""
    dealer_points = hand_points(dealer)
    player_points = hand_points(player)
    if player_points > _BLACKJACK or (
        dealer_points > player_points and dealer_points <= _BLACKJACK
    ):
        return Outcome.LOSE
    if dealer_points > _BLACKJACK or dealer_points < player_points:
        return Outcome.WIN
    return Outcome.TIE


def draw_table(screen: Screen, coins: int, bet: int) -> None:
    """Clear the terminal and draw the blackjack table."""
    screen.clear_screen()
    screen.casino(20, 17)
    screen.deck(70, 5)
    screen.coins(8, 33, coins)
    screen.frame(2, 5)
    draw_bet(screen, bet)
    screen.line(28, 6)


def draw_bet(screen: Screen, bet: int) -> None:
    """Show the current bet and the possible winnings."""
    screen.text(10, 3, "Apuesta:", bet, 35)
    screen.text(10, 5, "Ganancia:", bet * 2, 35)


def draw_round_buttons(screen: Screen) -> None:
    """Draw the hit, stand and double buttons."""
    screen.button(12, 29, "Pedir", 1, 35)
    screen.button(36, 29, "Pasar", 2, 35)
    screen.button(60, 29, "Doble", 3, 35)


class Round:
    """One round of blackjack played from a prepared deck."""

    def __init__(self, deck: Sequence[Card], screen: Screen) -> None:
        self.deck = deck
        self.screen = screen
        self.position = 0
        self.player: list[Card] = []
        self.dealer: list[Card] = []

    def start(self) -> None:
        """Deal two cards to each side, the dealer's first card face down."""
        for _ in range(2):
            self.deal(True, False)
            self.position += 1
            self.deal(False, False)
            self.position += 1
        hidden = self.dealer[0].value
        self.screen.text(37, 12, "Crupier:", hand_points(self.dealer[:2]) - hidden, 35)
        self.screen.text(37, 15, "Jugador:", self.player_points(), 35)
        self.screen.sleep(_START_DELAY)
        draw_round_buttons(self.screen)

    def deal(self, to_player: bool, reveal: bool = False) -> Card:
        """Move the next card from the deck into a hand and draw it."""
        if self.position >= len(self.deck):
            raise IndexError("the deck is exhausted")
        card = self.deck[self.position]
        hand = self.player if to_player else self.dealer
        hand.append(card)
        self.screen.sleep(_DEAL_DELAY)

        if to_player:
            self.screen.text(37, 15, "Jugador:", hand_points(hand), 35)
        elif reveal:
            self.screen.text(37, 12, "Crupier:", hand_points(hand), 35)

        slot = len(hand) - 1
        x = slot * _CARD_SPACING + _HAND_COLUMN
        if to_player:
            self.screen.card(card.rank, card.suit, x, _PLAYER_ROW)
        elif slot == 0:
            self.screen.card_back(x, _DEALER_ROW)
        else:
            self.screen.card(card.rank, card.suit, x, _DEALER_ROW)

        self.position += 1
        return card

    def reveal_dealer(self) -> None:
        """Turn the dealer's cards face up."""
        for slot, card in enumerate(self.dealer):
            x = slot * _CARD_SPACING + _HAND_COLUMN
            self.screen.card(card.rank, card.suit, x, _DEALER_ROW)
            self.screen.text(37, 12, "Crupier:", hand_points(self.dealer[:2]), 35)

    def hit(self) -> bool:
        """Give the player a card; return True if that ends the round by busting."""
        self.deal(True, False)
        return self.player_points() > _BLACKJACK

    def dealer_play(self) -> None:
        """Draw for the dealer until it beats the player or reaches 18."""
        while (
            self.dealer_points() < self.player_points() + 1
            and self.dealer_points() < _DEALER_STANDS_ON
        ):
            self.deal(False, True)

    def stand(self) -> Outcome:
        """Reveal the dealer's hand, let it play and return the result."""
        self.reveal_dealer()
        self.dealer_play()
        return self.result()

    def double_down(self) -> Outcome:
        """Take exactly one more card, then let the dealer play."""
        self.deal(True, False)
        self.reveal_dealer()
        self.dealer_play()
        return self.result()

    def player_points(self) -> int:
        return hand_points(self.player)

    def dealer_points(self) -> int:
        return hand_points(self.dealer)

    def result(self) -> Outcome:
        return determine_result(self.player, self.dealer, True)