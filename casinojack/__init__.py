"""Blackjack for the terminal: cards, rounds, screens, menus and a stack."""

__version__ = "0.1.0"
__all__ = ["cards", "game", "main", "menu", "stack", "ui"]