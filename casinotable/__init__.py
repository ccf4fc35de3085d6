"""Card-table game logic: card movement, volume options, lobby and hold'em rules."""

__version__ = "0.1.0"

__all__ = [
    "movement",
    "options",
    "lobby",
    "poker_table",
    "poker_betting",
    "poker_showdown",
    "poker_pots",
]