"""Ranking playing cards as numbers from 0 to 51."""

NCARDS = 52
NSUITS = 4
VALUES = "23456789TJKQA"
SUITS = "CDHS"


def rank_card(value, suit):
    """Number of the card with the given value and suit characters."""
    i = VALUES.find(value) if len(value) == 1 else -1
    j = SUITS.find(suit) if len(suit) == 1 else -1
    if i < 0:
        raise ValueError(f"unknown card value {value!r}")
    if j < 0:
        raise ValueError(f"unknown suit {suit!r}")
    return i * NSUITS + j


def _check(card):
    if not 0 <= card < NCARDS:
        raise ValueError(f"card number {card} outside 0..{NCARDS - 1}")


def card_suit(card):
    """Suit character of a card number."""
    _check(card)
    return SUITS[card % NSUITS]


def card_value(card):
    """Value character of a card number."""
    _check(card)
    return VALUES[card // NSUITS]