"""Simulation of the card game War with six cards per player."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Sequence

MAX_TURNS = 1_000_000


class Winner(enum.Enum):
    FIRST = "first"
    SECOND = "second"
    NONE = "none"


@dataclass
class GameResult:
    """Who won and after how many turns."""

    winner: Winner = Winner.NONE
    turn: int = 0


def simulate_war_game(first_deck: Sequence[int], second_deck: Sequence[int]) -> GameResult:
    """Play until one player has no cards; a game that runs too long has no winner.

    The higher card takes both, except that 0 beats 11.
    """
    result = GameResult()
    first = deque(first_deck)
    second = deque(second_deck)

    while result.turn <= MAX_TURNS and first and second:
        first_card = first.popleft()
        second_card = second.popleft()

        if first_card == 0 and second_card == 11:
            first_wins = True
        elif first_card == 11 and second_card == 0:
            first_wins = False
        elif first_card != second_card:
            first_wins = first_card > second_card
        else:
            first_wins = None

        if first_wins is True:
            first.extend((first_card, second_card))
            result.winner = Winner.FIRST
        elif first_wins is False:
            second.extend((first_card, second_card))
            result.winner = Winner.SECOND

        result.turn += 1

    if result.turn > MAX_TURNS:
        result.winner = Winner.NONE
    return result