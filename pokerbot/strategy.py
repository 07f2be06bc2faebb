"""Game state tracking and the call/fold decision rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

MAX_CARDS = 7

_FACE_RANKS = {"1": 10, "J": 11, "Q": 12, "K": 13, "A": 14}
# An absent card has an empty point; it ranks as a NUL character would.
_MISSING_RANK = ord("\0") - ord("0")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Action(Enum):
    """Replies the player can send to the server."""

    CALL = "call \n"
    RAISE = "raise100 \n"
    ALL_IN = "all_in \n"
    FOLD = "fold \n"

    @property
    def wire(self) -> bytes:
        """The reply as sent: the text followed by a NUL byte."""
        return self.value.encode("ascii") + b"\0"


def card_rank(point: str) -> int:
    """Rank of a card point: digits by value, 10 and J/Q/K/A as 10 to 14."""
    if not point:
        return _MISSING_RANK
    first = point[0]
    if first in _FACE_RANKS:
        return _FACE_RANKS[first]
    return ord(first) - ord("0")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _body_lines(message: str) -> list[str]:
    """Complete lines after the header line, up to the closing tag."""
    lines = message.split("\n")[1:-1]
    body = []
    for line in lines:
        if line.startswith("/"):
            break
        body.append(line)
    return body


@dataclass
class GameState:
    """What the player knows about the current hand."""

    colors: list[str] = field(default_factory=list)
    points: list[str] = field(default_factory=list)
    bets: list[int] = field(default_factory=list)
    bet_max: int = 0
    stage: int = 0
    member_count: int = 0
    money: int = 0

    def reset(self) -> None:
        """Forget everything about the hand."""
        self.colors = []
        self.points = []
        self.bets = []
        self.bet_max = 0
        self.stage = 0
        self.member_count = 0
        self.money = 0

    def reset_bets(self) -> None:
        """Forget the bets seen in the last inquiry."""
        self.bets = []
        self.bet_max = 0

    def read_seat(self, message: str, my_id) -> int:
        """Read a seat message: count the players and find this player's jetton."""
        wanted = str(my_id)
        count = 0
        money = 0
        found = False
        for line in _body_lines(message):
            count += 1
            if ":" in line:
                line = line[line.index(":") + 2:]
            tokens = line.split(" ")
            if not found and tokens[0] == wanted:
                found = True
                money = _atoi(tokens[1]) if len(tokens) > 1 else 0
        self.member_count = count
        self.money = money
        return money

    def read_cards(self, message: str) -> None:
        """Add the cards of a hold, flop, turn or river message."""
        for line in _body_lines(message):
            if len(self.colors) >= MAX_CARDS:
                raise ValueError(f"a hand holds at most {MAX_CARDS} cards")
            tokens = line.split(" ")
            self.colors.append(tokens[0])
            self.points.append(tokens[1] if len(tokens) > 1 else "")

    def read_inquire(self, message: str) -> None:
        """Read the bets of an inquire message, largest first."""
        bets = []
        for line in _body_lines(message):
            tokens = line.split(" ")
            bets.append(_atoi(tokens[3]) if len(tokens) > 3 else 0)
        self.bets = sorted(bets, reverse=True)
        self.bet_max = max(self.bets, default=0)

    def _point(self, index: int) -> str:
        return self.points[index] if index < len(self.points) else ""

    def _suit(self, index: int) -> str:
        return self.colors[index][:1] if index < len(self.colors) else ""

    def _rank(self, index: int) -> int:
        return card_rank(self._point(index))

    def ranks(self, count: int) -> list[int]:
        """Ranks of the first count cards, in ascending order."""
        return sorted(self._rank(index) for index in range(count))

    def hold_strategy_1(self) -> bool:
        """Play the hole cards at a full table: strict thresholds."""
        first, second = self._rank(0), self._rank(1)
        if first == second and first > 7:
            return True
        if first > 9 and second > 9 and self._suit(0) == self._suit(1):
            return True
        return 14 in (first, second) and first > 11 and second > 11

    def hold_strategy_2(self) -> bool:
        """Play the hole cards at a medium table: looser thresholds."""
        first, second = self._rank(0), self._rank(1)
        if first == second and first > 2:
            return True
        if first > 3 and second > 3 and self._suit(0) == self._suit(1):
            return True
        return (first > 11 or second > 11) and first > 4 and second > 4

    def is_flush_draw(self) -> bool:
        """Four of the five cards share the suit of a matching pair."""
        suit_a = suit_b = ""
        if self._suit(0) == self._suit(1):
            suit_a = self._suit(0)
        elif self._suit(2) == self._suit(3):
            suit_b = self._suit(2)
        count_a = count_b = 0
        for index in range(5):
            suit = self._suit(index)
            if suit == suit_a:
                count_a += 1
            elif suit == suit_b:
                count_b += 1
        return count_a >= 4 or count_b >= 4

    def has_three_of_kind(self) -> bool:
        """One of the first three points appears three times in five cards."""
        firsts = [self._point(index)[:1] for index in range(5)]
        char_a, char_b, char_c = firsts[:3]
        count_a = count_b = count_c = 0
        for char in firsts:
            if char == char_a:
                count_a += 1
            elif char == char_b:
                count_b += 1
            elif char == char_c:
                count_c += 1
        return max(count_a, count_b, count_c) >= 3

    def has_pair(self) -> bool:
        """Two of the five cards have the same rank."""
        ranks = [self._rank(index) for index in range(5)]
        return len(set(ranks)) < len(ranks)

    def is_straight(self) -> bool:
        """The five cards form a run of consecutive ranks."""
        ranks = self.ranks(5)
        return all(high - low == 1 for low, high in zip(ranks, ranks[1:]))

    def strategy(self) -> bool:
        """Stay in after the flop when any made hand or draw is present."""
        return (
            self.is_flush_draw()
            or self.has_three_of_kind()
            or self.has_pair()
            or self.is_straight()
        )