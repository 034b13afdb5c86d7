"""Dragon-curve turn rule in O(1) bit arithmetic per segment boundary."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from dragon_curve.types import Turn


@dataclass
class TurnState:
    """Per-instance turn history.

    ``turn_counter`` counts the segment boundaries crossed so far.
    ``turn_bits`` holds one toggle bit per power of two; bit ``k`` flips
    each time the counter carries into position ``k``.
    """

    turn_counter: int = 0
    turn_bits: int = 0

    def reset(self) -> None:
        self.turn_counter = 0
        self.turn_bits = 0


def advance(state: TurnState) -> Turn:
    """Return the turn for the next segment boundary and update ``state``.

    Must be called exactly once per boundary, in order. The bits that
    change between ``n`` and ``n + 1`` are a run of low ones ending in the
    bit that flips 0 -> 1; ``(changed + 1) >> 1`` isolates that bit. Its
    toggle in ``turn_bits`` says whether this boundary sits in the
    reversed-and-flipped half of the fold at that scale.
    """
    prev = state.turn_counter
    state.turn_counter += 1
    changed = prev ^ state.turn_counter
    pivot = (changed + 1) >> 1

    turn = Turn.LEFT if state.turn_bits & pivot else Turn.RIGHT
    state.turn_bits ^= pivot
    return turn


def turn_sequence(count: int) -> Iterator[Turn]:
    """Yield the first ``count`` turns of a fresh curve."""
    if count < 0:
        raise ValueError("count must be non-negative")
    state = TurnState()
    for _ in range(count):
        yield advance(state)
