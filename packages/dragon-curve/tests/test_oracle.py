"""Tests for the bit-arithmetic dragon-curve turn rule."""

import pytest
from dragon_curve.oracle import TurnState, advance, turn_sequence
from dragon_curve.types import Turn

L, R = Turn.LEFT, Turn.RIGHT


def doubling_sequence(min_length: int) -> list[Turn]:
    """Paper-folding construction: S + [R] + reverse(flip(S)), from S = [R]."""
    flip = {L: R, R: L}
    seq = [R]
    while len(seq) < min_length:
        seq = seq + [R] + [flip[t] for t in reversed(seq)]
    return seq


def test_first_eight_turns():
    state = TurnState()
    turns = [advance(state) for _ in range(8)]
    assert turns == [R, R, L, R, R, L, L, R]


def test_first_sixteen_match_doubling():
    state = TurnState()
    turns = [advance(state) for _ in range(16)]
    assert turns == doubling_sequence(16)[:16]


def test_long_prefix_matches_doubling():
    """Agreement holds across several carries, not just the first few."""
    expected = doubling_sequence(5000)[:5000]
    assert list(turn_sequence(5000)) == expected


def test_counter_increments_once_per_call():
    state = TurnState()
    for i in range(1, 20):
        advance(state)
        assert state.turn_counter == i


def test_turn_bits_after_first_calls():
    state = TurnState()
    advance(state)
    assert state.turn_bits == 1
    advance(state)
    assert state.turn_bits == 3
    advance(state)
    assert state.turn_bits == 2


def test_states_are_independent():
    a = TurnState()
    b = TurnState()
    for _ in range(5):
        advance(a)
    assert b == TurnState(0, 0)
    assert advance(b) is R


def test_reset_restarts_sequence():
    state = TurnState()
    first = [advance(state) for _ in range(10)]
    state.reset()
    assert state.turn_counter == 0
    assert state.turn_bits == 0
    assert [advance(state) for _ in range(10)] == first


def test_turn_sequence_empty():
    assert list(turn_sequence(0)) == []


def test_turn_sequence_negative_count():
    with pytest.raises(ValueError):
        list(turn_sequence(-1))
