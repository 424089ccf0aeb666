"""Tests for TraitScorer (scoring.py) and the Score value type."""
from tripodplanner import Score, TraitScorer, priority_mask


def test_priority_mask() -> None:
    assert priority_mask(0) == 0
    assert priority_mask(3) == 0b111


def test_priority_beats_total_count() -> None:
    scorer = TraitScorer(1)
    one_priority = Score(traits=0b0001, cost=100)
    three_low = Score(traits=0b1110, cost=0)
    assert scorer.better(one_priority, three_low)


def test_total_count_beats_cost() -> None:
    scorer = TraitScorer(1)
    assert scorer.better(Score(0b111, 50), Score(0b011, 0))


def test_lower_cost_wins_tie() -> None:
    scorer = TraitScorer(2)
    assert scorer.better(Score(0b11, 3), Score(0b11, 6))
    assert not scorer.better(Score(0b11, 6), Score(0b11, 6))


def test_key_and_describe() -> None:
    scorer = TraitScorer(2)
    score = Score(0b10110, 7)
    assert scorer.key(score) == (1, 3, -7)
    assert scorer.describe(score) == "1/3/7"


def test_meets_priority() -> None:
    scorer = TraitScorer(2)
    assert scorer.meets_priority(Score(0b111))
    assert not scorer.meets_priority(Score(0b101))
    assert TraitScorer(0).meets_priority(Score())


def test_score_helpers() -> None:
    score = Score().add(0b101, 4).add(0b010, 1)
    assert score == Score(0b111, 5)
    assert score.has(3)
    assert not Score(0b011).has(3)
    assert score.trait_count() == 3
    assert score.trait_count(0b100) == 1
