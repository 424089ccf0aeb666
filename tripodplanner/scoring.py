"""Score ordering: priority traits, then all traits, then cost."""
from tripodplanner.models import Score


def priority_mask(priority_count: int) -> int:
    """Bitmask of the first priority_count trait ids."""
    return (1 << priority_count) - 1


class TraitScorer:
    """Ranks Scores lexicographically, larger key is better."""

    def __init__(self, priority_count: int):
        self.priority_count = priority_count
        self.priority_mask = priority_mask(priority_count)

    def key(self, score: Score) -> tuple[int, int, int]:
        return (score.trait_count(self.priority_mask), score.trait_count(), -score.cost)

    def better(self, score: Score, other: Score) -> bool:
        """True if score strictly beats other."""
        return self.key(score) > self.key(other)

    def meets_priority(self, score: Score) -> bool:
        return score.covers(self.priority_mask)

    def describe(self, score: Score) -> str:
        p, t, c = self.key(score)
        return f"{p}/{t}/{-c}"
