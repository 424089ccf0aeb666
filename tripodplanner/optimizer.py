"""Library optimizer: depth-first branch and bound over tripods."""
import logging
import time
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional

from tripodplanner.checker import CatalogChecker
from tripodplanner.index import CandidateIndex
from tripodplanner.models import PlanDefinition, Score, Solution
from tripodplanner.scoring import TraitScorer

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """Search state for one tripod: which candidate holds it, and the score so far."""
    trait: int
    inherited: Score
    cursor: Optional[int] = None  # position in candidates(trait) of the held item
    score: Score = field(default_factory=Score)
    visited: bool = False
    left_open: bool = False       # no item held; trait left to other items
    closed: int = 0               # traits left open unobtained by earlier frames


class LibraryOptimizer:
    """Finds which items to store so the library holds the best set of tripods.

    Tripods are decided one at a time in id order. For each tripod the search
    tries every eligible candidate item, then leaving the tripod to chance.
    Two prunes keep this tractable:

    * redundancy: a tripod already granted by earlier picks gets no item;
    * priority cutoff: past the priority tripods, branches that miss any of
      them are dropped. This assumes some assignment obtains every priority
      tripod; if none does, disable it or the search may under-report.
    """

    def __init__(self, index: CandidateIndex, capacity: Mapping[int, int],
                 priority_count: int, *, redundancy_prune: bool = True,
                 priority_prune: bool = True, time_limit: Optional[float] = None):
        self.index = index
        self.capacity = index.checker.normalize_capacity(capacity, list(index.items))
        self.priority_count = CatalogChecker.clamp_priority(priority_count, index.trait_count)
        self.scorer = TraitScorer(self.priority_count)
        self.redundancy_prune = redundancy_prune
        self.priority_prune = priority_prune
        self.time_limit = time_limit

    @classmethod
    def from_plan(cls, plan: PlanDefinition) -> "LibraryOptimizer":
        index = CandidateIndex.build(plan.items, len(plan.trait_names) or None)
        return cls(
            index, plan.capacity, plan.priority_count,
            redundancy_prune=plan.redundancy_prune,
            priority_prune=plan.priority_prune,
            time_limit=plan.time_limit,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> Iterator[Solution]:
        """Yield every strictly improving assignment, best last.

        Each call starts a fresh search with its own capacity and selection state.
        """
        num_traits = self.index.trait_count
        free = list(self.capacity)
        selected: set[int] = set()
        best = Score()
        deadline = None if self.time_limit is None else time.monotonic() + self.time_limit
        frames: list[Frame] = [Frame(trait=1, inherited=Score())] if num_traits else []
        nodes = improvements = 0

        logger.info("Searching %d items over %d tripods (%d priority)",
                    len(self.index.items), num_traits, self.priority_count)
        while frames:
            if deadline is not None and time.monotonic() > deadline:
                logger.warning("Time limit of %.1fs reached after %d nodes; stopping",
                               self.time_limit, nodes)
                while frames:
                    self._release(frames.pop(), free, selected)
                break

            frame = frames[-1]
            nodes += 1
            if frame.visited:
                advanced = self._next_option(frame, free, selected)
            else:
                frame.visited = True
                if self.redundancy_prune and frame.inherited.has(frame.trait):
                    frame.left_open = True
                    frame.score = frame.inherited
                    advanced = True
                elif (self.priority_prune and frame.trait > self.priority_count
                      and not self.scorer.meets_priority(frame.inherited)):
                    advanced = False
                else:
                    advanced = self._next_option(frame, free, selected)

            if not advanced:
                frames.pop()
                continue

            if frame.trait < num_traits:
                frames.append(Frame(trait=frame.trait + 1, inherited=frame.score,
                                    closed=self._closed_after(frame)))
            elif self.scorer.better(frame.score, best):
                best = frame.score
                improvements += 1
                logger.debug("New best assignment %s", self.scorer.describe(best))
                yield self._solution(best, selected)

        logger.info("Search finished after %d nodes, %d improvements (best %s)",
                    nodes, improvements, self.scorer.describe(best))

    def best(self) -> Optional[Solution]:
        """Run to exhaustion and return the final (best) solution, if any."""
        result = None
        for result in self.run():
            pass
        return result

    # ------------------------------------------------------------------
    # Frame transitions
    # ------------------------------------------------------------------

    def _next_option(self, frame: Frame, free: list[int], selected: set[int]) -> bool:
        """Move frame to its next candidate (or to leaving the tripod open).

        Returns False once every option has been tried.
        """
        if frame.left_open:
            return False
        candidates = self.index.candidates(frame.trait)
        start = 0
        if frame.cursor is not None:
            self._deselect(candidates[frame.cursor], free, selected)
            start = frame.cursor + 1

        for pos in range(start, len(candidates)):
            idx = candidates[pos]
            if idx in selected or not free[self.index.items[idx].category]:
                continue
            if self.index.item_mask(idx) & frame.closed:
                continue
            self._select(idx, free, selected)
            item = self.index.items[idx]
            frame.cursor = pos
            frame.score = frame.inherited.add(self.index.item_mask(idx), item.cost)
            return True

        frame.cursor = None
        frame.left_open = True
        frame.score = frame.inherited
        return True

    @staticmethod
    def _closed_after(frame: Frame) -> int:
        """Closed traits for the next frame.

        A trait left open while unobtained stays unobtained: later frames skip
        every item granting it.
        """
        if frame.left_open and not frame.score.has(frame.trait):
            return frame.closed | 1 << (frame.trait - 1)
        return frame.closed

    def _release(self, frame: Frame, free: list[int], selected: set[int]) -> None:
        if frame.cursor is not None:
            self._deselect(self.index.candidates(frame.trait)[frame.cursor], free, selected)
            frame.cursor = None

    def _select(self, idx: int, free: list[int], selected: set[int]) -> None:
        category = self.index.items[idx].category
        assert idx not in selected, f"item #{idx} selected twice"
        assert free[category] > 0, f"no free slot in category {category}"
        selected.add(idx)
        free[category] -= 1

    def _deselect(self, idx: int, free: list[int], selected: set[int]) -> None:
        category = self.index.items[idx].category
        assert idx in selected, f"item #{idx} released but not selected"
        assert free[category] < self.capacity[category], f"category {category} over capacity"
        selected.remove(idx)
        free[category] += 1

    # ------------------------------------------------------------------
    # Result builder
    # ------------------------------------------------------------------

    def _solution(self, score: Score, selected: set[int]) -> Solution:
        return Solution(
            priority_count=score.trait_count(self.scorer.priority_mask),
            trait_count=score.trait_count(),
            cost=score.cost,
            traits=score.traits,
            items=sorted(selected),
        )
