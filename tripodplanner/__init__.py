"""tripodplanner: tripod library storage optimizer."""

from tripodplanner.checker import CatalogChecker, CatalogError, InvalidReason
from tripodplanner.data import SourceDataHandler
from tripodplanner.index import CandidateIndex
from tripodplanner.models import Item, PlanDefinition, Score, Solution
from tripodplanner.optimizer import LibraryOptimizer
from tripodplanner.report import format_solution
from tripodplanner.scoring import TraitScorer, priority_mask

__all__ = [
    # Validation
    "CatalogChecker", "CatalogError", "InvalidReason",
    # Catalog data
    "SourceDataHandler",
    # Models
    "Item", "PlanDefinition", "Score", "Solution",
    # Index / scoring / search
    "CandidateIndex", "TraitScorer", "priority_mask", "LibraryOptimizer",
    # Output
    "format_solution",
]
