"""Text rendering of optimizer solutions."""
from typing import Optional, Sequence

from tripodplanner.constants import CATEGORIES
from tripodplanner.models import Item, Solution


def format_header(solution: Solution) -> str:
    return (f"==[ New best assignment: {solution.priority_count}/{solution.trait_count}/"
            f"{solution.cost} {solution.bitmask} ]==")


def format_item_line(index: int, item: Optional[Item] = None) -> str:
    line = f"Use item: #{index:02d}"
    if item is not None:
        label = f" {item.name}" if item.name else ""
        line += f" ({CATEGORIES[item.category]}{label})"
    return line


def format_solution(solution: Solution,
                    catalog: Optional[Sequence[Item]] = None,
                    trait_names: Optional[Sequence[str]] = None) -> str:
    """Header line, then one line per selected item, then obtained tripods if names are known."""
    lines = [format_header(solution)]
    for idx in solution.items:
        lines.append(format_item_line(idx, catalog[idx] if catalog is not None else None))
    if trait_names:
        for t in solution.trait_ids:
            name = trait_names[t - 1] if t <= len(trait_names) else f"Tripod {t}"
            lines.append(f"  + {name}")
    return "\n".join(lines)
