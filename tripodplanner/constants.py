"""Library constants. No mutable state."""

# Library rows (item categories). Index == Item.category.
CATEGORIES = ["Helmet", "Shoulders", "Chest", "Pants", "Gloves", "Weapon"]
CATEGORY_MAP: dict[str, int] = {name: idx for idx, name in enumerate(CATEGORIES)}

# Each item can grant up to this many tripods.
MAX_TRAITS = 3

# Empty trait slot on an item
NO_TRAIT = 0

# Free slots per row when no capacity is given (first page already sorted out)
DEFAULT_CAPACITY = 4


def default_capacity() -> dict[int, int]:
    """Capacity table with DEFAULT_CAPACITY free slots in every row."""
    return {idx: DEFAULT_CAPACITY for idx in range(len(CATEGORIES))}
