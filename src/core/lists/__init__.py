"""
List manipulation — построение, выбор элементов, перестройка и применение функций.

Позиции во всех функциях 1-based.
"""

# Constructing Lists
from src.core.lists.construction import (
    DEFAULT_RANGE_STEP,
    character_range,
    fixed_point_list,
    make_range,
    subdivide,
    table,
)

# Elements of Lists
from src.core.lists.elements import (
    delete_duplicates,
    drop,
    random_choice,
)

# Rearranging & Restructuring Lists
from src.core.lists.restructuring import (
    DEFAULT_LEVEL,
    DEFAULT_PARTITION_SIZE,
    DEFAULT_SHUFFLE_PASSES,
    flatten,
    partition,
    riffle,
    shuffle,
)

# Applying Functions to Lists
from src.core.lists.applying import (
    DEFAULT_MAP_LEVEL,
    map_level,
)

# Specs
from src.core.lists.specs import (
    MAX_INDEX_SPEC_LENGTH,
    IndexSpec,
    IterationSpec,
)

__all__ = [
    # Constructing Lists
    "DEFAULT_RANGE_STEP",
    "character_range",
    "fixed_point_list",
    "make_range",
    "subdivide",
    "table",
    # Elements of Lists
    "delete_duplicates",
    "drop",
    "random_choice",
    # Rearranging & Restructuring Lists
    "DEFAULT_LEVEL",
    "DEFAULT_PARTITION_SIZE",
    "DEFAULT_SHUFFLE_PASSES",
    "flatten",
    "partition",
    "riffle",
    "shuffle",
    # Applying Functions to Lists
    "DEFAULT_MAP_LEVEL",
    "map_level",
    # Specs
    "MAX_INDEX_SPEC_LENGTH",
    "IndexSpec",
    "IterationSpec",
]
