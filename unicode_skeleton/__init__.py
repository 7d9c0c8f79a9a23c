"""
Unicode skeletons and confusable detection (UTS #39).

    >>> skeleton("ℝ𝓊𝓈𝓉")
    'Rust'
    >>> confusable("ℝ𝓊𝓈𝓉", "Rust")
    True
"""

from .data import (
    get_table,
    reset_table,
    load_confusables,
    parse_confusables,
)
from .skeleton import (
    decompose,
    prototype_chars,
    skeleton_chars,
    skeleton,
    confusable,
)
from .table import (
    ConfusablesTable,
    TableBuildError,
    MAX_POOL_SIZE,
)

__all__ = [
    "ConfusablesTable",
    "MAX_POOL_SIZE",
    "TableBuildError",
    "confusable",
    "decompose",
    "get_table",
    "load_confusables",
    "parse_confusables",
    "prototype_chars",
    "reset_table",
    "skeleton",
    "skeleton_chars",
]
