"""Random walk submodule for rdfwalks."""

from .config import WalkConfig
from .formatting import to_walk_strings, to_walk_strings_duplicate_free
from .neighbors import NeighborIndex
from .random_source import ThreadLocalRandom
from .walker import WalkGenerator

__all__ = [
    "NeighborIndex",
    "ThreadLocalRandom",
    "WalkConfig",
    "WalkGenerator",
    "to_walk_strings",
    "to_walk_strings_duplicate_free",
]
