"""Enumerations for triple roles and walk generation modes."""

from enum import Enum, StrEnum, auto


class TripleRole(Enum):
    """Position of a term inside a triple.

    The same integer identifier can denote different terms depending on
    the role it is read under, so every id/string translation is
    parameterized by a role.

    Attributes
    ----------
    SUBJECT : int
        The first position of a triple.
    PREDICATE : int
        The middle position; predicates have their own id namespace.
    OBJECT : int
        The last position of a triple.
    """

    SUBJECT = auto()
    PREDICATE = auto()
    OBJECT = auto()


class WalkGenerationMode(StrEnum):
    """Traversal policy used to produce walks for an entity.

    Attributes
    ----------
    RANDOM_WALKS : str
        Forward walks following outgoing edges only.
    RANDOM_WALKS_DUPLICATE_FREE : str
        Breadth expansion of distinct forward paths, randomly pruned to
        the requested number of walks after each depth.
    MID_WALKS : str
        Walks growing on both sides of the entity; each hop picks a side
        with a fair coin.
    MID_WALKS_DUPLICATE_FREE : str
        Mid walks with identical walk strings collapsed.
    MID_WALKS_WEIGHTED : str
        Mid walks whose side is drawn proportionally to the number of
        candidates on each side; identical strings collapsed.
    """

    RANDOM_WALKS = "random_walks"
    RANDOM_WALKS_DUPLICATE_FREE = "random_walks_duplicate_free"
    MID_WALKS = "mid_walks"
    MID_WALKS_DUPLICATE_FREE = "mid_walks_duplicate_free"
    MID_WALKS_WEIGHTED = "mid_walks_weighted"
