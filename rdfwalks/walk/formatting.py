"""Convert label sequences into space-separated walk strings."""

from collections.abc import Iterable, Sequence


def to_walk_strings(walks: Iterable[Sequence[str]]) -> list[str]:
    """Join each walk's labels with single spaces, keeping order."""
    return [" ".join(walk) for walk in walks]


def to_walk_strings_duplicate_free(walks: Iterable[Sequence[str]]) -> list[str]:
    """Join walks like :func:`to_walk_strings`, dropping repeated strings.

    The first occurrence of each string keeps its position.
    """
    return list(dict.fromkeys(to_walk_strings(walks)))
