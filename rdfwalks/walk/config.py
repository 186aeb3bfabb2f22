"""Configuration for batch walk generation."""

from dataclasses import dataclass

from ..enums import WalkGenerationMode

DEFAULT_NUMBER_OF_WALKS: int = 100
DEFAULT_DEPTH: int = 4
DEFAULT_NUM_WORKERS: int = 1


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Parameters for generating walks over many entities.

    Parameters
    ----------
    number_of_walks : int
        Walks requested per entity. Duplicate-free modes may return fewer.
    depth : int
        Number of hops per walk.
    mode : WalkGenerationMode
        Traversal policy.
    num_workers : int
        Threads used to process entities concurrently.
    seed : int | None
        Base seed for the per-thread generators. ``None`` seeds every
        thread non-deterministically.

    Raises
    ------
    ValueError
        If any parameter is out of its valid range.
    """

    number_of_walks: int = DEFAULT_NUMBER_OF_WALKS
    depth: int = DEFAULT_DEPTH
    mode: WalkGenerationMode = WalkGenerationMode.RANDOM_WALKS
    num_workers: int = DEFAULT_NUM_WORKERS
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.number_of_walks < 0:
            raise ValueError(
                f"number_of_walks must be non-negative, got {self.number_of_walks}"
            )
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")
        if self.num_workers < 1:
            raise ValueError(f"num_workers must be positive, got {self.num_workers}")
