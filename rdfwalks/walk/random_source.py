"""Thread-local random number source for walk strategies."""

import itertools
import threading
from collections.abc import Sequence
from typing import TypeVar

import torch

T = TypeVar("T")


class ThreadLocalRandom:
    """Hands every thread its own ``torch.Generator``.

    Draws never take a lock, so concurrent walk calls do not contend on
    a shared generator.

    Parameters
    ----------
    seed : int | None
        When set, the k-th thread to draw is seeded with ``seed + k``.
        When ``None``, each generator is seeded non-deterministically.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._local = threading.local()
        self._thread_counter = itertools.count()

    def randint(self, high: int) -> int:
        """Draw an integer uniformly from ``[0, high)``.

        Raises
        ------
        ValueError
            If ``high`` is not positive.
        """
        if high < 1:
            raise ValueError(f"high must be positive, got {high}")
        return int(torch.randint(0, high, (1,), generator=self._generator()).item())

    def coin(self) -> int:
        """Draw ``0`` or ``1`` with equal probability."""
        return self.randint(2)

    def uniform(self) -> float:
        """Draw a float uniformly from ``[0, 1)``."""
        return float(torch.rand(1, generator=self._generator()).item())

    def choice(self, candidates: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence uniformly."""
        return candidates[self.randint(len(candidates))]

    def _generator(self) -> torch.Generator:
        generator: torch.Generator | None = getattr(self._local, "generator", None)
        if generator is None:
            generator = torch.Generator()
            if self._seed is None:
                generator.seed()
            else:
                generator.manual_seed(self._seed + next(self._thread_counter))
            self._local.generator = generator
        return generator
