"""Shared fixtures for rdfwalks tests."""

import pytest

from rdfwalks.store import InMemoryGraphStore
from rdfwalks.walk import ThreadLocalRandom, WalkGenerator

from ._helpers import CYCLIC_TRIPLES, EXAMPLE_TRIPLES


@pytest.fixture
def example_store() -> InMemoryGraphStore:
    """Store built from :data:`EXAMPLE_TRIPLES`."""
    return InMemoryGraphStore.from_triples(EXAMPLE_TRIPLES)


@pytest.fixture
def cyclic_store() -> InMemoryGraphStore:
    """Store built from :data:`CYCLIC_TRIPLES`."""
    return InMemoryGraphStore.from_triples(CYCLIC_TRIPLES)


@pytest.fixture
def seeded_rng() -> ThreadLocalRandom:
    return ThreadLocalRandom(seed=42)


@pytest.fixture
def example_generator(
    example_store: InMemoryGraphStore,
    seeded_rng: ThreadLocalRandom,
) -> WalkGenerator:
    return WalkGenerator(example_store, seeded_rng)


@pytest.fixture
def cyclic_generator(
    cyclic_store: InMemoryGraphStore,
    seeded_rng: ThreadLocalRandom,
) -> WalkGenerator:
    return WalkGenerator(cyclic_store, seeded_rng)
