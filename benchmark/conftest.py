"""Shared fixtures for the rdfwalks benchmark suite.

Synthetic graph topology
------------------------
``num_nodes`` IRI nodes ``http://bench.org/n<i>`` connected by
``num_nodes * avg_degree`` random triples over ``num_predicates``
predicates, plus one literal label per tenth node so that walks also hit
object-only sinks.

All triples are drawn with a fixed seed for reproducibility.
"""

import pytest
import torch

from rdfwalks.store import InMemoryGraphStore
from rdfwalks.walk import ThreadLocalRandom, WalkGenerator

GRAPH_PROFILES = {
    "small": {"num_nodes": 1_000, "avg_degree": 5, "num_predicates": 8, "seed": 0},
    "medium": {"num_nodes": 10_000, "avg_degree": 5, "num_predicates": 16, "seed": 0},
    "large": {"num_nodes": 50_000, "avg_degree": 5, "num_predicates": 32, "seed": 0},
}

NODE_PREFIX = "http://bench.org/n"
PREDICATE_PREFIX = "http://bench.org/r"
LABEL_PREDICATE = "http://bench.org/label"


def make_synthetic_triples(
    num_nodes: int,
    avg_degree: int,
    num_predicates: int,
    seed: int,
) -> list[tuple[str, str, str]]:
    """Create random string triples.

    Parameters
    ----------
    num_nodes : int
        Number of IRI nodes.
    avg_degree : int
        Average out-degree per node.
    num_predicates : int
        Number of distinct predicates between nodes.
    seed : int
        Random seed for reproducibility.

    Returns
    -------
    list[tuple[str, str, str]]
        Triples ready for :meth:`InMemoryGraphStore.from_triples`.
    """
    gen = torch.Generator().manual_seed(seed)
    n_edges = num_nodes * avg_degree
    src = torch.randint(0, num_nodes, (n_edges,), generator=gen).tolist()
    rel = torch.randint(0, num_predicates, (n_edges,), generator=gen).tolist()
    dst = torch.randint(0, num_nodes, (n_edges,), generator=gen).tolist()

    triples = [
        (f"{NODE_PREFIX}{s}", f"{PREDICATE_PREFIX}{r}", f"{NODE_PREFIX}{o}")
        for s, r, o in zip(src, rel, dst, strict=True)
    ]
    triples.extend(
        (f"{NODE_PREFIX}{i}", LABEL_PREDICATE, f'"node {i}"')
        for i in range(0, num_nodes, 10)
    )
    return triples


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session", params=["small", "medium", "large"])
def raw_triples(request) -> list[tuple[str, str, str]]:
    """Session-scoped string triples parametrised by size."""
    return make_synthetic_triples(**GRAPH_PROFILES[request.param])


@pytest.fixture(scope="session", params=["small", "medium", "large"])
def store(request) -> InMemoryGraphStore:
    """Session-scoped store parametrised by size (small/medium/large)."""
    return InMemoryGraphStore.from_triples(
        make_synthetic_triples(**GRAPH_PROFILES[request.param])
    )


@pytest.fixture(scope="session")
def generator(store: InMemoryGraphStore) -> WalkGenerator:
    """WalkGenerator over the parametrised store with a fixed seed."""
    return WalkGenerator(store, ThreadLocalRandom(seed=0))
