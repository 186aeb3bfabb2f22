"""Benchmarks for every walk generation mode at depths 2 and 4."""

import pytest

from rdfwalks.enums import WalkGenerationMode

# Node 0 carries a label triple, so it always has an outgoing edge.
BENCH_ENTITY = "http://bench.org/n0"


@pytest.mark.parametrize("depth", [2, 4])
@pytest.mark.parametrize("mode", list(WalkGenerationMode))
def test_walk(benchmark, generator, mode, depth):
    """Benchmark 50 walks for one entity over varying modes and depths."""
    benchmark(generator.generate, BENCH_ENTITY, mode, 50, depth)


def test_entities(benchmark, generator):
    """Benchmark enumerating all entity strings."""
    benchmark(generator.entities)
