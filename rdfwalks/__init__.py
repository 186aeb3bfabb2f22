"""rdfwalks: random walk generation over RDF knowledge graphs.

This package produces RDF2Vec-style walks: sequences of alternating node
and predicate labels drawn by random traversal of a compressed,
integer-indexed triple store. The walks are meant as training corpora for
downstream embedding models.

Walk Generation
---------------
Walks are generated per start entity by :class:`WalkGenerator` under one
of five :class:`WalkGenerationMode` policies:

1. **Random walks** --- follow outgoing edges, one uniformly drawn
   triple per hop.

2. **Duplicate-free random walks** --- expand all distinct forward paths
   breadth-first, randomly pruning the frontier to the requested size
   after every depth.

3. **Mid walks** --- grow both sides of the entity; each hop flips a fair
   coin between predecessors and successors.

4. **Duplicate-free mid walks** --- mid walks with repeated walk strings
   collapsed.

5. **Weighted mid walks** --- mid walks choosing the side with
   probability proportional to its number of candidate triples.

Identifier Space
----------------
The store numbers terms like an HDT dictionary. Ids ``1..n_shared`` are
terms used as subject and object; ids above ``n_shared`` mean
subject-only or object-only terms depending on the role they are read
under. :class:`IdSpace` answers the role checks that decide whether a
node can be expanded further.

Module Layout
-------------
``store``
    :class:`GraphStore` interface, :class:`IdSpace`,
    :class:`InMemoryGraphStore` and the rdflib-backed
    :func:`load_graph_store`.
``walk``
    :class:`WalkGenerator`, :class:`WalkConfig`,
    :class:`ThreadLocalRandom` and :class:`NeighborIndex`.
``entities``
    :class:`EntitySelector`.
``serialization``
    :func:`format_triple`, :func:`write_triples`, :func:`serialize_store`.
``runner``
    :func:`build_walk_generator` and :func:`generate_walks_for_entities`.

References
----------
.. [1] Ristoski, P., & Paulheim, H. (2016). RDF2Vec: RDF Graph Embeddings
   for Data Mining. *ISWC*.
"""

from .entities import EntitySelector
from .enums import TripleRole, WalkGenerationMode
from .exceptions import (
    IdSpaceError,
    RdfWalksError,
    StoreIterationError,
    StoreUnavailableError,
)
from .runner import build_walk_generator, generate_walks_for_entities
from .serialization import format_triple, serialize_store, write_triples
from .store import (
    GraphStore,
    IdSpace,
    InMemoryGraphStore,
    TripleId,
    TripleRecord,
    load_graph_store,
)
from .walk import NeighborIndex, ThreadLocalRandom, WalkConfig, WalkGenerator

__all__ = [
    "EntitySelector",
    "GraphStore",
    "IdSpace",
    "IdSpaceError",
    "InMemoryGraphStore",
    "NeighborIndex",
    "RdfWalksError",
    "StoreIterationError",
    "StoreUnavailableError",
    "ThreadLocalRandom",
    "TripleId",
    "TripleRecord",
    "TripleRole",
    "WalkConfig",
    "WalkGenerationMode",
    "WalkGenerator",
    "build_walk_generator",
    "format_triple",
    "generate_walks_for_entities",
    "load_graph_store",
    "serialize_store",
    "write_triples",
]
