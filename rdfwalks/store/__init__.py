"""Triple store abstractions and implementations."""

from .base import UNBOUND_ID, GraphStore, TripleId, TripleRecord
from .id_space import IdSpace
from .memory import InMemoryGraphStore
from .rdf import load_graph_store

__all__ = [
    "UNBOUND_ID",
    "GraphStore",
    "IdSpace",
    "InMemoryGraphStore",
    "TripleId",
    "TripleRecord",
    "load_graph_store",
]
