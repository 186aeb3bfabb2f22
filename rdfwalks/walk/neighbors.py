"""Materialized neighbor lookup on top of raw store iteration."""

from collections.abc import Iterator

from ..store.base import GraphStore, TripleId, TripleRecord
from ..store.id_space import IdSpace


class NeighborIndex:
    """Candidate triples around a node, copied out of the store iterators.

    Lookups with an id that is not valid for the queried role return an
    empty list without touching the store.

    Parameters
    ----------
    store : GraphStore
        The store to search.
    id_space : IdSpace
        Role partition of ``store``.
    """

    def __init__(self, store: GraphStore, id_space: IdSpace) -> None:
        self._store = store
        self._id_space = id_space

    def successors(self, subject_id: int) -> list[TripleId]:
        """Return every triple whose subject is ``subject_id``.

        Raises
        ------
        StoreIterationError
            Propagated from the store.
        """
        if not self._id_space.may_act_as_subject(subject_id):
            return []
        return self._materialize(self._store.search_by_subject(subject_id))

    def predecessors(self, object_id: int) -> list[TripleId]:
        """Return every triple whose object is ``object_id``.

        Raises
        ------
        StoreIterationError
            Propagated from the store.
        """
        if not self._id_space.may_act_as_object(object_id):
            return []
        return self._materialize(self._store.search_by_object(object_id))

    @staticmethod
    def _materialize(records: Iterator[TripleRecord]) -> list[TripleId]:
        # Records may be one buffer refilled on every step.
        return [record.freeze() for record in records]
