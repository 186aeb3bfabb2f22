"""Enumerate every node of a store that can start a walk."""

from ._logging import get_logger
from .enums import TripleRole
from .store.base import GraphStore

logger = get_logger(__name__)


class EntitySelector:
    """Collects the surface strings of all subjects and objects.

    Parameters
    ----------
    store : GraphStore
        The store whose dictionary is enumerated.
    """

    def __init__(self, store: GraphStore) -> None:
        self._store = store

    def entities(self) -> set[str]:
        """Return the set of all node strings (subjects and objects).

        Walks the subject section (shared and subject-only ids) and then
        the full object section; shared terms read under either role give
        the same string and collapse in the set.

        Returns
        -------
        set[str]
            Distinct entity strings.
        """
        store = self._store
        result: set[str] = set()
        for i in range(1, store.n_subjects + 1):
            result.add(store.id_to_string(i, TripleRole.SUBJECT))
        for i in range(1, store.n_objects + 1):
            result.add(store.id_to_string(i, TripleRole.OBJECT))

        logger.debug(
            "Enumerated %d entities (%d shared, %d subjects, %d objects)",
            len(result),
            store.n_shared,
            store.n_subjects,
            store.n_objects,
        )
        return result
