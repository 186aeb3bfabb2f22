"""Random walk generation over an integer-indexed triple store."""

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import assert_never

from .._logging import get_logger
from ..entities import EntitySelector
from ..enums import TripleRole, WalkGenerationMode
from ..exceptions import IdSpaceError, StoreIterationError
from ..store.base import GraphStore, TripleId
from .formatting import to_walk_strings, to_walk_strings_duplicate_free
from .neighbors import NeighborIndex
from .random_source import ThreadLocalRandom

logger = get_logger(__name__)


@dataclass(slots=True)
class _MidWalkState:
    """Both ends of a walk growing around its anchor entity.

    A cleared validity flag stays cleared for the rest of the walk.
    """

    labels: deque[str]
    predecessor: int
    successor: int
    valid_predecessor: bool = True
    valid_successor: bool = True


class WalkGenerator:
    """Generates RDF2Vec-style walks for single entities.

    All walk methods are pure with respect to generator state and may be
    called concurrently from several threads; randomness comes from a
    per-thread generator. Returned walks are space-separated label
    sequences alternating node and predicate labels. Forward walks start
    with the requested entity, mid walks contain it as their anchor.
    Walks consisting of the entity alone are dropped.

    Parameters
    ----------
    store : GraphStore
        Read-only triple store. Acquired once; closing it is up to the
        caller.
    rng : ThreadLocalRandom | None
        Random source. A non-deterministically seeded one is created
        when omitted.

    Raises
    ------
    IdSpaceError
        If the store's dictionary counts are inconsistent.
    """

    def __init__(self, store: GraphStore, rng: ThreadLocalRandom | None = None) -> None:
        try:
            id_space = store.id_space
        except IdSpaceError:
            logger.error("Triple store has an inconsistent identifier partition")
            raise
        self._store = store
        self._id_space = id_space
        self._neighbors = NeighborIndex(store, id_space)
        self._rng = rng if rng is not None else ThreadLocalRandom()
        self._entity_selector = EntitySelector(store)

    def entities(self) -> set[str]:
        """Return every subject and object string of the store."""
        return self._entity_selector.entities()

    def generate(
        self,
        entity: str,
        mode: WalkGenerationMode,
        number_of_walks: int,
        depth: int,
    ) -> list[str]:
        """Generate walks for ``entity`` with the given traversal policy.

        Parameters
        ----------
        entity : str
            Surface string of the start entity.
        mode : WalkGenerationMode
            Traversal policy.
        number_of_walks : int
            Number of walks to attempt.
        depth : int
            Number of hops per walk.

        Returns
        -------
        list[str]
            Generated walks.
        """
        match mode:
            case WalkGenerationMode.RANDOM_WALKS:
                return self.random_walks(entity, number_of_walks, depth)
            case WalkGenerationMode.RANDOM_WALKS_DUPLICATE_FREE:
                return self.duplicate_free_random_walks(entity, number_of_walks, depth)
            case WalkGenerationMode.MID_WALKS:
                return self.mid_walks(entity, number_of_walks, depth)
            case WalkGenerationMode.MID_WALKS_DUPLICATE_FREE:
                return self.mid_walks_duplicate_free(entity, number_of_walks, depth)
            case WalkGenerationMode.MID_WALKS_WEIGHTED:
                return self.weighted_mid_walks(entity, number_of_walks, depth)
            case _ as unreachable:
                assert_never(unreachable)

    # ---- forward walks ----

    def random_walks(self, entity: str, number_of_walks: int, depth: int) -> list[str]:
        """Generate forward walks following outgoing edges only.

        Each walk starts at ``entity`` and at every hop draws one
        outgoing triple of the current node uniformly. A walk stops
        early when the current node has no outgoing triples or cannot
        act as a subject.

        Parameters
        ----------
        entity : str
            Surface string of the start entity.
        number_of_walks : int
            Number of walks to attempt.
        depth : int
            Maximum number of hops per walk.

        Returns
        -------
        list[str]
            Between 0 and ``number_of_walks`` walks in generation order,
            each with at most ``2 * depth + 1`` labels.
        """
        start_id = self._store.string_to_id(entity, TripleRole.SUBJECT)
        walks: list[list[str]] = []

        for _ in range(number_of_walks):
            labels = [entity]
            cursor = start_id
            valid_subject = True
            for _ in range(depth):
                if not valid_subject:
                    break
                try:
                    triple = self.random_triple_for_subject(cursor)
                except StoreIterationError as exc:
                    logger.warning(
                        "Search failed for successors of %d, skipping hop: %s",
                        cursor,
                        exc,
                    )
                    continue
                if triple is None:
                    break
                labels.append(self._label(triple.predicate, TripleRole.PREDICATE))
                labels.append(self._label(triple.object, TripleRole.OBJECT))
                cursor = triple.object
                valid_subject = not self._id_space.is_object_only(cursor)
            if len(labels) > 1:
                walks.append(labels)

        logger.debug("Generated %d random walks for %s", len(walks), entity)
        return to_walk_strings(walks)

    def random_triple_for_subject(self, subject_id: int) -> TripleId | None:
        """Draw one outgoing triple of ``subject_id`` uniformly.

        Parameters
        ----------
        subject_id : int
            Id under the subject role.

        Returns
        -------
        TripleId | None
            The drawn triple, or ``None`` if the id cannot act as a
            subject or has no outgoing triples.

        Raises
        ------
        StoreIterationError
            Propagated from the store.
        """
        candidates = self._neighbors.successors(subject_id)
        if not candidates:
            return None
        return self._rng.choice(candidates)

    def duplicate_free_random_walks(
        self,
        entity: str,
        number_of_walks: int,
        depth: int,
    ) -> list[str]:
        """Expand distinct forward paths breadth-first with random pruning.

        All one-hop paths from ``entity`` form the initial frontier. Each
        further pass replaces every extendable path by all its one-hop
        continuations; paths that cannot be extended stay as they are.
        After every pass, uniformly drawn paths are removed until at most
        ``number_of_walks`` remain. Early removals cut off whole
        subtrees, so the result is not a uniform sample of depth-``d``
        paths.

        Parameters
        ----------
        entity : str
            Surface string of the start entity.
        number_of_walks : int
            Upper bound on the number of paths kept.
        depth : int
            Maximum number of hops per path.

        Returns
        -------
        list[str]
            Distinct walks, possibly of mixed lengths.
        """
        if number_of_walks < 1 or depth < 1:
            return []

        start_id = self._store.string_to_id(entity, TripleRole.SUBJECT)
        if not self._id_space.may_act_as_subject(start_id):
            return []

        try:
            paths = [[triple] for triple in self._neighbors.successors(start_id)]
        except StoreIterationError as exc:
            logger.warning("Search failed for successors of %s: %s", entity, exc)
            return []
        self._prune(paths, number_of_walks)

        for _ in range(1, depth):
            kept: list[list[TripleId]] = []
            grown: list[list[TripleId]] = []
            for path in paths:
                tail = path[-1].object
                continuations: list[TripleId] = []
                if not self._id_space.is_object_only(tail):
                    try:
                        continuations = self._neighbors.successors(tail)
                    except StoreIterationError as exc:
                        logger.warning(
                            "Search failed for successors of %d, keeping path: %s",
                            tail,
                            exc,
                        )
                if continuations:
                    grown.extend([*path, triple] for triple in continuations)
                else:
                    kept.append(path)
            if not grown:
                break
            paths = kept + grown
            self._prune(paths, number_of_walks)

        walks = [self._path_labels(entity, path) for path in paths]
        logger.debug("Generated %d duplicate-free walks for %s", len(walks), entity)
        return to_walk_strings(walks)

    # ---- mid walks ----

    def mid_walks(self, entity: str, number_of_walks: int, depth: int) -> list[str]:
        """Generate walks growing on both sides of ``entity``.

        See :meth:`mid_walk` for a single walk.
        """
        return to_walk_strings(self.mid_walks_as_lists(entity, number_of_walks, depth))

    def mid_walks_duplicate_free(
        self,
        entity: str,
        number_of_walks: int,
        depth: int,
    ) -> list[str]:
        """Generate mid walks, collapsing identical walk strings."""
        return to_walk_strings_duplicate_free(
            self.mid_walks_as_lists(entity, number_of_walks, depth)
        )

    def mid_walks_as_lists(
        self,
        entity: str,
        number_of_walks: int,
        depth: int,
    ) -> list[list[str]]:
        """Generate mid walks as label lists, dropping single-label walks."""
        walks: list[list[str]] = []
        for _ in range(number_of_walks):
            walk = self.mid_walk(entity, depth)
            if len(walk) > 1:
                walks.append(walk)
        logger.debug("Generated %d mid walks for %s", len(walks), entity)
        return walks

    def mid_walk(self, entity: str, depth: int) -> list[str]:
        """Generate one walk around ``entity``.

        Every iteration flips a fair coin to pick the predecessor or the
        successor side and, if that side is still valid, prepends
        ``[subject, predicate]`` or appends ``[predicate, object]`` of a
        uniformly drawn triple. A hop that finds no candidate consumes
        the iteration without changing the walk.

        Parameters
        ----------
        entity : str
            Surface string of the anchor entity.
        depth : int
            Number of iterations.

        Returns
        -------
        list[str]
            Labels of the walk; ``[entity]`` if no hop succeeded.
        """
        state = self._start_mid_walk(entity)
        for _ in range(depth):
            if self._rng.coin() == 0:
                if not state.valid_predecessor:
                    continue
                candidates = self._predecessor_candidates(state)
                if candidates:
                    self._extend_left(state, self._rng.choice(candidates))
            else:
                if not state.valid_successor:
                    continue
                candidates = self._successor_candidates(state)
                if candidates:
                    self._extend_right(state, self._rng.choice(candidates))
        return list(state.labels)

    def weighted_mid_walks(
        self,
        entity: str,
        number_of_walks: int,
        depth: int,
    ) -> list[str]:
        """Generate weighted mid walks, collapsing identical walk strings.

        See :meth:`weighted_mid_walk` for a single walk.
        """
        return to_walk_strings_duplicate_free(
            self.weighted_mid_walks_as_lists(entity, number_of_walks, depth)
        )

    def weighted_mid_walks_as_lists(
        self,
        entity: str,
        number_of_walks: int,
        depth: int,
    ) -> list[list[str]]:
        """Generate weighted mid walks as label lists, dropping single-label walks."""
        walks: list[list[str]] = []
        for _ in range(number_of_walks):
            walk = self.weighted_mid_walk(entity, depth)
            if len(walk) > 1:
                walks.append(walk)
        logger.debug("Generated %d weighted mid walks for %s", len(walks), entity)
        return walks

    def weighted_mid_walk(self, entity: str, depth: int) -> list[str]:
        """Generate one mid walk whose side is drawn by candidate count.

        Every iteration collects the candidates on both sides. With ``a``
        predecessor and ``b`` successor candidates, the walk extends to
        the left with probability ``a / (a + b)`` and to the right
        otherwise; the triple within the chosen side is drawn uniformly.
        The walk ends early once neither side has a candidate.

        Parameters
        ----------
        entity : str
            Surface string of the anchor entity.
        depth : int
            Maximum number of iterations.

        Returns
        -------
        list[str]
            Labels of the walk; ``[entity]`` if no hop succeeded.
        """
        state = self._start_mid_walk(entity)
        for _ in range(depth):
            left = self._predecessor_candidates(state) if state.valid_predecessor else []
            right = self._successor_candidates(state) if state.valid_successor else []

            total = len(left or ()) + len(right or ())
            if total == 0:
                if left is None or right is None:
                    continue
                break

            cut_off = len(left or ()) / total
            if left and self._rng.uniform() <= cut_off:
                self._extend_left(state, self._rng.choice(left))
            elif right:
                self._extend_right(state, self._rng.choice(right))
        return list(state.labels)

    # ---- helpers ----

    def _start_mid_walk(self, entity: str) -> _MidWalkState:
        return _MidWalkState(
            labels=deque([entity]),
            predecessor=self._store.string_to_id(entity, TripleRole.OBJECT),
            successor=self._store.string_to_id(entity, TripleRole.SUBJECT),
        )

    def _predecessor_candidates(self, state: _MidWalkState) -> list[TripleId] | None:
        """Triples ending at the left cursor.

        Clears the predecessor flag if the cursor cannot act as an
        object. Returns ``None`` if the store search failed.
        """
        if not self._id_space.may_act_as_object(state.predecessor):
            state.valid_predecessor = False
            return []
        try:
            return self._neighbors.predecessors(state.predecessor)
        except StoreIterationError as exc:
            logger.warning(
                "Search failed for predecessors of %d, skipping hop: %s",
                state.predecessor,
                exc,
            )
            return None

    def _successor_candidates(self, state: _MidWalkState) -> list[TripleId] | None:
        """Triples starting at the right cursor.

        Clears the successor flag if the cursor cannot act as a subject.
        Returns ``None`` if the store search failed.
        """
        if not self._id_space.may_act_as_subject(state.successor):
            state.valid_successor = False
            return []
        try:
            return self._neighbors.successors(state.successor)
        except StoreIterationError as exc:
            logger.warning(
                "Search failed for successors of %d, skipping hop: %s",
                state.successor,
                exc,
            )
            return None

    def _extend_left(self, state: _MidWalkState, triple: TripleId) -> None:
        state.labels.appendleft(self._label(triple.predicate, TripleRole.PREDICATE))
        state.labels.appendleft(self._label(triple.subject, TripleRole.SUBJECT))
        state.predecessor = triple.subject
        state.valid_predecessor = not self._id_space.is_subject_only(triple.subject)

    def _extend_right(self, state: _MidWalkState, triple: TripleId) -> None:
        state.labels.append(self._label(triple.predicate, TripleRole.PREDICATE))
        state.labels.append(self._label(triple.object, TripleRole.OBJECT))
        state.successor = triple.object
        state.valid_successor = not self._id_space.is_object_only(triple.object)

    def _path_labels(self, entity: str, path: Sequence[TripleId]) -> list[str]:
        labels = [entity]
        for triple in path:
            labels.append(self._label(triple.predicate, TripleRole.PREDICATE))
            labels.append(self._label(triple.object, TripleRole.OBJECT))
        return labels

    def _prune(self, paths: list[list[TripleId]], limit: int) -> None:
        """Remove uniformly drawn paths in place until ``limit`` remain."""
        while len(paths) > limit:
            del paths[self._rng.randint(len(paths))]

    def _label(self, term_id: int, role: TripleRole) -> str:
        return self._store.id_to_string(term_id, role)
