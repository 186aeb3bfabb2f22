"""Abstract triple store consumed by the walk engine."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

from ..enums import TripleRole
from .id_space import IdSpace

UNBOUND_ID: int = 0
"""Wildcard id; also what ``string_to_id`` returns for unknown terms."""


@dataclass(frozen=True, slots=True)
class TripleId:
    """An immutable ``(subject, predicate, object)`` triple of ids.

    Parameters
    ----------
    subject : int
        Subject id (subject role).
    predicate : int
        Predicate id (predicate namespace).
    object : int
        Object id (object role).
    """

    subject: int
    predicate: int
    object: int


class TripleRecord:
    """Mutable triple record handed out by store iterators.

    Stores may refill the same record on every ``next()``; consumers
    that keep a triple must copy it with :meth:`freeze` first.
    """

    __slots__ = ("subject", "predicate", "object")

    def __init__(self, subject: int = 0, predicate: int = 0, object: int = 0) -> None:
        self.subject = subject
        self.predicate = predicate
        self.object = object

    def freeze(self) -> TripleId:
        """Copy the current values into an immutable :class:`TripleId`."""
        return TripleId(self.subject, self.predicate, self.object)


class GraphStore(ABC):
    """Immutable, integer-indexed triple store.

    Implementations must be safe to share between threads for reading.
    Iterators returned by the ``search_*`` methods are not; each one is
    consumed by a single caller.
    """

    @abstractmethod
    def string_to_id(self, term: str, role: TripleRole) -> int:
        """Translate ``term`` to its id under ``role``; ``0`` if unknown."""

    @abstractmethod
    def id_to_string(self, term_id: int, role: TripleRole) -> str:
        """Translate ``term_id`` back to its surface string under ``role``.

        Raises
        ------
        KeyError
            If ``term_id`` is not a valid id for ``role``.
        """

    @abstractmethod
    def search_by_subject(self, subject_id: int) -> Iterator[TripleRecord]:
        """Iterate all triples whose subject is ``subject_id``.

        Raises
        ------
        StoreIterationError
            If the underlying index fails while iterating.
        """

    @abstractmethod
    def search_by_object(self, object_id: int) -> Iterator[TripleRecord]:
        """Iterate all triples whose object is ``object_id``.

        Raises
        ------
        StoreIterationError
            If the underlying index fails while iterating.
        """

    @property
    @abstractmethod
    def n_shared(self) -> int:
        """Number of terms occurring as both subject and object."""

    @property
    @abstractmethod
    def n_subjects(self) -> int:
        """Number of subject terms, shared ones included."""

    @property
    @abstractmethod
    def n_objects(self) -> int:
        """Number of object terms, shared ones included."""

    @property
    @abstractmethod
    def n_predicates(self) -> int:
        """Number of predicate terms."""

    @property
    def id_space(self) -> IdSpace:
        """Role partition derived from the dictionary counts.

        Raises
        ------
        IdSpaceError
            If the counts are inconsistent.
        """
        return IdSpace(
            n_shared=self.n_shared,
            n_subjects=self.n_subjects,
            n_objects=self.n_objects,
        )
