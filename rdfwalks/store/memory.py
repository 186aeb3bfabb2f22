"""In-memory triple store with an HDT-style dictionary and CSR indices."""

from collections.abc import Iterable, Iterator, Sequence
from typing import Self

import torch
from torch import Tensor
from torch_geometric.utils import degree

from .._logging import get_logger
from ..enums import TripleRole
from .base import UNBOUND_ID, GraphStore, TripleRecord

logger = get_logger(__name__)

StringTriple = tuple[str, str, str]
"""``(subject, predicate, object)`` surface strings."""


def _row_pointers(keys: Tensor, num_rows: int) -> Tensor:
    """Build CSR row offsets for ``keys`` sorted ascending.

    Row ``k`` spans ``ptr[k]:ptr[k + 1]``. Row 0 is the unbound id and
    stays empty.
    """
    counts = degree(keys, num_nodes=num_rows + 1, dtype=torch.long)
    return torch.cat([torch.zeros(1, dtype=torch.long), torch.cumsum(counts, dim=0)])


class InMemoryGraphStore(GraphStore):
    """Immutable triple store kept entirely in memory.

    Terms are numbered the way HDT dictionaries number them: terms that
    occur as both subject and object form the shared section and get ids
    ``1..n_shared`` under both roles; subject-only terms continue the
    subject numbering, object-only terms continue the object numbering.
    Each section is sorted lexicographically. Predicates are numbered in
    a separate namespace.

    Triples are held twice, sorted by subject and by object, with CSR
    row offsets so that a fixed-subject or fixed-object search is a
    single slice.

    Parameters
    ----------
    shared : Sequence[str]
        Sorted terms of the shared section.
    subject_only : Sequence[str]
        Sorted subject-only terms.
    object_only : Sequence[str]
        Sorted object-only terms.
    predicates : Sequence[str]
        Sorted predicate terms.
    triples : Tensor
        ``[num_triples, 3]`` long tensor of ``(s, p, o)`` ids, unique.
    """

    def __init__(
        self,
        shared: Sequence[str],
        subject_only: Sequence[str],
        object_only: Sequence[str],
        predicates: Sequence[str],
        triples: Tensor,
    ) -> None:
        self._subject_terms: list[str] = [*shared, *subject_only]
        self._object_terms: list[str] = [*shared, *object_only]
        self._predicate_terms: list[str] = list(predicates)
        self._n_shared = len(shared)

        self._ids: dict[TripleRole, dict[str, int]] = {
            TripleRole.SUBJECT: {t: i for i, t in enumerate(self._subject_terms, 1)},
            TripleRole.PREDICATE: {
                t: i for i, t in enumerate(self._predicate_terms, 1)
            },
            TripleRole.OBJECT: {t: i for i, t in enumerate(self._object_terms, 1)},
        }
        self._terms: dict[TripleRole, list[str]] = {
            TripleRole.SUBJECT: self._subject_terms,
            TripleRole.PREDICATE: self._predicate_terms,
            TripleRole.OBJECT: self._object_terms,
        }

        triples = triples.reshape(-1, 3).to(torch.long)
        self._num_triples = int(triples.size(0))

        spo_order = self._lex_order(triples, (0, 1, 2))
        self._by_subject = triples[spo_order]
        self._subject_ptr = _row_pointers(
            self._by_subject[:, 0], len(self._subject_terms)
        )

        osp_order = self._lex_order(triples, (2, 0, 1))
        self._by_object = triples[osp_order]
        self._object_ptr = _row_pointers(
            self._by_object[:, 2], len(self._object_terms)
        )

        logger.debug(
            "Built InMemoryGraphStore: %d triples, %d shared, %d subjects, "
            "%d objects, %d predicates",
            self._num_triples,
            self._n_shared,
            len(self._subject_terms),
            len(self._object_terms),
            len(self._predicate_terms),
        )

    @classmethod
    def from_triples(cls, triples: Iterable[StringTriple]) -> Self:
        """Build a store from surface-string triples.

        Duplicate triples are collapsed.

        Parameters
        ----------
        triples : Iterable[StringTriple]
            ``(subject, predicate, object)`` strings.

        Returns
        -------
        InMemoryGraphStore
            The indexed store.
        """
        unique = set(triples)
        subjects = {s for s, _, _ in unique}
        objects = {o for _, _, o in unique}

        shared = sorted(subjects & objects)
        subject_only = sorted(subjects - objects)
        object_only = sorted(objects - subjects)
        predicates = sorted({p for _, p, _ in unique})

        subject_ids = {t: i for i, t in enumerate([*shared, *subject_only], 1)}
        object_ids = {t: i for i, t in enumerate([*shared, *object_only], 1)}
        predicate_ids = {t: i for i, t in enumerate(predicates, 1)}

        encoded = torch.tensor(
            [[subject_ids[s], predicate_ids[p], object_ids[o]] for s, p, o in unique],
            dtype=torch.long,
        )
        return cls(shared, subject_only, object_only, predicates, encoded)

    def string_to_id(self, term: str, role: TripleRole) -> int:
        return self._ids[role].get(term, UNBOUND_ID)

    def id_to_string(self, term_id: int, role: TripleRole) -> str:
        terms = self._terms[role]
        if not 1 <= term_id <= len(terms):
            raise KeyError(f"No {role.name.lower()} with id {term_id}")
        return terms[term_id - 1]

    def search_by_subject(self, subject_id: int) -> Iterator[TripleRecord]:
        return self._scan(self._by_subject, self._subject_ptr, subject_id)

    def search_by_object(self, object_id: int) -> Iterator[TripleRecord]:
        return self._scan(self._by_object, self._object_ptr, object_id)

    @property
    def n_shared(self) -> int:
        return self._n_shared

    @property
    def n_subjects(self) -> int:
        return len(self._subject_terms)

    @property
    def n_objects(self) -> int:
        return len(self._object_terms)

    @property
    def n_predicates(self) -> int:
        return len(self._predicate_terms)

    def __len__(self) -> int:
        return self._num_triples

    @staticmethod
    def _lex_order(triples: Tensor, columns: tuple[int, int, int]) -> Tensor:
        """Return the permutation sorting rows by ``columns`` lexicographically."""
        order = torch.arange(triples.size(0))
        # Stable sorts from the least significant column up.
        for col in reversed(columns):
            keys = triples[order, col]
            order = order[torch.sort(keys, stable=True).indices]
        return order

    @staticmethod
    def _scan(rows: Tensor, ptr: Tensor, key: int) -> Iterator[TripleRecord]:
        """Yield the rows of CSR row ``key`` through one reused record."""
        if not 1 <= key < ptr.numel() - 1:
            return
        start = int(ptr[key].item())
        end = int(ptr[key + 1].item())
        record = TripleRecord()
        for s, p, o in rows[start:end].tolist():
            record.subject = s
            record.predicate = p
            record.object = o
            yield record
