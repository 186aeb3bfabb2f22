"""Tests for InMemoryGraphStore and the rdflib loader."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from rdfwalks.enums import TripleRole
from rdfwalks.exceptions import StoreUnavailableError
from rdfwalks.store import (
    UNBOUND_ID,
    GraphStore,
    InMemoryGraphStore,
    TripleId,
    TripleRecord,
    load_graph_store,
)

from ._helpers import EXAMPLE_TRIPLES, LITERAL_E


def test_dictionary_counts(example_store: InMemoryGraphStore) -> None:
    assert example_store.n_shared == 3
    assert example_store.n_subjects == 4
    assert example_store.n_objects == 4
    assert example_store.n_predicates == 3
    assert len(example_store) == 5


@pytest.mark.parametrize(
    ("term", "role", "expected"),
    [
        ("B", TripleRole.SUBJECT, 1),
        ("B", TripleRole.OBJECT, 1),
        ("D", TripleRole.SUBJECT, 3),
        ("A", TripleRole.SUBJECT, 4),
        (LITERAL_E, TripleRole.OBJECT, 4),
        ("A", TripleRole.OBJECT, UNBOUND_ID),
        (LITERAL_E, TripleRole.SUBJECT, UNBOUND_ID),
        ("author", TripleRole.PREDICATE, 1),
        ("X", TripleRole.SUBJECT, UNBOUND_ID),
    ],
)
def test_string_to_id(
    example_store: InMemoryGraphStore,
    term: str,
    role: TripleRole,
    expected: int,
) -> None:
    assert example_store.string_to_id(term, role) == expected


def test_same_id_differs_by_role(example_store: InMemoryGraphStore) -> None:
    assert example_store.id_to_string(4, TripleRole.SUBJECT) == "A"
    assert example_store.id_to_string(4, TripleRole.OBJECT) == LITERAL_E


@pytest.mark.parametrize("term_id", [0, 5])
def test_id_to_string_out_of_range(
    example_store: InMemoryGraphStore,
    term_id: int,
) -> None:
    with pytest.raises(KeyError):
        example_store.id_to_string(term_id, TripleRole.SUBJECT)


def _decode(store: InMemoryGraphStore, records) -> list[tuple[str, str, str]]:
    return [
        (
            store.id_to_string(r.subject, TripleRole.SUBJECT),
            store.id_to_string(r.predicate, TripleRole.PREDICATE),
            store.id_to_string(r.object, TripleRole.OBJECT),
        )
        for r in records
    ]


def test_search_by_subject(example_store: InMemoryGraphStore) -> None:
    a_id = example_store.string_to_id("A", TripleRole.SUBJECT)
    assert _decode(example_store, example_store.search_by_subject(a_id)) == [
        ("A", "knows", "B"),
        ("A", "knows", "C"),
    ]


def test_search_by_object(example_store: InMemoryGraphStore) -> None:
    d_id = example_store.string_to_id("D", TripleRole.OBJECT)
    assert _decode(example_store, example_store.search_by_object(d_id)) == [
        ("B", "likes", "D"),
        ("C", "likes", "D"),
    ]


@pytest.mark.parametrize("key", [0, 5, 100])
def test_search_outside_section_is_empty(
    example_store: InMemoryGraphStore,
    key: int,
) -> None:
    assert list(example_store.search_by_subject(key)) == []
    assert list(example_store.search_by_object(key)) == []


def test_search_reuses_one_record(example_store: InMemoryGraphStore) -> None:
    a_id = example_store.string_to_id("A", TripleRole.SUBJECT)
    records = list(example_store.search_by_subject(a_id))
    assert len(records) == 2
    assert records[0] is records[1]


def test_duplicate_triples_collapse() -> None:
    store = InMemoryGraphStore.from_triples(EXAMPLE_TRIPLES + EXAMPLE_TRIPLES[:2])
    assert len(store) == len(EXAMPLE_TRIPLES)


def test_empty_store() -> None:
    store = InMemoryGraphStore.from_triples([])
    assert len(store) == 0
    assert store.n_subjects == 0
    assert list(store.search_by_subject(1)) == []


def test_id_space_from_store(example_store: InMemoryGraphStore) -> None:
    space = example_store.id_space
    assert space.is_subject_only(example_store.string_to_id("A", TripleRole.SUBJECT))
    assert space.is_object_only(example_store.string_to_id(LITERAL_E, TripleRole.OBJECT))


NT_CONTENT = """\
<http://ex.org/A> <http://ex.org/knows> <http://ex.org/B> .
<http://ex.org/B> <http://ex.org/name> "Bob" .
<http://ex.org/B> <http://ex.org/label> "Bob"@en .
_:x <http://ex.org/knows> <http://ex.org/A> .
"""


def test_load_graph_store_ntriples(tmp_path: Path) -> None:
    path = tmp_path / "graph.nt"
    path.write_text(NT_CONTENT, encoding="utf-8")

    store = load_graph_store(path, format="nt")

    assert len(store) == 4
    assert store.string_to_id("http://ex.org/A", TripleRole.SUBJECT) != UNBOUND_ID
    assert store.string_to_id('"Bob"', TripleRole.OBJECT) != UNBOUND_ID
    assert store.string_to_id('"Bob"@en', TripleRole.OBJECT) != UNBOUND_ID
    assert store.n_shared == 2


def test_load_graph_store_guesses_format(tmp_path: Path) -> None:
    path = tmp_path / "graph.ttl"
    path.write_text(
        "@prefix ex: <http://ex.org/> .\nex:A ex:knows ex:B .\n", encoding="utf-8"
    )
    store = load_graph_store(path)
    assert store.string_to_id("http://ex.org/B", TripleRole.OBJECT) == 1


def test_load_graph_store_missing_file(tmp_path: Path) -> None:
    with pytest.raises(StoreUnavailableError, match="not found"):
        load_graph_store(tmp_path / "missing.nt")


def test_load_graph_store_unparsable(tmp_path: Path) -> None:
    path = tmp_path / "broken.nt"
    path.write_text("this is not rdf <<<\n", encoding="utf-8")
    with pytest.raises(StoreUnavailableError) as excinfo:
        load_graph_store(path, format="nt")
    assert excinfo.value.__cause__ is not None


def test_store_unavailable_is_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_graph_store(tmp_path / "missing.nt")


def test_freeze_detaches_from_record() -> None:
    record = TripleRecord(1, 2, 3)
    frozen = record.freeze()
    record.object = 9
    assert frozen == TripleId(1, 2, 3)


class _StoreWithoutPredicateCount(GraphStore):
    def string_to_id(self, term: str, role: TripleRole) -> int:
        return UNBOUND_ID

    def id_to_string(self, term_id: int, role: TripleRole) -> str:
        raise KeyError(term_id)

    def search_by_subject(self, subject_id: int) -> Iterator[TripleRecord]:
        return iter(())

    def search_by_object(self, object_id: int) -> Iterator[TripleRecord]:
        return iter(())

    n_shared = n_subjects = n_objects = 0


def test_graph_store_requires_predicate_count() -> None:
    with pytest.raises(TypeError, match="n_predicates"):
        _StoreWithoutPredicateCount()  # type: ignore[abstract]
