"""Write triples as N-Triples-like lines."""

from collections.abc import Iterable, Iterator
from pathlib import Path

from ._logging import get_logger
from .enums import TripleRole
from .store.base import GraphStore

logger = get_logger(__name__)

LITERAL_PREFIX: str = '"'


def format_triple(subject: str, predicate: str, object_: str) -> str:
    """Render one triple as ``<s> <p> <o> .`` plus a newline.

    Objects starting with a double quote are literals and are written
    verbatim instead of angle-bracketed. No further escaping happens.
    """
    if not object_.startswith(LITERAL_PREFIX):
        object_ = f"<{object_}>"
    return f"<{subject}> <{predicate}> {object_} .\n"


def iter_store_triples(store: GraphStore) -> Iterator[tuple[str, str, str]]:
    """Yield every triple of ``store`` as surface strings, by subject id."""
    for subject_id in range(1, store.n_subjects + 1):
        subject = store.id_to_string(subject_id, TripleRole.SUBJECT)
        for record in store.search_by_subject(subject_id):
            yield (
                subject,
                store.id_to_string(record.predicate, TripleRole.PREDICATE),
                store.id_to_string(record.object, TripleRole.OBJECT),
            )


def write_triples(triples: Iterable[tuple[str, str, str]], path: str | Path) -> int:
    """Write ``triples`` to ``path`` in UTF-8, one line each.

    Returns
    -------
    int
        Number of lines written.

    Raises
    ------
    OSError
        If the file cannot be written.
    """
    path = Path(path)
    count = 0
    try:
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            for subject, predicate, object_ in triples:
                handle.write(format_triple(subject, predicate, object_))
                count += 1
    except OSError:
        logger.error("Could not write triples to %s", path)
        raise
    logger.debug("Wrote %d triples to %s", count, path)
    return count


def serialize_store(store: GraphStore, path: str | Path) -> int:
    """Write every triple of ``store`` to ``path``. See :func:`write_triples`."""
    return write_triples(iter_store_triples(store), path)
