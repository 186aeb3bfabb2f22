"""Load an RDF file into an :class:`InMemoryGraphStore` via rdflib."""

from collections.abc import Iterator
from pathlib import Path

from rdflib import Graph, URIRef
from rdflib.term import Node

from .._logging import get_logger
from ..exceptions import StoreUnavailableError
from .memory import InMemoryGraphStore, StringTriple

logger = get_logger(__name__)


def term_to_string(term: Node) -> str:
    """Render an rdflib term the way a compressed RDF dictionary stores it.

    IRIs become their plain string; literals and blank nodes keep their
    N3 form, so literals start with a double quote.
    """
    if isinstance(term, URIRef):
        return str(term)
    return term.n3()


def _iter_string_triples(graph: Graph) -> Iterator[StringTriple]:
    for s, p, o in graph:
        yield term_to_string(s), term_to_string(p), term_to_string(o)


def load_graph_store(path: str | Path, format: str | None = None) -> InMemoryGraphStore:
    """Parse an RDF file and index it.

    Parameters
    ----------
    path : str | Path
        RDF file to read.
    format : str | None
        rdflib parser name (``"nt"``, ``"turtle"``, ``"xml"``, ...).
        Guessed from the file extension when ``None``.

    Returns
    -------
    InMemoryGraphStore
        The loaded store.

    Raises
    ------
    StoreUnavailableError
        If the file does not exist or cannot be parsed.
    """
    path = Path(path)
    if not path.is_file():
        logger.error("Failed to load triple store: %s does not exist", path)
        raise StoreUnavailableError(f"Triple store file not found: {path}")

    graph = Graph()
    try:
        graph.parse(source=str(path), format=format)
    except Exception as exc:
        logger.error("Failed to load triple store from %s: %s", path, exc)
        raise StoreUnavailableError(f"Could not parse triple store {path}") from exc

    logger.info("Parsed %d triples from %s", len(graph), path)
    return InMemoryGraphStore.from_triples(_iter_string_triples(graph))
