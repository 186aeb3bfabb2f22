"""Generate walks for many entities on a thread pool."""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from tqdm import tqdm

from ._logging import get_logger
from .store.base import GraphStore
from .walk import ThreadLocalRandom, WalkConfig, WalkGenerator

logger = get_logger(__name__)


def build_walk_generator(store: GraphStore, config: WalkConfig) -> WalkGenerator:
    """Build a WalkGenerator whose random source follows ``config.seed``.

    Parameters
    ----------
    store : GraphStore
        The triple store.
    config : WalkConfig
        Walk configuration.

    Returns
    -------
    WalkGenerator
        A generator instance.
    """
    return WalkGenerator(store, ThreadLocalRandom(config.seed))


def generate_walks_for_entities(
    generator: WalkGenerator,
    entities: Iterable[str] | None,
    config: WalkConfig,
    *,
    show_progress: bool = False,
) -> dict[str, list[str]]:
    """Run ``config.mode`` for every entity, ``config.num_workers`` at a time.

    Parameters
    ----------
    generator : WalkGenerator
        Generator shared by all workers.
    entities : Iterable[str] | None
        Start entities. ``None`` means every entity of the store, in
        sorted order. Repeated entities are walked once.
    config : WalkConfig
        Walk mode, number of walks, depth and worker count.
    show_progress : bool
        Display a ``tqdm`` progress bar.

    Returns
    -------
    dict[str, list[str]]
        Walks per entity, in the order each entity first appears.
    """
    if entities is None:
        targets = sorted(generator.entities())
    else:
        targets = list(dict.fromkeys(entities))

    def walk(entity: str) -> list[str]:
        return generator.generate(
            entity, config.mode, config.number_of_walks, config.depth
        )

    with ThreadPoolExecutor(max_workers=config.num_workers) as pool:
        results = list(
            tqdm(
                pool.map(walk, targets),
                total=len(targets),
                desc="Generating walks",
                disable=not show_progress,
            )
        )

    walks = dict(zip(targets, results, strict=True))
    logger.info(
        "Finished. Total entities: %d | Total walks: %d",
        len(walks),
        sum(len(w) for w in walks.values()),
    )
    return walks
