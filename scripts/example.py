"""End-to-end walk generation on a small in-line RDF graph.

Wires together the engine components -- load_graph_store, WalkGenerator,
generate_walks_for_entities, serialize_store -- to verify the pipeline
works: write a Turtle file, load it, enumerate entities, generate walks in
every mode, and print a few of them.

This is a standalone demo script -- not production code. It intentionally
skips strict typing for brevity.
"""
import tempfile
import time
from pathlib import Path

from rdfwalks import (
    WalkConfig,
    WalkGenerationMode,
    build_walk_generator,
    generate_walks_for_entities,
    load_graph_store,
    serialize_store,
)

# ---------------------------------------------------------------------------
# Pipeline parameters
# ---------------------------------------------------------------------------
NUMBER_OF_WALKS = 20
DEPTH = 3
NUM_WORKERS = 4
WALKS_SHOWN = 3
SEED = 42

TURTLE = """\
@prefix ex: <http://example.org/> .

ex:alice ex:knows ex:bob, ex:carol ;
         ex:worksAt ex:acme .
ex:bob   ex:knows ex:carol ;
         ex:worksAt ex:acme .
ex:carol ex:knows ex:alice ;
         ex:livesIn ex:berlin .
ex:acme  ex:locatedIn ex:berlin ;
         ex:name "ACME Corp"@en .
ex:berlin ex:name "Berlin"@de .
"""


def main() -> None:
    print("=" * 60)
    print("rdfwalks End-to-End Pipeline - In-line Turtle Graph")
    print("=" * 60)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        source = Path(tmp) / "graph.ttl"
        source.write_text(TURTLE, encoding="utf-8")

        # --------------------------------------------------------------
        # 1. Load the store
        # --------------------------------------------------------------
        t0 = time.perf_counter()
        store = load_graph_store(source)
        elapsed = time.perf_counter() - t0
        print(f"[1/3] Loaded {len(store)} triples ({elapsed:.2f}s)")
        print(f"  Shared ids:    {store.n_shared}")
        print(f"  Subject ids:   {store.n_subjects}")
        print(f"  Object ids:    {store.n_objects}")
        print(f"  Predicate ids: {store.n_predicates}")
        print()

        # --------------------------------------------------------------
        # 2. Generate walks in every mode
        # --------------------------------------------------------------
        print("[2/3] Generating walks")
        for mode in WalkGenerationMode:
            config = WalkConfig(
                number_of_walks=NUMBER_OF_WALKS,
                depth=DEPTH,
                mode=mode,
                num_workers=NUM_WORKERS,
                seed=SEED,
            )
            generator = build_walk_generator(store, config)

            t0 = time.perf_counter()
            walks = generate_walks_for_entities(generator, None, config)
            elapsed = time.perf_counter() - t0
            total = sum(len(w) for w in walks.values())
            print(f"  {mode.value:<28} {total:>5} walks ({elapsed:.2f}s)")
            for walk in walks["http://example.org/alice"][:WALKS_SHOWN]:
                print(f"      {walk}")
        print()

        # --------------------------------------------------------------
        # 3. Serialize the store back out
        # --------------------------------------------------------------
        target = Path(tmp) / "graph.nt"
        count = serialize_store(store, target)
        print(f"[3/3] Serialized {count} triples")
        print("-" * 60)
        print(target.read_text(encoding="utf-8"), end="")
        print("-" * 60)


if __name__ == "__main__":
    main()
