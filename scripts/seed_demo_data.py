"""
Seed demo data into the local store.

Creates the tables if needed, then loads 25 jobs, 1,000 candidates, their
applications and three assessments. Skips when jobs already exist unless
--force is given.

Usage:
    python scripts/seed_demo_data.py [--force] [--seed 42]
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from talentflow.core.config import settings
from talentflow.db.seed import seed_database
from talentflow.db.session import build_engine, build_session_maker, init_db
from talentflow.repositories.collections import Collection
from talentflow.repositories.entity_store import EntityStore


async def seed_demo_data(force: bool = False, seed: int | None = None) -> None:
    engine = build_engine(settings)
    try:
        await init_db(engine, [collection.value for collection in Collection])
        store = EntityStore(build_session_maker(engine))
        seeded = await seed_database(store, seed=seed, force=force)
        if seeded:
            print("[OK] Demo data created")
            for collection in Collection:
                print(f"  {collection.value}: {await store.count(collection)}")
        else:
            print("[SKIP] Store already has jobs (use --force to seed anyway)")
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo data into the local store.")
    parser.add_argument("--force", action="store_true", help="seed even when jobs already exist")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible data")
    args = parser.parse_args()

    print(f"Seeding demo data into {settings.DATABASE_URL}...\n")
    asyncio.run(seed_demo_data(force=args.force, seed=args.seed))
    print("\n[OK] Done.")


if __name__ == "__main__":
    main()
