#!/usr/bin/env python3
"""Seed PostgreSQL with the built-in stain removal catalog.

Usage:
  1. Set DATABASE_URL in .env (defaults to a local postgres)
  2. Run: python scripts/seed_db.py

Steps:
  Step 1: Create tables
  Step 2: Seed stains, materials, and guides (existing rows are left untouched)
"""

import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def step_header(n: int, title: str) -> None:
    print(f"\n{'='*60}")
    print(f"  Step {n}: {title}")
    print(f"{'='*60}\n")


def ok(msg: str) -> None:
    print(f"  ✅ {msg}")


def fail(msg: str) -> None:
    print(f"  ❌ {msg}")


def info(msg: str) -> None:
    print(f"  ℹ️  {msg}")


async def step1_create_tables():
    step_header(1, "Create Tables")
    from stainsolver.database import init_db

    if await init_db():
        ok("Tables ready: stains, materials, stain_removal_guides")
        return True
    fail("Database unavailable — check DATABASE_URL")
    return False


async def step2_seed():
    step_header(2, "Seed Catalog")
    from stainsolver.catalog.seeding import seed_catalog
    from stainsolver.database import async_session_factory
    from stainsolver.services.storage import SqlGuideStore

    report = await seed_catalog(SqlGuideStore(async_session_factory))

    ok(f"Stains: {report.stains_created} created, {report.stains_existing} already present")
    ok(f"Materials: {report.materials_created} created, {report.materials_existing} already present")
    ok(f"Guides: {report.guides_created} created, {report.guides_existing} already present")
    for skipped in report.skipped:
        info(f"Skipped {skipped.stain_name} on {skipped.material_name}: {skipped.reason}")
    return True


async def main():
    print("\n🧺 StainSolver — Database Seeding")
    print("=" * 60)

    from stainsolver.database import close_db

    try:
        if not await step1_create_tables():
            sys.exit(1)
        await step2_seed()
    finally:
        await close_db()

    print(f"\n{'='*60}")
    print("  Seeding complete")
    print(f"{'='*60}\n")


if __name__ == "__main__":
    asyncio.run(main())
