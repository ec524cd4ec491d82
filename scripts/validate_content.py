#!/usr/bin/env python3
"""Content validation pass — fails the build when any guide is below standard.

Every guide must have:
  - 3 to 6 generated steps
  - at least 1 warning
  - at least 3 products
  - a known effectiveness tier
  - valid HowTo and FAQPage JSON-LD

Usage:
  python scripts/validate_content.py              # validate the database
  python scripts/validate_content.py --seed-data  # validate the built-in catalog

Writes content-validation-report.json when any guide fails and exits 1.
"""

import argparse
import asyncio
import json
import os
import sys
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

REPORT_PATH = "content-validation-report.json"


def ok(msg: str) -> None:
    print(f"  ✅ {msg}")


def fail(msg: str) -> None:
    print(f"  ❌ {msg}")


def info(msg: str) -> None:
    print(f"  ℹ️  {msg}")


async def load_store(use_seed_data: bool):
    from stainsolver.services.storage import MemoryGuideStore, SqlGuideStore

    if use_seed_data:
        from stainsolver.catalog.seeding import seed_catalog

        store = MemoryGuideStore()
        await seed_catalog(store)
        info("Validating built-in catalog")
        return store

    from stainsolver.database import async_session_factory

    info("Validating database catalog")
    return SqlGuideStore(async_session_factory)


async def main(use_seed_data: bool) -> int:
    from stainsolver.catalog.validation import validate_catalog

    print("\n🧺 StainSolver — Content Validation")
    print("=" * 60)

    start = time.monotonic()
    store = await load_store(use_seed_data)
    try:
        report = await validate_catalog(store)
    finally:
        if not use_seed_data:
            from stainsolver.database import close_db
            await close_db()
    duration = time.monotonic() - start

    print(f"\n  Validation completed in {duration:.2f}s")
    print(f"  - Total guides: {report.summary.total}")
    print(f"  - Valid guides: {report.summary.valid}")
    print(f"  - Invalid guides: {report.summary.invalid}")

    if report.valid:
        ok("All guides passed validation")
        return 0

    print("\n  Errors found:")
    for guide in report.errors:
        print(f"\n  ► Guide: {guide.stain_name} on {guide.material_name} (ID: {guide.guide_id})")
        for error in guide.errors:
            fail(error)

    with open(REPORT_PATH, "w", encoding="utf-8") as f:
        json.dump(report.model_dump(mode="json"), f, indent=2)
    info(f"Detailed report saved to {REPORT_PATH}")
    return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed-data", action="store_true", help="validate the built-in catalog instead of the database")
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.seed_data)))
