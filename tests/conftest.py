"""Shared test fixtures and configuration."""

import os

import pytest

# No database or cache warming during tests
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PRELOAD_TOP_GUIDES", "false")

from stainsolver.catalog.schemas import Material, RawGuide, Stain  # noqa: E402
from stainsolver.catalog.seeding import seed_catalog  # noqa: E402
from stainsolver.catalog.service import GuideService  # noqa: E402
from stainsolver.content import GuideContentAssembler  # noqa: E402
from stainsolver.services.cache import RevalidatingCache  # noqa: E402
from stainsolver.services.storage import MemoryGuideStore  # noqa: E402


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def coffee():
    return Stain(id=1, name="coffee", display_name="Coffee", color="#6F4E37", category="beverage")


@pytest.fixture
def cotton():
    return Material(id=1, name="cotton", display_name="Cotton", type="natural")


@pytest.fixture
def coffee_on_cotton():
    """Minimal authored guide for coffee on cotton."""
    return RawGuide(
        id=1,
        stain_id=1,
        material_id=1,
        pre_treatment="Blot immediately.",
        wash_method="Apply soap. Rinse with cold water. Dry.",
        products=["dish soap", "cold water", "cloth"],
        warnings=["Never use hot water"],
        effectiveness="excellent",
    )


@pytest.fixture
def assembler():
    return GuideContentAssembler()


@pytest.fixture
async def memory_store():
    """In-memory store loaded with the built-in catalog."""
    store = MemoryGuideStore()
    await seed_catalog(store)
    return store


@pytest.fixture
def cache(clock):
    return RevalidatingCache(revalidate_seconds=300, maxsize=64, clock=clock)


@pytest.fixture
def service(memory_store, cache):
    return GuideService(memory_store, cache=cache, storage_timeout=1.0)
