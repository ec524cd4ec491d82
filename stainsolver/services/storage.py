"""Catalog storage — stains, materials, and raw guides.

Two backends share the GuideStore interface:
  - SqlGuideStore: PostgreSQL via SQLAlchemy async sessions
  - MemoryGuideStore: dict-backed, used when the database is unavailable and in tests

Rows are converted to pydantic records at this boundary, so JSON columns
with the wrong shape fail here rather than inside content generation.
"""

import itertools
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from stainsolver.catalog.schemas import (
    GuideCreate,
    GuideSummary,
    Material,
    MaterialCreate,
    RawGuide,
    Stain,
    StainCreate,
)
from stainsolver.errors import AlreadyExistsError, DuplicateGuideError, NotFoundError
from stainsolver.models import GuideRecord, MaterialRecord, StainRecord

logger = logging.getLogger(__name__)

RELATED_GUIDES_LIMIT = 4


class GuideStore(ABC):
    """Read/write access to the catalog."""

    # ── Stains ──

    @abstractmethod
    async def get_stain(self, stain_id: int) -> Stain | None: ...

    @abstractmethod
    async def get_stain_by_name(self, name: str) -> Stain | None: ...

    @abstractmethod
    async def list_stains(self) -> list[Stain]: ...

    @abstractmethod
    async def create_stain(self, data: StainCreate) -> Stain: ...

    # ── Materials ──

    @abstractmethod
    async def get_material(self, material_id: int) -> Material | None: ...

    @abstractmethod
    async def get_material_by_name(self, name: str) -> Material | None: ...

    @abstractmethod
    async def list_materials(self) -> list[Material]: ...

    @abstractmethod
    async def create_material(self, data: MaterialCreate) -> Material: ...

    # ── Guides ──

    @abstractmethod
    async def get_guide(self, guide_id: int) -> RawGuide | None: ...

    @abstractmethod
    async def get_guide_for_pair(self, stain_id: int, material_id: int) -> RawGuide | None: ...

    @abstractmethod
    async def list_guide_ids(self) -> list[int]: ...

    @abstractmethod
    async def list_guide_summaries(self) -> list[GuideSummary]: ...

    @abstractmethod
    async def related_guides(
        self, stain_id: int, material_id: int, exclude_id: int | None = None,
        limit: int = RELATED_GUIDES_LIMIT,
    ) -> list[GuideSummary]:
        """Guides sharing the stain or the material, excluding `exclude_id`."""

    @abstractmethod
    async def create_guide(self, data: GuideCreate) -> RawGuide:
        """Insert a guide. Raises NotFoundError for unknown ids, DuplicateGuideError for a taken pair."""


# ═══════════════ IN-MEMORY ═══════════════

class MemoryGuideStore(GuideStore):
    """Dict-backed catalog with auto-incrementing ids."""

    def __init__(self):
        self._stains: dict[int, Stain] = {}
        self._materials: dict[int, Material] = {}
        self._guides: dict[int, RawGuide] = {}
        self._stain_ids = itertools.count(1)
        self._material_ids = itertools.count(1)
        self._guide_ids = itertools.count(1)

    async def get_stain(self, stain_id: int) -> Stain | None:
        return self._stains.get(stain_id)

    async def get_stain_by_name(self, name: str) -> Stain | None:
        return next((s for s in self._stains.values() if s.name == name), None)

    async def list_stains(self) -> list[Stain]:
        return sorted(self._stains.values(), key=lambda s: s.display_name)

    async def create_stain(self, data: StainCreate) -> Stain:
        if await self.get_stain_by_name(data.name):
            raise AlreadyExistsError("stain", data.name)
        stain = Stain(id=next(self._stain_ids), **data.model_dump())
        self._stains[stain.id] = stain
        return stain

    async def get_material(self, material_id: int) -> Material | None:
        return self._materials.get(material_id)

    async def get_material_by_name(self, name: str) -> Material | None:
        return next((m for m in self._materials.values() if m.name == name), None)

    async def list_materials(self) -> list[Material]:
        return sorted(self._materials.values(), key=lambda m: m.display_name)

    async def create_material(self, data: MaterialCreate) -> Material:
        if await self.get_material_by_name(data.name):
            raise AlreadyExistsError("material", data.name)
        material = Material(id=next(self._material_ids), **data.model_dump())
        self._materials[material.id] = material
        return material

    async def get_guide(self, guide_id: int) -> RawGuide | None:
        return self._guides.get(guide_id)

    async def get_guide_for_pair(self, stain_id: int, material_id: int) -> RawGuide | None:
        return next(
            (g for g in self._guides.values() if g.stain_id == stain_id and g.material_id == material_id),
            None,
        )

    async def list_guide_ids(self) -> list[int]:
        return sorted(self._guides)

    async def list_guide_summaries(self) -> list[GuideSummary]:
        return [self._summarize(g) for g in self._guides.values()]

    async def related_guides(
        self, stain_id: int, material_id: int, exclude_id: int | None = None,
        limit: int = RELATED_GUIDES_LIMIT,
    ) -> list[GuideSummary]:
        related = [
            g for g in self._guides.values()
            if (g.stain_id == stain_id or g.material_id == material_id) and g.id != exclude_id
        ]
        return [self._summarize(g) for g in related[:limit]]

    async def create_guide(self, data: GuideCreate) -> RawGuide:
        if data.stain_id not in self._stains:
            raise NotFoundError("stain", data.stain_id)
        if data.material_id not in self._materials:
            raise NotFoundError("material", data.material_id)
        if await self.get_guide_for_pair(data.stain_id, data.material_id):
            raise DuplicateGuideError(data.stain_id, data.material_id)

        guide = RawGuide(
            id=next(self._guide_ids),
            last_updated=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self._guides[guide.id] = guide
        return guide

    def _summarize(self, guide: RawGuide) -> GuideSummary:
        stain = self._stains[guide.stain_id]
        material = self._materials[guide.material_id]
        return GuideSummary(
            id=guide.id,
            stain_id=stain.id,
            material_id=material.id,
            stain_name=stain.name,
            stain_display_name=stain.display_name,
            material_name=material.name,
            material_display_name=material.display_name,
            effectiveness=guide.effectiveness,
            last_updated=guide.last_updated,
        )


# ═══════════════ POSTGRESQL ═══════════════

class SqlGuideStore(GuideStore):
    """Catalog backed by the stains / materials / stain_removal_guides tables."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def get_stain(self, stain_id: int) -> Stain | None:
        async with self._sessions() as session:
            record = await session.get(StainRecord, stain_id)
            return Stain.model_validate(record) if record else None

    async def get_stain_by_name(self, name: str) -> Stain | None:
        async with self._sessions() as session:
            record = await session.scalar(select(StainRecord).where(StainRecord.name == name))
            return Stain.model_validate(record) if record else None

    async def list_stains(self) -> list[Stain]:
        async with self._sessions() as session:
            records = await session.scalars(select(StainRecord).order_by(StainRecord.display_name))
            return [Stain.model_validate(r) for r in records]

    async def create_stain(self, data: StainCreate) -> Stain:
        if await self.get_stain_by_name(data.name):
            raise AlreadyExistsError("stain", data.name)
        record = StainRecord(**data.model_dump())
        await self._insert(record, AlreadyExistsError("stain", data.name))
        logger.info("Stain created | id=%d | name=%s", record.id, record.name)
        return Stain.model_validate(record)

    async def get_material(self, material_id: int) -> Material | None:
        async with self._sessions() as session:
            record = await session.get(MaterialRecord, material_id)
            return Material.model_validate(record) if record else None

    async def get_material_by_name(self, name: str) -> Material | None:
        async with self._sessions() as session:
            record = await session.scalar(select(MaterialRecord).where(MaterialRecord.name == name))
            return Material.model_validate(record) if record else None

    async def list_materials(self) -> list[Material]:
        async with self._sessions() as session:
            records = await session.scalars(select(MaterialRecord).order_by(MaterialRecord.display_name))
            return [Material.model_validate(r) for r in records]

    async def create_material(self, data: MaterialCreate) -> Material:
        if await self.get_material_by_name(data.name):
            raise AlreadyExistsError("material", data.name)
        record = MaterialRecord(**data.model_dump())
        await self._insert(record, AlreadyExistsError("material", data.name))
        logger.info("Material created | id=%d | name=%s", record.id, record.name)
        return Material.model_validate(record)

    async def get_guide(self, guide_id: int) -> RawGuide | None:
        async with self._sessions() as session:
            record = await session.get(GuideRecord, guide_id)
            return RawGuide.model_validate(record) if record else None

    async def get_guide_for_pair(self, stain_id: int, material_id: int) -> RawGuide | None:
        async with self._sessions() as session:
            record = await session.scalar(
                select(GuideRecord).where(
                    GuideRecord.stain_id == stain_id,
                    GuideRecord.material_id == material_id,
                )
            )
            return RawGuide.model_validate(record) if record else None

    async def list_guide_ids(self) -> list[int]:
        async with self._sessions() as session:
            return list(await session.scalars(select(GuideRecord.id).order_by(GuideRecord.id)))

    async def list_guide_summaries(self) -> list[GuideSummary]:
        return await self._summaries(self._summary_query())

    async def related_guides(
        self, stain_id: int, material_id: int, exclude_id: int | None = None,
        limit: int = RELATED_GUIDES_LIMIT,
    ) -> list[GuideSummary]:
        query = self._summary_query().where(
            or_(GuideRecord.stain_id == stain_id, GuideRecord.material_id == material_id)
        )
        if exclude_id is not None:
            query = query.where(GuideRecord.id != exclude_id)
        return await self._summaries(query.limit(limit))

    async def create_guide(self, data: GuideCreate) -> RawGuide:
        if await self.get_stain(data.stain_id) is None:
            raise NotFoundError("stain", data.stain_id)
        if await self.get_material(data.material_id) is None:
            raise NotFoundError("material", data.material_id)
        if await self.get_guide_for_pair(data.stain_id, data.material_id):
            raise DuplicateGuideError(data.stain_id, data.material_id)

        record = GuideRecord(**data.model_dump())
        await self._insert(record, DuplicateGuideError(data.stain_id, data.material_id))
        logger.info(
            "Guide created | id=%d | stain_id=%d | material_id=%d",
            record.id, record.stain_id, record.material_id,
        )
        return RawGuide.model_validate(record)

    async def _insert(self, record, on_conflict: Exception):
        """Add and commit one row; a unique-constraint race surfaces as `on_conflict`."""
        async with self._sessions() as session:
            session.add(record)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise on_conflict from e
            await session.refresh(record)

    @staticmethod
    def _summary_query():
        return (
            select(
                GuideRecord.id,
                GuideRecord.stain_id,
                GuideRecord.material_id,
                StainRecord.name.label("stain_name"),
                StainRecord.display_name.label("stain_display_name"),
                MaterialRecord.name.label("material_name"),
                MaterialRecord.display_name.label("material_display_name"),
                GuideRecord.effectiveness,
                GuideRecord.last_updated,
            )
            .join(StainRecord, StainRecord.id == GuideRecord.stain_id)
            .join(MaterialRecord, MaterialRecord.id == GuideRecord.material_id)
            .order_by(GuideRecord.id)
        )

    async def _summaries(self, query) -> list[GuideSummary]:
        async with self._sessions() as session:
            rows = (await session.execute(query)).mappings()
            return [GuideSummary.model_validate(dict(row)) for row in rows]
