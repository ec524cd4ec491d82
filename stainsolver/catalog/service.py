"""Guide service — the request-path coordinator.

Responsibilities:
  - Resolve stain/material slugs and the raw guide from storage
  - Assemble generated content and merge it into the response payload
  - Serve guide pages through the ISR cache (fresh / stale / miss)
  - Rank top guides and warm the cache with them on startup
  - Build the sitemap
Every storage call is bounded by a timeout. Driver errors and timeouts surface
as UpstreamError, and so do rows that fail schema validation.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, TypeVar

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from stainsolver.catalog.schemas import (
    GeneratedContent,
    GuideCreate,
    GuideDetail,
    GuideResponse,
    GuideSummary,
    Material,
    MaterialCreate,
    RawGuide,
    Stain,
    StainCreate,
)
from stainsolver.config import settings
from stainsolver.content import GuideContentAssembler
from stainsolver.errors import CatalogError, NotFoundError, UpstreamError
from stainsolver.services.cache import CacheLookup, RevalidatingCache
from stainsolver.services.storage import GuideStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATIC_PAGES = ["/", "/stains", "/materials", "/guides"]
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class GuideService:
    """Owns the store, the ISR cache, and the content assembler for one app instance."""

    def __init__(
        self,
        store: GuideStore,
        cache: RevalidatingCache | None = None,
        assembler: GuideContentAssembler | None = None,
        storage_timeout: float | None = None,
        priority_stains: list[str] | None = None,
        top_limit: int | None = None,
    ):
        self.store = store
        if cache is None:
            cache = RevalidatingCache(
                revalidate_seconds=settings.revalidate_seconds,
                maxsize=settings.cache_max_entries,
            )
        self.cache = cache
        self.assembler = assembler or GuideContentAssembler()
        self.storage_timeout = storage_timeout if storage_timeout is not None else settings.storage_timeout_seconds
        self.priority_stains = priority_stains if priority_stains is not None else settings.priority_stains
        self.top_limit = top_limit if top_limit is not None else settings.top_guides_limit

    # ═══════════════ GUIDE PAGES ═══════════════

    async def get_guide(self, stain_name: str, material_name: str) -> CacheLookup:
        """Guide page payload via the ISR cache. Raises NotFoundError / UpstreamError on a miss."""
        key = RevalidatingCache.make_key(stain_name, material_name)
        return await self.cache.get_or_load(key, lambda: self.build_guide(stain_name, material_name))

    async def build_guide(self, stain_name: str, material_name: str) -> dict[str, Any]:
        stain = await self._call(self.store.get_stain_by_name(stain_name))
        if stain is None:
            raise NotFoundError("stain", stain_name)
        material = await self._call(self.store.get_material_by_name(material_name))
        if material is None:
            raise NotFoundError("material", material_name)
        raw = await self._call(self.store.get_guide_for_pair(stain.id, material.id))
        if raw is None:
            raise NotFoundError("guide", f"{stain_name}/{material_name}")

        related = await self._call(self.store.related_guides(stain.id, material.id, exclude_id=raw.id))
        content = self.assembler.assemble(stain, material, raw)

        response = GuideResponse(
            stain=stain,
            material=material,
            guide=merge_guide(raw, content),
            related_guides=related,
        )
        return response.to_payload()

    # ═══════════════ TOP GUIDES ═══════════════

    async def top_guides(self) -> list[GuideSummary]:
        summaries = await self._call(self.store.list_guide_summaries())
        return rank_guides(summaries, self.priority_stains)[:self.top_limit]

    async def preload_top_guides(self) -> int:
        """Render the top guides into the cache. Returns how many were cached."""
        cached = 0
        for summary in await self.top_guides():
            try:
                payload = await self.build_guide(summary.stain_name, summary.material_name)
            except CatalogError as e:
                logger.warning(
                    "Pre-cache failed | guide=%s | %s", summary.id, str(e)[:200],
                )
                continue
            self.cache.set(RevalidatingCache.make_key(summary.stain_name, summary.material_name), payload)
            cached += 1
        logger.info("Pre-cached %d top guides for ISR", cached)
        return cached

    # ═══════════════ CATALOG ═══════════════

    async def list_stains(self) -> list[Stain]:
        return await self._call(self.store.list_stains())

    async def get_stain(self, name: str) -> Stain:
        stain = await self._call(self.store.get_stain_by_name(name))
        if stain is None:
            raise NotFoundError("stain", name)
        return stain

    async def create_stain(self, data: StainCreate) -> Stain:
        return await self._call(self.store.create_stain(data))

    async def list_materials(self) -> list[Material]:
        return await self._call(self.store.list_materials())

    async def get_material(self, name: str) -> Material:
        material = await self._call(self.store.get_material_by_name(name))
        if material is None:
            raise NotFoundError("material", name)
        return material

    async def create_material(self, data: MaterialCreate) -> Material:
        return await self._call(self.store.create_material(data))

    async def list_guides(self) -> list[GuideSummary]:
        return await self._call(self.store.list_guide_summaries())

    async def create_guide(self, data: GuideCreate) -> RawGuide:
        return await self._call(self.store.create_guide(data))

    async def sitemap(self) -> dict[str, Any]:
        stains = await self.list_stains()
        materials = await self.list_materials()
        guides = await self.list_guides()

        urls = list(STATIC_PAGES)
        urls += [f"/stains/{s.name}" for s in stains]
        urls += [f"/materials/{m.name}" for m in materials]
        urls += [g.path for g in guides]
        return {"total": len(urls), "urls": urls}

    async def _call(self, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.storage_timeout)
        except asyncio.TimeoutError as e:
            logger.error("Storage call timed out | timeout=%.1fs", self.storage_timeout)
            raise UpstreamError("Storage call timed out") from e
        except SQLAlchemyError as e:
            logger.error("Storage call failed | %s", str(e)[:200])
            raise UpstreamError("Storage call failed") from e
        except ValidationError as e:
            logger.error("Storage returned an unreadable row | %s", str(e)[:200])
            raise UpstreamError("Storage returned an unreadable row") from e


def merge_guide(raw: RawGuide, content: GeneratedContent) -> GuideDetail:
    return GuideDetail(
        id=raw.id,
        stain_id=raw.stain_id,
        material_id=raw.material_id,
        pre_treatment=raw.pre_treatment,
        wash_method=raw.wash_method,
        effectiveness=raw.effectiveness,
        last_updated=raw.last_updated,
        intro=content.intro,
        steps=content.steps,
        products=content.supplies,
        warnings=content.warnings,
        faq=content.faqs,
        effectiveness_details=content.effectiveness,
        difficulty=content.difficulty,
        time_required=content.time_required,
        success_rate=content.success_rate,
    )


def rank_guides(summaries: list[GuideSummary], priority_stains: list[str]) -> list[GuideSummary]:
    """Priority stains first (in list order), then most recently updated."""
    rank = {name: i for i, name in enumerate(priority_stains)}

    def key(summary: GuideSummary):
        updated = summary.last_updated or _EPOCH
        return rank.get(summary.stain_name, len(rank)), -updated.timestamp()

    return sorted(summaries, key=key)
