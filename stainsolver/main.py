"""StainSolver Backend — FastAPI application entry point.

Serves the stain/material catalog and ISR-cached guide pages under /api.
"""

import logging
import time
import traceback
from collections import defaultdict
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stainsolver.catalog.schemas import (
    GuideCreate,
    GuideSummary,
    Material,
    MaterialCreate,
    RawGuide,
    Stain,
    StainCreate,
)
from stainsolver.catalog.service import GuideService
from stainsolver.config import settings
from stainsolver.errors import AlreadyExistsError, CatalogError, NotFoundError, UpstreamError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger("stainsolver")

AI_CRAWLER_SIGNATURES = (
    "gpt", "chatgpt", "openai", "perplexity", "claude", "anthropic",
    "googlebot", "bingbot", "slurp", "duckduckbot", "baiduspider", "yandex",
)


def is_ai_crawler(user_agent: str) -> bool:
    lowered = user_agent.lower()
    return any(sig in lowered for sig in AI_CRAWLER_SIGNATURES)


def client_ip(request: Request) -> str:
    ip = request.headers.get("x-forwarded-for", "").split(",")[0].strip()
    if not ip:
        ip = request.client.host if request.client else "unknown"
    return ip


# ═══════════════ RATE LIMITER ═══════════════

class RateLimiter:
    """Fixed-window rate limiter by IP."""

    def __init__(self, max_requests: int, window_seconds: int = 60):
        self.max_requests = max_requests
        self.window = window_seconds
        self._hits: dict[str, list[float]] = defaultdict(list)

    def is_limited(self, ip: str) -> bool:
        now = time.monotonic()
        window_start = now - self.window
        # Remove expired entries
        self._hits[ip] = [t for t in self._hits[ip] if t > window_start]
        if len(self._hits[ip]) >= self.max_requests:
            return True
        self._hits[ip].append(now)
        return False


# ═══════════════ LIFESPAN ═══════════════

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("StainSolver backend starting | environment=%s", settings.environment)

    # Initialize database (graceful degradation to the built-in catalog)
    from stainsolver.catalog.seeding import seed_catalog
    from stainsolver.database import async_session_factory, close_db, init_db
    from stainsolver.services.storage import MemoryGuideStore, SqlGuideStore

    db_ok = await init_db()
    if db_ok:
        store = SqlGuideStore(async_session_factory)
    else:
        store = MemoryGuideStore()
        await seed_catalog(store)
    logger.info("Storage: %s", "postgresql" if db_ok else "in-memory (built-in catalog)")

    service = GuideService(store)
    app.state.guide_service = service

    if settings.preload_top_guides:
        try:
            await service.preload_top_guides()
        except CatalogError as e:
            logger.warning("Top guide preload skipped: %s", str(e)[:200])

    yield

    await service.cache.drain()
    await close_db()
    logger.info("StainSolver backend shutting down")


# ═══════════════ APP ═══════════════

app = FastAPI(
    title="StainSolver API",
    description="Stain removal guides by stain and material",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["POST", "OPTIONS", "GET"],
    allow_headers=["Content-Type"],
)

app.state.api_limiter = RateLimiter(settings.rate_limit_requests, settings.rate_limit_window_seconds)
app.state.sitemap_limiter = RateLimiter(
    settings.sitemap_rate_limit_requests, settings.sitemap_rate_limit_window_seconds,
)


def get_service(request: Request) -> GuideService:
    return request.app.state.guide_service


# ═══════════════ MIDDLEWARE ═══════════════

@app.middleware("http")
async def api_guard(request: Request, call_next):
    """Rate limits, security headers, and request logging for /api routes."""
    path = request.url.path
    ip = client_ip(request)

    if path.startswith("/api/sitemap") and request.app.state.sitemap_limiter.is_limited(ip):
        return JSONResponse(
            status_code=429,
            content={"message": "Too many sitemap generation requests, please try again later."},
        )
    if path.startswith("/api/") and request.app.state.api_limiter.is_limited(ip):
        return JSONResponse(
            status_code=429,
            content={"message": "Too many requests, please try again later."},
        )

    start = time.monotonic()
    response = await call_next(request)
    elapsed_ms = int((time.monotonic() - start) * 1000)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "SAMEORIGIN"
    response.headers["Referrer-Policy"] = "no-referrer"
    if request.url.scheme == "https" or request.headers.get("x-forwarded-proto") == "https":
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

    if path.startswith("/api/"):
        user_agent = request.headers.get("user-agent", "Unknown")
        logger.info(
            "%s %s | %d | %dms | ai=%s | ua=%s",
            request.method, path, response.status_code, elapsed_ms,
            is_ai_crawler(user_agent), user_agent[:100],
        )
    return response


# ═══════════════ ERROR HANDLERS ═══════════════

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"message": str(exc), "missing": exc.entity})


@app.exception_handler(AlreadyExistsError)
async def conflict_handler(request: Request, exc: AlreadyExistsError):
    return JSONResponse(status_code=409, content={"message": str(exc)})


@app.exception_handler(UpstreamError)
async def upstream_handler(request: Request, exc: UpstreamError):
    logger.error("Upstream failure | %s %s | %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"message": "Catalog storage unavailable"})


@app.exception_handler(RequestValidationError)
async def validation_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'] if p != 'body')}: {err['msg']}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"message": f"Validation error: {details}"})


@app.exception_handler(Exception)
async def unhandled_handler(request: Request, exc: Exception):
    logger.error("Unhandled error | %s %s | %s", request.method, request.url.path, str(exc)[:300])
    content = {"message": "Internal server error"}
    if not settings.is_production:
        content["detail"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=500, content=content)


# ═══════════════ ENDPOINTS ═══════════════

@app.get("/health")
async def health(request: Request):
    service = get_service(request)
    return {
        "status": "ok",
        "environment": settings.environment,
        "storage": type(service.store).__name__,
        "cached_guides": len(service.cache),
    }


@app.get("/api/stains", response_model=list[Stain])
async def list_stains(request: Request):
    return await get_service(request).list_stains()


@app.get("/api/stains/{name}", response_model=Stain)
async def get_stain(name: str, request: Request):
    return await get_service(request).get_stain(name)


@app.post("/api/stains", response_model=Stain, status_code=201)
async def create_stain(data: StainCreate, request: Request):
    return await get_service(request).create_stain(data)


@app.get("/api/materials", response_model=list[Material])
async def list_materials(request: Request):
    return await get_service(request).list_materials()


@app.get("/api/materials/{name}", response_model=Material)
async def get_material(name: str, request: Request):
    return await get_service(request).get_material(name)


@app.post("/api/materials", response_model=Material, status_code=201)
async def create_material(data: MaterialCreate, request: Request):
    return await get_service(request).create_material(data)


@app.get("/api/guides", response_model=list[GuideSummary])
async def list_guides(request: Request):
    return await get_service(request).list_guides()


@app.post("/api/guides", response_model=RawGuide, status_code=201)
async def create_guide(data: GuideCreate, request: Request):
    guide = await get_service(request).create_guide(data)
    logger.info("Guide created | id=%s | stain_id=%d | material_id=%d", guide.id, guide.stain_id, guide.material_id)
    return guide


@app.get("/api/guides/top", response_model=list[GuideSummary])
async def top_guides(request: Request):
    try:
        return await get_service(request).top_guides()
    except UpstreamError as e:
        logger.error("Top guides failed | %s", e)
        return JSONResponse(status_code=500, content={"message": "Failed to get top guides"})


@app.get("/api/guides/{stain_name}/{material_name}")
async def get_guide(stain_name: str, material_name: str, request: Request):
    start = time.monotonic()
    try:
        lookup = await get_service(request).get_guide(stain_name, material_name)
    except UpstreamError as e:
        logger.error("Guide failed | %s/%s | %s", stain_name, material_name, e)
        return JSONResponse(status_code=500, content={"message": "Failed to get guide"})

    elapsed_ms = int((time.monotonic() - start) * 1000)
    logger.info(
        "Guide served | %s/%s | cache=%s | %dms", stain_name, material_name, lookup.status, elapsed_ms,
    )
    cache_control = settings.stale_cache_control if lookup.is_stale else settings.fresh_cache_control
    return JSONResponse(
        content=lookup.data,
        headers={"Cache-Control": cache_control, "X-Cache": lookup.status.upper()},
    )


@app.get("/api/sitemap")
async def sitemap(request: Request):
    try:
        return await get_service(request).sitemap()
    except UpstreamError as e:
        logger.error("Sitemap failed | %s", e)
        return JSONResponse(status_code=500, content={"message": "Failed to generate sitemap"})
