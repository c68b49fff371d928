import logging
from contextlib import asynccontextmanager

import redis.asyncio as redis
import sentry_sdk
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from sqlalchemy import text

from taskboard.config import settings
from taskboard.database import async_session, engine
from taskboard.migrations import run_migrations
from taskboard.services import seed_service

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize Sentry
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=0.2 if settings.ENVIRONMENT == "production" else 1.0,
        send_default_pii=False,
    )


async def seed_on_startup() -> seed_service.SeedResult:
    async with async_session() as session:
        result = await seed_service.seed_database(
            session,
            user_count=settings.SEED_USER_COUNT,
            tasks_per_user_min=settings.SEED_TASKS_PER_USER_MIN,
            tasks_per_user_max=settings.SEED_TASKS_PER_USER_MAX,
            comment_count=settings.SEED_COMMENT_COUNT,
            friendship_pairs=settings.SEED_FRIENDSHIP_PAIRS,
            random_seed=settings.SEED_RANDOM_SEED,
        )
        await session.commit()
    return result


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: migrate (or just verify the connection), then seed
    if settings.AUTO_MIGRATE:
        await run_migrations(engine)
    else:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))

    if settings.SEED_ON_STARTUP:
        await seed_on_startup()

    app.state.redis = None
    if settings.REDIS_URL:
        app.state.redis = redis.from_url(settings.REDIS_URL, decode_responses=True)
        await app.state.redis.ping()
    else:
        logger.info("REDIS_URL not set, rate limiting disabled")

    yield

    # Shutdown
    if app.state.redis is not None:
        await app.state.redis.aclose()
    await engine.dispose()


def docs_urls(environment: str) -> dict[str, str | None]:
    """Interactive docs and the OpenAPI schema are only served in development."""
    enabled = environment == "development"
    return {
        "docs_url": "/docs" if enabled else None,
        "redoc_url": "/redoc" if enabled else None,
        "openapi_url": "/openapi.json" if enabled else None,
    }


app = FastAPI(
    title="Taskboard API",
    version="0.1.0",
    lifespan=lifespan,
    **docs_urls(settings.ENVIRONMENT),
)

# Middleware
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from taskboard.middleware.rate_limit import RateLimitMiddleware  # noqa: E402

app.add_middleware(RateLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

from taskboard.middleware.error_handler import register_error_handlers  # noqa: E402

register_error_handlers(app)

# Routers
from taskboard.routers.comments import router as comments_router  # noqa: E402
from taskboard.routers.friends import router as friends_router  # noqa: E402
from taskboard.routers.tasks import router as tasks_router  # noqa: E402
from taskboard.routers.users import router as users_router  # noqa: E402

app.include_router(users_router)
app.include_router(tasks_router)
app.include_router(comments_router)
app.include_router(friends_router)


@app.get(
    "/",
    response_class=PlainTextResponse,
    tags=["Root"],
    summary="API root",
    description="Basic health/info endpoint.",
)
async def root():
    return "Taskboard API"


@app.get("/health", tags=["Root"])
async def health():
    return {"status": "ok"}
