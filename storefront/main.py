# storefront/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from storefront.data.database import Base, engine
from storefront.data.seed import seed
from storefront.api.routers import carts, categories, health
from storefront.utils.logging import get_logger

# import wszystkich modeli przed create_all
from storefront.data import models  # noqa: F401

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
        seed()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise
    logger.info("Database ready")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(carts.router)
    app.include_router(categories.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
