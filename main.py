import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI
from configs import settings
from infrastructure import Initilizer
from infrastructure import DatabaseConnector
from repository.link_repository import LinkRepository
from apies.links.router import link_router
from utils.get_connections import get_db_connector

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.db_connection = Initilizer.create_database_connector()
    app.state.link_store = LinkRepository(app.state.db_connection)
    # StoreUnavailable propagates and aborts startup.
    await app.state.link_store.ensure_schema()
    logger.info(f"Connected to the database {app.state.db_connection.config.async_url.split('@')[-1]}")

    yield
    await app.state.db_connection.close_async()


def create_app(configurations: Optional[settings.Settings] = None) -> FastAPI:
    configurations = configurations or settings.Settings()

    app = FastAPI(
        title=configurations.PROJECT_NAME,
        version=configurations.VERSION,
        description="URL shortener backed by SQLAlchemy",
        lifespan=lifespan
    )
    app.state.settings = configurations

    # Registered before the link routes so it is not taken for a link id.
    @app.get("/healthz")
    async def health(db: DatabaseConnector = Depends(get_db_connector)):
        return {
            "db": await db.test_async_connection()
        }

    app.include_router(link_router)
    return app


app = create_app()


if __name__ == "__main__":
    configurations = app.state.settings
    logging.basicConfig(level=configurations.LOG_LEVEL.upper())
    logger.info(f"Listening on {configurations.HOST}:{configurations.PORT}")
    uvicorn.run(app, host=configurations.HOST, port=configurations.PORT)
