import logging
from contextlib import asynccontextmanager
from enum import Enum
from typing import Any, Dict, Optional, AsyncGenerator

from pydantic import Field
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.ext.asyncio import AsyncEngine
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class DatabaseBackend(str, Enum):
    """Supported database backends"""
    POSTGRESQL = "postgresql"
    SQLITE = "sqlite"


class DatabaseConfig(BaseSettings):
    """Database configuration with Pydantic validation"""

    # Connection settings
    backend: DatabaseBackend = DatabaseBackend.POSTGRESQL
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    username: str = Field(default="postgres", description="Database username")
    password: str = Field(default="postgres", description="Database password")
    database: str = Field(default="shortener", description="Database name")

    # Connection pool settings
    pool_size: int = Field(default=20, ge=1, le=50, description="Connection pool size")
    max_overflow: int = Field(default=40, ge=0, description="Max overflow connections")
    pool_timeout: int = Field(default=30, ge=1, description="Pool checkout timeout")
    pool_recycle: int = Field(default=3600, ge=300, description="Connection recycle time")
    pool_pre_ping: bool = Field(default=True, description="Enable connection health checks")

    echo_queries: bool = Field(default=False, description="Log SQL queries")

    # Custom connection parameters
    connection_args: Dict[str, Any] = Field(default_factory=dict, description="Additional engine arguments")

    class Config:
        env_prefix = "DB_"
        case_sensitive = False
        env_file = ".env"
        extra = "ignore"

    @property
    def async_url(self) -> str:
        """Generate asynchronous database URL"""
        if self.backend == DatabaseBackend.SQLITE:
            return f"sqlite+aiosqlite:///{self.database}"

        auth = f"{self.username}:{self.password}@" if self.username else ""
        return f"postgresql+asyncpg://{auth}{self.host}:{self.port}/{self.database}"


class DatabaseConnector:

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self._async_engine: Optional[AsyncEngine] = None
        self._async_session_factory: Optional[async_sessionmaker] = None

        self._setup_async_engine()

    @property
    def backend(self) -> DatabaseBackend:
        return self.config.backend

    @property
    def engine(self) -> AsyncEngine:
        if not self._async_engine:
            raise RuntimeError("Async engine not initialized")
        return self._async_engine

    def _setup_async_engine(self):
        if self.config.backend == DatabaseBackend.SQLITE:
            engine_kwargs = {
                "echo": self.config.echo_queries,
                **self.config.connection_args
            }
        else:
            engine_kwargs = {
                "pool_size": self.config.pool_size,
                "max_overflow": self.config.max_overflow,
                "pool_timeout": self.config.pool_timeout,
                "pool_recycle": self.config.pool_recycle,
                "pool_pre_ping": self.config.pool_pre_ping,
                "echo": self.config.echo_queries,
                **self.config.connection_args
            }

        try:
            self._async_engine = create_async_engine(self.config.async_url, **engine_kwargs)
            self._async_session_factory = async_sessionmaker(
                bind=self._async_engine,
                class_=AsyncSession,
                autoflush=False,
                expire_on_commit=False
            )
            logger.info(f"Async engine created for {self.config.backend.value}")

        except Exception as e:
            logger.error(f"Failed to create async engine: {e}")
            raise

    @asynccontextmanager
    async def get_async_session(self) -> AsyncGenerator[AsyncSession, None]:
        if not self._async_session_factory:
            raise RuntimeError("Async engine not initialized")

        session = self._async_session_factory()
        try:
            yield session
            await session.commit()
        except Exception as e:
            await session.rollback()
            logger.debug(f"Async session rolled back: {e}")
            raise
        finally:
            await session.close()

    @asynccontextmanager
    async def get_async_connection(self):
        async with self.engine.connect() as conn:
            yield conn

    async def test_async_connection(self) -> bool:
        try:
            async with self.get_async_connection() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Async connection test failed: {e}")
            return False

    async def close_async(self):
        if self._async_engine:
            await self._async_engine.dispose()
            logger.info("Async engine disposed")


def create_database_connector(**overrides) -> DatabaseConnector:
    """Build a connector from the environment, with `overrides` taking precedence."""
    config = DatabaseConfig(**{key: value for key, value in overrides.items() if value is not None})
    return DatabaseConnector(config)
