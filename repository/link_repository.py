import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from infrastructure.databases.postgres import DatabaseBackend, DatabaseConnector
from interfaces.generate_link_id_interface import IGenerateLinkId
from interfaces.link_store_interface import ILinkStore
from models.errors import NotFound, StoreUnavailable, WriteFailure
from models.link import Base, Link
from services.link.link_id_generator import NanoidLinkIdGenerator

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    DatabaseBackend.POSTGRESQL: postgresql.insert,
    DatabaseBackend.SQLITE: sqlite.insert,
}


class LinkRepository(ILinkStore):
    def __init__(self, db_connector: DatabaseConnector, id_generator: Optional[IGenerateLinkId] = None):
        self.db_connector = db_connector
        self.id_generator = id_generator or NanoidLinkIdGenerator()

    async def ensure_schema(self) -> None:
        try:
            async with self.db_connector.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailable(f"Failed to provision links schema: {e}") from e
        logger.info(f"Links schema ready on {self.db_connector.backend.value}")

    def _upsert_statement(self, link_id: str, url: str):
        insert = _DIALECT_INSERTS[self.db_connector.backend]
        stmt = insert(Link).values(id=link_id, url=url)
        # Conflicts are resolved on url: an existing row keeps its url and takes the new id.
        return stmt.on_conflict_do_update(
            index_elements=[Link.url],
            set_={"id": stmt.excluded.id},
        ).returning(Link.id)

    async def put(self, url: str) -> str:
        link_id = self.id_generator.generate()
        try:
            async with self.db_connector.get_async_session() as session:
                result = await session.execute(self._upsert_statement(link_id, url))
                stored_id = result.scalar_one()
        except IntegrityError as e:
            raise WriteFailure(f"Link constraint violation for id {link_id!r}: {e}") from e
        except (SQLAlchemyError, OSError) as e:
            raise WriteFailure(f"Failed to store link: {e}") from e

        logger.info(f"Stored URL: {url} with ID: {stored_id}")
        return stored_id

    async def get(self, link_id: str) -> str:
        try:
            async with self.db_connector.get_async_session() as session:
                stmt = select(Link.url).where(Link.id == link_id)
                url = (await session.execute(stmt)).scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailable(f"Failed to get link {link_id!r}: {e}") from e

        if url is None:
            raise NotFound(link_id)

        logger.debug(f"Fetched URL: {url} for ID: {link_id}")
        return url
