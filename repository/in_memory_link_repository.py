import logging
from typing import Dict, Optional

from interfaces.generate_link_id_interface import IGenerateLinkId
from interfaces.link_store_interface import ILinkStore
from models.errors import NotFound, WriteFailure
from services.link.link_id_generator import NanoidLinkIdGenerator

logger = logging.getLogger(__name__)


class InMemoryLinkStore(ILinkStore):
    """Process-local link store with the same contract as LinkRepository.

    `put` never awaits, so each call runs to completion on the event loop
    without interleaving.
    """

    def __init__(self, id_generator: Optional[IGenerateLinkId] = None):
        self.id_generator = id_generator or NanoidLinkIdGenerator()
        self._urls_by_id: Dict[str, str] = {}
        self._ids_by_url: Dict[str, str] = {}

    async def ensure_schema(self) -> None:
        return None

    async def put(self, url: str) -> str:
        if not url:
            raise WriteFailure("Link url must not be empty")

        link_id = self.id_generator.generate()
        previous_id = self._ids_by_url.get(url)
        if link_id in self._urls_by_id and previous_id != link_id:
            raise WriteFailure(f"Link id {link_id!r} is already taken")

        if previous_id is not None:
            del self._urls_by_id[previous_id]
        self._urls_by_id[link_id] = url
        self._ids_by_url[url] = link_id

        logger.info(f"Stored URL: {url} with ID: {link_id}")
        return link_id

    async def get(self, link_id: str) -> str:
        try:
            return self._urls_by_id[link_id]
        except KeyError:
            raise NotFound(link_id) from None

    def __len__(self) -> int:
        return len(self._urls_by_id)
