import logging
from dataclasses import dataclass

from interfaces.link_store_interface import ILinkStore
from models.errors import LinkStoreError, ResolveFailed, ShortenFailed

__all__ = [
    "ShortenedLink",
    "LinkService"
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShortenedLink:
    id: str
    short_link: str


class LinkService:
    """Translates shorten/resolve requests into link store calls.

    Holds no mutable state besides the store handle, so one instance may serve
    any number of concurrent requests.
    """

    def __init__(self, link_store: ILinkStore, base_url: str):
        self.link_store = link_store
        self.base_url = base_url.rstrip("/")

    def build_short_link(self, link_id: str) -> str:
        return f"{self.base_url}/{link_id}"

    async def shorten(self, url: str) -> ShortenedLink:
        try:
            link_id = await self.link_store.put(url)
        except LinkStoreError as e:
            logger.warning(f"Shorten failed for {url!r}: {e}")
            raise ShortenFailed("Failed to shorten url", cause_kind=e.kind) from e

        short_link = self.build_short_link(link_id)
        logger.info(f"Shortened URL: {url} -> {short_link}")
        return ShortenedLink(id=link_id, short_link=short_link)

    async def resolve(self, link_id: str) -> str:
        # Unknown ids and store outages are reported the same way.
        try:
            url = await self.link_store.get(link_id)
        except LinkStoreError as e:
            logger.warning(f"Resolve failed for {link_id!r}: {e}")
            raise ResolveFailed("Failed to resolve link", cause_kind=e.kind) from e

        logger.info(f"Redirecting ID: {link_id} to URL: {url}")
        return url
