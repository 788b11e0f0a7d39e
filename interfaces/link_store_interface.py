from abc import ABC, abstractmethod


class ILinkStore(ABC):

    @abstractmethod
    async def ensure_schema(self) -> None:
        """Create the links table if missing. Raises StoreUnavailable."""
        raise NotImplementedError("Method ensure_schema Of Interface ILinkStore Is Not Implemented")

    @abstractmethod
    async def put(self, url: str) -> str:
        """Assign a fresh id to `url`, reusing its row if present. Raises WriteFailure."""
        raise NotImplementedError("Method put Of Interface ILinkStore Is Not Implemented")

    @abstractmethod
    async def get(self, link_id: str) -> str:
        """Return the url stored for `link_id`. Raises NotFound or StoreUnavailable."""
        raise NotImplementedError("Method get Of Interface ILinkStore Is Not Implemented")
