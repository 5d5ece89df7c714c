from abc import ABC, abstractmethod
from typing import Any


class StoreProvider(ABC):
    """Server-side proxy to a third-party store API.

    Providers never raise upstream failures to their callers: every method
    degrades to an empty result instead.
    """

    @classmethod
    @abstractmethod
    async def create(cls, settings):
        """Async factory constructor for provider."""
        raise NotImplementedError("Async factory not implemented")

    @abstractmethod
    async def close(self) -> None:
        """Release the outbound HTTP client"""
        pass

    @abstractmethod
    async def get_app_details(self, app_id: str) -> dict[str, Any]:
        """Fetch the raw details object for an app id, or {} on failure"""
        pass

    @abstractmethod
    async def search_apps(self, term: str) -> list[Any]:
        """Free-text app search, [] on failure"""
        pass

    @abstractmethod
    async def check_health(self) -> bool:
        """Check if provider API is reachable and healthy"""
        pass
