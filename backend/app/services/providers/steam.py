import asyncio, httpx, json, logging
from typing import Any, Optional
from urllib.parse import quote

from ...core.config import Settings
from .base import StoreProvider

logger = logging.getLogger(__name__)

# Marks left unescaped in the search path segment, alongside letters, digits and "_.-~"
_SEARCH_SAFE_CHARS = "!*'()"


class SteamProvider(StoreProvider):
    BASE_APP_DETAILS_URL = "https://store.steampowered.com/api/appdetails"
    BASE_SEARCH_APPS_URL = "https://steamcommunity.com/actions/SearchApps"

    def __init__(
            self,
            client: Optional[httpx.AsyncClient] = None,
            country_code: str = "De",
            max_concurrency: int = 10,
    ):
        self.client = client
        self.country_code = country_code
        self.max_concurrency = max_concurrency
        self.semaphore = asyncio.Semaphore(max_concurrency)

    @classmethod
    async def create(cls, settings: Settings):
        """Async factory for SteamProvider with persistent HTTP client."""
        client = httpx.AsyncClient(
            timeout=settings.STEAM_TIMEOUT,
            limits=httpx.Limits(max_connections=settings.STEAM_MAX_CONNECTIONS),
            http2=True,
            headers={"User-Agent": settings.STEAM_USER_AGENT},
        )
        return cls(
            client=client,
            country_code=settings.STEAM_COUNTRY_CODE,
            max_concurrency=settings.STEAM_MAX_CONCURRENCY,
        )

    async def close(self):
        if self.client:
            await self.client.aclose()
            self.client = None

    async def get_app_details(self, app_id: str) -> dict[str, Any]:
        """Fetch the appdetails payload for one app and pass it through untouched."""
        try:
            async with self.semaphore:
                resp = await self.client.get(
                    self.BASE_APP_DETAILS_URL, params={"appids": app_id, "cc": self.country_code}
                )
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to proxy Steam details for app %s: %s", app_id, e)
            return {}

        if not isinstance(data, dict):
            logger.error("Steam details for app %s is not an object (got %s)", app_id, type(data).__name__)
            return {}

        return data

    async def search_apps(self, term: str) -> list[Any]:
        """Search Steam apps by name. Returns the upstream match list or []."""
        url = f"{self.BASE_SEARCH_APPS_URL}/{quote(term, safe=_SEARCH_SAFE_CHARS)}"
        try:
            async with self.semaphore:
                resp = await self.client.get(url)
            resp.raise_for_status()
            text = resp.text
        except httpx.HTTPError as e:
            logger.error("Steam search request failed for '%s': %s", term, e)
            return []

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("Steam search JSON parse failed for '%s': %s", term, e)
            return []

        if not isinstance(data, list):
            logger.error("Steam search for '%s' returned %s, expected a list", term, type(data).__name__)
            return []

        logger.debug("Steam search for '%s' returned %d apps", term, len(data))
        return data

    async def check_health(self) -> bool:
        try:
            async with self.semaphore:
                resp = await self.client.get(f"{self.BASE_SEARCH_APPS_URL}/{quote('Stardew Valley')}")
            return resp.status_code == 200
        except httpx.HTTPError:
            return False
