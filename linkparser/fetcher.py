from typing import List, Optional

import httpx
from loguru import logger

from linkparser.parser import extract_links
from linkparser.utils.config_loader import Config, load_config
from linkparser.utils.logger import configure_logging


class PageFetcher:
    """Download pages so their links can be listed.

    Thin I/O wrapper around ``httpx.AsyncClient``; redirects are not
    followed and HTTP errors are raised to the caller.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, config: Optional[Config] = None):
        if config is None:
            config = load_config()
            configure_logging(config)

        self.config = config
        self.user_agent = self.config.user_agent
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=self.config.request_timeout,
            follow_redirects=False,
        )

    async def __aenter__(self) -> "PageFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def fetch_html(self, url: str) -> str:
        logger.debug(f"Fetching {url}")

        try:
            resp = await self.client.get(
                url,
                headers={
                    "User-Agent": self.user_agent,
                    "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
                },
                timeout=self.config.request_timeout,
            )
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning(f"Failed to fetch {url}: {exc}")
            raise

        return (resp.content or b"").decode("utf-8", errors="replace")

    async def list_links(self, url: str) -> List[str]:
        html = await self.fetch_html(url)
        return extract_links(url, html)
