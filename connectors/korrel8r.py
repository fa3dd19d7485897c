import logging
from typing import Any, Dict, List, Optional

from config import (
    KORREL8R_API_PREFIX,
    KORREL8R_DOMAINS_PATH,
    KORREL8R_GOALS_PATH,
    KORREL8R_NEIGHBOURS_PATH,
    Settings,
)
from correlate.graph import Graph
from correlate.search import Search, SearchType
from correlate.uri import join_path
from datasources.helpers import fetch_json, post_json

log = logging.getLogger(__name__)

# ask korrel8r to include the rules behind each edge
GRAPH_PARAMS = {"rules": "true"}


class Korrel8rConnector:
    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_url = str(base_url).rstrip("/")
        self.timeout = timeout
        self.headers = headers or {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "Korrel8rConnector":
        return cls(settings.korrel8r_url, timeout=settings.korrel8r_timeout)

    def _url(self, path: str) -> str:
        return join_path(self.base_url, KORREL8R_API_PREFIX, path)

    @property
    def health_url(self) -> str:
        return self._url(KORREL8R_DOMAINS_PATH)

    async def list_domains(self) -> List[Dict[str, Any]]:
        return await fetch_json(
            self._url(KORREL8R_DOMAINS_PATH),
            headers=self.headers,
            timeout=self.timeout,
            invalid_msg="korrel8r list domains failed",
        )

    async def neighbours(self, search: Search) -> Graph:
        raw = await post_json(
            self._url(KORREL8R_NEIGHBOURS_PATH),
            search.to_request(),
            params=GRAPH_PARAMS,
            headers=self.headers,
            timeout=self.timeout,
            invalid_msg="korrel8r neighbours search failed",
        )
        return Graph.from_api(raw)

    async def goals(self, search: Search) -> Graph:
        raw = await post_json(
            self._url(KORREL8R_GOALS_PATH),
            search.to_request(),
            params=GRAPH_PARAMS,
            headers=self.headers,
            timeout=self.timeout,
            invalid_msg="korrel8r goals search failed",
        )
        return Graph.from_api(raw)

    async def graph(self, search: Search) -> Graph:
        log.debug("korrel8r %s search: %s", search.search_type.value, search.query_str)
        if search.search_type == SearchType.goal:
            return await self.goals(search)
        return await self.neighbours(search)
