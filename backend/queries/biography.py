"""
Biography lookup against the MediaWiki API — network I/O only.

Absence is the only failure signal: any HTTP error or malformed payload is
logged and turned into None / [] so callers never see an exception.
"""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from analytics.years import extract_short_description, infer_years, is_person_page
from config import Settings, get_settings
from models import HistoricalFigure, figure_id

logger = logging.getLogger(__name__)


class WikipediaLookup:
    """
    Resolves a person's name to a dated HistoricalFigure.

    Use as an async context manager, or call aclose() when done. Pass
    `client` to share a connection pool or inject a mock transport.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=self.settings.http_timeout,
            follow_redirects=True,
            headers={"User-Agent": self.settings.user_agent},
        )

    async def __aenter__(self) -> "WikipediaLookup":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def _query(self, params: dict) -> Optional[dict]:
        params = {"action": "query", "format": "json", **params}
        try:
            response = await self.client.get(self.settings.wikipedia_api_url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Wikipedia query failed (%s): %s", params.get("titles") or params.get("gsrsearch"), e)
            return None
        if not isinstance(data, dict):
            logger.warning("Wikipedia query returned a non-object payload: %r", type(data).__name__)
            return None
        return data

    async def get_person(self, name: str) -> Optional[HistoricalFigure]:
        """Dated figure for `name`, or None if the page is missing or carries no usable years."""
        data = await self._query({
            "titles":      name,
            "prop":        "extracts|categories|pageimages",
            "exintro":     1,
            "explaintext": 1,
            "piprop":      "original|thumbnail",
            "pithumbsize": self.settings.thumbnail_size,
            "cllimit":     "max",
            "redirects":   1,
        })
        if data is None:
            return None

        pages = (data.get("query") or {}).get("pages") or {}
        page = next(iter(pages.values()), None)
        if not page or "missing" in page or page.get("pageid", -1) == -1:
            logger.info("No Wikipedia page for %r", name)
            return None

        categories = [c.get("title", "") for c in page.get("categories", [])]
        extract    = page.get("extract") or ""
        birth, death = infer_years(categories, extract)
        if birth is None or death is None:
            logger.info("Could not determine years for %r", name)
            return None

        title = page.get("title") or name
        image = (page.get("original") or {}).get("source") or (page.get("thumbnail") or {}).get("source") or ""
        logger.debug("Resolved %r as %s (%s to %s)", name, title, birth, death)
        return HistoricalFigure(
            id=figure_id(title),
            name=title,
            birth_year=birth,
            death_year=death,
            short_description=extract_short_description(extract),
            image_url=image,
        )

    async def search(self, query: str, limit: int = 10) -> list[dict]:
        """Search results restricted to pages that look like biographies."""
        data = await self._query({
            "generator":   "search",
            "gsrsearch":   f"{query} -disambiguation",
            "gsrlimit":    limit,
            "prop":        "categories|extracts|pageimages",
            "exintro":     1,
            "explaintext": 1,
            "piprop":      "thumbnail",
            "pithumbsize": 400,
            "pilimit":     "max",
            "cllimit":     "max",
        })
        if data is None:
            return []

        pages = (data.get("query") or {}).get("pages") or {}
        results = []
        for page in sorted(pages.values(), key=lambda p: p.get("index", 0)):
            categories = [c.get("title", "") for c in page.get("categories", [])]
            if not is_person_page(categories):
                continue
            extract = page.get("extract") or ""
            results.append({
                "pageid":    page.get("pageid"),
                "title":     page.get("title"),
                "snippet":   extract.split(".")[0] + "." if extract else "",
                "thumbnail": (page.get("thumbnail") or {}).get("source"),
            })
        return results
