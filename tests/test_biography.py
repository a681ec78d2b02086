"""
Tests for queries/biography.py against a mocked MediaWiki API.

httpx.MockTransport answers every request, so nothing leaves the process.
"""
import asyncio

import httpx

from config import Settings
from queries.biography import WikipediaLookup


# ── helpers ────────────────────────────────────────────────────────────────────

CAESAR_PAGE = {
    "pageid": 15654,
    "title": "Julius Caesar",
    "extract": "Gaius Julius Caesar (12 July 100 BC – 15 March 44 BC) was a Roman general and statesman. "
               "He played a critical role in the events that led to the demise of the Roman Republic.",
    "categories": [
        {"title": "Category:100 BC births"},
        {"title": "Category:44 BC deaths"},
        {"title": "Category:Roman dictators"},
    ],
    "original": {"source": "https://upload.example/caesar.jpg"},
    "thumbnail": {"source": "https://upload.example/caesar-440.jpg"},
}

ROME_PAGE = {
    "pageid": 25458,
    "title": "Rome",
    "extract": "Rome is the capital city of Italy.",
    "categories": [{"title": "Category:Capitals in Europe"}],
}


def pages_payload(*pages):
    return {"query": {"pages": {str(p["pageid"]): p for p in pages}}}


def run_lookup(handler, call):
    async def go():
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with WikipediaLookup(settings=Settings(), client=client) as lookup:
            result = await call(lookup)
        await client.aclose()
        return result
    return asyncio.run(go())


# ── get_person ─────────────────────────────────────────────────────────────────

class TestGetPerson:
    def test_resolves_dated_figure(self):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json=pages_payload(CAESAR_PAGE))

        figure = run_lookup(handler, lambda l: l.get_person("Caesar"))
        assert seen["titles"] == "Caesar"
        assert seen["redirects"] == "1"
        assert figure.id == "julius_caesar"
        assert figure.name == "Julius Caesar"
        assert (figure.birth_year, figure.death_year) == (-100, -44)
        assert figure.image_url == "https://upload.example/caesar.jpg"
        assert figure.short_description.startswith("was a Roman general")

    def test_thumbnail_when_no_original(self):
        page = {k: v for k, v in CAESAR_PAGE.items() if k != "original"}
        figure = run_lookup(lambda r: httpx.Response(200, json=pages_payload(page)),
                            lambda l: l.get_person("Julius Caesar"))
        assert figure.image_url == "https://upload.example/caesar-440.jpg"

    def test_missing_page(self):
        payload = {"query": {"pages": {"-1": {"ns": 0, "title": "Nobody", "missing": ""}}}}
        figure = run_lookup(lambda r: httpx.Response(200, json=payload), lambda l: l.get_person("Nobody"))
        assert figure is None

    def test_page_without_years(self):
        figure = run_lookup(lambda r: httpx.Response(200, json=pages_payload(ROME_PAGE)),
                            lambda l: l.get_person("Rome"))
        assert figure is None

    def test_http_error_is_absence(self):
        figure = run_lookup(lambda r: httpx.Response(500), lambda l: l.get_person("Julius Caesar"))
        assert figure is None

    def test_network_error_is_absence(self):
        def handler(request):
            raise httpx.ConnectError("offline", request=request)

        assert run_lookup(handler, lambda l: l.get_person("Julius Caesar")) is None

    def test_malformed_json_is_absence(self):
        figure = run_lookup(lambda r: httpx.Response(200, content=b"<html>"), lambda l: l.get_person("X"))
        assert figure is None

    def test_non_object_json_is_absence(self):
        figure = run_lookup(lambda r: httpx.Response(200, json=[]), lambda l: l.get_person("Julius Caesar"))
        assert figure is None


# ── search ─────────────────────────────────────────────────────────────────────

class TestSearch:
    def test_only_person_pages(self):
        seen = {}

        def handler(request):
            seen.update(request.url.params)
            return httpx.Response(200, json=pages_payload(ROME_PAGE, CAESAR_PAGE))

        results = run_lookup(handler, lambda l: l.search("caesar", limit=5))
        assert seen["gsrsearch"] == "caesar -disambiguation"
        assert seen["gsrlimit"] == "5"
        assert [r["title"] for r in results] == ["Julius Caesar"]
        assert results[0]["snippet"].startswith("Gaius Julius Caesar")

    def test_no_results(self):
        results = run_lookup(lambda r: httpx.Response(200, json={"batchcomplete": ""}), lambda l: l.search("zzz"))
        assert results == []

    def test_non_object_json_is_empty(self):
        results = run_lookup(lambda r: httpx.Response(200, json=["caesar"]), lambda l: l.search("caesar"))
        assert results == []
