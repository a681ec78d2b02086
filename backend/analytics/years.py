"""
Birth/death year inference from Wikipedia page data — pure functions only.

Wikipedia rarely exposes structured dates through the plain query API, so
years are read from the page categories ("453 births", "44 BC deaths",
"5th-century BC births", "400s births") and, failing that, from the
lifespan parenthetical at the start of the extract ("(c. 406 – 453)").

Precision falls off in that order: exact year, extract, decade, century.
Whatever end is still missing is estimated from the other end.
"""
from __future__ import annotations

import re
from typing import Iterable, Optional

ASSUMED_LIFESPAN     = 60
ASSUMED_AGE_AT_DEATH = 30

_EXACT   = re.compile(r"(?:^|:)\s*(\d+)\s*(bc\s+)?(births|deaths)$")
_DECADE  = re.compile(r"(?:^|:)\s*(\d+)0s(\s+bc)?\s+(births|deaths)$")
_CENTURY = re.compile(r"(\d+)(?:st|nd|rd|th)[- ]century(\s+bc)?\s+(births|deaths)$")

_LIFESPAN = re.compile(
    r"\((?:c\.\s*)?(\d+)(\s*BCE?)?\s*[-–—]\s*(?:c\.\s*)?(?:AD\s*)?(\d+)(\s*BCE?)?",
    re.IGNORECASE,
)

_TAGS          = re.compile(r"</?[^>]+(>|$)")
_PARENTHETICAL = re.compile(r"\([^)]+\)")
_BIO_CLAUSE    = re.compile(r"\b(?:was|is|became|lived)\b.*?(?:\.|\n|$)")

DESCRIPTION_LIMIT = 200


def is_person_page(categories: Iterable[str]) -> bool:
    return any("births" in c.lower() or "deaths" in c.lower() for c in categories)


def _scan_categories(categories: Iterable[str]) -> dict[str, dict[str, int]]:
    """{'births'|'deaths': {'exact'|'decade'|'century': year}}"""
    found: dict[str, dict[str, int]] = {"births": {}, "deaths": {}}
    for raw in categories:
        title = raw.lower().strip()

        m = _EXACT.search(title)
        if m:
            year = int(m.group(1))
            found[m.group(3)]["exact"] = -year if m.group(2) else year
            continue

        m = _DECADE.search(title)
        if m:
            mid = int(m.group(1) + "0") + 5
            found[m.group(3)]["decade"] = -mid if m.group(2) else mid
            continue

        m = _CENTURY.search(title)
        if m:
            mid = (int(m.group(1)) - 1) * 100 + 50
            found[m.group(3)]["century"] = -mid if m.group(2) else mid
    return found


def years_from_extract(extract: str) -> tuple[Optional[int], Optional[int]]:
    """Read '(c. 406 – 453)' style lifespans. A trailing BC on the death applies to both ends."""
    m = _LIFESPAN.search(extract or "")
    if not m:
        return None, None
    birth, birth_bc, death, death_bc = int(m.group(1)), m.group(2), int(m.group(3)), m.group(4)
    if death_bc:
        return -birth, -death
    if birth_bc:
        return -birth, death
    return birth, death


def infer_years(categories: Iterable[str], extract: str = "") -> tuple[Optional[int], Optional[int]]:
    """
    Best-effort (birth_year, death_year). (None, None) when nothing is known.
    """
    found = _scan_categories(list(categories))
    birth = found["births"].get("exact")
    death = found["deaths"].get("exact")

    if birth is None or death is None:
        ext_birth, ext_death = years_from_extract(extract)
        if birth is None:
            birth = ext_birth
        if death is None:
            death = ext_death

    for precision in ("decade", "century"):
        if birth is None:
            birth = found["births"].get(precision)
        if death is None:
            death = found["deaths"].get(precision)

    if birth is None and death is not None:
        birth = death - ASSUMED_AGE_AT_DEATH
    elif death is None and birth is not None:
        death = birth + ASSUMED_LIFESPAN

    return birth, death


def extract_short_description(extract: str) -> str:
    text = _TAGS.sub("", extract or "")
    text = _PARENTHETICAL.sub("", text)
    text = ".".join(text.split(".")[:2]).strip()

    m = _BIO_CLAUSE.search(text)
    if m:
        text = m.group(0)

    if len(text) > DESCRIPTION_LIMIT:
        return text[:DESCRIPTION_LIMIT - 3] + "..."
    return text
