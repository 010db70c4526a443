"""Irish job market relevance of a CV."""

import re

from models.responses import IrishMarketAnalysis
from services.keyword_extractor import contains_keyword
from services.text_cleaner import normalize

IRISH_ATS_KEYWORDS: dict[str, tuple[str, ...]] = {
    "locations": (
        "dublin", "cork", "galway", "limerick", "waterford", "kilkenny", "drogheda",
        "dundalk", "bray", "navan", "ennis", "tralee", "carlow", "naas", "athlone",
        "portlaoise",
    ),
    "work_auth": (
        "eu citizen", "irish citizen", "work permit", "stamp 4", "eligible to work",
        "right to work", "no visa required", "permanent resident",
    ),
    "companies": (
        "google", "microsoft", "facebook", "meta", "amazon", "apple", "intel", "ibm",
        "accenture", "deloitte", "pwc", "kpmg", "ey", "citi", "bank of america",
        "aib", "bank of ireland", "permanent tsb", "irish life", "zurich",
    ),
    "sectors": (
        "fintech", "pharmaceuticals", "medical devices", "agriculture",
        "food processing", "technology", "financial services", "healthcare",
        "manufacturing", "logistics",
    ),
}

ALL_IRISH_KEYWORDS: tuple[str, ...] = tuple(
    kw for group in IRISH_ATS_KEYWORDS.values() for kw in group
)

# +353 or a leading 0, then a non-zero digit and 7-9 more digits. Spaces, dashes
# and brackets may sit between the digits of one number, never before it.
IRISH_PHONE_RE = re.compile(r"(?<![\w.+\-/])(?:\+353|0)[\s\-()]*[1-9](?:[\s\-()]*\d){7,9}(?!\d)")

# Each keyword counts five times its share of the full list
KEYWORD_MULTIPLIER = 5
PHONE_BONUS = 10


def has_irish_phone(text: str) -> bool:
    """Detect an Irish phone number, allowing spaces and dashes inside it."""
    return IRISH_PHONE_RE.search(text) is not None


def calculate_irish_market_relevance(cv_text: str) -> IrishMarketAnalysis:
    text = normalize(cv_text)
    found = [kw for kw in ALL_IRISH_KEYWORDS if contains_keyword(text, kw)]

    raw = len(found) / len(ALL_IRISH_KEYWORDS) * 100 * KEYWORD_MULTIPLIER
    if has_irish_phone(text):
        raw += PHONE_BONUS
    score = min(100, max(0, round(raw)))

    suggestions: list[str] = []
    if not any(contains_keyword(text, loc) for loc in IRISH_ATS_KEYWORDS["locations"]):
        suggestions.append("Consider mentioning your location or target work location in Ireland")
    if not any(contains_keyword(text, auth) for auth in IRISH_ATS_KEYWORDS["work_auth"]):
        suggestions.append("Clearly state your work authorisation status for Ireland/EU")
    if len(found) < 3:
        suggestions.append("Include more Ireland-specific keywords and location references")

    return IrishMarketAnalysis(score=score, found_keywords=found, suggestions=suggestions)
