"""Keyword lists and keyword matching for ATS analysis.

Matching is deliberately literal: case-insensitive, whole-word, no
stemming and no fuzzy matching. A keyword matches when it is not glued
to another word character on either side, which keeps "java" from
matching "javascript" while still handling "c++", "ci/cd" and "node.js".
"""

import logging
import re
from functools import lru_cache

from models.responses import KeywordAnalysis
from services.similarity import extract_tfidf_keywords
from services.text_cleaner import normalize, word_count

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Keywords ATS systems screen for on the Irish market
# ---------------------------------------------------------------------------
ATS_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technical": (
        "javascript", "typescript", "react", "node.js", "python", "java", "sql",
        "aws", "azure", "git", "html", "css", "mongodb", "postgresql", "docker",
        "kubernetes", "api", "rest", "graphql", "agile", "scrum", "ci/cd",
        "devops", "cloud", "microservices", "testing", "automation",
    ),
    "soft": (
        "leadership", "communication", "teamwork", "problem-solving", "analytical",
        "creative", "collaborative", "adaptable", "organized", "detail-oriented",
        "proactive", "innovative", "strategic", "customer-focused",
        "results-driven", "time management", "multitasking",
    ),
    "irish": (
        "dublin", "cork", "galway", "limerick", "waterford", "irish", "ireland",
        "eu citizen", "work permit", "stamp 4", "eligible to work",
        "fluent english", "irish market", "multinational", "sme",
        "enterprise ireland", "ida ireland",
    ),
}

# ---------------------------------------------------------------------------
# Industry keyword groups. Only core, technical and irish_context feed the
# industry score; the other groups are used for keyword extraction.
# ---------------------------------------------------------------------------
INDUSTRY_KEYWORDS: dict[str, dict[str, tuple[str, ...]]] = {
    "technology": {
        "core": ("software development", "programming", "coding", "web development", "mobile development"),
        "technical": ("javascript", "typescript", "react", "node.js", "python", "java", "sql", "html", "css"),
        "frameworks": ("angular", "vue.js", "express", "spring", "django", "laravel"),
        "tools": ("git", "docker", "kubernetes", "aws", "azure", "jenkins", "jira"),
        "methodologies": ("agile", "scrum", "devops", "ci/cd", "test-driven development"),
        "irish_context": ("dublin tech", "remote work", "hybrid work", "multinational", "startup ecosystem"),
    },
    "finance": {
        "core": ("financial analysis", "accounting", "budgeting", "forecasting", "risk management"),
        "technical": ("excel", "sql", "tableau", "power bi", "sap", "oracle", "bloomberg"),
        "compliance": ("gdpr", "mifid", "central bank", "regulatory compliance", "audit"),
        "certifications": ("cfa", "acca", "cpa", "aia", "cima"),
        "irish_context": ("ifsc", "dublin financial", "central bank ireland", "revenue", "financial services"),
    },
    "healthcare": {
        "core": ("patient care", "clinical", "medical", "nursing", "treatment", "diagnosis"),
        "technical": ("epic", "cerner", "hl7", "hipaa", "medical terminology"),
        "certifications": ("nmbi", "coru", "rcpi", "rcsi", "irish medical council"),
        "irish_context": ("hse", "irish healthcare", "medical council", "nursing board", "private healthcare"),
    },
}

INDUSTRY_SCORE_GROUPS = ("core", "technical", "irish_context")


@lru_cache(maxsize=512)
def _keyword_pattern(keyword: str) -> re.Pattern:
    return re.compile(rf"(?<!\w){re.escape(keyword.lower())}(?!\w)", re.IGNORECASE)


def count_occurrences(text: str, keyword: str) -> int:
    """Count whole-word occurrences of keyword in text."""
    if not text or not keyword:
        return 0
    return len(_keyword_pattern(keyword).findall(text))


def contains_keyword(text: str, keyword: str) -> bool:
    return bool(text) and _keyword_pattern(keyword).search(text) is not None


def match_keywords(cv_text: str, keywords: list[str] | tuple[str, ...]) -> KeywordAnalysis:
    """Match CV text against a keyword list.

    Density is occurrences per 1000 words, reported for matched keywords only.
    """
    unique = list(dict.fromkeys(kw.lower() for kw in keywords if kw))
    text = normalize(cv_text)
    words = word_count(text)

    density: dict[str, float] = {}
    missing: list[str] = []
    for kw in unique:
        count = count_occurrences(text, kw)
        if count > 0:
            density[kw] = round(count * 1000 / words, 1)
        else:
            missing.append(kw)

    return KeywordAnalysis(
        total=len(unique),
        matched=len(density),
        missing=missing,
        density=density,
    )


def all_ats_keywords() -> list[str]:
    return [kw for group in ATS_KEYWORDS.values() for kw in group]


def skill_keywords() -> list[str]:
    """Technical and soft keywords, the vocabulary of a skills section."""
    return list(ATS_KEYWORDS["technical"]) + list(ATS_KEYWORDS["soft"])


def get_industry_keywords(industry: str | None) -> list[str]:
    """Keywords counted for an industry; empty for unknown or general industries."""
    groups = INDUSTRY_KEYWORDS.get((industry or "").lower())
    if not groups:
        return []
    return [kw for name in INDUSTRY_SCORE_GROUPS for kw in groups.get(name, ())]


def target_keywords(job_description: str | None = None, industry: str | None = None) -> list[str]:
    """Keywords a CV is checked against.

    With a job description only the keywords the description mentions remain.
    """
    keywords = list(dict.fromkeys(all_ats_keywords() + get_industry_keywords(industry)))
    if job_description and job_description.strip():
        jd = normalize(job_description)
        keywords = [kw for kw in keywords if contains_keyword(jd, kw)]
    return keywords


def keyword_score(analysis: KeywordAnalysis) -> int:
    """Share of target keywords found, 0-100. Neutral 50 with nothing to match."""
    if analysis.total == 0:
        return 50
    return min(100, max(0, round(analysis.matched / analysis.total * 100)))


def extract_job_keywords(job_description: str, top_n: int = 25) -> dict[str, list[str]]:
    """Local keyword extraction from a job description.

    Dictionary hits per category, plus TF-IDF terms that no dictionary covers.
    Used when the AI keyword extraction is unavailable.
    """
    jd = normalize(job_description)
    result: dict[str, list[str]] = {
        category: [kw for kw in group if contains_keyword(jd, kw)]
        for category, group in ATS_KEYWORDS.items()
    }

    industry_hits: list[str] = []
    for groups in INDUSTRY_KEYWORDS.values():
        for group in groups.values():
            industry_hits.extend(kw for kw in group if contains_keyword(jd, kw))
    known = {kw for found in result.values() for kw in found}
    result["industry"] = [kw for kw in dict.fromkeys(industry_hits) if kw not in known]
    known.update(result["industry"])

    tfidf_terms = extract_tfidf_keywords(job_description, top_n=top_n)
    result["other"] = [kw for kw in tfidf_terms if kw not in known][:top_n]
    logger.debug("Local keyword extraction found %d dictionary terms", len(known))
    return result
