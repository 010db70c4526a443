"""Per-section ATS heuristics and contact extraction.

Each logical CV section (contact, experience, skills, education) earns
50 points when a recognisable header word is present and up to 50 more
from content checks. Scores clamp to 100 per section.
"""

import re
from datetime import datetime

from models.responses import SectionAnalysis, SectionResult
from services.irish_market import has_irish_phone
from services.keyword_extractor import contains_keyword, match_keywords, skill_keywords
from services.text_cleaner import normalize

# Header words ATS parsers look for, per section
ATS_SECTIONS: dict[str, tuple[str, ...]] = {
    "contact": ("contact", "personal", "details", "information"),
    "experience": ("experience", "employment", "work", "career", "professional"),
    "skills": ("skills", "technical", "competencies", "expertise", "abilities"),
    "education": ("education", "qualifications", "academic", "training", "certifications"),
}

HEADER_POINTS = 50
SECTION_MAX = 100

JOB_TITLE_INDICATORS = ("manager", "developer", "engineer", "analyst", "coordinator", "specialist")
EDUCATION_KEYWORDS = (
    "university", "college", "degree", "bachelor", "master", "phd", "diploma",
    "certificate", "leaving cert", "honours",
)
WORK_AUTH_KEYWORDS = ("eu citizen", "stamp", "work permit", "visa", "eligible to work")

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)
URL_RE = re.compile(r"(?:https?://|www\.)[\w.-]+\.[a-z]{2,}", re.IGNORECASE)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

_QUANTIFIED_RE = re.compile(
    r"\d+\s*(?:%|percent|million|thousand|k\b|[$€£])|[$€£]\s?\d+", re.IGNORECASE
)


def has_quantified_results(text: str) -> bool:
    """True when text carries numbers with units: 30%, €2 million, 15k."""
    return _QUANTIFIED_RE.search(text) is not None


def has_recent_experience(text: str, now: datetime | None = None) -> bool:
    """Current role ("present"/"current") or a year within the last two years."""
    lower = text.lower()
    if contains_keyword(lower, "present") or contains_keyword(lower, "current"):
        return True
    year = (now or datetime.now()).year
    return any(year - int(y) <= 2 for y in YEAR_RE.findall(text) if int(y) <= year)


def has_work_authorisation(text: str) -> bool:
    return any(contains_keyword(text, kw) for kw in WORK_AUTH_KEYWORDS)


def extract_contact_info(text: str) -> dict[str, str | None]:
    """Extract contact information from CV text."""
    email_match = EMAIL_RE.search(text)
    linkedin_match = LINKEDIN_RE.search(text)
    github_match = GITHUB_RE.search(text)
    url_match = URL_RE.search(text)

    return {
        "email": email_match.group() if email_match else None,
        "irish_phone": "yes" if has_irish_phone(text) else None,
        "linkedin": linkedin_match.group() if linkedin_match else None,
        "github": github_match.group() if github_match else None,
        "website": url_match.group() if url_match else None,
    }


def _header_found(text: str, section: str) -> bool:
    return any(contains_keyword(text, header) for header in ATS_SECTIONS[section])


def _score_contact(text: str) -> tuple[int, list[str]]:
    score, issues = 0, []
    if "@" in text:
        score += 20
    else:
        issues.append("Email address missing")
    if has_irish_phone(text):
        score += 20
    else:
        issues.append("Irish phone number missing")
    return score, issues


def _score_experience(text: str) -> tuple[int, list[str]]:
    score, issues = 0, []
    if len(YEAR_RE.findall(text)) >= 2:
        score += 25
    else:
        issues.append("Employment dates not clearly specified")
    if any(title in text for title in JOB_TITLE_INDICATORS):
        score += 25
    else:
        issues.append("Job titles not clearly identified")
    return score, issues


def _score_skills(text: str) -> tuple[int, list[str]]:
    found = match_keywords(text, skill_keywords()).matched
    if found >= 5:
        return 50, []
    if found >= 3:
        return 30, []
    return 0, ["Insufficient skills listed for ATS detection"]


def _score_education(text: str) -> tuple[int, list[str]]:
    if any(kw in text for kw in EDUCATION_KEYWORDS):
        return 50, []
    return 0, ["Educational qualifications not clearly specified"]


_CONTENT_SCORERS = {
    "contact": _score_contact,
    "experience": _score_experience,
    "skills": _score_skills,
    "education": _score_education,
}


def analyze_sections(cv_text: str) -> SectionAnalysis:
    """Score each CV section 0-100; the overall section score is their rounded mean."""
    text = normalize(cv_text)
    details: dict[str, SectionResult] = {}

    for section in ATS_SECTIONS:
        score = 0
        issues: list[str] = []
        if _header_found(text, section):
            score += HEADER_POINTS
        else:
            issues.append(f"{section.capitalize()} section not clearly identified")

        content_score, content_issues = _CONTENT_SCORERS[section](text)
        score += content_score
        issues.extend(content_issues)

        details[section] = SectionResult(score=min(SECTION_MAX, score), issues=issues)

    overall = round(sum(r.score for r in details.values()) / len(details))
    return SectionAnalysis(score=overall, details=details)
