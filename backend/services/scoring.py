"""Weighted aggregation of sub-scores, rejection risk and ATS vendor simulation."""

from models.responses import ATSCompatibility, RejectionRisk, SectionAnalysis, TargetATSScore
from services.keyword_extractor import match_keywords, skill_keywords
from services.section_parser import (
    extract_contact_info,
    has_quantified_results,
    has_recent_experience,
    has_work_authorisation,
)
from services.text_cleaner import normalize

# Weights for the overall ATS score
W_KEYWORD = 0.35
W_FORMAT = 0.25
W_SECTION = 0.25
W_IRISH = 0.15

# Lower bound of each risk band, best first
RISK_THRESHOLDS: tuple[tuple[int, RejectionRisk], ...] = (
    (80, "low"),
    (60, "medium"),
    (40, "high"),
)

ATS_VENDORS = ("workday", "greenhouse", "lever", "icims", "taleo")
VENDOR_BASE_FACTOR = 0.75
VENDOR_MAX_BONUS = 25

TECH_ROLE_TERMS = ("developer", "engineer", "programmer", "software", "technical")


def clamp_score(value: float) -> int:
    return min(100, max(0, round(value)))


def compute_overall_score(
    keyword_score: float,
    format_score: float,
    section_score: float,
    irish_score: float,
) -> int:
    """Compute the weighted overall ATS score. Returns 0-100."""
    raw = (
        W_KEYWORD * keyword_score
        + W_FORMAT * format_score
        + W_SECTION * section_score
        + W_IRISH * irish_score
    )
    return clamp_score(raw)


def rejection_risk(overall_score: int) -> RejectionRisk:
    for threshold, risk in RISK_THRESHOLDS:
        if overall_score >= threshold:
            return risk
    return "critical"


def _vendor_bonuses(cv_text: str, sections: SectionAnalysis) -> dict[str, int]:
    text = normalize(cv_text)
    contact = extract_contact_info(cv_text)

    workday = 0
    if contact["linkedin"]:
        workday += 5
    if has_quantified_results(text):
        workday += 10

    greenhouse = 0
    if match_keywords(text, skill_keywords()).matched >= 8:
        greenhouse += 10
    if any(term in text for term in TECH_ROLE_TERMS):
        greenhouse += 15

    lever = 0
    if contact["website"] or contact["github"]:
        lever += 5
    if has_recent_experience(text):
        lever += 10

    icims = 0
    education = sections.details.get("education")
    if education is not None and education.score >= 50:
        icims += 10
    if has_work_authorisation(text):
        icims += 5

    taleo = 0
    if contact["email"] and contact["irish_phone"]:
        taleo += 15

    return {
        "workday": workday,
        "greenhouse": greenhouse,
        "lever": lever,
        "icims": icims,
        "taleo": taleo,
    }


def ats_compatibility(cv_text: str, format_score: int, sections: SectionAnalysis) -> ATSCompatibility:
    """Simulated per-vendor scores: a format-driven base plus vendor-specific bonuses."""
    base = round(format_score * VENDOR_BASE_FACTOR)
    bonuses = _vendor_bonuses(cv_text, sections)
    return ATSCompatibility(**{
        vendor: clamp_score(base + min(VENDOR_MAX_BONUS, bonuses[vendor]))
        for vendor in ATS_VENDORS
    })


def target_ats_score(compatibility: ATSCompatibility, target: str = "auto") -> TargetATSScore:
    """Score for the requested vendor; "auto" reports the strictest one."""
    scores = compatibility.model_dump()
    if target in scores:
        return TargetATSScore(name=target, score=scores[target])
    name = min(ATS_VENDORS, key=lambda vendor: scores[vendor])
    return TargetATSScore(name=name, score=scores[name])
