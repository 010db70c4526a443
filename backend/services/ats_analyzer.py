"""Orchestrator: heuristic ATS compatibility analysis.

Pipeline:
1. Text normalisation (PDF artifacts, lowercase)
2. Keyword matching against the target keyword list
3. Format and section heuristics
4. Irish market relevance (and industry keywords, if requested)
5. Weighted overall score, rejection risk, ATS vendor simulation
6. Suggestions, warnings, strengths and summary report
7. Gemini qualitative review (enterprise mode only, never changes scores)
"""

import logging

from models.requests import ATSAnalysisRequest
from models.responses import AIReview, AnalysisDetails, ATSAnalysis, SectionResult
from services import gemini_client, keyword_extractor, prompt_builder
from services.format_checker import analyze_file_format, analyze_format, validate_ats_format
from services.irish_market import calculate_irish_market_relevance
from services.report_builder import (
    build_report,
    generate_strengths,
    generate_suggestions,
    generate_warnings,
)
from services.scoring import (
    ats_compatibility,
    compute_overall_score,
    rejection_risk,
    target_ats_score,
)
from services.section_parser import analyze_sections
from services.similarity import job_match_score
from services.text_cleaner import clean_pdf_text

logger = logging.getLogger(__name__)


def _str_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if str(v).strip()]


async def _ai_review(
    cv_text: str,
    job_description: str | None,
    overall_score: int,
    missing_keywords: list[str],
) -> AIReview | None:
    prompt = prompt_builder.build_ats_review_prompt(
        cv_text, job_description, overall_score, missing_keywords[:10]
    )
    data = await gemini_client.generate_json(prompt)
    if not data:
        return None
    return AIReview(
        summary=prompt_builder.to_british_english(str(data.get("summary", ""))),
        strengths=_str_list(data.get("strengths")),
        improvements=_str_list(data.get("improvements")),
        missing_keywords=_str_list(data.get("missing_keywords")),
    )


def analyze_text(request: ATSAnalysisRequest) -> ATSAnalysis:
    """Run the deterministic heuristic pipeline. Never raises on odd input."""
    cv_text = clean_pdf_text(request.cv_text)
    job_description = request.job_description or None

    # --- Keywords ---
    targets = keyword_extractor.target_keywords(job_description, request.industry)
    keyword_analysis = keyword_extractor.match_keywords(cv_text, targets)
    keyword_score = keyword_extractor.keyword_score(keyword_analysis)

    # --- Format & structure ---
    format_analysis = analyze_format(cv_text)
    section_analysis = analyze_sections(cv_text)
    format_validation = validate_ats_format(cv_text)
    file_format = (
        analyze_file_format(request.file_name, request.file_size) if request.file_name else None
    )

    # --- Market & industry relevance ---
    irish_market = calculate_irish_market_relevance(cv_text)
    industry_score = None
    industry_keywords = keyword_extractor.get_industry_keywords(request.industry)
    if industry_keywords:
        industry_score = keyword_extractor.keyword_score(
            keyword_extractor.match_keywords(cv_text, industry_keywords)
        )

    # --- Aggregate ---
    overall_score = compute_overall_score(
        keyword_score, format_analysis.score, section_analysis.score, irish_market.score
    )
    compatibility = ats_compatibility(cv_text, format_analysis.score, section_analysis)

    # --- Report ---
    suggestions = generate_suggestions(
        keyword_analysis, format_analysis, section_analysis, irish_market, format_validation
    )
    warnings = generate_warnings(
        keyword_analysis, format_analysis, section_analysis, format_validation, file_format
    )
    strengths = generate_strengths(keyword_analysis, format_analysis, section_analysis, irish_market)
    report = build_report(
        overall_score, keyword_analysis, format_analysis, section_analysis, suggestions, warnings
    )

    details = section_analysis.details
    return ATSAnalysis(
        overall_score=overall_score,
        keyword_score=keyword_score,
        format_score=format_analysis.score,
        structure_score=section_analysis.score,
        irish_market_score=irish_market.score,
        industry_score=industry_score,
        job_match_score=job_match_score(cv_text, job_description) if job_description else None,
        rejection_risk=rejection_risk(overall_score),
        keyword_density=keyword_analysis,
        ats_compatibility=compatibility,
        target_ats=target_ats_score(compatibility, request.target_ats),
        irish_market=irish_market,
        suggestions=suggestions,
        strengths=strengths,
        warnings=warnings,
        report=report,
        file_format=file_format,
        format_validation=format_validation,
        details=AnalysisDetails(
            contact_info=details.get("contact", SectionResult()),
            experience=details.get("experience", SectionResult()),
            skills=details.get("skills", SectionResult()),
            education=details.get("education", SectionResult()),
            formatting=format_analysis.details,
        ),
        analysis_mode=request.analysis_mode,
    )


async def analyze(request: ATSAnalysisRequest) -> ATSAnalysis:
    """Heuristic analysis, plus a Gemini review in enterprise mode."""
    analysis = analyze_text(request)
    logger.info(
        "ATS analysis: overall=%d risk=%s mode=%s",
        analysis.overall_score, analysis.rejection_risk, request.analysis_mode,
    )

    if request.analysis_mode != "enterprise":
        return analysis

    review = await _ai_review(
        request.cv_text,
        request.job_description,
        analysis.overall_score,
        analysis.keyword_density.missing,
    )
    if review is None:
        logger.warning("Gemini review unavailable, returning heuristic analysis only")
        analysis.degraded = True
    else:
        analysis.ai_review = review
    return analysis
