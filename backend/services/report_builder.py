"""Turn ATS sub-scores into suggestions, warnings, strengths and a summary report."""

from datetime import datetime, timezone

from models.responses import (
    ATSReport,
    FileFormatAnalysis,
    FormatAnalysis,
    FormatValidation,
    IrishMarketAnalysis,
    KeywordAnalysis,
    SectionAnalysis,
)

MAX_KEY_FINDINGS = 6
MAX_PRIORITY_ACTIONS = 5


def _coverage(keywords: KeywordAnalysis) -> float:
    if keywords.total == 0:
        return 0.0
    return keywords.matched / keywords.total


def _section_score(sections: SectionAnalysis, name: str) -> int:
    result = sections.details.get(name)
    return result.score if result is not None else 0


def generate_suggestions(
    keywords: KeywordAnalysis,
    format_analysis: FormatAnalysis,
    sections: SectionAnalysis,
    irish_market: IrishMarketAnalysis | None = None,
    validation: FormatValidation | None = None,
) -> list[str]:
    suggestions: list[str] = []

    if keywords.matched < keywords.total * 0.6:
        suggestions.append("Include more relevant keywords from the job description naturally in your content")
    if keywords.missing:
        suggestions.append(f"Consider adding these missing keywords: {', '.join(keywords.missing[:3])}")

    if format_analysis.score < 80:
        suggestions.append("Use standard formatting with simple bullet points and clear section headers")
        suggestions.append("Avoid tables, graphics, and complex layouts that ATS systems cannot parse")

    if sections.score < 70:
        suggestions.append('Use clear, standard section headings like "Experience", "Skills", and "Education"')
        suggestions.append("Ensure each section contains relevant, detailed information")

    if irish_market is not None and irish_market.score < 60:
        suggestions.extend(irish_market.suggestions)

    if validation is not None and not validation.is_valid:
        suggestions.extend(validation.recommendations[:2])

    suggestions.append("Include your work authorisation status clearly if you are not an EU citizen")
    suggestions.append("Use Irish English spelling and terminology familiar to Irish employers")

    # Irish market and validation advice can repeat earlier lines
    return list(dict.fromkeys(suggestions))


def generate_warnings(
    keywords: KeywordAnalysis,
    format_analysis: FormatAnalysis,
    sections: SectionAnalysis,
    validation: FormatValidation | None = None,
    file_format: FileFormatAnalysis | None = None,
) -> list[str]:
    warnings: list[str] = []

    if format_analysis.score < 50:
        warnings.append("CV formatting may prevent proper ATS parsing - consider simplifying layout")
    if _section_score(sections, "contact") < 50:
        warnings.append("Contact information is incomplete or not clearly formatted")
    if keywords.matched == 0 and keywords.total > 0:
        warnings.append("No relevant keywords found - CV may not match job requirements")
    if _section_score(sections, "experience") < 40:
        warnings.append("Work experience section needs improvement for ATS compatibility")

    if validation is not None and not validation.is_valid:
        warnings.extend(validation.issues[:2])
    if file_format is not None and not file_format.compatible:
        warnings.extend(file_format.warnings[:2])

    return warnings


def generate_strengths(
    keywords: KeywordAnalysis,
    format_analysis: FormatAnalysis,
    sections: SectionAnalysis,
    irish_market: IrishMarketAnalysis | None = None,
) -> list[str]:
    strengths: list[str] = []

    if keywords.total > 0 and keywords.matched > keywords.total * 0.7:
        strengths.append("Excellent keyword optimisation with relevant terms throughout")
    if format_analysis.score >= 80:
        strengths.append("Clean, ATS-friendly formatting that systems can easily parse")
    if sections.score >= 80:
        strengths.append("Well-structured with clear sections that ATS systems recognise")
    if _section_score(sections, "contact") >= 80:
        strengths.append("Complete contact information in proper format")
    if _section_score(sections, "skills") >= 80:
        strengths.append("Comprehensive skills section with relevant competencies")
    if irish_market is not None and irish_market.score >= 70:
        strengths.append("Strong optimisation for the Irish job market")

    return strengths


def _summary(overall_score: int) -> str:
    if overall_score >= 80:
        return (
            f"Your CV scores {overall_score}/100 for ATS compatibility - excellent! "
            "It should successfully pass through most Applicant Tracking Systems used by Irish employers. "
            "Focus on maintaining this quality while tailoring keywords for specific job applications."
        )
    if overall_score >= 60:
        return (
            f"Your CV scores {overall_score}/100 for ATS compatibility. "
            "It's in good shape but has room for improvement. "
            "Focus on the priority actions below to increase your chances of passing ATS screening."
        )
    return (
        f"Your CV scores {overall_score}/100 for ATS compatibility and needs significant improvement. "
        "Many ATS systems may struggle to parse your CV effectively. "
        "Please address the critical issues identified below."
    )


def build_report(
    overall_score: int,
    keywords: KeywordAnalysis,
    format_analysis: FormatAnalysis,
    sections: SectionAnalysis,
    suggestions: list[str],
    warnings: list[str],
) -> ATSReport:
    """Summarise the analysis into key findings and at most five priority actions."""
    key_findings: list[str] = []
    priority_actions: list[str] = []

    if overall_score >= 80:
        key_findings.append("Excellent ATS compatibility - your CV should pass most screening systems")
    elif overall_score >= 60:
        key_findings.append("Good ATS compatibility with room for improvement")
    else:
        key_findings.append("Poor ATS compatibility - significant improvements needed")

    coverage = _coverage(keywords) * 100
    if coverage >= 70:
        key_findings.append("Strong keyword optimisation")
    elif coverage >= 40:
        key_findings.append("Moderate keyword coverage")
        priority_actions.append("Increase relevant keyword density")
    else:
        key_findings.append("Poor keyword optimisation")
        priority_actions.append("URGENT: Add more relevant keywords from job descriptions")

    if format_analysis.score >= 80:
        key_findings.append("ATS-friendly formatting detected")
    else:
        key_findings.append("Formatting may cause ATS parsing issues")
        priority_actions.append("Simplify formatting and remove complex elements")

    if sections.score >= 80:
        key_findings.append("Well-structured with clear sections")
    else:
        key_findings.append("Section structure needs improvement")
        priority_actions.append("Use standard section headings (Experience, Skills, Education)")

    key_findings.append("Analysed for Irish job market compatibility")

    priority_actions.extend(warnings[:3])
    if len(priority_actions) < MAX_PRIORITY_ACTIONS:
        priority_actions.extend(suggestions[: MAX_PRIORITY_ACTIONS - len(priority_actions)])

    return ATSReport(
        summary=_summary(overall_score),
        key_findings=key_findings[:MAX_KEY_FINDINGS],
        priority_actions=priority_actions[:MAX_PRIORITY_ACTIONS],
        score=overall_score,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
