"""Formatting and file-type checks for ATS parseability."""

import re

from models.responses import FileFormatAnalysis, FormatAnalysis, FormatValidation, SectionResult
from services.irish_market import has_irish_phone
from services.text_cleaner import word_count

SPECIAL_BULLETS_RE = re.compile("[●◆▪▫■□◦‣⁃]")
HTML_TAG_RE = re.compile(r"<[^>]*>")
TABLE_ROW_RE = re.compile(r"\|.*\|")
EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

MIN_WORDS = 200
MAX_WORDS = 800
MIN_VALIDATION_WORDS = 150
LONG_LINE_CHARS = 100
MAX_PDF_BYTES = 5 * 1024 * 1024

# (penalty, issue) applied when the check fails
_FORMAT_PENALTIES = {
    "bullets": (10, "Contains special bullet characters that may not be ATS-friendly"),
    "html": (15, "Contains HTML tags or rich formatting"),
    "tables": (10, "May contain tables or complex formatting"),
    "too_short": (20, f"CV appears too short (under {MIN_WORDS} words)"),
    "too_long": (10, "CV may be too long for optimal ATS parsing"),
    "phone": (5, "Irish phone number format not detected"),
    "email": (15, "Email address not found"),
}


def analyze_format(cv_text: str) -> FormatAnalysis:
    """Start from 100 and deduct for each formatting problem found."""
    failed: list[str] = []
    if SPECIAL_BULLETS_RE.search(cv_text):
        failed.append("bullets")
    if HTML_TAG_RE.search(cv_text):
        failed.append("html")
    if "\t" in cv_text or TABLE_ROW_RE.search(cv_text):
        failed.append("tables")

    words = word_count(cv_text)
    if words < MIN_WORDS:
        failed.append("too_short")
    elif words > MAX_WORDS:
        failed.append("too_long")

    if not has_irish_phone(cv_text):
        failed.append("phone")
    if not EMAIL_RE.search(cv_text):
        failed.append("email")

    score = max(0, 100 - sum(_FORMAT_PENALTIES[key][0] for key in failed))
    issues = [_FORMAT_PENALTIES[key][1] for key in failed]
    return FormatAnalysis(score=score, details=SectionResult(score=score, issues=issues))


def validate_ats_format(text: str) -> FormatValidation:
    """List elements known to break ATS parsers, with a fix for each."""
    issues: list[str] = []
    recommendations: list[str] = []

    if "\t" in text:
        issues.append("Contains tab characters that may break formatting")
        recommendations.append("Replace tabs with spaces for consistent formatting")

    if SPECIAL_BULLETS_RE.search(text):
        issues.append("Contains special Unicode bullet points")
        recommendations.append("Use standard hyphens (-) or asterisks (*) for bullet points")

    if HTML_TAG_RE.search(text):
        issues.append("Contains HTML or XML tags")
        recommendations.append("Remove all HTML formatting and use plain text")

    if "|" in text:
        issues.append("May contain tables or pipe characters")
        recommendations.append("Avoid tables and complex layouts")

    lines = text.split("\n")
    long_lines = [line for line in lines if len(line) > LONG_LINE_CHARS]
    if len(long_lines) > len(lines) * 0.3:
        issues.append("Many lines are very long")
        recommendations.append("Break long lines for better readability")

    if word_count(text) < MIN_VALIDATION_WORDS:
        issues.append("Content appears too short for a complete CV")
        recommendations.append("Expand with more detail about your experience and skills")

    return FormatValidation(is_valid=not issues, issues=issues, recommendations=recommendations)


def analyze_file_format(file_name: str, file_size: int | None = None) -> FileFormatAnalysis:
    """Judge how well an uploaded file type survives ATS parsing."""
    extension = file_name.lower().rsplit(".", 1)[-1] if "." in file_name else ""
    warnings: list[str] = []
    recommendations: list[str] = []
    compatible = True

    if extension == "pdf":
        recommendations.append("PDF is ATS-friendly - ensure it's text-based, not scanned")
        if file_size and file_size > MAX_PDF_BYTES:
            warnings.append("File size is large - consider optimising to under 5MB")
    elif extension in ("doc", "docx"):
        recommendations.append("Word documents are highly ATS-compatible")
        recommendations.append("Ensure you're using standard fonts and formatting")
    elif extension == "txt":
        warnings.append("Plain text files lose formatting but are fully ATS-compatible")
        recommendations.append("Consider using .docx or .pdf for better presentation")
    elif extension == "rtf":
        warnings.append("RTF files may have compatibility issues with some ATS systems")
        recommendations.append("Convert to .docx or .pdf for better compatibility")
    elif extension in ("html", "htm"):
        compatible = False
        warnings.append("HTML files are not recommended for ATS systems")
        recommendations.append("Convert to .docx or .pdf format")
    elif extension in ("jpg", "jpeg", "png", "gif"):
        compatible = False
        warnings.append("Image files cannot be parsed by ATS systems")
        recommendations.append("Use text-based formats like .docx or .pdf")
    else:
        compatible = False
        warnings.append("Unknown or unsupported file format")
        recommendations.append("Use .docx or .pdf for optimal ATS compatibility")

    if compatible:
        recommendations.append("Include your Eircode in contact details for Irish employers")
        recommendations.append("Mention work authorisation status if non-EU citizen")

    return FileFormatAnalysis(
        compatible=compatible,
        format=extension.upper(),
        warnings=warnings,
        recommendations=recommendations,
    )
