"""AI-assisted keyword extraction and cover letter drafting."""

import logging

from models.requests import CoverLetterRequest
from services import gemini_client, keyword_extractor, prompt_builder

logger = logging.getLogger(__name__)


class CoverLetterError(Exception):
    """Raised when a cover letter cannot be generated."""


class InvalidCoverLetterRequest(CoverLetterError):
    pass


class AIServiceUnavailable(CoverLetterError):
    pass


def _clean_keyword_lists(data: dict) -> dict[str, list[str]]:
    """Keep only list-of-string categories from an AI response."""
    cleaned: dict[str, list[str]] = {}
    for category, values in data.items():
        if isinstance(values, list):
            cleaned[str(category)] = [str(v).strip() for v in values if str(v).strip()]
    return cleaned


async def extract_keywords(job_description: str, market: str = "global") -> tuple[dict[str, list[str]], str]:
    """Categorised keywords for a job description and where they came from ("ai" or "local")."""
    data = await gemini_client.generate_json(
        prompt_builder.build_keyword_prompt(job_description, market)
    )
    if data:
        keywords = _clean_keyword_lists(data)
        if keywords:
            return keywords, "ai"

    logger.warning("Gemini keyword extraction unavailable, using local keyword lists")
    return keyword_extractor.extract_job_keywords(job_description), "local"


def validate_cover_letter_request(request: CoverLetterRequest) -> None:
    if request.template not in prompt_builder.COVER_LETTER_TEMPLATES:
        raise InvalidCoverLetterRequest(
            f"Invalid template. Choose one of: {', '.join(prompt_builder.COVER_LETTER_TEMPLATES)}"
        )
    if request.tone not in prompt_builder.COVER_LETTER_TONES:
        raise InvalidCoverLetterRequest(
            f"Invalid tone. Choose one of: {', '.join(prompt_builder.COVER_LETTER_TONES)}"
        )
    missing = [
        name for name, value in (
            ("company", request.company),
            ("position", request.position),
            ("applicantName", request.applicant_name),
        )
        if not value.strip()
    ]
    if missing:
        raise InvalidCoverLetterRequest(f"Missing required fields: {', '.join(missing)}")


async def generate_cover_letter(request: CoverLetterRequest) -> str:
    """Draft a cover letter in British/Irish English.

    Raises InvalidCoverLetterRequest for bad input, AIServiceUnavailable when
    Gemini is not configured and CoverLetterError when generation fails.
    """
    validate_cover_letter_request(request)
    if not gemini_client.is_configured():
        raise AIServiceUnavailable("AI service not configured")

    contact_lines = None
    if request.include_address:
        contact_lines = [line for line in (request.user_address, request.user_phone) if line]

    prompt = prompt_builder.build_cover_letter_prompt(
        template=request.template,
        tone=request.tone,
        company=request.company,
        position=request.position,
        applicant_name=request.applicant_name,
        background=request.background,
        achievements=request.achievements,
        job_description=request.job_description,
        custom_instructions=request.custom_instructions,
        contact_lines=contact_lines,
    )
    letter = await gemini_client.generate_text(prompt)
    if not letter:
        raise CoverLetterError("Failed to generate cover letter")
    return prompt_builder.to_british_english(letter)
