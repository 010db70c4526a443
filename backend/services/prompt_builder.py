"""All prompt templates for Gemini API calls."""

import re

IRISH_CONTEXT = """You are an expert career adviser for the Irish job market.
Use British/Irish English spelling. Be aware of Irish work authorisation
(EU/EEA citizenship, Stamp 4, Critical Skills and General Employment Permits)
and of how Irish employers and multinationals screen CVs."""

COVER_LETTER_TEMPLATES: dict[str, str] = {
    "basic": "Basic",
    "highPerformer": "High Performer",
    "creative": "Creative",
    "graduate": "Graduate",
    "careerChange": "Career Change",
    "executive": "Executive",
}

COVER_LETTER_TONES: dict[str, str] = {
    "formal": "Formal",
    "friendly": "Friendly",
    "enthusiastic": "Enthusiastic",
}

# American -> British/Irish spelling, applied to generated text
BRITISH_SPELLINGS: dict[str, str] = {
    "color": "colour",
    "organization": "organisation",
    "organizations": "organisations",
    "center": "centre",
    "realize": "realise",
    "analyze": "analyse",
    "analyzed": "analysed",
    "optimize": "optimise",
    "optimized": "optimised",
    "customize": "customise",
    "recognize": "recognise",
    "recognized": "recognised",
    "specialized": "specialised",
    "catalog": "catalogue",
    "dialog": "dialogue",
    "skillset": "skill set",
    "utilized": "utilised",
}
_BRITISH_RE = re.compile(r"\b(" + "|".join(BRITISH_SPELLINGS) + r")\b", re.IGNORECASE)


def _british(match: re.Match) -> str:
    word = match.group(0)
    replacement = BRITISH_SPELLINGS[word.lower()]
    if word[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def to_british_english(text: str) -> str:
    """Convert common American spellings, keeping a leading capital."""
    return _BRITISH_RE.sub(_british, text)


def build_ats_review_prompt(
    cv_text: str,
    job_description: str | None,
    overall_score: int,
    missing_keywords: list[str],
) -> str:
    """Qualitative review that complements the heuristic ATS score."""
    jd_section = ""
    if job_description:
        jd_section = f"""
JOB DESCRIPTION:
---
{job_description}
---
"""

    return f"""{IRISH_CONTEXT}

A rule-based ATS checker scored this CV {overall_score}/100.
Keywords it reported as missing: {', '.join(missing_keywords) or 'none'}.
Review the CV as an ATS and a recruiter in Ireland would.

CV:
---
{cv_text}
---
{jd_section}
Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "summary": "<2-3 sentence assessment of the CV's ATS readiness>",
  "strengths": [<3-5 specific strengths with evidence from the CV>],
  "improvements": [<3-5 concrete, actionable improvements>],
  "missing_keywords": [<important keywords the CV should add>]
}}"""


def build_keyword_prompt(job_description: str, market: str = "global") -> str:
    return f"""{IRISH_CONTEXT}

Extract and categorise the keywords an ATS would screen for in this job description.

JOB DESCRIPTION:
---
{job_description}
---

Target market: {market}

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "technical": [<programming languages, software, tools>],
  "soft": [<communication, leadership, teamwork ...>],
  "industry": [<sector-specific terminology>],
  "education": [<degrees, certifications>],
  "work_authorisation": [<visa, permit or location requirements>],
  "other": [<any other important screening terms>]
}}"""


def build_cover_letter_prompt(
    template: str,
    tone: str,
    company: str,
    position: str,
    applicant_name: str,
    background: str,
    achievements: list[str] | None = None,
    job_description: str | None = None,
    custom_instructions: str | None = None,
    contact_lines: list[str] | None = None,
) -> str:
    achievements_text = "\n".join(f"- {a}" for a in (achievements or [])[:8]) or "- (none provided)"
    extras = ""
    if job_description:
        extras += f'\nJob Description: "{job_description}"\n'
    if custom_instructions:
        extras += f"\nAdditional instructions: {custom_instructions}\n"
    if contact_lines:
        extras += "\nInclude this contact information in the header:\n" + "\n".join(contact_lines) + "\n"

    return f"""You are a cover letter specialist for the Irish job market.
Write a professional cover letter for this application.

Candidate: {applicant_name}
Position: {position}
Company: {company}
Template: {COVER_LETTER_TEMPLATES[template]}
Tone: {COVER_LETTER_TONES[tone]}

Candidate background:
{background}

Key achievements:
{achievements_text}
{extras}
Requirements:
- 250-400 words total
- Strong opening stating the position
- 2-3 body paragraphs with relevant experience
- Professional closing with "Kind regards"
- British English spelling
- Match the {COVER_LETTER_TONES[tone].lower()} tone requested
- Follow the {COVER_LETTER_TEMPLATES[template]} template style

Write a complete, ready-to-send cover letter. No explanations, just the letter."""
