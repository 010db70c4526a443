"""Cleanup of text pasted from or extracted out of PDF/Word CVs.

PDF extraction leaves ligature glyphs, typographic quotes, invisible
spaces and words split around a ligature ("arti fi cial"). Everything
downstream assumes plain ASCII-ish text, so the analyser always runs
the CV through ``normalize`` first.
"""

import re

_CHAR_REPLACEMENTS: dict[str, str] = {
    "ﬁ": "fi", "ﬂ": "fl", "ﬀ": "ff", "ﬃ": "ffi",
    "ﬄ": "ffl", "ﬆ": "st", "æ": "ae", "œ": "oe",
    "‘": "'", "’": "'", "`": "'",
    "“": '"', "”": '"', "„": '"',
    "–": "-", "—": "-", "―": "-",
    "\u00ad": "",  # soft hyphen
    "\u00a0": " ",
    "\u200b": "", "\u200c": "", "\u200d": "", "\ufeff": "",
}
_CHAR_TABLE = str.maketrans(_CHAR_REPLACEMENTS)

# Words PDF extractors commonly split around a "fi" ligature
_LIGATURE_WORDS = frozenset({
    "artificial", "scientific", "specific", "proficient", "efficient",
    "certificate", "certified", "classification", "configuration",
    "notification", "verification", "identification", "qualification",
    "qualifications", "significant", "financial", "office", "profile",
})

_BROKEN_WORD_RE = re.compile(r"\b([A-Za-z]+)\s+(fi|fl|ff|ffi|ffl)\s+([A-Za-z]+)\b")

_NEEDS_CLEANING_RE = [
    re.compile("[ﬁﬂﬀﬃﬄ]"),
    re.compile("[‘’“”„]"),
    re.compile("[\u00a0\u200b]"),
    re.compile(r" {3,}"),
]


def _join_broken_word(match: re.Match) -> str:
    combined = "".join(match.groups())
    if combined.lower() in _LIGATURE_WORDS:
        return combined
    return match.group(0)


def clean_pdf_text(text: str) -> str:
    """Fix the usual PDF extraction artifacts. Returns '' for empty input."""
    if not text:
        return ""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.translate(_CHAR_TABLE)
    text = _BROKEN_WORD_RE.sub(_join_broken_word, text)

    # Spacing around punctuation
    text = re.sub(r"[ \t]+([.,;:!?])", r"\1", text)
    text = re.sub(r"([.,;:!?]) {2,}", r"\1 ", text)
    text = re.sub(r"\( +", "(", text)
    text = re.sub(r" +\)", ")", text)

    # Excessive whitespace; tabs are left alone so format checks still see them
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = re.sub(r" {3,}", "  ", text)
    text = "\n".join(line.strip(" ") for line in text.split("\n"))

    return text.strip()


def needs_cleaning(text: str) -> bool:
    """Check whether text shows typical PDF extraction artifacts."""
    return any(pattern.search(text) for pattern in _NEEDS_CLEANING_RE)


def fix_contact_concatenation(text: str) -> str:
    """Re-insert spaces PDF extraction drops between phone numbers, emails and text."""
    text = re.sub(r"(\d)([a-zA-Z]+@)", r"\1 \2", text)
    text = re.sub(r"(@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*\.(?:ie|com|org|net|eu|io))([a-zA-Z])", r"\1 \2", text)
    text = re.sub(r"(\d{7,})([a-zA-Z])", r"\1 \2", text)
    return text


def normalize(text: str) -> str:
    """Clean and lowercase CV text for matching."""
    return clean_pdf_text(text).lower()


def tokenize(text: str) -> list[str]:
    return normalize(text).split()


def word_count(text: str) -> int:
    """Number of whitespace-separated words, never below 1 so it is safe to divide by."""
    return max(len(text.split()), 1)
