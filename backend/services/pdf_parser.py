"""Text extraction from uploaded CV documents."""

import io

import pdfplumber
from docx import Document

from services.text_cleaner import clean_pdf_text, fix_contact_concatenation

SUPPORTED_EXTENSIONS = (".pdf", ".docx")
MIN_EXTRACTED_CHARS = 50


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_document_text(file_name: str, content: bytes) -> str:
    """Extract and clean CV text from a PDF or DOCX upload."""
    if file_name.lower().endswith(".docx"):
        raw = extract_text_docx(content)
    else:
        raw = extract_text(content)
    return fix_contact_concatenation(clean_pdf_text(raw))
