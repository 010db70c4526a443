import io
from unittest.mock import AsyncMock, patch

import pytest
from docx import Document
from fastapi.testclient import TestClient

from api.dependencies import limiter
from main import app

client = TestClient(app)

JOB_DESCRIPTION = "We need a Python developer with AWS and Kubernetes experience in Dublin"


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


def _docx_upload(*paragraphs: str) -> bytes:
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert isinstance(data["gemini_configured"], bool)


def test_ats_health():
    response = client.get("/api/ats/analyze")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("healthy", "degraded")
    assert data["service"] == "ats-analyzer"
    assert data["version"] == "1.0.0"
    assert data["features"]["keywordAnalysis"] is True
    assert data["features"]["aiReview"] == data["ai"]["configured"]
    assert "lastChecked" in data


@patch("services.gemini_client.is_configured", return_value=False)
def test_ats_health_degraded_without_ai(mock_configured):
    data = client.get("/api/ats/analyze").json()
    assert data["status"] == "degraded"
    assert data["features"]["aiReview"] is False


# ---------------------------------------------------------------------------
# ATS analysis
# ---------------------------------------------------------------------------

def test_analyze(strong_cv):
    response = client.post(
        "/api/ats/analyze",
        json={"cvText": strong_cv, "jobDescription": JOB_DESCRIPTION, "targetATS": "lever"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    analysis = data["analysis"]
    for key in (
        "overallScore", "keywordScore", "formatScore", "structureScore", "irishMarketScore",
        "rejectionRisk", "keywordDensity", "atsCompatibility", "targetATS", "irishMarket",
        "suggestions", "strengths", "warnings", "report", "formatValidation", "details",
    ):
        assert key in analysis
    assert analysis["rejectionRisk"] == "low"
    assert analysis["targetATS"]["name"] == "lever"
    assert analysis["keywordDensity"]["matched"] == 4
    assert "keyFindings" in analysis["report"]
    assert "contactInfo" in analysis["details"]
    assert analysis["jobMatchScore"] is not None
    assert analysis["degraded"] is False


def test_analyze_weak_cv(weak_cv):
    response = client.post("/api/ats/analyze", json={"cvText": weak_cv})
    assert response.status_code == 200
    assert response.json()["analysis"]["rejectionRisk"] == "critical"


def test_analyze_rejects_short_cv():
    response = client.post("/api/ats/analyze", json={"cvText": "Python developer"})
    assert response.status_code == 400
    assert "at least 100 characters" in response.json()["detail"]


def test_analyze_rejects_missing_cv():
    response = client.post("/api/ats/analyze", json={"jobDescription": JOB_DESCRIPTION})
    assert response.status_code == 400


def test_analyze_rejects_unknown_vendor(strong_cv):
    response = client.post("/api/ats/analyze", json={"cvText": strong_cv, "targetATS": "bamboohr"})
    assert response.status_code == 422


@patch("services.gemini_client.generate_json", new_callable=AsyncMock, return_value=None)
def test_analyze_enterprise_degraded(mock_generate, strong_cv):
    response = client.post("/api/ats/analyze", json={"cvText": strong_cv, "analysisMode": "enterprise"})
    assert response.status_code == 200
    analysis = response.json()["analysis"]
    assert analysis["analysisMode"] == "enterprise"
    assert analysis["degraded"] is True
    assert analysis["aiReview"] is None


def test_analyze_rate_limited_per_user(weak_cv):
    headers = {"x-user-id": "rate-limit-test"}
    for _ in range(10):
        response = client.post("/api/ats/analyze", json={"cvText": weak_cv}, headers=headers)
        assert response.status_code == 200
        assert "X-RateLimit-Remaining" in response.headers

    response = client.post("/api/ats/analyze", json={"cvText": weak_cv}, headers=headers)
    assert response.status_code == 429
    assert response.json()["detail"] == "Rate limit exceeded. Please try again later."

    # Other users have their own budget
    other = client.post("/api/ats/analyze", json={"cvText": weak_cv}, headers={"x-user-id": "someone-else"})
    assert other.status_code == 200


# ---------------------------------------------------------------------------
# AI tools
# ---------------------------------------------------------------------------

@patch("services.gemini_client.generate_json", new_callable=AsyncMock, return_value=None)
def test_extract_keywords_local_fallback(mock_generate):
    response = client.post("/api/ai/extract-keywords", json={"jobDescription": JOB_DESCRIPTION})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["source"] == "local"
    assert "python" in data["keywords"]["technical"]


def test_extract_keywords_rejects_short_description():
    response = client.post("/api/ai/extract-keywords", json={"jobDescription": "Python dev"})
    assert response.status_code == 400


@patch("services.gemini_client.is_configured", return_value=False)
def test_cover_letter_unavailable(mock_configured):
    response = client.post(
        "/api/ai/generate-cover-letter",
        json={
            "template": "basic",
            "tone": "formal",
            "company": "Stripe",
            "position": "Engineer",
            "applicantName": "Aoife Murphy",
        },
    )
    assert response.status_code == 503


def test_cover_letter_invalid_template():
    response = client.post(
        "/api/ai/generate-cover-letter",
        json={"template": "fancy", "tone": "formal", "company": "Stripe", "position": "Engineer", "applicantName": "Aoife"},
    )
    assert response.status_code == 400
    assert "Invalid template" in response.json()["detail"]


@patch("services.gemini_client.generate_text", new_callable=AsyncMock, return_value="Dear Hiring Manager, I specialized in payments.")
@patch("services.gemini_client.is_configured", return_value=True)
def test_cover_letter_generated(mock_configured, mock_generate):
    response = client.post(
        "/api/ai/generate-cover-letter",
        json={
            "template": "highPerformer",
            "tone": "enthusiastic",
            "company": "Stripe",
            "position": "Engineer",
            "applicantName": "Aoife Murphy",
            "achievements": ["Cut costs by 20%"],
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["coverLetter"] == "Dear Hiring Manager, I specialised in payments."
    assert data["template"] == "highPerformer"
    assert data["tone"] == "enthusiastic"


# ---------------------------------------------------------------------------
# Document parsing
# ---------------------------------------------------------------------------

def test_parse_rejects_unsupported_type():
    response = client.post(
        "/api/parse-pdf",
        files={"file": ("cv.txt", b"not a pdf", "text/plain")},
    )
    assert response.status_code == 400


def test_parse_rejects_invalid_pdf():
    response = client.post(
        "/api/parse-pdf",
        files={"file": ("cv.pdf", b"not a pdf", "application/pdf")},
    )
    assert response.status_code == 400


def test_parse_docx():
    content = _docx_upload(
        "Aoife Murphy",
        "Senior Software Engineer, Dublin",
        "Python, AWS, Docker and Kubernetes across eight years of delivery",
    )
    response = client.post(
        "/api/parse-pdf",
        files={"file": ("cv.docx", content, "application/octet-stream")},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["fileName"] == "cv.docx"
    assert "Senior Software Engineer, Dublin" in data["text"]
    assert data["wordCount"] == len(data["text"].split())


def test_parse_docx_too_little_text():
    response = client.post(
        "/api/parse-pdf",
        files={"file": ("cv.docx", _docx_upload("Aoife"), "application/octet-stream")},
    )
    assert response.status_code == 400
