from datetime import datetime, timezone

from fastapi import APIRouter, File, HTTPException, Request, Response, UploadFile

from api.dependencies import limiter
from config import settings
from models.requests import ATSAnalysisRequest, CoverLetterRequest, KeywordExtractionRequest
from models.responses import (
    ATSAnalysisResponse,
    CoverLetterResponse,
    KeywordExtractionResponse,
    ParsedDocumentResponse,
)
from services import ai_tools, ats_analyzer, gemini_client, pdf_parser

SERVICE_NAME = "ats-analyzer"
SERVICE_VERSION = "1.0.0"

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok", "gemini_configured": gemini_client.is_configured()}


@router.get("/api/ats/analyze")
async def ats_status():
    ai_configured = gemini_client.is_configured()
    return {
        "status": "healthy" if ai_configured else "degraded",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "features": {
            "keywordAnalysis": True,
            "formatAnalysis": True,
            "sectionAnalysis": True,
            "irishMarketAnalysis": True,
            "atsVendorSimulation": True,
            "aiReview": ai_configured,
        },
        "ai": {"configured": ai_configured, "model": settings.gemini_model},
        "lastChecked": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/api/ats/analyze", response_model=ATSAnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, response: Response, body: ATSAnalysisRequest):
    if len(body.cv_text.strip()) < settings.min_cv_length:
        raise HTTPException(
            status_code=400,
            detail=f"CV text must be at least {settings.min_cv_length} characters long",
        )

    analysis = await ats_analyzer.analyze(body)
    return ATSAnalysisResponse(analysis=analysis)


@router.post("/api/ai/extract-keywords", response_model=KeywordExtractionResponse)
@limiter.limit(settings.rate_limit)
async def extract_keywords(request: Request, response: Response, body: KeywordExtractionRequest):
    if len(body.job_description.strip()) < 20:
        raise HTTPException(
            status_code=400,
            detail="Job description must be at least 20 characters long",
        )

    keywords, source = await ai_tools.extract_keywords(body.job_description.strip(), body.market)
    return KeywordExtractionResponse(keywords=keywords, source=source)


@router.post("/api/ai/generate-cover-letter", response_model=CoverLetterResponse)
@limiter.limit(settings.rate_limit)
async def generate_cover_letter(request: Request, response: Response, body: CoverLetterRequest):
    try:
        letter = await ai_tools.generate_cover_letter(body)
    except ai_tools.InvalidCoverLetterRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ai_tools.AIServiceUnavailable:
        raise HTTPException(
            status_code=503,
            detail="AI service not configured. Set GEMINI_API_KEY to use AI features.",
        )
    except ai_tools.CoverLetterError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return CoverLetterResponse(cover_letter=letter, template=body.template, tone=body.tone)


@router.post("/api/parse-pdf", response_model=ParsedDocumentResponse)
async def parse_document(file: UploadFile = File(...)):
    # Validate file type
    file_name = file.filename or ""
    if not file_name.lower().endswith(pdf_parser.SUPPORTED_EXTENSIONS):
        raise HTTPException(status_code=400, detail="Only PDF and DOCX files are accepted")

    # Read and validate size
    content = await file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        text = pdf_parser.extract_document_text(file_name, content)
    except Exception:
        raise HTTPException(status_code=400, detail="Could not parse uploaded file")

    if len(text) < pdf_parser.MIN_EXTRACTED_CHARS:
        raise HTTPException(status_code=400, detail="Document contains insufficient readable text")

    return ParsedDocumentResponse(text=text, word_count=len(text.split()), file_name=file_name)
