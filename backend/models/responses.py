from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RejectionRisk = Literal["low", "medium", "high", "critical"]


class CamelModel(BaseModel):
    """Serialized with camelCase keys, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class KeywordAnalysis(CamelModel):
    total: int = 0
    matched: int = 0
    missing: list[str] = []
    # keyword -> occurrences per 1000 words
    density: dict[str, float] = {}


class SectionResult(CamelModel):
    score: int = 0
    issues: list[str] = []


class SectionAnalysis(CamelModel):
    score: int = 0
    details: dict[str, SectionResult] = {}


class FormatAnalysis(CamelModel):
    score: int = 100
    details: SectionResult = SectionResult(score=100)


class FormatValidation(CamelModel):
    is_valid: bool = True
    issues: list[str] = []
    recommendations: list[str] = []


class FileFormatAnalysis(CamelModel):
    compatible: bool = True
    format: str = ""
    warnings: list[str] = []
    recommendations: list[str] = []


class IrishMarketAnalysis(CamelModel):
    score: int = 0
    found_keywords: list[str] = []
    suggestions: list[str] = []


class ATSCompatibility(CamelModel):
    workday: int = 0
    greenhouse: int = 0
    lever: int = 0
    icims: int = 0
    taleo: int = 0


class TargetATSScore(CamelModel):
    name: str = "auto"
    score: int = 0


class ATSReport(CamelModel):
    summary: str = ""
    key_findings: list[str] = []
    priority_actions: list[str] = []
    score: int = 0
    timestamp: str = ""


class AnalysisDetails(CamelModel):
    contact_info: SectionResult = SectionResult()
    experience: SectionResult = SectionResult()
    skills: SectionResult = SectionResult()
    education: SectionResult = SectionResult()
    formatting: SectionResult = SectionResult()


class AIReview(CamelModel):
    summary: str = ""
    strengths: list[str] = []
    improvements: list[str] = []
    missing_keywords: list[str] = []


class ATSAnalysis(CamelModel):
    overall_score: int = 0
    keyword_score: int = 0
    format_score: int = 0
    structure_score: int = 0
    irish_market_score: int = 0
    industry_score: int | None = None
    job_match_score: int | None = None
    rejection_risk: RejectionRisk = "critical"
    keyword_density: KeywordAnalysis = KeywordAnalysis()
    ats_compatibility: ATSCompatibility = ATSCompatibility()
    target_ats: TargetATSScore = Field(default=TargetATSScore(), alias="targetATS")
    irish_market: IrishMarketAnalysis = IrishMarketAnalysis()
    suggestions: list[str] = []
    strengths: list[str] = []
    warnings: list[str] = []
    report: ATSReport = ATSReport()
    file_format: FileFormatAnalysis | None = None
    format_validation: FormatValidation = FormatValidation()
    details: AnalysisDetails = AnalysisDetails()
    analysis_mode: str = "basic"
    ai_review: AIReview | None = None
    degraded: bool = False


class ATSAnalysisResponse(CamelModel):
    success: bool = True
    analysis: ATSAnalysis


class KeywordExtractionResponse(CamelModel):
    success: bool = True
    keywords: dict[str, list[str]] = {}
    source: Literal["ai", "local"] = "local"


class CoverLetterResponse(CamelModel):
    success: bool = True
    cover_letter: str = ""
    template: str = ""
    tone: str = ""


class ParsedDocumentResponse(CamelModel):
    success: bool = True
    text: str = ""
    word_count: int = 0
    file_name: str = ""
